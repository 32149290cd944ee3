"""
HTML escaping and the trusted-HTML boundary.

Security model:
- Every value that did not arrive through an ``html`` option is escaped
  exactly once before it reaches the output.
- ``TrustedHtml`` (``markupsafe.Markup``) marks fragments the caller vouches
  for. Content escaping leaves them untouched; nothing here sanitises them.
"""
from __future__ import annotations

from typing import Any

from markupsafe import Markup

from .values import is_nullish, to_string

TrustedHtml = Markup

# Numeric character references keep the output identical regardless of the
# document's named-entity support.
_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&#38;",
        "<": "&#60;",
        ">": "&#62;",
        '"': "&#34;",
        "'": "&#39;",
        "`": "&#96;",
    }
)


def escape_attribute(value: Any) -> str:
    """Escape a value for use inside a double-quoted attribute (or its name).

    Unlike ``escape_html`` this ignores ``TrustedHtml``: attribute values are
    always escaped.
    """
    return to_string(value).translate(_ESCAPE_TABLE)


def escape_html(value: Any) -> str:
    """Escape text content; ``TrustedHtml`` passes through unchanged.

    Nullish values render as the empty string.
    """
    if is_nullish(value):
        return ""
    if hasattr(value, "__html__"):
        return str(value.__html__())
    return to_string(value).translate(_ESCAPE_TABLE)


def trusted(value: Any) -> str:
    """Return ``value`` as raw markup, without escaping it.

    Callers take responsibility for sanitising the fragment.
    """
    if is_nullish(value):
        return ""
    if hasattr(value, "__html__"):
        return str(value.__html__())
    return to_string(value)


def html_or_text(html: Any, text: Any) -> str:
    """Prefer the trusted ``html`` option, else the escaped ``text`` option."""
    if not is_nullish(html):
        return trusted(html)
    return escape_html(text)
