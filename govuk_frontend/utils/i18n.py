"""
Translation data attributes for components with client-side behaviour.

Components such as the accordion or character count ship their UI strings
to the browser as ``data-i18n.*`` attributes. Plural forms use one
attribute per CLDR plural rule:
https://cldr.unicode.org/index/cldr-spec/plural-rules
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attributes import encode_attribute


@dataclass(frozen=True)
class I18nRequest:
    """Translation key plus either one message or messages by plural rule.

    ``messages`` takes precedence over ``message`` when both are present.
    """

    key: str
    message: Optional[str] = None
    messages: Optional[Mapping[str, str]] = None

    @classmethod
    def coerce(cls, request: Any) -> "I18nRequest":
        if isinstance(request, I18nRequest):
            return request
        return cls(
            key=request.get("key", ""),
            message=request.get("message"),
            messages=request.get("messages"),
        )


def encode_i18n_attributes(request: Any = None, **fields: Any) -> str:
    """Render ``data-i18n.{key}[.{pluralRule}]`` attributes.

    Accepts an ``I18nRequest``, a mapping, or the same fields as keywords:

        >>> encode_i18n_attributes(key="hide-section", message="Hide")
        ' data-i18n.hide-section="Hide"'
    """
    params = I18nRequest.coerce(request if request is not None else fields)

    if params.messages and isinstance(params.messages, Mapping):
        return "".join(
            encode_attribute(f"data-i18n.{params.key}.{plural_rule}", message)
            for plural_rule, message in params.messages.items()
        )
    if params.message:
        return encode_attribute(f"data-i18n.{params.key}", params.message)
    return ""
