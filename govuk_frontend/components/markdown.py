"""
Markdown to GOV.UK typography, for ``html`` options.

Why:
- Components trust ``html`` options as given. Services that show
  author-supplied content (guidance, notification banners, inset text) need
  it styled like the rest of the page and safe to trust.

How:
- markdown-it renders CommonMark plus tables, with raw HTML disabled.
- A core rule tags each block with its design system class, so ``# Title``
  becomes ``<h1 class="govuk-heading-xl">`` and lists become
  ``govuk-list`` lists.
- bleach then keeps only the tags in ``TYPOGRAPHY_CLASSES`` (plus inline
  emphasis), and a ``class`` attribute only when it is the class that tag
  gets from the rule above.
"""
from __future__ import annotations

from typing import Any

import bleach
from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from ..utils import TrustedHtml

# Tag -> class, following the GOV.UK Frontend typography and table styles
TYPOGRAPHY_CLASSES = {
    "p": "govuk-body",
    "h1": "govuk-heading-xl",
    "h2": "govuk-heading-l",
    "h3": "govuk-heading-m",
    "h4": "govuk-heading-s",
    "h5": "govuk-heading-s",
    "h6": "govuk-heading-s",
    "ul": "govuk-list govuk-list--bullet",
    "ol": "govuk-list govuk-list--number",
    "a": "govuk-link",
    "blockquote": "govuk-inset-text",
    "hr": "govuk-section-break govuk-section-break--visible",
    "table": "govuk-table",
    "thead": "govuk-table__head",
    "tbody": "govuk-table__body",
    "tr": "govuk-table__row",
    "th": "govuk-table__header",
    "td": "govuk-table__cell",
}

_INLINE_TAGS = {"li", "strong", "em", "code", "pre", "br"}

ALLOWED_TAGS = frozenset(TYPOGRAPHY_CLASSES) | _INLINE_TAGS

LINK_PROTOCOLS = frozenset({"http", "https", "mailto"})


def _add_typography_class(token: Token) -> None:
    if token.nesting == -1:
        return
    css = TYPOGRAPHY_CLASSES.get(token.tag)
    if css:
        token.attrJoin("class", css)


def _typography_rule(state: StateCore) -> None:
    for token in state.tokens:
        _add_typography_class(token)
        # Links live inside inline tokens
        for child in token.children or []:
            _add_typography_class(child)


def _allow_attribute(tag: str, name: str, value: Any) -> bool:
    if name == "class":
        return value == TYPOGRAPHY_CLASSES.get(tag)
    return tag == "a" and name in ("href", "title")


_MD = MarkdownIt("commonmark", {"html": False, "linkify": False, "typographer": False}).enable("table")
_MD.core.ruler.push("govuk_typography", _typography_rule)


def sanitize_html(fragment: str) -> TrustedHtml:
    """Reduce an HTML fragment to GOV.UK typography markup.

    Tags outside ``ALLOWED_TAGS`` are escaped rather than dropped, so nothing
    the author wrote silently disappears. Classes other than the design
    system class for the tag are removed.
    """
    if not fragment:
        return TrustedHtml("")
    cleaned = bleach.clean(
        str(fragment),
        tags=ALLOWED_TAGS,
        attributes=_allow_attribute,
        protocols=LINK_PROTOCOLS,
        strip=False,
    )
    return TrustedHtml(cleaned.strip())


def render_markdown_safe(src: str) -> TrustedHtml:
    """Render author-supplied markdown as GOV.UK styled, trusted HTML.

    Example:
        >>> govuk_inset_text({"html": render_markdown_safe("Read the **guidance**")})
    """
    if not src:
        return TrustedHtml("")
    return sanitize_html(_MD.render(str(src)))
