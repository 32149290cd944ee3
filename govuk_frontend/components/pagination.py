"""
Pagination component for GOV.UK Frontend

Helps users move forwards and backwards through a series of pages, such as
search results.

Layouts:
    - Inline: previous/next arrows either side of a list of numbered pages.
    - Block: with no ``items`` but a ``previous`` or ``next`` link, the links
      stack vertically and may carry a ``labelText`` underneath.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from ..utils import TrustedHtml, is_nullish
from .base import Component, Params, as_mapping, as_trusted, load_asset

ARROW_PREVIOUS = load_asset("arrow-previous.svg")
ARROW_NEXT = load_asset("arrow-next.svg")

DEFAULT_LINK_TEXT = {
    "prev": 'Previous<span class="govuk-visually-hidden"> page</span>',
    "next": 'Next<span class="govuk-visually-hidden"> page</span>',
}


class Pagination(Component):
    name = "pagination"

    @property
    def block_level(self) -> bool:
        return not self.get("items") and bool(self.get("next") or self.get("previous"))

    def _link_content(self, link: Mapping[str, Any], kind: str) -> str:
        if not is_nullish(link.get("html")):
            return self.trusted(link["html"])
        if link.get("text"):
            return self.escape(link["text"])
        return DEFAULT_LINK_TEXT[kind]

    def arrow_link(self, link: Mapping[str, Any], kind: str, arrow: str) -> str:
        """Render the previous (``kind="prev"``) or next link."""
        content = self._link_content(link, kind)

        if self.block_level:
            decorated = "" if link.get("labelText") else " govuk-pagination__link-title--decorated"
            inner = (
                f'{arrow} <span class="govuk-pagination__link-title{decorated}">\n'
                f"      {content}\n"
                "    </span>"
            )
            if link.get("labelText"):
                inner += (
                    '<span class="govuk-visually-hidden">:</span>'
                    f'<span class="govuk-pagination__link-label">{self.escape(link["labelText"])}</span>'
                )
        else:
            title = f'<span class="govuk-pagination__link-title">{content}</span>'
            inner = f"{arrow} {title}" if kind == "prev" else f"{title} {arrow}"

        return (
            f'<div class="govuk-pagination__{kind}">\n'
            f'  <a class="govuk-link govuk-pagination__link" href="{self.escape(link["href"])}" '
            f'rel="{kind}"{self.attributes(link.get("attributes"))}>{inner}</a>\n'
            "</div>"
        )

    def _page_links(self) -> str:
        items = self.get("items")
        if not items:
            return ""

        pages: List[str] = ['<ul class="govuk-pagination__list">']
        for item in items:
            css = self.classes(
                "govuk-pagination__item",
                **{
                    "govuk-pagination__item--current": bool(item.get("current")),
                    "govuk-pagination__item--ellipses": bool(item.get("ellipsis")),
                },
            )
            if item.get("ellipsis"):
                link = "&ctdot;"
            else:
                label = item.get("visuallyHiddenText") or f"Page {item.get('number', '')}"
                current = ' aria-current="page"' if item.get("current") else ""
                link = (
                    f'<a class="govuk-link govuk-pagination__link" href="{self.escape(item.get("href"))}" '
                    f'aria-label="{self.escape(label)}"{current}{self.attributes(item.get("attributes"))}>'
                    f"{self.escape(item.get('number'))}</a>"
                )
            pages.append(f'<li class="{css}">{link}</li>')
        pages.append("</ul>")
        return "".join(pages)

    def render(self) -> str:
        css = self.classes(
            "govuk-pagination",
            self.get("classes"),
            **{"govuk-pagination--block": self.block_level},
        )

        previous = as_mapping(self.get("previous"))
        next_ = as_mapping(self.get("next"))
        previous_link = self.arrow_link(previous, "prev", ARROW_PREVIOUS) if previous.get("href") else ""
        next_link = self.arrow_link(next_, "next", ARROW_NEXT) if next_.get("href") else ""
        label = self.escape(self.get("landmarkLabel")) if self.get("landmarkLabel") else "Pagination"

        return (
            f'<nav class="{css}" aria-label="{label}"{self.attributes(self.get("attributes"))}>\n'
            f"  {previous_link}\n"
            f"  {self._page_links()}\n"
            f"  {next_link}\n"
            "</nav>"
        )


def govuk_pagination(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the pagination component.

    Example:
        >>> govuk_pagination({
        ...     "previous": {"href": "/page/1"},
        ...     "next": {"href": "/page/3"},
        ...     "items": [{"number": 1, "href": "/page/1"}, {"number": 2, "href": "/page/2", "current": True}],
        ... })
    """
    return as_trusted(Pagination(params, **overrides).render())
