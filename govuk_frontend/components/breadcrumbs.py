"""
Breadcrumbs component for GOV.UK Frontend

Helps users understand where they are within a website's structure and
move between levels. Items without ``href`` render as the current page.
"""
from __future__ import annotations

from typing import Any, List, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_trusted


class Breadcrumbs(Component):
    name = "breadcrumbs"

    def render(self) -> str:
        items = self.require_items("items")
        css = self.classes(
            "govuk-breadcrumbs",
            self.get("classes"),
            **{"govuk-breadcrumbs--collapse-on-mobile": bool(self.get("collapseOnMobile"))},
        )

        crumbs: List[str] = []
        for item in items:
            content = self.content(item)
            if item.get("href"):
                crumbs.append(
                    '<li class="govuk-breadcrumbs__list-item">\n'
                    f'      <a class="govuk-breadcrumbs__link" href="{self.escape(item["href"])}"'
                    f'{self.attributes(item.get("attributes"))}>{content}</a>\n'
                    "    </li>"
                )
            else:
                crumbs.append(
                    f'<li class="govuk-breadcrumbs__list-item" aria-current="page">{content}</li>'
                )

        return (
            f'<div class="{css}"{self.attributes(self.get("attributes"))}>\n'
            '  <ol class="govuk-breadcrumbs__list">'
            f"{''.join(crumbs)}\n"
            "  </ol>\n"
            "</div>"
        )


def govuk_breadcrumbs(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the breadcrumbs component.

    Example:
        >>> govuk_breadcrumbs({"items": [{"text": "Section", "href": "/section"}]})
    """
    return as_trusted(Breadcrumbs(params, **overrides).render())
