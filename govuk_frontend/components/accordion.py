"""
Accordion component for GOV.UK Frontend

Lets users show and hide sections of related content on a page. Section
ids are ``{id}-heading-{n}``, ``{id}-summary-{n}`` and ``{id}-content-{n}``
counting from 1. Button labels are translated through ``data-i18n.*``
attributes read by the component script.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from ..utils import TrustedHtml, encode_i18n_attributes, is_nullish
from .base import Component, Params, as_mapping, as_trusted

# (i18n key, option)
SECTION_MESSAGES = (
    ("hide-all-sections", "hideAllSectionsText"),
    ("hide-section", "hideSectionText"),
    ("hide-section-aria-label", "hideSectionAriaLabelText"),
    ("show-all-sections", "showAllSectionsText"),
    ("show-section", "showSectionText"),
    ("show-section-aria-label", "showSectionAriaLabelText"),
)


class Accordion(Component):
    name = "accordion"

    def section(self, item: Mapping[str, Any], index: int, element_id: str, heading_level: str) -> str:
        summary = as_mapping(item.get("summary"))
        summary_html = ""
        if summary.get("html") or summary.get("text"):
            summary_html = (
                f'<div class="govuk-accordion__section-summary govuk-body" id="{element_id}-summary-{index}">\n'
                f"        {self.content(summary)}\n"
                "      </div>"
            )

        content = as_mapping(item.get("content"))
        if not is_nullish(content.get("html")):
            content_html = self.trusted(content["html"])
        else:
            content_html = f'<p class="govuk-body">{self.escape(content.get("text"))}</p>'

        css = self.classes(
            "govuk-accordion__section",
            **{"govuk-accordion__section--expanded": bool(item.get("expanded"))},
        )
        return (
            f'<div class="{css}">\n'
            '  <div class="govuk-accordion__section-header">\n'
            f'    <h{heading_level} class="govuk-accordion__section-heading">\n'
            f'      <span class="govuk-accordion__section-button" id="{element_id}-heading-{index}">\n'
            f"        {self.content(item.get('heading'))}\n"
            "      </span>\n"
            f"    </h{heading_level}>\n"
            f"    {summary_html}\n"
            "  </div>\n"
            f'  <div id="{element_id}-content-{index}" class="govuk-accordion__section-content">\n'
            f"    {content_html}\n"
            "  </div>\n"
            "</div>"
        )

    def render(self) -> str:
        items = [item for item in self.require_items("items") if item]
        element_id = self.escape(self.get("id"))
        heading_level = self.escape(self.get("headingLevel")) if self.get("headingLevel") else "2"

        attrs = f' class="{self.classes("govuk-accordion", self.get("classes"))}"'
        attrs += ' data-module="govuk-accordion"'
        attrs += f' id="{element_id}"'
        for key, option in SECTION_MESSAGES:
            attrs += encode_i18n_attributes(key=key, message=self.get(option, default=None))
        attrs += self.attribute("data-remember-expanded", self.get("rememberExpanded"))
        attrs += self.attributes(self.get("attributes"))

        sections: List[str] = [
            self.section(item, index, element_id, heading_level) for index, item in enumerate(items, start=1)
        ]
        return f"<div{attrs}>{''.join(sections)}</div>"


def govuk_accordion(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the accordion component.

    Example:
        >>> govuk_accordion({
        ...     "id": "accordion-default",
        ...     "items": [{"heading": {"text": "Section A"}, "content": {"text": "We need to know your nationality."}}],
        ... })
    """
    return as_trusted(Accordion(params, **overrides).render())
