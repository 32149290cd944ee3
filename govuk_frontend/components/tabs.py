"""
Tabs component for GOV.UK Frontend

Lets users navigate between related sections of content, displaying one
section at a time. The first tab is selected; the other panels start
hidden.
"""
from __future__ import annotations

from typing import Any, List, Optional

from ..utils import TrustedHtml, is_nullish
from .base import Component, Params, as_mapping, as_trusted


class Tabs(Component):
    name = "tabs"

    def render(self) -> str:
        tabs = ""
        panels: List[str] = []
        items = self.get("items") or []

        if items:
            id_prefix = self.escape(self.get("idPrefix")) if self.get("idPrefix") else ""
            list_items: List[str] = []

            index = 0
            for item in items:
                if not item:
                    continue
                index += 1
                item_id = item.get("id")
                panel_id = self.escape(item_id) if not is_nullish(item_id) else f"{id_prefix}-{index}"
                selected = " govuk-tabs__list-item--selected" if index == 1 else ""
                hidden = " govuk-tabs__panel--hidden" if index > 1 else ""
                panel = as_mapping(item.get("panel"))

                list_items.append(
                    f'<li class="govuk-tabs__list-item{selected}">\n'
                    f'          <a class="govuk-tabs__tab" href="#{panel_id}"'
                    f'{self.attributes(item.get("attributes"))}>\n'
                    f'            {self.escape(item.get("label"))}\n'
                    "          </a>\n"
                    "        </li>"
                )

                if not is_nullish(panel.get("html")):
                    panel_content = self.trusted(panel["html"])
                elif panel.get("text"):
                    panel_content = f'<p class="govuk-body">{self.escape(panel["text"])}</p>'
                else:
                    panel_content = ""

                panels.append(
                    f'<div class="govuk-tabs__panel{hidden}" id="{panel_id}"'
                    f'{self.attributes(panel.get("attributes"))}>\n'
                    f"        {panel_content}\n"
                    "      </div>"
                )

            tabs = f'<ul class="govuk-tabs__list">{"".join(list_items)}</ul>'

        css = self.classes("govuk-tabs", self.get("classes"))
        title = self.escape(self.get("title")) if self.get("title") else "Contents"
        return (
            f'<div{self.attribute("id", self.get("id"))} class="{css}"'
            f'{self.attributes(self.get("attributes"))} data-module="govuk-tabs">\n'
            '  <h2 class="govuk-tabs__title">\n'
            f"    {title}\n"
            "  </h2>\n"
            f"  {tabs}\n"
            f"  {''.join(panels)}\n"
            "</div>"
        )


def govuk_tabs(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the tabs component."""
    return as_trusted(Tabs(params, **overrides).render())
