"""
Panel component for GOV.UK Frontend

A visible container used on confirmation or results pages to highlight
important content.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_trusted


class Panel(Component):
    name = "panel"

    def render(self) -> str:
        heading_level = self.escape(self.get("headingLevel")) if self.get("headingLevel") else "1"
        css = self.classes("govuk-panel govuk-panel--confirmation", self.get("classes"))

        body = ""
        if self.get("html") or self.get("text"):
            body = f'<div class="govuk-panel__body">{self.content(self.params)}</div>'

        return (
            f'<div class="{css}"{self.attributes(self.get("attributes"))}>\n'
            f'  <h{heading_level} class="govuk-panel__title">\n'
            f"    {self.content(self.params, 'titleHtml', 'titleText')}\n"
            f"  </h{heading_level}>\n"
            f"  {body}\n"
            "</div>"
        )


def govuk_panel(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the panel component, e.g. ``govuk_panel({"titleText": "Application complete"})``."""
    return as_trusted(Panel(params, **overrides).render())
