"""Warning text component for GOV.UK Frontend."""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml, coalesce
from .base import Component, Params, as_trusted


class WarningText(Component):
    """Important text with a "!" icon and visually hidden fallback text"""

    name = "warning-text"

    def render(self) -> str:
        css = self.classes("govuk-warning-text", self.get("classes"))
        fallback = self.escape(coalesce(self.get("iconFallbackText"), "Warning"))
        return (
            f'<div class="{css}"{self.attributes(self.get("attributes"))}>\n'
            '  <span class="govuk-warning-text__icon" aria-hidden="true">!</span>\n'
            '  <strong class="govuk-warning-text__text">\n'
            f'    <span class="govuk-visually-hidden">{fallback}</span>\n'
            f"    {self.content(self.params)}\n"
            "  </strong>\n"
            "</div>"
        )


def govuk_warning_text(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the warning text component."""
    return as_trusted(WarningText(params, **overrides).render())
