"""
Details component for GOV.UK Frontend

Makes a page easier to scan by letting users reveal more detailed
information only if they need it.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_trusted


class Details(Component):
    name = "details"

    def render(self) -> str:
        css = self.classes("govuk-details", self.get("classes"))
        attrs = (
            f"{self.attribute('id', self.get('id'))} class=\"{css}\""
            f"{self.attributes(self.get('attributes'))}"
            f"{' open' if self.get('open') else ''}"
        )
        return (
            f"<details{attrs}>\n"
            '  <summary class="govuk-details__summary">\n'
            '    <span class="govuk-details__summary-text">\n'
            f"      {self.content(self.params, 'summaryHtml', 'summaryText')}\n"
            "    </span>\n"
            "  </summary>\n"
            '  <div class="govuk-details__text">\n'
            f"    {self.content(self.params)}\n"
            "  </div>\n"
            "</details>"
        )


def govuk_details(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the details component."""
    return as_trusted(Details(params, **overrides).render())
