"""
Phase banner component for GOV.UK Frontend

Shows users the service is still being worked on. Services on a
service.gov.uk domain must use it until they pass a live assessment.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_trusted
from .tag import Tag


class PhaseBanner(Component):
    name = "phase-banner"

    def render(self) -> str:
        tag = Tag(
            text=self.get("tag", "text"),
            html=self.get("tag", "html"),
            classes=f"govuk-phase-banner__content__tag {self.get('tag', 'classes') or ''}".strip(),
        ).render()

        css = self.classes("govuk-phase-banner", self.get("classes"))
        return (
            f'<div class="{css}"{self.attributes(self.get("attributes"))}>\n'
            '  <p class="govuk-phase-banner__content">\n'
            f"    {tag}\n"
            '    <span class="govuk-phase-banner__text">\n'
            f"      {self.content(self.params)}\n"
            "    </span>\n"
            "  </p>\n"
            "</div>"
        )


def govuk_phase_banner(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the phase banner component."""
    return as_trusted(PhaseBanner(params, **overrides).render())
