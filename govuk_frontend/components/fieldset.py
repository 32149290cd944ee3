"""
Fieldset component for GOV.UK Frontend

Groups related form inputs under a legend. Checkboxes, radios and date
input wrap their markup in a fieldset when a ``fieldset`` option is given.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_trusted


class Fieldset(Component):
    """``<fieldset>`` with optional legend (optionally the page heading)"""

    name = "fieldset"

    def render(self) -> str:
        legend = ""
        legend_params = self.get("legend", default={})

        if self.get("legend", "html") or self.get("legend", "text"):
            content = self.content(legend_params)
            if legend_params.get("isPageHeading"):
                content = f'<h1 class="govuk-fieldset__heading">{content}</h1>'
            legend_css = self.classes("govuk-fieldset__legend", legend_params.get("classes"))
            legend = f'<legend class="{legend_css}">\n      {content}\n    </legend>'

        css = self.classes("govuk-fieldset", self.get("classes"))
        attrs = (
            f"{self.attribute('role', self.get('role'))}"
            f"{self.attribute('aria-describedby', self.get('describedBy'))}"
            f"{self.attributes(self.get('attributes'))}"
        )
        return (
            f'<fieldset class="{css}"{attrs}>\n'
            f"  {legend}\n"
            f"  {self.trusted(self.get('html'))}\n"
            "</fieldset>"
        )


def govuk_fieldset(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the fieldset component, e.g. ``govuk_fieldset({"legend": {"text": "What is your address?"}})``."""
    return as_trusted(Fieldset(params, **overrides).render())
