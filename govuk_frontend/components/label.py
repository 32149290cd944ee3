"""
Label component for GOV.UK Frontend

Renders nothing when neither ``text`` nor ``html`` is given, so form
controls can always delegate to it.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_trusted


class Label(Component):
    """``<label>`` for a form control, optionally wrapped in a page heading"""

    name = "label"

    def render(self) -> str:
        label_html = ""

        if self.get("html") or self.get("text"):
            css = self.classes("govuk-label", self.get("classes"))
            attrs = f"{self.attributes(self.get('attributes'))}{self.attribute('for', self.get('for'))}"
            label_html = f'<label class="{css}"{attrs}>{self.content(self.params)}</label>'

        if self.get("isPageHeading"):
            label_html = f'<h1 class="govuk-label-wrapper">\n  {label_html}\n</h1>'

        return label_html


def govuk_label(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the label component, e.g. ``govuk_label({"text": "National Insurance number"})``."""
    return as_trusted(Label(params, **overrides).render())
