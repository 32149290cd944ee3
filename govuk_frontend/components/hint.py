"""
Hint component for GOV.UK Frontend

Adds hint text to inputs and fieldsets. Form controls render it themselves
and point ``aria-describedby`` at its id.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_trusted


class Hint(Component):
    """Hint text below a label or legend"""

    name = "hint"

    def render(self) -> str:
        css = self.classes("govuk-hint", self.get("classes"))
        attrs = f"{self.attribute('id', self.get('id'))}{self.attributes(self.get('attributes'))}"
        return f'<div class="{css}"{attrs}>{self.content(self.params)}</div>'


def govuk_hint(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the hint component, e.g. ``govuk_hint({"text": "For example, QQ 12 34 56 C"})``."""
    return as_trusted(Hint(params, **overrides).render())
