"""
Inset text component for GOV.UK Frontend

Differentiates a block of text (quotes, examples, additional information)
from the content that surrounds it.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_trusted


class InsetText(Component):
    name = "inset-text"

    def render(self) -> str:
        css = self.classes("govuk-inset-text", self.get("classes"))
        return (
            f'<div{self.attribute("id", self.get("id"))} class="{css}"'
            f'{self.attributes(self.get("attributes"))}>\n'
            f"  {self.content(self.params)}\n"
            "</div>"
        )


def govuk_inset_text(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the inset text component."""
    return as_trusted(InsetText(params, **overrides).render())
