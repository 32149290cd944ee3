"""Tag component for GOV.UK Frontend: shows users the status of something."""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_trusted


class Tag(Component):
    name = "tag"

    def render(self) -> str:
        css = self.classes("govuk-tag", self.get("classes"))
        return (
            f'<strong class="{css}"{self.attributes(self.get("attributes"))}>\n'
            f"  {self.content(self.params)}\n"
            "</strong>"
        )


def govuk_tag(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the tag component, e.g. ``govuk_tag({"text": "Alpha"})``."""
    return as_trusted(Tag(params, **overrides).render())
