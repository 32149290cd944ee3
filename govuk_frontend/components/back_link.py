"""Back link component for GOV.UK Frontend."""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml, is_nullish
from .base import Component, Params, as_trusted


class BackLink(Component):
    """Link back to the previous page; text defaults to "Back"."""

    name = "back-link"

    def render(self) -> str:
        href = self.escape(self.get("href") or "#")
        css = self.classes("govuk-back-link", self.get("classes"))
        if is_nullish(self.get("html")):
            content = self.escape(self.get("text")) or "Back"
        else:
            content = self.trusted(self.get("html"))
        return (
            f'<a href="{href}" class="{css}"{self.attributes(self.get("attributes"))}>\n'
            f"    {content}\n"
            "  </a>"
        )


def govuk_back_link(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the back link component, e.g. ``govuk_back_link({"href": "/previous"})``."""
    return as_trusted(BackLink(params, **overrides).render())
