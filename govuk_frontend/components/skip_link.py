"""
Skip link component for GOV.UK Frontend

Helps keyboard-only users skip to the main content on a page. The page
template renders one by default.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_trusted


class SkipLink(Component):
    name = "skip-link"

    def render(self) -> str:
        href = self.escape(self.get("href") or "#content")
        css = self.classes("govuk-skip-link", self.get("classes"))
        return (
            f'<a href="{href}" class="{css}"{self.attributes(self.get("attributes"))}'
            f' data-module="govuk-skip-link">{self.content(self.params)}</a>'
        )


def govuk_skip_link(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the skip link component."""
    return as_trusted(SkipLink(params, **overrides).render())
