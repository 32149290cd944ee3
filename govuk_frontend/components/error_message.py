"""
Error message component for GOV.UK Frontend

The message is prefixed with visually hidden text ("Error:" by default) so
screen reader users hear it is an error. Pass an empty
``visuallyHiddenText`` to drop the prefix.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml, coalesce
from .base import Component, Params, as_trusted


class ErrorMessage(Component):
    """Inline error message for a form control"""

    name = "error-message"

    def render(self) -> str:
        visually_hidden_text = coalesce(self.get("visuallyHiddenText"), "Error")
        message = self.content(self.params)

        if visually_hidden_text:
            message = (
                f'<span class="govuk-visually-hidden">{self.escape(visually_hidden_text)}:</span> '
                f"{message}"
            )

        css = self.classes("govuk-error-message", self.get("classes"))
        return (
            f'<p{self.attribute("id", self.get("id"))} class="{css}"'
            f'{self.attributes(self.get("attributes"))}>\n'
            f"  {message}\n"
            "</p>"
        )


def govuk_error_message(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the error message component."""
    return as_trusted(ErrorMessage(params, **overrides).render())
