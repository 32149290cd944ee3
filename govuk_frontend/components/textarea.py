"""
Textarea component for GOV.UK Frontend

Lets users enter an amount of text longer than a single line.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml
from .base import Params, as_trusted
from .form_group import FormControl

DEFAULT_ROWS = 5


class Textarea(FormControl):
    name = "textarea"
    block = "govuk-textarea"

    def render(self) -> str:
        label = self.label()
        hint = self.hint()
        error_message = self.error_message()

        spellcheck = self.get("spellcheck")
        rows = self.get("rows") or DEFAULT_ROWS
        attrs = (
            f"{self.attribute('id', self.control_id)}"
            f"{self.attribute('name', self.get('name'))}"
            f"{self.attribute('rows', rows)}"
            f"{self.attribute('spellcheck', spellcheck) if isinstance(spellcheck, bool) else ''}"
            f"{' disabled' if self.get('disabled') else ''}"
            f"{self.aria_describedby()}"
            f"{self.attribute('autocomplete', self.get('autocomplete')) if self.get('autocomplete') else ''}"
            f"{self.attributes(self.get('attributes'))}"
        )
        textarea = (
            f'<textarea class="{self.control_classes()}"{attrs}>'
            f"{self.escape(self.get('value'))}</textarea>"
        )
        return self.form_group(
            f"{label}\n  {hint}\n  {error_message}\n  {self.before_input()}\n  {textarea}\n  {self.after_input()}"
        )


def govuk_textarea(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the textarea component, e.g. ``govuk_textarea({"id": "more-detail", "name": "moreDetail"})``."""
    return as_trusted(Textarea(params, **overrides).render())
