"""
Text input component for GOV.UK Frontend

Lets users enter a single line of text. Supports prefix and suffix boxes
(for units such as "£" or "kg") that wrap the input together with any
``formGroup.beforeInput``/``afterInput`` content.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from ..utils import UNDEFINED, TrustedHtml, coalesce
from .base import Params, as_trusted
from .form_group import FormControl


class Input(FormControl):
    name = "input"
    block = "govuk-input"

    def affix_item(self, source: Any, kind: str) -> str:
        """Render a ``prefix`` or ``suffix`` box; hidden from screen readers."""
        if not isinstance(source, Mapping) or not (source.get("text") or source.get("html")):
            return ""
        css = self.classes(f"govuk-input__{kind}", source.get("classes"))
        return (
            f'<div class="{css}" aria-hidden="true"{self.attributes(source.get("attributes"))}>'
            f"{self.content(source)}</div>"
        )

    def input_element(self) -> str:
        spellcheck = self.get("spellcheck")
        attrs = (
            f' id="{self.escape(self.control_id)}"'
            f"{self.attribute('name', self.get('name'))}"
            f"{self.attribute('type', coalesce(self.get('type'), 'text'))}"
            f"{self.attribute('spellcheck', spellcheck if isinstance(spellcheck, bool) else UNDEFINED)}"
            f"{self.attribute('value', self.get('value'))}"
            f"{' disabled' if self.get('disabled') is True else ''}"
            f"{self.aria_describedby()}"
            f"{self.attribute('autocomplete', self.get('autocomplete'))}"
            f"{self.attribute('autocapitalize', self.get('autocapitalize'))}"
            f"{self.attribute('pattern', self.get('pattern'))}"
            f"{self.attribute('inputmode', self.get('inputmode'))}"
            f"{self.attributes(self.get('attributes'))}"
        )
        return f'<input class="{self.control_classes()}"{attrs}>'

    def render(self) -> str:
        label = self.label()
        hint = self.hint()
        error_message = self.error_message()
        input_element = self.input_element()

        before_input = self.before_input() + self.affix_item(self.get("prefix"), "prefix")
        after_input = self.affix_item(self.get("suffix"), "suffix") + self.after_input()
        if before_input or after_input:
            wrapper_css = self.classes("govuk-input__wrapper", self.get("inputWrapper", "classes"))
            wrapper_attrs = self.attributes(self.get("inputWrapper", "attributes"))
            before_input = f'<div class="{wrapper_css}"{wrapper_attrs}>{before_input}'
            after_input += "</div>"

        return self.form_group(
            f"{label}\n  {hint}\n  {error_message}\n  {before_input}\n  {input_element}\n  {after_input}"
        )


def govuk_input(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the text input component.

    Example:
        >>> govuk_input({"id": "postcode", "name": "postcode", "label": {"text": "Postcode"}})
    """
    return as_trusted(Input(params, **overrides).render())
