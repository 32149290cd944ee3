"""
Date input component for GOV.UK Frontend

Asks users for a date they already know, as separate day, month and year
inputs. The fieldset gets ``role="group"`` so screen readers announce the
hint for a group of text inputs.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from ..utils import UNDEFINED, TrustedHtml, coalesce, to_string
from ..utils.text import capitalise
from .base import Params, affix, as_mapping, as_trusted, dig
from .fieldset import Fieldset
from .form_group import FormControl
from .input import Input

DEFAULT_ITEMS = (
    {"name": "day", "classes": "govuk-input--width-2"},
    {"name": "month", "classes": "govuk-input--width-2"},
    {"name": "year", "classes": "govuk-input--width-4"},
)


class DateInput(FormControl):
    name = "date-input"
    block = "govuk-date-input"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        initial = self.get("fieldset", "describedBy")
        self.described_by = [to_string(initial)] if initial else []

    def items(self) -> List[Mapping[str, Any]]:
        items = self.get("items")
        return list(items) if items else [dict(item) for item in DEFAULT_ITEMS]

    def render_item(self, item: Mapping[str, Any]) -> str:
        item_name = to_string(dig(item, "name"))
        name_prefix = self.get("namePrefix")
        input_html = Input(
            label={
                "text": coalesce(dig(item, "label"), capitalise(item_name)),
                "classes": "govuk-date-input__label",
            },
            id=coalesce(dig(item, "id"), f"{to_string(self.control_id)}-{item_name}"),
            classes=f"govuk-date-input__input {to_string(coalesce(dig(item, 'classes'), ''))}".strip(),
            name=f"{name_prefix}-{item_name}" if name_prefix else item_name,
            value=dig(item, "value"),
            type="text",
            inputmode=coalesce(dig(item, "inputmode"), "numeric"),
            autocomplete=dig(item, "autocomplete"),
            pattern=dig(item, "pattern"),
            attributes=dig(item, "attributes"),
        ).render()
        return f'<div class="govuk-date-input__item">\n      {input_html}\n    </div>'

    def render(self) -> str:
        inner: List[str] = [self.hint(), self.error_message()]

        form_group = as_mapping(self.get("formGroup"))
        css = self.classes(self.block, self.get("classes"))
        inputs = "\n    ".join(self.render_item(item) for item in self.items())
        inner.append(
            f'<div class="{css}"{self.attributes(self.get("attributes"))}{self.attribute("id", self.control_id)}>\n'
            f"    {affix(form_group, 'beforeInputs')}\n"
            f"    {inputs}\n"
            f"    {affix(form_group, 'afterInputs')}\n"
            "  </div>"
        )
        inner_html = "\n".join(part for part in inner if part)

        if self.get("fieldset"):
            inner_html = Fieldset(
                describedBy=" ".join(self.described_by) or UNDEFINED,
                classes=self.get("fieldset", "classes"),
                role="group",
                attributes=self.get("fieldset", "attributes"),
                legend=self.get("fieldset", "legend"),
                html=inner_html,
            ).render()
        return self.form_group(inner_html)


def govuk_date_input(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the date input component.

    Example:
        >>> govuk_date_input({"id": "dob", "namePrefix": "dob", "fieldset": {"legend": {"text": "Date of birth"}}})
    """
    return as_trusted(DateInput(params, **overrides).render())
