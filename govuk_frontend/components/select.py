"""
Select component for GOV.UK Frontend

Lets users choose an option from a long list. An option is selected when
its own ``selected`` flag says so, or, failing that, when the component
``value`` equals the option's value (or its text, for options without a
value).
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from ..utils import UNDEFINED, TrustedHtml, coalesce, is_nullish
from .base import Params, as_trusted, dig, logger
from .form_group import FormControl


class Select(FormControl):
    name = "select"
    block = "govuk-select"

    def is_selected(self, item: Mapping[str, Any]) -> bool:
        if not is_nullish(item.get("selected")):
            return bool(item["selected"])
        value = self.get("value")
        effective_value = coalesce(dig(item, "value"), dig(item, "text"))
        return value is not UNDEFINED and value == effective_value

    def options(self) -> str:
        options: List[str] = []
        matched = False
        for item in self.get("items") or []:
            if not item:
                continue
            selected = self.is_selected(item)
            matched = matched or selected
            options.append(
                f"<option{self.attribute('value', dig(item, 'value'))}"
                f"{' selected' if selected else ''}"
                f"{' disabled' if item.get('disabled') else ''}"
                f"{self.attributes(item.get('attributes'))}>"
                f"{self.escape(item.get('text'))}</option>"
            )
        if not matched and not is_nullish(self.get("value")):
            logger.debug("select %r: value %r matches no option", self.get("id"), self.get("value"))
        return "\n    ".join(options)

    def render(self) -> str:
        label = self.label()
        hint = self.hint()
        error_message = self.error_message()

        attrs = (
            f' id="{self.escape(self.control_id)}" name="{self.escape(self.get("name"))}"'
            f"{' disabled' if self.get('disabled') else ''}"
            f"{self.aria_describedby()}"
            f"{self.attributes(self.get('attributes'))}"
        )
        select = (
            f'<select class="{self.control_classes()}"{attrs}>\n'
            f"    {self.options()}\n"
            "  </select>"
        )
        return self.form_group(
            f"{label}\n  {hint}\n  {error_message}\n  {self.before_input()}\n  {select}\n  {self.after_input()}"
        )


def govuk_select(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the select component.

    Example:
        >>> govuk_select({
        ...     "id": "sort",
        ...     "name": "sort",
        ...     "value": "updated",
        ...     "items": [{"value": "published", "text": "Recently published"},
        ...               {"value": "updated", "text": "Recently updated"}],
        ... })
    """
    return as_trusted(Select(params, **overrides).render())
