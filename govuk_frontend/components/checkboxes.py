"""
Checkboxes component for GOV.UK Frontend

Lets users select one or more options. Items are checked by their own
``checked`` flag or by appearing in the component's ``values`` list.
Without a fieldset each checkbox carries the group's ``aria-describedby``
itself, so the hint and error message are still announced.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from ..utils import TrustedHtml, coalesce, is_nullish
from .base import Params, as_trusted, dig
from .choices import ChoiceGroup


class Checkboxes(ChoiceGroup):
    name = "checkboxes"
    block = "govuk-checkboxes"
    input_type = "checkbox"

    def initial_described_by(self) -> Any:
        return coalesce(self.get("fieldset", "describedBy"), self.get("describedBy"))

    def is_checked(self, item: Mapping[str, Any]) -> bool:
        if not is_nullish(item.get("checked")):
            return bool(item["checked"])
        values = self.get("values") or []
        return dig(item, "value") in values

    def item_name(self, item: Mapping[str, Any]) -> Any:
        return coalesce(dig(item, "name"), self.get("name"))

    def item_attributes(self, item: Mapping[str, Any], item_id: str, hint_id: str) -> str:
        described_by = [] if self.has_fieldset else list(self.described_by)
        if hint_id:
            described_by.append(hint_id)
        return (
            f"{self.attribute('data-behaviour', dig(item, 'behaviour'))}"
            f"{self.attribute('aria-describedby', ' '.join(described_by)) if described_by else ''}"
        )


def govuk_checkboxes(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the checkboxes component.

    Example:
        >>> govuk_checkboxes({
        ...     "name": "nationality",
        ...     "values": ["british"],
        ...     "items": [{"value": "british", "text": "British"}, {"value": "irish", "text": "Irish"}],
        ... })
    """
    return as_trusted(Checkboxes(params, **overrides).render())
