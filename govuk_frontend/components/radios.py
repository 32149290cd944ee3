"""
Radios component for GOV.UK Frontend

Lets users select a single option from a list. An item is checked when its
own ``checked`` flag says so, or, failing that, when its value equals the
component ``value``.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from ..utils import UNDEFINED, TrustedHtml, is_nullish
from .base import Params, as_trusted, dig
from .choices import ChoiceGroup


class Radios(ChoiceGroup):
    name = "radios"
    block = "govuk-radios"
    input_type = "radio"

    def is_checked(self, item: Mapping[str, Any]) -> bool:
        if not is_nullish(item.get("checked")):
            return bool(item["checked"])
        value = self.get("value")
        return value is not UNDEFINED and dig(item, "value") == value

    def item_attributes(self, item: Mapping[str, Any], item_id: str, hint_id: str) -> str:
        return self.attribute("aria-describedby", hint_id) if hint_id else ""


def govuk_radios(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the radios component.

    Example:
        >>> govuk_radios({
        ...     "name": "where-do-you-live",
        ...     "fieldset": {"legend": {"text": "Where do you live?"}},
        ...     "items": [{"value": "england", "text": "England"}, {"value": "scotland", "text": "Scotland"}],
        ... })
    """
    return as_trusted(Radios(params, **overrides).render())
