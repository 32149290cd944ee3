"""
Character count component for GOV.UK Frontend

A textarea that tells users how many characters or words they have left.
The limit and the translated count messages travel to the browser as data
attributes on the form group; the component script does the counting.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml, coalesce, encode_attributes, encode_i18n_attributes, to_string
from .base import Component, Params, affix, as_mapping, as_trusted, join_classes
from .hint import Hint
from .textarea import Textarea

# (i18n key, option, plural forms?)
COUNT_MESSAGES = (
    ("characters-under-limit", "charactersUnderLimitText", True),
    ("characters-at-limit", "charactersAtLimitText", False),
    ("characters-over-limit", "charactersOverLimitText", True),
    ("words-under-limit", "wordsUnderLimitText", True),
    ("words-at-limit", "wordsAtLimitText", False),
    ("words-over-limit", "wordsOverLimitText", True),
)


class CharacterCount(Component):
    name = "character-count"

    @property
    def has_no_limit(self) -> bool:
        return not self.get("maxwords") and not self.get("maxlength")

    def description(self) -> str:
        """Text of the count message rendered before the script runs.

        Without a limit the script interpolates the message once the
        maximum is configured client side, so nothing is rendered here.
        """
        if self.has_no_limit:
            return ""
        unit = "words" if self.get("maxwords") else "characters"
        text = coalesce(self.get("textareaDescriptionText"), f"You can enter up to %{{count}} {unit}")
        limit = coalesce(self.get("maxwords"), self.get("maxlength"))
        return str(text).replace("%{count}", str(limit))

    def form_group_attributes(self) -> str:
        attrs = encode_attributes(
            {
                "data-module": "govuk-character-count",
                "data-maxlength": {"value": self.get("maxlength"), "optional": True},
                "data-threshold": {"value": self.get("threshold"), "optional": True},
                "data-maxwords": {"value": self.get("maxwords"), "optional": True},
            }
        )
        if self.has_no_limit and self.get("textareaDescriptionText"):
            attrs += encode_i18n_attributes(
                key="textarea-description",
                messages={"other": self.get("textareaDescriptionText")},
            )
        for key, option, plural in COUNT_MESSAGES:
            if plural:
                attrs += encode_i18n_attributes(key=key, messages=self.get(option, default=None))
            else:
                attrs += encode_i18n_attributes(key=key, message=self.get(option, default=None))
        attrs += encode_attributes(self.get("formGroup", "attributes"))
        return attrs

    def render(self) -> str:
        element_id = self.get("id")
        info_id = f"{to_string(element_id)}-info"
        form_group = as_mapping(self.get("formGroup"))

        count_message = Hint(
            {
                "text": self.description(),
                "id": info_id,
                "classes": join_classes("govuk-character-count__message", self.get("countMessage", "classes")),
            }
        ).render()
        count_message += affix(form_group, "afterInput")

        textarea_params = {
            "id": element_id,
            "name": self.get("name"),
            "describedBy": info_id,
            "rows": self.get("rows"),
            "spellcheck": self.get("spellcheck"),
            "value": self.get("value"),
            "formGroup": {
                "classes": join_classes("govuk-character-count", form_group.get("classes")),
                "attributes": self.form_group_attributes(),
                "beforeInput": form_group.get("beforeInput"),
                "afterInput": {"html": count_message},
            },
            "classes": join_classes("govuk-js-character-count", self.get("classes")),
            "label": {**as_mapping(self.get("label")), "for": element_id},
            "hint": self.get("hint"),
            "errorMessage": self.get("errorMessage"),
            "attributes": self.get("attributes"),
        }
        return Textarea(textarea_params).render()


def govuk_character_count(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the character count component.

    Example:
        >>> govuk_character_count({"id": "summary", "name": "summary", "maxlength": 200})
    """
    return as_trusted(CharacterCount(params, **overrides).render())
