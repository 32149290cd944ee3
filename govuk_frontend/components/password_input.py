"""
Password input component for GOV.UK Frontend

A text input for passwords with a show/hide toggle button. The button is
rendered hidden and revealed by the component script, which also reads the
translated button labels and announcements from ``data-i18n.*`` attributes.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml, coalesce, encode_attributes, encode_i18n_attributes
from .base import Component, Params, affix, as_mapping, as_trusted, join_classes
from .button import Button
from .input import Input

# (i18n key, option)
TOGGLE_MESSAGES = (
    ("show-password", "showPasswordText"),
    ("hide-password", "hidePasswordText"),
    ("show-password-aria-label", "showPasswordAriaLabelText"),
    ("hide-password-aria-label", "hidePasswordAriaLabelText"),
    ("password-shown-announcement", "passwordShownAnnouncementText"),
    ("password-hidden-announcement", "passwordHiddenAnnouncementText"),
)


class PasswordInput(Component):
    name = "password-input"

    def form_group_attributes(self) -> str:
        attrs = ' data-module="govuk-password-input"'
        for key, option in TOGGLE_MESSAGES:
            attrs += encode_i18n_attributes(key=key, message=self.get(option, default=None))
        return attrs + encode_attributes(self.get("formGroup", "attributes"))

    def toggle_button(self) -> str:
        return Button(
            type="button",
            classes=join_classes(
                "govuk-button--secondary govuk-password-input__toggle govuk-js-password-input-toggle",
                self.get("button", "classes"),
            ),
            text=coalesce(self.get("showPasswordText"), "Show"),
            attributes={
                "aria-controls": self.get("id"),
                "aria-label": coalesce(self.get("showPasswordAriaLabelText"), "Show password"),
                "hidden": {"value": True, "optional": True},
            },
        ).render()

    def render(self) -> str:
        form_group = as_mapping(self.get("formGroup"))
        after_input = self.toggle_button() + affix(form_group, "afterInput")

        return Input(
            formGroup={
                "classes": join_classes("govuk-password-input", form_group.get("classes")),
                "attributes": self.form_group_attributes(),
                "beforeInput": form_group.get("beforeInput"),
                "afterInput": {"html": after_input},
            },
            inputWrapper={"classes": "govuk-password-input__wrapper"},
            label=self.get("label"),
            hint=self.get("hint"),
            classes=join_classes(
                "govuk-password-input__input govuk-js-password-input-input", self.get("classes")
            ),
            errorMessage=self.get("errorMessage"),
            id=self.get("id"),
            name=self.get("name"),
            type="password",
            spellcheck=False,
            autocapitalize="none",
            autocomplete=coalesce(self.get("autocomplete"), "current-password"),
            value=self.get("value"),
            disabled=self.get("disabled"),
            describedBy=self.get("describedBy"),
            attributes=self.get("attributes"),
        ).render()


def govuk_password_input(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the password input component.

    Example:
        >>> govuk_password_input({"id": "password", "name": "password", "label": {"text": "Password"}})
    """
    return as_trusted(PasswordInput(params, **overrides).render())
