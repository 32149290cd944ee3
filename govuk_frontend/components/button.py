"""
Button component for GOV.UK Frontend

Helps users carry out an action like starting an application or saving
their information.

Behavior:
    - Renders ``<a>`` when ``href`` is set, otherwise ``<button>``.
    - ``element`` forces ``a``, ``button`` or ``input``. The option is
      deprecated upstream and logged at debug level when used.
    - ``isStartButton`` adds the start modifier and arrow icon.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import UNDEFINED, TrustedHtml, coalesce
from .base import Component, Params, as_trusted, logger

# The SVG needs `focusable="false"` so that Internet Explorer does not treat
# it as an interactive element.
START_ICON = (
    '<svg class="govuk-button__start-icon" xmlns="http://www.w3.org/2000/svg" width="17.5" '
    'height="19" viewBox="0 0 33 40" aria-hidden="true" focusable="false">\n'
    '    <path fill="currentColor" d="M0 0h13l20 20-20 20H0l20-20z"/>\n'
    "  </svg>"
)


class Button(Component):
    """Link, button or input styled as a GOV.UK button"""

    name = "button"

    def element(self) -> str:
        element = self.get("element")
        if element:
            logger.debug("button: 'element' option is deprecated (got %r)", element)
            return str(element).lower()
        return "a" if self.get("href") else "button"

    def render(self) -> str:
        is_start_button = self.get("isStartButton") is True
        css = self.classes(
            "govuk-button",
            self.get("classes"),
            **{"govuk-button--start": bool(self.get("isStartButton"))},
        )
        element = self.element()

        common_attrs = (
            f' class="{css}" data-module="govuk-button"'
            f"{self.attributes(self.get('attributes'))}"
            f"{self.attribute('id', self.get('id')) if self.get('id') else ''}"
        )
        start_icon = START_ICON if is_start_button else ""

        if element == "a":
            href = self.escape(self.get("href") or "#")
            return (
                f'<a href="{href}" role="button" draggable="false"{common_attrs}>\n'
                f"  {self.content(self.params)}{start_icon}\n"
                "</a>"
            )

        button_attrs = ""
        if self.get("name"):
            button_attrs += self.attribute("name", self.get("name"))
        if self.get("disabled"):
            button_attrs += ' disabled aria-disabled="true"'
        if self.get("preventDoubleClick") is not UNDEFINED:
            button_attrs += self.attribute("data-prevent-double-click", self.get("preventDoubleClick"))

        button_type = self.escape(coalesce(self.get("type"), "submit"))

        if element == "button":
            value = self.attribute("value", self.get("value")) if self.get("value") else ""
            return (
                f'<button{value} type="{button_type}"{button_attrs}{common_attrs}>\n'
                f"  {self.content(self.params)}{start_icon}\n"
                "</button>"
            )

        # Must be input
        return (
            f'<input value="{self.escape(self.get("text"))}" type="{button_type}"'
            f"{button_attrs}{common_attrs}>"
        )


def govuk_button(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the button component, e.g. ``govuk_button({"text": "Save and continue"})``."""
    return as_trusted(Button(params, **overrides).render())
