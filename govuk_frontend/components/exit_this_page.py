"""
Exit this page component for GOV.UK Frontend

Gives users a way to quickly and safely exit a service. The button links
to ``redirectUrl`` (BBC Weather by default) and the four ``*Text`` options
become ``data-i18n.*`` attributes for the client-side keyboard shortcut.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml, coalesce
from .base import Component, Params, as_trusted
from .button import Button

DEFAULT_REDIRECT_URL = "https://www.bbc.co.uk/weather"
DEFAULT_BUTTON_HTML = '<span class="govuk-visually-hidden">Emergency</span> Exit this page'


class ExitThisPage(Component):
    name = "exit-this-page"

    def render(self) -> str:
        css = self.classes("govuk-exit-this-page", self.get("classes"))
        attrs = self.attribute("id", self.get("id"))
        attrs += f' class="{css}"'
        attrs += ' data-module="govuk-exit-this-page"'
        attrs += self.attributes(self.get("attributes"))
        attrs += self.attribute("data-i18n.activated", self.get("activatedText"))
        attrs += self.attribute("data-i18n.timed-out", self.get("timedOutText"))
        attrs += self.attribute("data-i18n.press-two-more-times", self.get("pressTwoMoreTimesText"))
        attrs += self.attribute("data-i18n.press-one-more-time", self.get("pressOneMoreTimeText"))

        has_content = self.get("html") or self.get("text")
        button = Button(
            html=self.get("html") if has_content else DEFAULT_BUTTON_HTML,
            text=self.get("text"),
            classes="govuk-button--warning govuk-exit-this-page__button govuk-js-exit-this-page-button",
            href=coalesce(self.get("redirectUrl"), DEFAULT_REDIRECT_URL),
            attributes={"rel": "nofollow noreferrer"},
        ).render()

        return f"<div{attrs}>\n  {button}\n</div>"


def govuk_exit_this_page(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the exit this page component."""
    return as_trusted(ExitThisPage(params, **overrides).render())
