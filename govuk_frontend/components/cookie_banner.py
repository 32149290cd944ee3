"""
Cookie banner component for GOV.UK Frontend

Asks users to accept or reject non-essential cookies. A banner holds one
or more messages (question, accepted, rejected) of which all but one are
usually ``hidden`` and swapped by the service's own script.

Message actions render as buttons, except links (``href`` without
``type="button"``) which render as plain ``govuk-link`` anchors.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_trusted
from .button import Button


class CookieBanner(Component):
    name = "cookie-banner"

    def action(self, action: Mapping[str, Any]) -> str:
        if not action.get("href") or action.get("type") == "button":
            return Button(
                text=action.get("text"),
                type=action.get("type") or "button",
                name=action.get("name"),
                value=action.get("value"),
                classes=action.get("classes"),
                href=action.get("href"),
                attributes=action.get("attributes"),
            ).render()
        css = self.classes("govuk-link", action.get("classes"))
        return (
            f'<a class="{css}" href="{self.escape(action["href"])}"{self.attributes(action.get("attributes"))}>'
            f"{self.escape(action.get('text'))}</a>"
        )

    def message(self, message: Mapping[str, Any]) -> str:
        actions = ""
        if message.get("actions"):
            buttons = "\n    ".join(self.action(action) for action in message["actions"])
            actions = f'<div class="govuk-button-group">\n    {buttons}\n  </div>'

        heading = ""
        if message.get("headingHtml") or message.get("headingText"):
            heading = (
                '<h2 class="govuk-cookie-banner__heading govuk-heading-m">\n'
                f"          {self.content(message, 'headingHtml', 'headingText')}\n"
                "        </h2>"
            )

        if message.get("html"):
            content = self.trusted(message["html"])
        elif message.get("text"):
            content = f'<p class="govuk-body">{self.escape(message["text"])}</p>'
        else:
            content = ""

        css = self.classes("govuk-cookie-banner__message govuk-width-container", message.get("classes"))
        attrs = (
            f"{self.attribute('role', message.get('role')) if message.get('role') else ''}"
            f"{self.attributes(message.get('attributes'))}"
            f"{' hidden' if message.get('hidden') else ''}"
        )
        return (
            f'<div class="{css}"{attrs}>\n'
            '  <div class="govuk-grid-row">\n'
            '    <div class="govuk-grid-column-two-thirds">\n'
            f"      {heading}\n"
            '      <div class="govuk-cookie-banner__content">\n'
            f"        {content}\n"
            "      </div>\n"
            "    </div>\n"
            "  </div>\n"
            f"  {actions}\n"
            "</div>"
        )

    def render(self) -> str:
        messages: List[str] = [self.message(message) for message in self.require_items("messages")]
        css = self.classes("govuk-cookie-banner", self.get("classes"))
        label = self.escape(self.get("ariaLabel")) if self.get("ariaLabel") else "Cookie banner"
        attrs = (
            f' data-nosnippet role="region" aria-label="{label}"'
            f"{' hidden' if self.get('hidden') else ''}"
            f"{self.attributes(self.get('attributes'))}"
        )
        return f'<div class="{css}"{attrs}>\n  {"".join(messages)}\n</div>'


def govuk_cookie_banner(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the cookie banner component.

    Example:
        >>> govuk_cookie_banner({
        ...     "messages": [{
        ...         "headingText": "Cookies on this service",
        ...         "text": "We use some essential cookies to make this service work.",
        ...         "actions": [{"text": "Accept analytics cookies", "type": "button", "name": "cookies", "value": "accept"}],
        ...     }],
        ... })
    """
    return as_trusted(CookieBanner(params, **overrides).render())
