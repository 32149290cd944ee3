"""
Notification banner component for GOV.UK Frontend

Tells the user about something they need to know about that is not
directly related to the page content.

Behavior:
    - ``type="success"`` switches to the success style, ``role="alert"``
      and a "Success" title.
    - Otherwise the banner is a ``role="region"`` landmark titled
      "Important".
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml, is_nullish
from .base import Component, Params, as_trusted

DEFAULT_TITLE_ID = "govuk-notification-banner-title"


class NotificationBanner(Component):
    name = "notification-banner"

    def _role(self, success: bool) -> str:
        if self.get("role"):
            return self.escape(self.get("role"))
        # Success banners take priority for assistive technology users;
        # the others are landmarks users can navigate to.
        return "alert" if success else "region"

    def _title(self, success: bool) -> str:
        if self.get("titleHtml"):
            return self.trusted(self.get("titleHtml"))
        if self.get("titleText"):
            return self.escape(self.get("titleText"))
        return "Success" if success else "Important"

    def render(self) -> str:
        success = self.get("type") == "success"
        heading_level = self.escape(self.get("titleHeadingLevel")) if self.get("titleHeadingLevel") else "2"
        title_id = self.escape(self.get("titleId")) if self.get("titleId") else DEFAULT_TITLE_ID
        css = self.classes(
            "govuk-notification-banner",
            self.get("classes"),
            **{"govuk-notification-banner--success": success},
        )

        attrs = f' role="{self._role(success)}"'
        attrs += f' aria-labelledby="{title_id}"'
        attrs += ' data-module="govuk-notification-banner"'
        attrs += self.attribute("data-disable-auto-focus", self.get("disableAutoFocus"))
        attrs += self.attributes(self.get("attributes"))

        if not is_nullish(self.get("html")):
            content = self.trusted(self.get("html"))
        elif self.get("text"):
            content = f'<p class="govuk-notification-banner__heading">{self.escape(self.get("text"))}</p>'
        else:
            content = ""

        return (
            f'<div class="{css}"{attrs}>\n'
            '  <div class="govuk-notification-banner__header">\n'
            f'    <h{heading_level} class="govuk-notification-banner__title" id="{title_id}">\n'
            f"      {self._title(success)}\n"
            f"    </h{heading_level}>\n"
            "  </div>\n"
            '  <div class="govuk-notification-banner__content">\n'
            f"    {content}\n"
            "  </div>\n"
            "</div>"
        )


def govuk_notification_banner(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the notification banner component."""
    return as_trusted(NotificationBanner(params, **overrides).render())
