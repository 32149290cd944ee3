"""
Error summary component for GOV.UK Frontend

Summarises the errors a user has made at the top of a page. Each entry in
``errorList`` links to the field with the error when it has an ``href``.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_trusted


class ErrorSummary(Component):
    name = "error-summary"

    def _error_list(self) -> str:
        error_list = self.get("errorList") or []
        if not error_list:
            return ""

        items = []
        for item in error_list:
            content = self.content(item)
            if item.get("href"):
                content = (
                    f'<a href="{self.escape(item["href"])}"{self.attributes(item.get("attributes"))}>'
                    f"{content}</a>"
                )
            items.append(f"<li>{content}</li>")
        return f'<ul class="govuk-list govuk-error-summary__list">{"".join(items)}</ul>'

    def render(self) -> str:
        css = self.classes("govuk-error-summary", self.get("classes"))

        description = ""
        if self.get("descriptionHtml") or self.get("descriptionText"):
            description = f"<p>{self.content(self.params, 'descriptionHtml', 'descriptionText')}</p>"

        attrs = (
            f"{self.attribute('data-disable-auto-focus', self.get('disableAutoFocus'))}"
            f"{self.attributes(self.get('attributes'))}"
        )

        # role="alert" lives on a child container so the focus handling does
        # not race the screen reader announcement.
        return (
            f'<div class="{css}"{attrs} data-module="govuk-error-summary">\n'
            '    <div role="alert">\n'
            '      <h2 class="govuk-error-summary__title">\n'
            f"        {self.content(self.params, 'titleHtml', 'titleText')}\n"
            "      </h2>\n"
            '      <div class="govuk-error-summary__body">\n'
            f"        {description}\n"
            f"        {self._error_list()}\n"
            "      </div>\n"
            "    </div>\n"
            "  </div>"
        )


def govuk_error_summary(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the error summary component.

    Example:
        >>> govuk_error_summary({
        ...     "titleText": "There is a problem",
        ...     "errorList": [{"text": "Enter a postcode, like AA1 1AA", "href": "#postcode"}],
        ... })
    """
    return as_trusted(ErrorSummary(params, **overrides).render())
