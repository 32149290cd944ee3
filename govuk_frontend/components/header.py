"""
Header component for GOV.UK Frontend

Shows users that they are on GOV.UK and which service they are using.
Navigation items collapse behind a menu button on small screens.
"""
from __future__ import annotations

from typing import Any, List, Optional

from ..utils import TrustedHtml, coalesce, is_nullish
from .base import Component, Params, as_trusted, dig, load_asset

GOVUK_ST_EDWARDS_CROWN = load_asset("govuk-st-edwards-crown.svg")
GOVUK_TUDOR_CROWN = load_asset("govuk-tudor-crown.svg")


class Header(Component):
    name = "header"

    def _service_name(self) -> str:
        if not self.get("serviceName"):
            return ""
        service_name = self.escape(self.get("serviceName"))
        if self.get("serviceUrl"):
            return (
                f'<a href="{self.escape(self.get("serviceUrl"))}" '
                f'class="govuk-header__link govuk-header__service-name">{service_name}</a>'
            )
        return f'<span class="govuk-header__service-name">{service_name}</span>'

    def _navigation(self) -> str:
        items = self.get("navigation") or []
        if not items:
            return ""

        menu_button_text = coalesce(self.get("menuButtonText"), "Menu")
        menu_button_label = coalesce(self.get("menuButtonLabel"), menu_button_text)
        label = coalesce(self.get("navigationLabel"), menu_button_text)
        menu_label = (
            self.attribute("aria-label", menu_button_label)
            if menu_button_label != menu_button_text
            else ""
        )

        navigation_items: List[str] = []
        for item in items:
            if not (item.get("html") or item.get("text")):
                continue
            link_open = link_close = ""
            if item.get("href"):
                link_open = (
                    f'<a class="govuk-header__link" href="{self.escape(item["href"])}"'
                    f'{self.attributes(item.get("attributes"))}>'
                )
                link_close = "</a>"
            if is_nullish(item.get("html")):
                content = f" {self.escape(item.get('text'))}"
            else:
                content = self.trusted(item["html"])
            active = " govuk-header__navigation-item--active" if item.get("active") else ""
            navigation_items.append(
                f'<li class="govuk-header__navigation-item{active}">\n'
                f"          {link_open}{content}{link_close}\n"
                "        </li>"
            )

        nav_css = self.classes("govuk-header__navigation", self.get("navigationClasses"))
        return (
            f'<nav aria-label="{self.escape(label)}" class="{nav_css}">\n'
            '      <button type="button" class="govuk-header__menu-button govuk-js-header-toggle" '
            f'aria-controls="navigation"{menu_label} hidden>\n'
            f"        {self.escape(menu_button_text)}\n"
            "      </button>\n"
            '      <ul id="navigation" class="govuk-header__navigation-list">\n'
            f"        {''.join(navigation_items)}\n"
            "      </ul>\n"
            "    </nav>"
        )

    def render(self) -> str:
        service_name = self._service_name()
        navigation = self._navigation()

        container_classes = self.get("containerClasses")
        container_css = (
            f" {self.escape(container_classes)}" if container_classes else " govuk-width-container"
        )
        crown = GOVUK_ST_EDWARDS_CROWN if self.get("useTudorCrown") is False else GOVUK_TUDOR_CROWN
        homepage_url = self.escape(coalesce(dig(self.params, "homepageUrl"), "/"))
        content = (
            f'<div class="govuk-header__content">{service_name}{navigation}</div>'
            if service_name or navigation
            else ""
        )

        css = self.classes("govuk-header", self.get("classes"))
        return (
            f'<header class="{css}" data-module="govuk-header"{self.attributes(self.get("attributes"))}>\n'
            f'  <div class="govuk-header__container{container_css}">\n'
            '    <div class="govuk-header__logo">\n'
            f'      <a href="{homepage_url}" class="govuk-header__link govuk-header__link--homepage">\n'
            f"        {crown}\n"
            '        <span class="govuk-header__product-name">\n'
            f"          {self.escape(self.get('productName'))}\n"
            "        </span>\n"
            "      </a>\n"
            "    </div>\n"
            f"    {content}\n"
            "  </div>\n"
            "</header>"
        )


def govuk_header(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the header component, e.g. ``govuk_header({"serviceName": "Service name", "serviceUrl": "/"})``."""
    return as_trusted(Header(params, **overrides).render())
