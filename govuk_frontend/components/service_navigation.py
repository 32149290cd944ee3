"""
Service navigation component for GOV.UK Frontend

Shows the service name and the main navigation of a service. ``slots``
take trusted HTML injected at the start and end of the container and of
the navigation list.

When there is a service name or a start/end slot the component renders as
a ``<section>`` landmark; otherwise the ``<nav>`` inside is landmark
enough and a plain ``<div>`` wraps it.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_trusted


class ServiceNavigation(Component):
    name = "service-navigation"

    def slot(self, name: str) -> str:
        return self.trusted(self.get("slots", name))

    def _service_name(self) -> str:
        if not self.get("serviceName"):
            return ""
        service_name = self.escape(self.get("serviceName"))
        if self.get("serviceUrl"):
            inner = (
                f'<a href="{self.escape(self.get("serviceUrl"))}" class="govuk-service-navigation__link">\n'
                f"        {service_name}\n"
                "      </a>"
            )
        else:
            inner = f'<span class="govuk-service-navigation__text">\n        {service_name}\n      </span>'
        return f'<span class="govuk-service-navigation__service-name">{inner}</span>'

    def _item(self, item: Mapping[str, Any]) -> str:
        active_or_current = bool(item.get("active") or item.get("current"))
        aria_current = ""
        if active_or_current:
            aria_current = f' aria-current="{"page" if item.get("current") else "true"}"'

        # Active links are wrapped in <strong> so the current item stays
        # distinguishable when users override colours
        content = self.content(item)
        if active_or_current:
            content = f'<strong class="govuk-service-navigation__active-fallback">{content}</strong>'

        css = self.classes(
            "govuk-service-navigation__item",
            **{"govuk-service-navigation__item--active": active_or_current},
        )
        link = ""
        if item.get("href"):
            link = (
                f'<a class="govuk-service-navigation__link" href="{self.escape(item["href"])}"'
                f'{aria_current}{self.attributes(item.get("attributes"))}>\n'
                f"            {content}\n"
                "          </a>"
            )
        elif item.get("html") or item.get("text"):
            link = f'<span class="govuk-service-navigation__text"{aria_current}>{content}</span>'
        return f'<li class="{css}">{link}</li>'

    def _navigation(self, menu_button_text: str) -> str:
        items = self.get("navigation") or []
        if not (items or self.get("slots", "navigationStart") or self.get("slots", "navigationEnd")):
            return ""

        navigation_id = self.escape(self.get("navigationId")) if self.get("navigationId") else "navigation"
        label = self.escape(self.get("navigationLabel")) if self.get("navigationLabel") else menu_button_text
        nav_css = self.classes("govuk-service-navigation__wrapper", self.get("navigationClasses"))
        menu_button_label = ""
        if self.get("menuButtonLabel") and self.escape(self.get("menuButtonLabel")) != menu_button_text:
            menu_button_label = self.attribute("aria-label", self.get("menuButtonLabel"))

        parts: List[str] = [
            f'<nav aria-label="{label}" class="{nav_css}">\n'
            '      <button type="button" class="govuk-service-navigation__toggle '
            f'govuk-js-service-navigation-toggle" aria-controls="{navigation_id}"{menu_button_label} hidden>\n'
            f"        {menu_button_text}\n"
            "      </button>\n"
            f'      <ul class="govuk-service-navigation__list" id="{navigation_id}">',
            self.slot("navigationStart"),
        ]
        parts.extend(self._item(item) for item in items)
        parts.append(self.slot("navigationEnd"))
        parts.append("</ul></nav>")
        return "".join(parts)

    def render(self) -> str:
        menu_button_text = self.escape(self.get("menuButtonText")) if self.get("menuButtonText") else "Menu"
        css = self.classes("govuk-service-navigation", self.get("classes"))
        common_attrs = (
            f'class="{css}" data-module="govuk-service-navigation"{self.attributes(self.get("attributes"))}'
        )

        inner = (
            '<div class="govuk-width-container">\n'
            f"  {self.slot('start')}\n"
            '  <div class="govuk-service-navigation__container">\n'
            f"    {self._service_name()}\n"
            f"    {self._navigation(menu_button_text)}\n"
            "  </div>\n"
            f"  {self.slot('end')}\n"
            "</div>"
        )

        if self.get("serviceName") or self.get("slots", "start") or self.get("slots", "end"):
            label = self.escape(self.get("ariaLabel")) if self.get("ariaLabel") else "Service information"
            return f'<section aria-label="{label}" {common_attrs}>\n  {inner}\n</section>'
        return f"<div {common_attrs}>\n  {inner}\n</div>"


def govuk_service_navigation(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the service navigation component.

    Example:
        >>> govuk_service_navigation({
        ...     "serviceName": "Apply for a licence",
        ...     "navigation": [{"href": "/", "text": "Home", "current": True}],
        ... })
    """
    return as_trusted(ServiceNavigation(params, **overrides).render())
