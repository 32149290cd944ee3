"""
Footer component for GOV.UK Frontend

Provides copyright, licensing and other information about the service,
plus optional navigation columns and support ("meta") links.
"""
from __future__ import annotations

from typing import Any, List, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_mapping, as_trusted, load_asset

LICENCE_LOGO = load_asset("licence.svg")

OPEN_GOVERNMENT_LICENCE = (
    "All content is available under the\n"
    '  <a class="govuk-footer__link" '
    'href="https://www.nationalarchives.gov.uk/doc/open-government-licence/version/3/" '
    'rel="license">Open Government Licence v3.0</a>, except where otherwise stated'
)
CROWN_COPYRIGHT = "© Crown copyright"
CROWN_COPYRIGHT_URL = (
    "https://www.nationalarchives.gov.uk/information-management/"
    "re-using-public-sector-information/uk-government-licensing-framework/crown-copyright/"
)


class Footer(Component):
    name = "footer"

    def _navigation(self) -> str:
        sections = self.get("navigation") or []
        if not sections:
            return ""

        parts: List[str] = ['<div class="govuk-footer__navigation">']
        for nav in sections:
            width = self.escape(nav.get("width")) if nav.get("width") else "full"
            parts.append(
                f'<div class="govuk-footer__section govuk-grid-column-{width}">\n'
                f'  <h2 class="govuk-footer__heading govuk-heading-m">{self.escape(nav.get("title"))}</h2>'
            )
            items = nav.get("items") or []
            if items:
                parts.append(
                    '<ul class="govuk-footer__list '
                    f'govuk-footer__list--columns-{self.escape(nav.get("columns"))}">'
                )
                for item in items:
                    # Links without both href and text are skipped
                    if not (item.get("href") and item.get("text")):
                        continue
                    parts.append(
                        '<li class="govuk-footer__list-item">\n'
                        f'  <a class="govuk-footer__link" href="{self.escape(item["href"])}"'
                        f'{self.attributes(item.get("attributes"))}>\n'
                        f"    {self.escape(item['text'])}\n"
                        "  </a>\n"
                        "</li>"
                    )
                parts.append("</ul>")
            parts.append("</div>")
        parts.append('</div><hr class="govuk-footer__section-break">')
        return "".join(parts)

    def _meta(self) -> str:
        meta = self.get("meta")
        if not meta:
            return ""
        meta = as_mapping(meta)

        title = self.escape(meta.get("visuallyHiddenTitle")) if meta.get("visuallyHiddenTitle") else "Support links"
        parts: List[str] = [f'<h2 class="govuk-visually-hidden">{title}</h2>']

        items = meta.get("items") or []
        if items:
            parts.append('<ul class="govuk-footer__inline-list">')
            for item in items:
                parts.append(
                    '<li class="govuk-footer__inline-list-item">\n'
                    f'  <a class="govuk-footer__link" href="{self.escape(item.get("href"))}"'
                    f'{self.attributes(item.get("attributes"))}>\n'
                    f"    {self.escape(item.get('text'))}\n"
                    "  </a>\n"
                    "</li>"
                )
            parts.append("</ul>")

        if meta.get("text") or meta.get("html"):
            parts.append(f'<div class="govuk-footer__meta-custom">\n  {self.content(meta)}\n</div>')
        return "".join(parts)

    def _slot(self, option: str, default: str) -> str:
        source = as_mapping(self.get(option))
        if source.get("html") or source.get("text"):
            return self.content(source)
        return default

    def render(self) -> str:
        css = self.classes("govuk-footer", self.get("classes"))
        container_css = self.classes("govuk-width-container", self.get("containerClasses"))

        return (
            f'<footer class="{css}"{self.attributes(self.get("attributes"))}>\n'
            f'  <div class="{container_css}">\n'
            f"    {self._navigation()}\n"
            '    <div class="govuk-footer__meta">\n'
            '      <div class="govuk-footer__meta-item govuk-footer__meta-item--grow">\n'
            f"        {self._meta()}\n"
            f"        {LICENCE_LOGO}\n"
            '        <span class="govuk-footer__licence-description">\n'
            f"          {self._slot('contentLicence', OPEN_GOVERNMENT_LICENCE)}\n"
            "        </span>\n"
            "      </div>\n"
            '      <div class="govuk-footer__meta-item">\n'
            f'        <a class="govuk-footer__link govuk-footer__copyright-logo" href="{CROWN_COPYRIGHT_URL}">\n'
            f"          {self._slot('copyright', CROWN_COPYRIGHT)}\n"
            "        </a>\n"
            "      </div>\n"
            "    </div>\n"
            "  </div>\n"
            "</footer>"
        )


def govuk_footer(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the footer component.

    Example:
        >>> govuk_footer({
        ...     "meta": {"items": [{"href": "/help", "text": "Help"}]},
        ... })
    """
    return as_trusted(Footer(params, **overrides).render())
