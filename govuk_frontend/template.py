"""
Page template for GOV.UK Frontend

Combines the boilerplate markup and components needed for a basic GOV.UK
page:
- the script that adds ``js-enabled``/``govuk-frontend-supported`` classes,
  required by components with JavaScript behaviour
- the skip link, header and footer components
- the favicon and related theme icons

Every ``*Html`` option is trusted and replaces the matching default.
Asset path, asset URL, theme colour and language fall back to the
configured settings (see ``config``).
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from .components.base import Component, Params, as_trusted
from .components.footer import Footer
from .components.header import Header
from .components.skip_link import SkipLink
from .config import get_settings
from .utils import TrustedHtml, is_nullish

logger = logging.getLogger("govuk_frontend.template")

DEFAULT_PAGE_TITLE = "GOV.UK - The best place to find government services and information"

SCRIPT = (
    "document.body.className += ' js-enabled' + "
    "('noModule' in HTMLScriptElement.prototype ? ' govuk-frontend-supported' : '');"
)


class PageTemplate(Component):
    name = "template"

    def slot(self, option: str, default: Any) -> str:
        """Return the trusted ``option`` or, when it is not given, ``default()``."""
        value = self.get(option)
        if is_nullish(value):
            return default()
        return self.trusted(value)

    def head_icons(self, asset_path: str, theme_color: str) -> str:
        return (
            f'<link rel="icon" sizes="48x48" href="{asset_path}/images/favicon.ico">\n'
            f'    <link rel="icon" sizes="any" href="{asset_path}/images/favicon.svg" type="image/svg+xml">\n'
            f'    <link rel="mask-icon" href="{asset_path}/images/govuk-icon-mask.svg" color="{theme_color}">\n'
            f'    <link rel="apple-touch-icon" href="{asset_path}/images/govuk-icon-180.png">\n'
            f'    <link rel="manifest" href="{asset_path}/manifest.json">'
        )

    def opengraph_image(self, asset_url: Any) -> str:
        # Open Graph images must be absolute URLs
        if self.get("opengraphImageUrl"):
            return f'<meta property="og:image" content="{self.escape(self.get("opengraphImageUrl"))}">'
        if asset_url:
            return f'<meta property="og:image" content="{self.escape(asset_url)}/images/govuk-opengraph-image.png">'
        return ""

    def main(self) -> str:
        container_css = self.classes("govuk-width-container", self.get("containerClasses"))
        main_css = self.classes("govuk-main-wrapper", self.get("mainClasses"))
        return (
            f'<div class="{container_css}">\n'
            f"      {self.trusted(self.get('beforeContentHtml'))}\n"
            f'      <main class="{main_css}" id="main-content"{self.attribute("lang", self.get("mainLang"))}>\n'
            f"        {self.trusted(self.get('contentHtml'))}\n"
            "      </main>\n"
            "    </div>"
        )

    def render(self) -> str:
        settings = get_settings()
        theme_color = self.escape(self.get("themeColor") or settings.theme_color)
        asset_path = self.escape(self.get("assetPath") or settings.asset_path)
        asset_url = self.get("assetUrl") or settings.asset_url
        html_lang = self.escape(self.get("htmlLang") or settings.html_lang)
        page_title = self.escape(self.get("pageTitle")) if self.get("pageTitle") else DEFAULT_PAGE_TITLE
        logger.debug("rendering page %r (lang=%s)", self.get("pageTitle"), html_lang)

        html_css = self.classes("govuk-template", self.get("htmlClasses"))
        body_css = self.classes("govuk-template__body", self.get("bodyClasses"))
        head_icons = self.slot("headIconsHtml", lambda: self.head_icons(asset_path, theme_color))
        skip_link = self.slot(
            "skipLinkHtml", lambda: SkipLink(href="#main-content", text="Skip to main content").render()
        )
        header = self.slot("headerHtml", lambda: Header().render())
        footer = self.slot("footerHtml", lambda: Footer().render())

        return (
            "<!DOCTYPE html>\n"
            f'<html lang="{html_lang}" class="{html_css}">\n'
            "  <head>\n"
            '    <meta charset="utf-8">\n'
            f'    <title{self.attribute("lang", self.get("pageTitleLang"))}>{page_title}</title>\n'
            '    <meta name="viewport" content="width=device-width, initial-scale=1, viewport-fit=cover">\n'
            f'    <meta name="theme-color" content="{theme_color}">\n'
            f"    {head_icons}\n"
            f"    {self.trusted(self.get('headHtml'))}\n"
            f"    {self.opengraph_image(asset_url)}\n"
            "  </head>\n"
            f'  <body class="{body_css}"{self.attributes(self.get("bodyAttributes"))}>\n'
            f'    <script{self.attribute("nonce", self.get("cspNonce"))}>{SCRIPT}</script>\n'
            f"    {self.trusted(self.get('bodyStartHtml'))}\n"
            f"    {skip_link}\n"
            f"    {header}\n"
            f"    {self.slot('mainHtml', self.main)}\n"
            f"    {footer}\n"
            f"    {self.trusted(self.get('bodyEndHtml'))}\n"
            "  </body>\n"
            "</html>"
        )


def govuk_template(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render a complete GOV.UK page.

    Example:
        >>> govuk_template({
        ...     "pageTitle": "Apply for a licence",
        ...     "headHtml": '<link rel="stylesheet" href="/stylesheets/govuk-frontend.min.css">',
        ...     "contentHtml": '<h1 class="govuk-heading-xl">Apply for a licence</h1>',
        ... })
    """
    return as_trusted(PageTemplate(params, **overrides).render())
