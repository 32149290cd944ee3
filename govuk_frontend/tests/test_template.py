"""
Page template: document structure, settings defaults and overrides.

Why:
    The template is where deployment settings meet per-page options. Pages
    must start with a doctype, pick up the configured asset path, colour and
    language, and let explicit options (and ``*Html`` slots) win.
"""
from __future__ import annotations

from govuk_frontend import govuk_template
from govuk_frontend.template import DEFAULT_PAGE_TITLE


def test_template_starts_with_doctype():
    assert govuk_template({}).startswith("<!DOCTYPE html>\n")


def test_template_defaults(soup):
    doc = soup(govuk_template({"contentHtml": "<h1>Hello</h1>"}))
    assert doc.html["lang"] == "en"
    assert doc.html["class"] == ["govuk-template"]
    assert doc.title.get_text() == DEFAULT_PAGE_TITLE
    assert doc.find("meta", attrs={"name": "theme-color"})["content"] == "#0b0c0c"
    assert doc.find("link", rel="manifest")["href"] == "/assets/manifest.json"
    assert doc.find("meta", property="og:image") is None
    assert doc.find("a", class_="govuk-skip-link")["href"] == "#main-content"
    assert doc.header is not None
    assert doc.footer is not None
    main = doc.find("main", id="main-content")
    assert main.h1.get_text() == "Hello"


def test_template_reads_settings_from_environment(soup, monkeypatch):
    monkeypatch.setenv("GOVUK_ASSET_PATH", "/static")
    monkeypatch.setenv("GOVUK_ASSET_URL", "https://example.gov.uk/")
    monkeypatch.setenv("GOVUK_THEME_COLOR", "#1d70b8")
    monkeypatch.setenv("GOVUK_HTML_LANG", "cy")

    doc = soup(govuk_template({}))
    assert doc.html["lang"] == "cy"
    assert doc.find("meta", attrs={"name": "theme-color"})["content"] == "#1d70b8"
    assert doc.find("link", rel="manifest")["href"] == "/static/manifest.json"
    og_image = doc.find("meta", property="og:image")["content"]
    assert og_image == "https://example.gov.uk/images/govuk-opengraph-image.png"


def test_template_options_override_settings(soup, monkeypatch):
    monkeypatch.setenv("GOVUK_HTML_LANG", "cy")
    doc = soup(
        govuk_template(
            {
                "htmlLang": "en-GB",
                "assetPath": "/cdn",
                "opengraphImageUrl": "https://cdn.example/og.png",
                "pageTitle": "Apply <now>",
                "pageTitleLang": "en",
            }
        )
    )
    assert doc.html["lang"] == "en-GB"
    assert doc.find("link", rel="manifest")["href"] == "/cdn/manifest.json"
    assert doc.find("meta", property="og:image")["content"] == "https://cdn.example/og.png"
    assert doc.title.get_text() == "Apply <now>"
    assert doc.title["lang"] == "en"


def test_template_script_carries_nonce(soup):
    doc = soup(govuk_template({"cspNonce": "abc123"}))
    script = doc.body.script
    assert script["nonce"] == "abc123"
    assert "govuk-frontend-supported" in script.string


def test_template_without_nonce_has_plain_script(soup):
    script = soup(govuk_template({})).body.script
    assert not script.has_attr("nonce")


def test_template_html_slots_replace_defaults(soup):
    doc = soup(
        govuk_template(
            {
                "headerHtml": '<div id="custom-header"></div>',
                "footerHtml": '<div id="custom-footer"></div>',
                "skipLinkHtml": "",
                "mainHtml": '<main id="custom-main"></main>',
                "bodyAttributes": {"data-test": "page"},
            }
        )
    )
    assert doc.header is None
    assert doc.footer is None
    assert doc.find(id="custom-header") is not None
    assert doc.find(id="custom-footer") is not None
    assert doc.find("a", class_="govuk-skip-link") is None
    assert doc.find(id="main-content") is None
    assert doc.find(id="custom-main") is not None
    assert doc.body["data-test"] == "page"
