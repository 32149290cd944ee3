"""
HTML escaping and the trusted-HTML boundary.

Why: Text options must be escaped exactly once, while ``html`` options and
``TrustedHtml`` fragments pass through untouched; escaping uses numeric
character references so output does not depend on named entities.
"""
from __future__ import annotations

from markupsafe import Markup

from govuk_frontend.utils import (
    UNDEFINED,
    TrustedHtml,
    coalesce,
    escape_attribute,
    escape_html,
    html_or_text,
    is_nullish,
    to_string,
    trusted,
)


def test_escape_html_uses_numeric_references_for_all_special_characters():
    assert escape_html("&<>\"'`") == "&#38;&#60;&#62;&#34;&#39;&#96;"


def test_escape_html_passes_trusted_html_through():
    assert escape_html(TrustedHtml("<b>")) == "<b>"
    assert escape_html("<b>") == "&#60;b&#62;"


def test_trusted_html_is_markupsafe_markup():
    assert TrustedHtml is Markup


def test_escape_html_renders_nullish_as_empty_string():
    assert escape_html(None) == ""
    assert escape_html(UNDEFINED) == ""


def test_escape_attribute_escapes_trusted_html_too():
    assert escape_attribute(TrustedHtml("<b>")) == "&#60;b&#62;"


def test_trusted_does_not_escape():
    assert trusted("<p>x</p>") == "<p>x</p>"
    assert trusted(None) == ""


def test_html_or_text_prefers_html():
    assert html_or_text("<b>bold</b>", "ignored") == "<b>bold</b>"
    assert html_or_text(None, "<b>") == "&#60;b&#62;"
    assert html_or_text(UNDEFINED, UNDEFINED) == ""


def test_html_or_text_keeps_empty_html():
    assert html_or_text("", "text") == ""


def test_to_string_follows_macro_printing():
    assert to_string(True) == "true"
    assert to_string(False) == "false"
    assert to_string(None) == ""
    assert to_string(3.0) == "3"
    assert to_string(0) == "0"


def test_undefined_is_falsy_and_nullish():
    assert not UNDEFINED
    assert is_nullish(UNDEFINED)
    assert is_nullish(None)
    assert not is_nullish(0)
    assert not is_nullish("")


def test_coalesce_returns_first_non_nullish_value():
    assert coalesce(None, UNDEFINED, 0, 1) == 0
    assert coalesce(None, "a") == "a"
    assert coalesce(None, None) is None
