"""
Translation data attributes.

Why: Components with client-side behaviour hand their strings to the
browser as ``data-i18n.*`` attributes; plural forms need one attribute per
plural rule, in the order given.
"""
from __future__ import annotations

from govuk_frontend.utils import I18nRequest, encode_i18n_attributes


def test_renders_a_single_plural_type():
    attributes = encode_i18n_attributes(
        key="translation-key",
        messages={"other": "You have %{count} characters remaining."},
    )
    assert attributes == ' data-i18n.translation-key.other="You have %{count} characters remaining."'


def test_renders_multiple_plural_types_in_order():
    attributes = encode_i18n_attributes(
        {
            "key": "translation-key",
            "messages": {"other": "You have %{count} characters remaining.", "one": "One character remaining"},
        }
    )
    assert attributes == (
        ' data-i18n.translation-key.other="You have %{count} characters remaining."'
        ' data-i18n.translation-key.one="One character remaining"'
    )


def test_renders_single_message():
    assert encode_i18n_attributes(key="hide-section", message="Hide") == ' data-i18n.hide-section="Hide"'


def test_messages_take_precedence_over_message():
    request = I18nRequest(key="k", message="ignored", messages={"one": "One"})
    assert encode_i18n_attributes(request) == ' data-i18n.k.one="One"'


def test_empty_messages_fall_back_to_message():
    assert encode_i18n_attributes(key="k", message="Hi", messages={}) == ' data-i18n.k="Hi"'


def test_outputs_nothing_without_translations():
    assert encode_i18n_attributes(key="translation-key") == ""
    assert encode_i18n_attributes(key="translation-key", message="") == ""
    assert encode_i18n_attributes(key="translation-key", message=None, messages=None) == ""


def test_messages_are_escaped():
    assert encode_i18n_attributes(key="k", message='<"x">') == ' data-i18n.k="&#60;&#34;x&#34;&#62;"'
