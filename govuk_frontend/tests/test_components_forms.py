"""
Form control components: label/hint/error wiring and item state.

Why:
    Form controls must point ``aria-describedby`` at their hint and error
    message, flag errors on both the control and the form group, and derive
    item ids and checked/selected state the way the design system does.
"""
from __future__ import annotations

import logging

import pytest

from govuk_frontend import (
    ComponentParameterError,
    govuk_character_count,
    govuk_checkboxes,
    govuk_date_input,
    govuk_file_upload,
    govuk_input,
    govuk_password_input,
    govuk_radios,
    govuk_select,
    govuk_textarea,
)


def test_input_wires_hint_and_error_message(soup):
    doc = soup(
        govuk_input(
            {
                "id": "postcode",
                "name": "postcode",
                "label": {"text": "Postcode"},
                "hint": {"text": "For example, AA1 1AA"},
                "errorMessage": {"text": "Enter a postcode"},
                "describedBy": "extra",
            }
        )
    )
    control = doc.input
    assert control["id"] == "postcode"
    assert control["type"] == "text"
    assert control["aria-describedby"] == "extra postcode-hint postcode-error"
    assert "govuk-input--error" in control["class"]
    assert "govuk-form-group--error" in doc.div["class"]
    assert doc.label["for"] == "postcode"
    assert doc.find(id="postcode-hint").get_text(strip=True) == "For example, AA1 1AA"
    assert doc.find(id="postcode-error") is not None


def test_input_without_hint_has_no_describedby(soup):
    control = soup(govuk_input({"id": "name", "name": "name"})).input
    assert not control.has_attr("aria-describedby")
    assert not control.has_attr("value")


def test_input_spellcheck_only_for_booleans(soup):
    assert soup(govuk_input({"id": "a", "spellcheck": False})).input["spellcheck"] == "false"
    assert not soup(govuk_input({"id": "a", "spellcheck": "no"})).input.has_attr("spellcheck")


def test_input_prefix_and_suffix_wrapper(soup):
    doc = soup(govuk_input({"id": "cost", "prefix": {"text": "£"}, "suffix": {"text": "per item"}}))
    wrapper = doc.find("div", class_="govuk-input__wrapper")
    assert wrapper is not None
    assert wrapper.find("div", class_="govuk-input__prefix")["aria-hidden"] == "true"
    assert wrapper.find("div", class_="govuk-input__suffix").get_text() == "per item"
    assert wrapper.input["id"] == "cost"


def test_textarea_defaults_to_five_rows(soup):
    textarea = soup(govuk_textarea({"id": "more", "name": "more", "value": "<b>"})).textarea
    assert textarea["rows"] == "5"
    assert textarea.get_text() == "<b>"


def test_character_count_data_attributes(soup):
    doc = soup(
        govuk_character_count(
            {
                "id": "summary",
                "name": "summary",
                "maxlength": 200,
                "charactersUnderLimitText": {"one": "1 character left", "other": "%{count} characters left"},
                "charactersAtLimitText": "No characters left",
                "label": {"text": "Summary"},
            }
        )
    )
    group = doc.div
    assert "govuk-character-count" in group["class"]
    assert group["data-module"] == "govuk-character-count"
    assert group["data-maxlength"] == "200"
    assert not group.has_attr("data-maxwords")
    assert not group.has_attr("data-threshold")
    assert group["data-i18n.characters-under-limit.one"] == "1 character left"
    assert group["data-i18n.characters-at-limit"] == "No characters left"

    info = doc.find(id="summary-info")
    assert info.get_text(strip=True) == "You can enter up to 200 characters"
    assert doc.textarea["aria-describedby"] == "summary-info"
    assert "govuk-js-character-count" in doc.textarea["class"]


def test_character_count_without_limit_adds_description_translation(soup):
    doc = soup(
        govuk_character_count({"id": "c", "name": "c", "textareaDescriptionText": "Up to %{count} words"})
    )
    assert doc.div["data-i18n.textarea-description.other"] == "Up to %{count} words"
    assert doc.find(id="c-info").get_text(strip=True) == ""


def test_password_input_toggle_button(soup):
    doc = soup(govuk_password_input({"id": "password", "name": "password", "label": {"text": "Password"}}))
    control = doc.input
    assert control["type"] == "password"
    assert control["autocomplete"] == "current-password"
    assert control["spellcheck"] == "false"
    assert control["autocapitalize"] == "none"

    button = doc.button
    assert button["type"] == "button"
    assert button["aria-controls"] == "password"
    assert button["aria-label"] == "Show password"
    assert button.has_attr("hidden")
    assert button.get_text(strip=True) == "Show"
    assert doc.div["data-module"] == "govuk-password-input"


def test_select_selects_by_value_or_text(soup):
    doc = soup(
        govuk_select(
            {
                "id": "sort",
                "name": "sort",
                "value": "Recently updated",
                "items": [
                    {"value": "published", "text": "Recently published"},
                    {"text": "Recently updated"},
                ],
            }
        )
    )
    options = doc.find_all("option")
    assert not options[0].has_attr("selected")
    assert options[1].has_attr("selected")
    assert not options[1].has_attr("value")


def test_select_item_selected_flag_wins(soup):
    doc = soup(
        govuk_select(
            {
                "id": "s",
                "name": "s",
                "value": "a",
                "items": [{"value": "a", "text": "A", "selected": False}, {"value": "b", "text": "B", "selected": True}],
            }
        )
    )
    options = doc.find_all("option")
    assert not options[0].has_attr("selected")
    assert options[1].has_attr("selected")


def test_select_logs_unmatched_value(caplog):
    with caplog.at_level(logging.DEBUG, logger="govuk_frontend.components"):
        govuk_select({"id": "s", "name": "s", "value": "zzz", "items": [{"value": "a", "text": "A"}]})
    assert "matches no option" in caplog.text


def test_file_upload(soup):
    control = soup(govuk_file_upload({"id": "file", "name": "file", "errorMessage": {"text": "Select a file"}})).input
    assert control["type"] == "file"
    assert "govuk-file-upload--error" in control["class"]
    assert control["aria-describedby"] == "file-error"


def test_radios_item_ids_and_checked_value(soup):
    doc = soup(
        govuk_radios(
            {
                "name": "where",
                "value": "wales",
                "items": [
                    {"value": "england", "text": "England"},
                    {"divider": "or"},
                    {"value": "wales", "text": "Wales"},
                    {"value": "scotland", "text": "Scotland"},
                ],
            }
        )
    )
    inputs = doc.find_all("input")
    assert [control["id"] for control in inputs] == ["where", "where-3", "where-4"]
    assert [control.has_attr("checked") for control in inputs] == [False, True, False]
    assert doc.find("div", class_="govuk-radios__divider").get_text() == "or"
    assert doc.find("label", attrs={"for": "where-3"}).get_text(strip=True) == "Wales"


def test_radios_conditional_reveal(soup):
    doc = soup(
        govuk_radios(
            {
                "idPrefix": "contact",
                "name": "contact",
                "items": [
                    {"value": "email", "text": "Email", "conditional": {"html": "<p>Email address</p>"}},
                    {"value": "phone", "text": "Phone", "checked": True, "conditional": {"html": "<p>Phone</p>"}},
                ],
            }
        )
    )
    first, second = doc.find_all("input")
    assert first["data-aria-controls"] == "conditional-contact"
    assert "govuk-radios__conditional--hidden" in doc.find(id="conditional-contact")["class"]
    assert "govuk-radios__conditional--hidden" not in doc.find(id="conditional-contact-2")["class"]
    assert second.has_attr("checked")


def test_radios_fieldset_receives_describedby(soup):
    doc = soup(
        govuk_radios(
            {
                "name": "r",
                "fieldset": {"legend": {"text": "Pick one"}},
                "hint": {"text": "Choose wisely"},
                "errorMessage": {"text": "Pick one"},
                "items": [{"value": "a", "text": "A"}],
            }
        )
    )
    assert doc.fieldset["aria-describedby"] == "r-hint r-error"
    assert "govuk-form-group--error" in doc.div["class"]


def test_checkboxes_values_and_item_describedby(soup):
    doc = soup(
        govuk_checkboxes(
            {
                "name": "nationality",
                "values": ["irish"],
                "hint": {"text": "Select all that apply"},
                "items": [
                    {"value": "british", "text": "British", "hint": {"text": "including English"}},
                    {"value": "irish", "text": "Irish"},
                ],
            }
        )
    )
    first, second = doc.find_all("input")
    assert first["type"] == "checkbox"
    # Without a fieldset each checkbox carries the group hint itself
    assert first["aria-describedby"] == "nationality-hint nationality-item-hint"
    assert second["aria-describedby"] == "nationality-hint"
    assert second.has_attr("checked")
    assert doc.find(id="nationality-item-hint").get_text(strip=True) == "including English"


def test_checkboxes_with_fieldset_leave_items_undescribed(soup):
    doc = soup(
        govuk_checkboxes(
            {
                "name": "c",
                "fieldset": {"legend": {"text": "Legend"}},
                "hint": {"text": "Hint"},
                "items": [{"value": "a", "text": "A", "behaviour": "exclusive"}],
            }
        )
    )
    control = doc.input
    assert not control.has_attr("aria-describedby")
    assert control["data-behaviour"] == "exclusive"
    assert doc.fieldset["aria-describedby"] == "c-hint"


def test_choice_groups_require_items():
    with pytest.raises(ComponentParameterError) as excinfo:
        govuk_checkboxes({"name": "c"})
    assert excinfo.value.component == "checkboxes"
    assert excinfo.value.option == "items"

    with pytest.raises(ComponentParameterError):
        govuk_radios({"name": "r", "items": "not a list"})


def test_date_input_default_items(soup):
    doc = soup(
        govuk_date_input(
            {"id": "dob", "namePrefix": "dob", "fieldset": {"legend": {"text": "Date of birth"}}, "hint": {"text": "e.g."}}
        )
    )
    inputs = doc.find_all("input")
    assert [control["id"] for control in inputs] == ["dob-day", "dob-month", "dob-year"]
    assert [control["name"] for control in inputs] == ["dob-day", "dob-month", "dob-year"]
    assert [control["inputmode"] for control in inputs] == ["numeric"] * 3
    assert "govuk-input--width-4" in inputs[2]["class"]
    assert [label.get_text(strip=True) for label in doc.find_all("label")] == ["Day", "Month", "Year"]
    assert doc.fieldset["role"] == "group"
    assert doc.fieldset["aria-describedby"] == "dob-hint"
    assert doc.find("div", class_="govuk-date-input")["id"] == "dob"
