"""
Structured content components: summary list, table, task list, accordion,
tabs, cookie banner and error summary.

Why:
    These components derive ids, modifiers and hidden text from their rows
    and items. Assistive technology depends on those derived values being
    exactly right, and missing row/item lists should fail loudly rather
    than render an empty shell.
"""
from __future__ import annotations

import pytest

from govuk_frontend import (
    ComponentParameterError,
    govuk_accordion,
    govuk_cookie_banner,
    govuk_error_summary,
    govuk_summary_list,
    govuk_table,
    govuk_tabs,
    govuk_task_list,
)


def test_summary_list_single_action_renders_without_list(soup):
    doc = soup(
        govuk_summary_list(
            {
                "rows": [
                    {
                        "key": {"text": "Name"},
                        "value": {"text": "Sarah Philips"},
                        "actions": {"items": [{"href": "#name", "text": "Change", "visuallyHiddenText": "name"}]},
                    },
                    {"key": {"text": "Date of birth"}, "value": {"text": "5 January 1978"}},
                ]
            }
        )
    )
    rows = doc.find_all("div", class_="govuk-summary-list__row")
    actions = rows[0].find("dd", class_="govuk-summary-list__actions")
    assert actions.ul is None
    assert actions.a.get_text(" ", strip=True) == "Change name"
    assert "govuk-summary-list__row--no-actions" in rows[1]["class"]


def test_summary_list_multiple_actions_render_as_list(soup):
    doc = soup(
        govuk_summary_list(
            {
                "rows": [
                    {
                        "key": {"text": "Address"},
                        "value": {"html": "72 Guild Street<br>London"},
                        "actions": {"items": [{"href": "#a", "text": "Change"}, {"href": "#b", "text": "Remove"}]},
                    }
                ]
            }
        )
    )
    assert len(doc.find_all("li", class_="govuk-summary-list__actions-list-item")) == 2
    assert doc.find("dd", class_="govuk-summary-list__value").br is not None


def test_summary_card_appends_title_to_action_text(soup):
    doc = soup(
        govuk_summary_list(
            {
                "card": {
                    "title": {"text": "University of Gloucestershire"},
                    "actions": {"items": [{"href": "#delete", "text": "Delete choice"}]},
                },
                "rows": [
                    {
                        "key": {"text": "Course"},
                        "value": {"text": "English"},
                        "actions": {"items": [{"href": "#course", "text": "Change", "visuallyHiddenText": "course"}]},
                    }
                ],
            }
        )
    )
    card = doc.find("div", class_="govuk-summary-card")
    assert card.h2.get_text(strip=True) == "University of Gloucestershire"
    hidden = card.find("dd", class_="govuk-summary-list__actions").find("span", class_="govuk-visually-hidden")
    assert hidden.get_text() == "course (University of Gloucestershire)"
    card_action = card.find("div", class_="govuk-summary-card__actions")
    assert "(University of Gloucestershire)" in card_action.get_text()


def test_table_head_and_first_cell_header(soup):
    doc = soup(
        govuk_table(
            {
                "caption": "Dates and amounts",
                "firstCellIsHeader": True,
                "head": [{"text": "Date"}, {"text": "Amount", "format": "numeric"}],
                "rows": [[{"text": "First 6 weeks"}, {"text": "£109.80 per week", "format": "numeric", "colspan": 2}]],
            }
        )
    )
    table = doc.table
    assert table.caption.get_text() == "Dates and amounts"
    head = table.thead.find_all("th")
    assert "govuk-table__header--numeric" in head[1]["class"]
    row = table.tbody.tr
    assert row.th["scope"] == "row"
    assert "govuk-table__cell--numeric" in row.td["class"]
    assert row.td["colspan"] == "2"


def test_task_list_ids_and_describedby(soup):
    doc = soup(
        govuk_task_list(
            {
                "idPrefix": "tasks",
                "items": [
                    {
                        "title": {"text": "Company details"},
                        "href": "#company",
                        "hint": {"text": "Address and directors"},
                        "status": {"tag": {"text": "Incomplete", "classes": "govuk-tag--blue"}},
                    },
                    {"title": {"text": "Payment"}, "status": {"text": "Cannot start yet"}},
                ],
            }
        )
    )
    items = doc.find_all("li", class_="govuk-task-list__item")
    assert "govuk-task-list__item--with-link" in items[0]["class"]
    assert items[0].a["aria-describedby"] == "tasks-1-hint tasks-1-status"
    assert items[0].find(id="tasks-1-hint").get_text(strip=True) == "Address and directors"
    assert items[0].find(id="tasks-1-status").strong["class"] == ["govuk-tag", "govuk-tag--blue"]
    assert items[1].a is None
    assert items[1].find(id="tasks-2-status").get_text(strip=True) == "Cannot start yet"


def test_task_list_default_id_prefix(soup):
    doc = soup(govuk_task_list({"items": [{"title": {"text": "A"}, "href": "#", "status": {"text": "Done"}}]}))
    assert doc.a["aria-describedby"] == "task-list-1-status"


def test_accordion_section_ids_and_translations(soup):
    doc = soup(
        govuk_accordion(
            {
                "id": "faq",
                "hideSectionText": "Cuddio",
                "rememberExpanded": False,
                "items": [
                    {"heading": {"text": "One"}, "summary": {"text": "First"}, "content": {"text": "Body <1>"}},
                    {"heading": {"html": "<em>Two</em>"}, "content": {"html": "<p>Raw</p>"}, "expanded": True},
                ],
            }
        )
    )
    accordion = doc.find(id="faq")
    assert accordion["data-module"] == "govuk-accordion"
    assert accordion["data-i18n.hide-section"] == "Cuddio"
    assert accordion["data-remember-expanded"] == "false"
    assert not accordion.has_attr("data-i18n.show-section")
    assert doc.find(id="faq-heading-1").get_text(strip=True) == "One"
    assert doc.find(id="faq-summary-1").get_text(strip=True) == "First"
    assert doc.find(id="faq-content-1").p.get_text() == "Body <1>"
    assert doc.find(id="faq-heading-2").em.get_text() == "Two"
    sections = doc.find_all("div", class_="govuk-accordion__section")
    assert "govuk-accordion__section--expanded" in sections[1]["class"]


def test_tabs_first_tab_selected_and_panels_hidden(soup):
    doc = soup(
        govuk_tabs(
            {
                "idPrefix": "tab",
                "items": [
                    {"label": "Past day", "panel": {"text": "Day"}},
                    {"label": "Past week", "id": "week", "panel": {"html": "<table></table>"}},
                ],
            }
        )
    )
    tabs = doc.find_all("li", class_="govuk-tabs__list-item")
    assert "govuk-tabs__list-item--selected" in tabs[0]["class"]
    assert tabs[0].a["href"] == "#tab-1"
    assert tabs[1].a["href"] == "#week"
    assert "govuk-tabs__panel--hidden" not in doc.find(id="tab-1")["class"]
    assert "govuk-tabs__panel--hidden" in doc.find(id="week")["class"]
    assert doc.find("h2", class_="govuk-tabs__title").get_text(strip=True) == "Contents"


def test_cookie_banner_actions(soup):
    doc = soup(
        govuk_cookie_banner(
            {
                "messages": [
                    {
                        "headingText": "Cookies on this service",
                        "text": "We use some essential cookies.",
                        "actions": [
                            {"text": "Accept", "type": "button", "name": "cookies", "value": "accept"},
                            {"text": "View cookies", "href": "/cookies"},
                        ],
                    },
                    {"text": "You've accepted cookies.", "role": "alert", "hidden": True},
                ]
            }
        )
    )
    banner = doc.find("div", class_="govuk-cookie-banner")
    assert banner["role"] == "region"
    assert banner["aria-label"] == "Cookie banner"
    assert banner.has_attr("data-nosnippet")
    button = banner.find("button")
    assert button["type"] == "button"
    assert button["value"] == "accept"
    link = banner.find("a", class_="govuk-link")
    assert link["href"] == "/cookies"
    messages = banner.find_all("div", class_="govuk-cookie-banner__message")
    assert messages[1]["role"] == "alert"
    assert messages[1].has_attr("hidden")


def test_error_summary_links_errors(soup):
    doc = soup(
        govuk_error_summary(
            {
                "titleText": "There is a problem",
                "descriptionText": "Check the following",
                "errorList": [{"text": "Enter a postcode", "href": "#postcode"}, {"text": "No link"}],
                "disableAutoFocus": True,
            }
        )
    )
    summary = doc.find("div", class_="govuk-error-summary")
    assert summary["data-disable-auto-focus"] == "true"
    assert summary.find(role="alert").h2.get_text(strip=True) == "There is a problem"
    items = summary.find_all("li")
    assert items[0].a["href"] == "#postcode"
    assert items[1].a is None


@pytest.mark.parametrize(
    "render, option",
    [
        (govuk_summary_list, "rows"),
        (govuk_table, "rows"),
        (govuk_task_list, "items"),
        (govuk_accordion, "items"),
        (govuk_cookie_banner, "messages"),
    ],
)
def test_required_lists_raise_parameter_error(render, option):
    with pytest.raises(ComponentParameterError) as excinfo:
        render({})
    assert excinfo.value.option == option
