"""
Markdown to GOV.UK typography.

Why:
    Author content dropped into an ``html`` option must look like the rest
    of the page (design system classes on every block) and must never let
    raw HTML or foreign classes through, because components trust ``html``
    options as given.
"""
from __future__ import annotations

from markupsafe import Markup

from govuk_frontend import govuk_inset_text
from govuk_frontend.components.markdown import render_markdown_safe, sanitize_html


def test_headings_and_paragraphs_get_typography_classes(soup):
    doc = soup(render_markdown_safe("# Apply\n\n## Before you start\n\n#### Fees\n\nIt takes 10 minutes."))
    assert doc.h1["class"] == ["govuk-heading-xl"]
    assert doc.h2["class"] == ["govuk-heading-l"]
    assert doc.h4["class"] == ["govuk-heading-s"]
    assert doc.p["class"] == ["govuk-body"]
    assert doc.h1.parent.name != "p"


def test_lists_links_and_quotes_use_design_system_classes(soup):
    md = (
        "- passport\n- driving licence\n\n"
        "1. Check\n2. Pay\n\n"
        "> You must be 18 or over.\n\n"
        "Read the [guidance](https://www.gov.uk/guidance \"Guidance\").\n\n"
        "---"
    )
    doc = soup(render_markdown_safe(md))
    assert doc.ul["class"] == ["govuk-list", "govuk-list--bullet"]
    assert doc.ol["class"] == ["govuk-list", "govuk-list--number"]
    # Tight list items stay bare, without a <p>
    assert doc.ul.li.p is None
    assert doc.blockquote["class"] == ["govuk-inset-text"]
    link = doc.a
    assert link["class"] == ["govuk-link"]
    assert link["href"] == "https://www.gov.uk/guidance"
    assert link["title"] == "Guidance"
    assert doc.hr["class"] == ["govuk-section-break", "govuk-section-break--visible"]


def test_tables_render_as_govuk_tables(soup):
    md = """| Item | Fee |
|------|-----|
| **Passport** | £88.50 |"""
    table = soup(render_markdown_safe(md)).table
    assert table["class"] == ["govuk-table"]
    assert table.thead["class"] == ["govuk-table__head"]
    assert table.thead.th["class"] == ["govuk-table__header"]
    assert table.tbody.tr["class"] == ["govuk-table__row"]
    cells = table.tbody.find_all("td")
    assert cells[0]["class"] == ["govuk-table__cell"]
    assert cells[0].strong.get_text() == "Passport"
    assert cells[1].get_text() == "£88.50"


def test_raw_html_in_markdown_stays_text(soup):
    html = render_markdown_safe("Hello <script>alert(1)</script> <b onclick=\"x()\">world</b>")
    doc = soup(html)
    assert doc.find("script") is None
    assert doc.find("b") is None
    assert "<script>alert(1)</script>" in doc.get_text()


def test_pipes_without_separator_are_a_paragraph(soup):
    doc = soup(render_markdown_safe("A | B | C"))
    assert doc.table is None
    assert doc.p.get_text() == "A | B | C"


def test_empty_input_gives_empty_trusted_html():
    assert render_markdown_safe("") == Markup("")
    assert isinstance(render_markdown_safe("*hi*"), Markup)
    assert sanitize_html("") == Markup("")


def test_sanitize_keeps_only_the_tag_own_design_system_class(soup):
    doc = soup(
        sanitize_html(
            '<p class="govuk-body">Kept</p>'
            '<p class="govuk-heading-xl">Wrong class</p>'
            '<h2 class="govuk-heading-l" id="x">Heading</h2>'
        )
    )
    first, second = doc.find_all("p")
    assert first["class"] == ["govuk-body"]
    assert not second.has_attr("class")
    assert doc.h2["class"] == ["govuk-heading-l"]
    assert not doc.h2.has_attr("id")


def test_sanitize_escapes_unknown_tags_and_drops_unsafe_links(soup):
    html = sanitize_html('<div onclick="steal()">Box</div><a href="javascript:alert(1)">Click</a>')
    assert "&lt;div" in html
    doc = soup(html)
    assert doc.div is None
    assert not doc.a.has_attr("href")
    assert doc.a.get_text() == "Click"


def test_markdown_output_is_not_escaped_again_by_components(soup):
    doc = soup(govuk_inset_text({"html": render_markdown_safe("Read the **guidance**")}))
    inset = doc.find("div", class_="govuk-inset-text")
    assert inset.p["class"] == ["govuk-body"]
    assert inset.strong.get_text() == "guidance"
