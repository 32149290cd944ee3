"""
Table component for GOV.UK Frontend

Cells take ``text``/``html`` plus optional ``format`` (e.g. ``numeric``),
``colspan`` and ``rowspan``. With ``firstCellIsHeader`` the first cell of
each body row becomes a row header.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_trusted, dig


class Table(Component):
    name = "table"

    def cell_attributes(self, cell: Mapping[str, Any]) -> str:
        return (
            f"{self.attribute('colspan', dig(cell, 'colspan'))}"
            f"{self.attribute('rowspan', dig(cell, 'rowspan'))}"
            f"{self.attributes(cell.get('attributes'))}"
        )

    def _caption(self) -> str:
        if not self.get("caption"):
            return ""
        css = self.classes("govuk-table__caption", self.get("captionClasses"))
        return f'<caption class="{css}">{self.escape(self.get("caption"))}</caption>'

    def _head(self) -> str:
        head = self.get("head")
        if not head:
            return ""
        cells: List[str] = []
        for item in head:
            css = self.classes(
                "govuk-table__header",
                f"govuk-table__header--{item['format']}" if item.get("format") else None,
                item.get("classes"),
            )
            cells.append(f'<th scope="col" class="{css}"{self.cell_attributes(item)}>{self.content(item)}</th>')
        return f'<thead class="govuk-table__head"><tr class="govuk-table__row">{"".join(cells)}</tr></thead>'

    def _row(self, row: Any) -> str:
        cells: List[str] = []
        for index, cell in enumerate(row):
            attrs = self.cell_attributes(cell)
            if index == 0 and self.get("firstCellIsHeader"):
                css = self.classes("govuk-table__header", cell.get("classes"))
                cells.append(f'<th scope="row" class="{css}"{attrs}>{self.content(cell)}</th>')
            else:
                css = self.classes(
                    "govuk-table__cell",
                    f"govuk-table__cell--{cell['format']}" if cell.get("format") else None,
                    cell.get("classes"),
                )
                cells.append(f'<td class="{css}"{attrs}>{self.content(cell)}</td>')
        return f'<tr class="govuk-table__row">{"".join(cells)}</tr>'

    def render(self) -> str:
        rows = self.require_items("rows")
        body = "".join(self._row(row) for row in rows if row)
        css = self.classes("govuk-table", self.get("classes"))
        return (
            f'<table class="{css}"{self.attributes(self.get("attributes"))}>\n'
            f"  {self._caption()}\n"
            f"  {self._head()}\n"
            f'  <tbody class="govuk-table__body">{body}</tbody>\n'
            "</table>"
        )


def govuk_table(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the table component.

    Example:
        >>> govuk_table({
        ...     "head": [{"text": "Month"}, {"text": "Amount", "format": "numeric"}],
        ...     "rows": [[{"text": "January"}, {"text": "£85", "format": "numeric"}]],
        ... })
    """
    return as_trusted(Table(params, **overrides).render())
