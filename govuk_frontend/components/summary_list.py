"""
Summary list component for GOV.UK Frontend

Summarises information as key/value rows with optional change links.
With ``card`` the list sits inside a summary card whose title is appended
(visually hidden) to every action link, so links read e.g. "Change name
(University of Gloucestershire)".
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from ..utils import TrustedHtml
from .base import Component, Params, as_mapping, as_trusted, dig


def _action_items(source: Any) -> Sequence[Any]:
    return dig(source, "actions", "items", default=None) or []


class SummaryList(Component):
    name = "summary-list"

    def action_link(self, action: Mapping[str, Any], card_title: Mapping[str, Any]) -> str:
        hidden_text = ""
        if action.get("visuallyHiddenText") or card_title:
            hidden_text = '<span class="govuk-visually-hidden">'
            if action.get("visuallyHiddenText"):
                hidden_text += f"{self.escape(action['visuallyHiddenText'])} "
            if card_title:
                hidden_text += f"({self.content(card_title)})"
            hidden_text += "</span>"

        css = self.classes("govuk-link", action.get("classes"))
        return (
            f'<a class="{css}" href="{self.escape(action.get("href"))}"{self.attributes(action.get("attributes"))}>\n'
            f"      {self.content(action)} {hidden_text}\n"
            "    </a>"
        )

    def actions(self, items: Sequence[Any], card_title: Mapping[str, Any], list_class: str, item_class: str) -> str:
        """A single action renders bare; several render as a list."""
        if len(items) == 1:
            return self.action_link(items[0], card_title)
        links = "".join(
            f'<li class="{item_class}">\n  {self.action_link(action, card_title)}\n</li>' for action in items
        )
        return f'<ul class="{list_class}">{links}</ul>'

    def row(self, row: Mapping[str, Any], any_row_has_actions: bool) -> str:
        key = as_mapping(row.get("key"))
        value = as_mapping(row.get("value"))
        actions = _action_items(row)
        card_title = as_mapping(self.get("card", "title"))

        css = self.classes(
            "govuk-summary-list__row",
            row.get("classes"),
            **{"govuk-summary-list__row--no-actions": any_row_has_actions and not actions},
        )
        html = (
            f'<div class="{css}">\n'
            f'  <dt class="{self.classes("govuk-summary-list__key", key.get("classes"))}">\n'
            f"    {self.content(key)}\n"
            "  </dt>\n"
            f'  <dd class="{self.classes("govuk-summary-list__value", value.get("classes"))}">\n'
            f"    {self.content(value)}\n"
            "  </dd>"
        )
        if actions:
            actions_css = self.classes("govuk-summary-list__actions", dig(row, "actions", "classes"))
            links = self.actions(
                actions, card_title, "govuk-summary-list__actions-list", "govuk-summary-list__actions-list-item"
            )
            html += f'<dd class="{actions_css}">{links}</dd>'
        return html + "</div>"

    def card(self, summary_list: str) -> str:
        card = as_mapping(self.get("card"))
        title = as_mapping(card.get("title"))

        title_html = ""
        if title:
            level = self.escape(title.get("headingLevel")) if title.get("headingLevel") else "2"
            title_css = self.classes("govuk-summary-card__title", title.get("classes"))
            title_html = f'<h{level} class="{title_css}">\n    {self.content(title)}\n  </h{level}>'

        actions_html = ""
        actions = _action_items(card)
        if actions:
            actions_css = self.classes("govuk-summary-card__actions", dig(card, "actions", "classes"))
            if len(actions) == 1:
                actions_html = f'<div class="{actions_css}">\n  {self.action_link(actions[0], title)}\n</div>'
            else:
                links = "".join(
                    f'<li class="govuk-summary-card__action">\n  {self.action_link(action, title)}\n</li>'
                    for action in actions
                )
                actions_html = f'<ul class="{actions_css}">{links}</ul>'

        css = self.classes("govuk-summary-card", card.get("classes"))
        return (
            f'<div class="{css}"{self.attributes(card.get("attributes"))}>\n'
            '  <div class="govuk-summary-card__title-wrapper">\n'
            f"    {title_html}\n"
            f"    {actions_html}\n"
            "  </div>\n"
            '  <div class="govuk-summary-card__content">\n'
            f"    {summary_list}\n"
            "  </div>\n"
            "</div>"
        )

    def render(self) -> str:
        rows = [row for row in self.require_items("rows") if row]
        # Rows without actions need a modifier when others have them, so
        # the columns line up
        any_row_has_actions = any(_action_items(row) for row in rows)

        css = self.classes("govuk-summary-list", self.get("classes"))
        parts: List[str] = [f'<dl class="{css}"{self.attributes(self.get("attributes"))}>']
        parts.extend(self.row(row, any_row_has_actions) for row in rows)
        parts.append("</dl>")
        summary_list = "".join(parts)

        if self.get("card"):
            return self.card(summary_list)
        return summary_list


def govuk_summary_list(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the summary list component.

    Example:
        >>> govuk_summary_list({
        ...     "rows": [{
        ...         "key": {"text": "Name"},
        ...         "value": {"text": "Sarah Philips"},
        ...         "actions": {"items": [{"href": "#", "text": "Change", "visuallyHiddenText": "name"}]},
        ...     }],
        ... })
    """
    return as_trusted(SummaryList(params, **overrides).render())
