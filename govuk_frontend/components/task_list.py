"""
Task list component for GOV.UK Frontend

Lists the tasks a user needs to complete and their status. Each task's
link is described by its hint and status via ``aria-describedby``; ids are
``{idPrefix}-{n}-hint`` and ``{idPrefix}-{n}-status`` counting from 1.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from ..utils import TrustedHtml
from .base import Component, Params, as_mapping, as_trusted
from .tag import Tag

DEFAULT_ID_PREFIX = "task-list"


class TaskList(Component):
    name = "task-list"

    def item(self, item: Mapping[str, Any], index: int, id_prefix: str) -> str:
        hint_id = f"{id_prefix}-{index}-hint"
        status_id = f"{id_prefix}-{index}-status"
        title = as_mapping(item.get("title"))
        status = as_mapping(item.get("status"))

        if item.get("href"):
            described_by = f"{hint_id} {status_id}" if item.get("hint") else status_id
            title_css = self.classes("govuk-link govuk-task-list__link", title.get("classes"))
            name = (
                f'<a class="{title_css}" href="{self.escape(item["href"])}" aria-describedby="{described_by}">\n'
                f"      {self.content(title)}\n"
                "    </a>"
            )
        else:
            title_class = f' class="{self.escape(title["classes"])}"' if title.get("classes") else ""
            name = f"<div{title_class}>\n      {self.content(title)}\n    </div>"

        hint = ""
        if item.get("hint"):
            hint = (
                f'<div id="{hint_id}" class="govuk-task-list__hint">\n'
                f"      {self.content(item['hint'])}\n"
                "    </div>"
            )

        if status.get("tag"):
            status_content = Tag(status["tag"]).render()
        else:
            status_content = self.content(status)

        css = self.classes(
            "govuk-task-list__item",
            item.get("classes"),
            **{"govuk-task-list__item--with-link": bool(item.get("href"))},
        )
        status_css = self.classes("govuk-task-list__status", status.get("classes"))
        return (
            f'<li class="{css}">\n'
            '  <div class="govuk-task-list__name-and-hint">\n'
            f"    {name}\n"
            f"    {hint}\n"
            "  </div>\n"
            f'  <div class="{status_css}" id="{status_id}">\n'
            f"    {status_content}\n"
            "  </div>\n"
            "</li>"
        )

    def render(self) -> str:
        items = [item for item in self.require_items("items") if item]
        id_prefix = self.escape(self.get("idPrefix")) if self.get("idPrefix") else DEFAULT_ID_PREFIX
        rendered: List[str] = [self.item(item, index, id_prefix) for index, item in enumerate(items, start=1)]

        css = self.classes("govuk-task-list", self.get("classes"))
        return (
            f'<ul class="{css}"{self.attributes(self.get("attributes"))}>\n'
            f"  {''.join(rendered)}\n"
            "</ul>"
        )


def govuk_task_list(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the task list component.

    Example:
        >>> govuk_task_list({
        ...     "items": [{"title": {"text": "Company details"}, "href": "#", "status": {"text": "Completed"}}],
        ... })
    """
    return as_trusted(TaskList(params, **overrides).render())
