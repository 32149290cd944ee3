"""
Shared rendering for radios and checkboxes.

Both render a list of choice items inside a form group, optionally wrapped
in a fieldset. Item ids derive from ``idPrefix`` (falling back to ``name``):
the first item gets the bare prefix so error summaries can link to it,
later items get ``-2``, ``-3`` and so on. Dividers count towards the
index too.
"""
from __future__ import annotations

from typing import Any, List, Mapping

from ..utils import UNDEFINED, coalesce, to_string
from .base import affix, as_mapping, dig, join_classes
from .fieldset import Fieldset
from .form_group import FormControl
from .hint import Hint
from .label import Label


class ChoiceGroup(FormControl):
    """Base for ``Radios`` and ``Checkboxes``"""

    input_type: str = ""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        initial = self.initial_described_by()
        self.described_by = [to_string(initial)] if initial else []

    @property
    def control_id(self) -> Any:
        return coalesce(self.get("idPrefix"), self.get("name"))

    @property
    def has_fieldset(self) -> bool:
        return isinstance(self.get("fieldset"), Mapping)

    def initial_described_by(self) -> Any:
        return self.get("fieldset", "describedBy")

    def item_id(self, item: Mapping[str, Any], index: int) -> str:
        suffix = f"-{index}" if index > 1 else ""
        return to_string(coalesce(dig(item, "id"), f"{to_string(self.control_id)}{suffix}"))

    def is_checked(self, item: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def item_attributes(self, item: Mapping[str, Any], item_id: str, hint_id: str) -> str:
        """Extra attributes for the item's ``<input>``, after ``checked``/``disabled``."""
        raise NotImplementedError

    def item_name(self, item: Mapping[str, Any]) -> Any:
        return self.get("name")

    def render_item(self, item: Mapping[str, Any], index: int) -> str:
        if item.get("divider"):
            return f'<div class="{self.block}__divider">{self.escape(item["divider"])}</div>'

        item_id = self.item_id(item, index)
        conditional_id = f"conditional-{item_id}"
        is_checked = self.is_checked(item)
        item_hint = as_mapping(item.get("hint"))
        has_hint = bool(item_hint.get("text") or item_hint.get("html"))
        hint_id = f"{item_id}-item-hint" if has_hint else ""

        label = Label(
            html=item.get("html"),
            text=item.get("text"),
            classes=join_classes(f"{self.block}__label", dig(item, "label", "classes")),
            attributes=dig(item, "label", "attributes"),
            **{"for": item_id},
        ).render()
        hint = ""
        if has_hint:
            hint = Hint(
                {**item_hint, "id": hint_id, "classes": join_classes(f"{self.block}__hint", item_hint.get("classes"))}
            ).render()

        conditional_html = dig(item, "conditional", "html")
        conditional = ""
        controls = ""
        if conditional_html:
            hidden = "" if is_checked else f" {self.block}__conditional--hidden"
            conditional = (
                f'<div class="{self.block}__conditional{hidden}" id="{self.escape(conditional_id)}">\n'
                f"    {self.trusted(conditional_html)}\n"
                "  </div>"
            )
            controls = self.attribute("data-aria-controls", conditional_id)

        return (
            f'<div class="{self.block}__item">\n'
            f'    <input class="{self.block}__input"{self.attribute("id", item_id)}'
            f'{self.attribute("name", self.item_name(item))} type="{self.input_type}"'
            f'{self.attribute("value", item.get("value"))}'
            f"{' checked' if is_checked else ''}"
            f"{' disabled' if item.get('disabled') else ''}"
            f"{controls}"
            f"{self.item_attributes(item, item_id, hint_id)}"
            f"{self.attributes(item.get('attributes'))}>\n"
            f"    {label}\n"
            f"    {hint}\n"
            f"    {conditional}\n"
            "  </div>"
        )

    def render(self) -> str:
        items = self.require_items("items")
        # Hint and error message first, so their ids reach the items and fieldset
        inner: List[str] = [self.hint(), self.error_message()]

        form_group = as_mapping(self.get("formGroup"))
        css = self.classes(self.block, self.get("classes"))
        inner.append(
            f'<div class="{css}"{self.attributes(self.get("attributes"))} data-module="{self.block}">'
        )
        inner.append(affix(form_group, "beforeInputs"))
        index = 1
        for item in items:
            if not item:
                continue
            inner.append(self.render_item(item, index))
            index += 1
        inner.append(affix(form_group, "afterInputs"))
        inner.append("</div>")

        inner_html = "\n".join(part for part in inner if part)
        if self.has_fieldset:
            inner_html = Fieldset(
                describedBy=" ".join(self.described_by) or UNDEFINED,
                classes=self.get("fieldset", "classes"),
                attributes=self.get("fieldset", "attributes"),
                legend=self.get("fieldset", "legend"),
                html=inner_html,
            ).render()
        return self.form_group(inner_html)
