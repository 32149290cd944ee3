"""
Shared form group plumbing for the form control components.

Input, textarea, select and file upload all render the same scaffolding:
a ``govuk-form-group`` wrapper with label, hint and error message, content
slots before and after the control, and an ``aria-describedby`` that
collects the ids of the hint and error message.
"""
from __future__ import annotations

from typing import Any, List, Optional

from ..utils import UNDEFINED, to_string
from .base import Component, Params, affix, as_mapping
from .error_message import ErrorMessage
from .hint import Hint
from .label import Label


class FormControl(Component):
    """Component that renders a single control inside a form group"""

    # BEM block of the control, used for the ``--error`` modifier
    block: str = ""

    def __init__(self, params: Optional[Params] = None, **overrides: Any) -> None:
        super().__init__(params, **overrides)
        self.described_by: List[str] = []
        if self.get("describedBy"):
            self.described_by.append(str(self.get("describedBy")))

    @property
    def control_id(self) -> Any:
        return self.get("id")

    @property
    def has_error(self) -> bool:
        return bool(self.get("errorMessage"))

    def label(self, control_id: Any = UNDEFINED) -> str:
        if not self.get("label"):
            return ""
        if control_id is UNDEFINED:
            control_id = self.control_id
        return Label({**as_mapping(self.get("label")), "for": control_id}).render()

    def hint(self, id_prefix: Any = UNDEFINED) -> str:
        """Render the hint and register its id with ``aria-describedby``."""
        if not self.get("hint"):
            return ""
        if id_prefix is UNDEFINED:
            id_prefix = self.control_id
        hint_id = f"{to_string(id_prefix)}-hint"
        self.described_by.append(hint_id)
        return Hint({**as_mapping(self.get("hint")), "id": hint_id}).render()

    def error_message(self, id_prefix: Any = UNDEFINED) -> str:
        """Render the error message and register its id with ``aria-describedby``."""
        if not self.has_error:
            return ""
        if id_prefix is UNDEFINED:
            id_prefix = self.control_id
        error_id = f"{to_string(id_prefix)}-error"
        self.described_by.append(error_id)
        return ErrorMessage({**as_mapping(self.get("errorMessage")), "id": error_id}).render()

    def aria_describedby(self) -> str:
        return self.attribute("aria-describedby", " ".join(self.described_by) or UNDEFINED)

    def control_classes(self, *extra: Any) -> str:
        return self.classes(
            self.block,
            *extra,
            self.get("classes"),
            **{f"{self.block}--error": self.has_error},
        )

    def before_input(self) -> str:
        return affix(self.get("formGroup", default={}), "beforeInput")

    def after_input(self) -> str:
        return affix(self.get("formGroup", default={}), "afterInput")

    def form_group(self, body: str) -> str:
        """Wrap already rendered ``body`` in the ``govuk-form-group`` container."""
        css = self.classes(
            "govuk-form-group",
            self.get("formGroup", "classes"),
            **{"govuk-form-group--error": self.has_error},
        )
        return (
            f'<div class="{css}"{self.attributes(self.get("formGroup", "attributes"))}>\n'
            f"  {body}\n"
            "</div>"
        )
