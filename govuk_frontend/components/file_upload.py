"""
File upload component for GOV.UK Frontend

Lets users select and upload a file.
"""
from __future__ import annotations

from typing import Any, Optional

from ..utils import TrustedHtml
from .base import Params, as_trusted
from .form_group import FormControl


class FileUpload(FormControl):
    name = "file-upload"
    block = "govuk-file-upload"

    def render(self) -> str:
        label = self.label()
        hint = self.hint()
        error_message = self.error_message()

        attrs = (
            f' id="{self.escape(self.control_id)}" name="{self.escape(self.get("name"))}" type="file"'
            f"{self.attribute('value', self.get('value'))}"
            f"{' multiple' if self.get('multiple') else ''}"
            f"{' disabled' if self.get('disabled') else ''}"
            f"{self.aria_describedby()}"
            f"{self.attributes(self.get('attributes'))}"
        )
        control = f'<input class="{self.control_classes()}"{attrs}>'
        return self.form_group(
            f"{label}\n  {hint}\n  {error_message}\n  {self.before_input()}\n  {control}\n  {self.after_input()}"
        )


def govuk_file_upload(params: Optional[Params] = None, **overrides: Any) -> TrustedHtml:
    """Render the file upload component, e.g. ``govuk_file_upload({"id": "file", "name": "file"})``."""
    return as_trusted(FileUpload(params, **overrides).render())
