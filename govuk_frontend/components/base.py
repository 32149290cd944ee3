"""
Base Component Class for GOV.UK Frontend components

This module provides the foundation for all components. Each component is a
small class that takes the design system's macro options as a mapping and
renders an HTML string, so the same fixtures that drive the Nunjucks macros
can drive these renderers.

Security:
- Everything except ``html``/``*Html`` options is escaped on output.
- ``html`` options are trusted as given; sanitising them is the caller's job
  (see ``components.markdown.sanitize_html``).
"""
from __future__ import annotations

import logging
from importlib import resources
from typing import Any, Dict, Mapping, Optional, Sequence

from ..errors import ComponentParameterError
from ..utils import (
    UNDEFINED,
    TrustedHtml,
    encode_attribute,
    encode_attributes,
    escape_html,
    html_or_text,
    is_nullish,
    to_string,
    trusted,
)

logger = logging.getLogger("govuk_frontend.components")

Params = Mapping[str, Any]


class Component:
    """Base class for all GOV.UK components

    Subclasses set ``name`` (the kebab-case component name) and implement
    ``render()``. Instances also implement ``__html__`` so they can be
    dropped straight into Jinja or markupsafe templates.
    """

    name: str = ""

    def __init__(self, params: Optional[Params] = None, **overrides: Any) -> None:
        merged: Dict[str, Any] = dict(params or {})
        merged.update(overrides)
        self.params = merged

    def render(self) -> str:
        """Render the component as an HTML string

        Returns:
            str: HTML representation of the component
        """
        raise NotImplementedError("Subclasses must implement render()")

    def __html__(self) -> TrustedHtml:
        return TrustedHtml(self.render())

    # ------------------------------------------------------------------ #
    # Parameter access
    # ------------------------------------------------------------------ #

    def get(self, *path: str, default: Any = UNDEFINED) -> Any:
        """Look up a (nested) option, e.g. ``get("formGroup", "classes")``.

        Missing keys, and non-mapping values along the way, yield ``default``.
        """
        return dig(self.params, *path, default=default)

    def require_items(self, option: str) -> Sequence[Any]:
        """Return a required list option or raise ``ComponentParameterError``."""
        value = self.params.get(option)
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise ComponentParameterError(self.name, option)
        return value

    # ------------------------------------------------------------------ #
    # Markup helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def escape(text: Any) -> str:
        """Escape HTML entities to prevent XSS attacks

        Args:
            text: Text to escape (None and UNDEFINED render as "")

        Returns:
            str: Escaped text; trusted HTML passes through unchanged
        """
        return escape_html(text)

    @staticmethod
    def trusted(html: Any) -> str:
        """Emit an ``html`` option without escaping."""
        return trusted(html)

    @staticmethod
    def content(source: Any, html_key: str = "html", text_key: str = "text") -> str:
        """Return ``source[html_key]`` as trusted HTML, else escaped ``source[text_key]``."""
        if not isinstance(source, Mapping):
            return ""
        return html_or_text(source.get(html_key), source.get(text_key))

    @staticmethod
    def classes(*args: Any, **conditionals: bool) -> str:
        """Helper to build CSS class strings with conditional classes

        Empty and nullish entries are skipped. Class names are escaped as
        they are user supplied in most components.

        Example:
            >>> Component.classes("govuk-button", None, **{"govuk-button--start": True})
            'govuk-button govuk-button--start'
        """
        classes = [escape_html(arg) for arg in args if not is_nullish(arg) and arg != ""]
        classes.extend(key for key, value in conditionals.items() if value)
        return " ".join(classes)

    @staticmethod
    def attribute(name: str, value: Any = UNDEFINED) -> str:
        """Render a single `` name="value"`` fragment (omitted when UNDEFINED)."""
        return encode_attribute(name, value)

    @staticmethod
    def attributes(attrs: Any = UNDEFINED) -> str:
        """Render an ``attributes`` option (mapping or pre-serialised string)."""
        return encode_attributes(attrs)


def dig(source: Any, *path: str, default: Any = UNDEFINED) -> Any:
    """Nested mapping lookup that tolerates missing or non-mapping levels."""
    current = source
    for key in path:
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current


def affix(source: Any, key: str) -> str:
    """Render ``beforeInput``/``afterInput`` style slots (html or text)."""
    slot = source.get(key) if isinstance(source, Mapping) else None
    if not isinstance(slot, Mapping):
        return ""
    return html_or_text(slot.get("html"), slot.get("text"))


def as_trusted(html: str) -> TrustedHtml:
    """Wrap rendered component markup for the public API."""
    return TrustedHtml(html)


def as_mapping(value: Any) -> Mapping[str, Any]:
    """Return ``value`` if it is a mapping, else an empty one."""
    return value if isinstance(value, Mapping) else {}


def load_asset(filename: str) -> str:
    """Read an inline SVG shipped in ``components/assets``."""
    return resources.files(__package__).joinpath("assets", filename).read_text(encoding="utf-8").strip()


def join_classes(*names: Any) -> str:
    """Join class names without escaping, for options handed to another component."""
    return " ".join(to_string(name) for name in names if name)
