"""
Attribute serialisation for component markup.

Every component funnels user supplied attributes through these helpers, so
the optional/boolean policy lives in exactly one place:

- By default (or with ``optional=False``) attributes render as
  `` name="value"``, including ``True``/``False`` which print as
  ``"true"``/``"false"`` and ``None`` which prints as ``""``.
- With ``optional=True`` a value of ``None``, ``UNDEFINED`` or ``False``
  drops the attribute, and ``True`` renders the bare name (a boolean HTML
  attribute such as `` checked``).
- Intentionally falsy values (``""`` and ``0``) are never dropped.

See https://developer.mozilla.org/en-US/docs/Glossary/Boolean/HTML
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union

from .escaping import escape_attribute
from .values import UNDEFINED, is_nullish


@dataclass(frozen=True)
class AttributeDescriptor:
    """An attribute value with explicit control over omission.

    Example:
        >>> encode_attributes({"checked": AttributeDescriptor(True, optional=True)})
        ' checked'
    """

    value: Any = UNDEFINED
    optional: bool = False

    @classmethod
    def coerce(cls, raw: Any) -> "AttributeDescriptor":
        """Normalise a bare value or a ``{"value", "optional"}`` mapping.

        Lists and tuples count as descriptors too. They have no ``value``,
        so ``{"x": ["a"]}`` renders `` x=""``.
        """
        if isinstance(raw, AttributeDescriptor):
            return raw
        if isinstance(raw, Mapping):
            return cls(value=raw.get("value", UNDEFINED), optional=raw.get("optional", False))
        if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
            return cls()
        return cls(value=raw)

    def render(self, name: str) -> str:
        """Render this value as a single attribute fragment for ``name``."""
        if self.optional is True:
            if self.value is True:
                return f" {escape_attribute(name)}"
            if is_nullish(self.value) or self.value is False:
                return ""
        return f' {escape_attribute(name)}="{escape_attribute(self.value)}"'


AttributesInput = Union[str, Mapping[str, Any], None]


def encode_attribute(name: str, value: Any = UNDEFINED) -> str:
    """Render one `` name="value"`` fragment, or ``""`` when ``value`` is UNDEFINED.

    ``None`` and ``""`` both render `` name=""``.

    Example:
        >>> encode_attribute("id", "test")
        ' id="test"'
    """
    if value is UNDEFINED:
        return ""
    return f' {escape_attribute(name)}="{escape_attribute(value)}"'


def encode_attributes(attributes: Any = UNDEFINED) -> str:
    """Render an attribute mapping as concatenated fragments.

    A string is treated as already serialised and returned as is; anything
    that is neither a string nor a mapping renders nothing. Entries keep
    the mapping's insertion order.
    """
    if isinstance(attributes, str):
        return str(attributes)
    if not isinstance(attributes, Mapping):
        return ""
    return "".join(
        AttributeDescriptor.coerce(raw).render(name) for name, raw in attributes.items()
    )
