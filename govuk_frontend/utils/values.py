"""
Value helpers shared by the encoders and components.

Component options arrive as plain mappings. Python has a single ``None``
where the macro options distinguish "not provided" from "explicitly empty",
so a dedicated ``UNDEFINED`` sentinel stands in for the former.
"""
from __future__ import annotations

from typing import Any


class _Undefined:
    """Marker for an option that was not provided at all."""

    _instance = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


def is_nullish(value: Any) -> bool:
    """True for ``None`` and ``UNDEFINED``."""
    return value is None or value is UNDEFINED


def coalesce(*values: Any) -> Any:
    """Return the first value that is not nullish (like ``a ?? b``)."""
    for value in values:
        if not is_nullish(value):
            return value
    return values[-1] if values else UNDEFINED


def to_string(value: Any) -> str:
    """Stringify a scalar the way the design system macros print it.

    Booleans become ``"true"``/``"false"``, nullish values become ``""`` and
    integral floats lose their fractional part (``2.0`` -> ``"2"``).
    """
    if is_nullish(value):
        return ""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
