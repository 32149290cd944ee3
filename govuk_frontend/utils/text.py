"""Small string helpers for component names and labels."""
from __future__ import annotations


def capitalise(value: str) -> str:
    """Upper-case the first character only (``"day"`` -> ``"Day"``)."""
    return f"{value[:1].upper()}{value[1:]}"


def to_camel_case(value: str) -> str:
    """Convert kebab case to camel case (``"back-link"`` -> ``"backLink"``)."""
    first, *rest = value.split("-")
    return first + "".join(capitalise(part) for part in rest)


def to_spaced(value: str) -> str:
    """Convert kebab case to a capitalised phrase (``"back-link"`` -> ``"Back link"``)."""
    return " ".join(capitalise(value).split("-"))

