"""
Exception hierarchy for govuk_frontend.

The attribute encoders never raise; these errors come from component
parameter checks, settings validation and the CLI.
"""
from __future__ import annotations


class GovukFrontendError(Exception):
    """Base class for all library errors."""


class ConfigurationError(GovukFrontendError, ValueError):
    """Raised when environment settings are unusable."""


class ComponentParameterError(GovukFrontendError, ValueError):
    """Raised when a component is missing a required option.

    Attributes:
        component: Kebab-case component name, e.g. ``"breadcrumbs"``.
        option: Name of the offending option, e.g. ``"items"``.
    """

    def __init__(self, component: str, option: str, message: str | None = None) -> None:
        self.component = component
        self.option = option
        super().__init__(message or f"{component}: option '{option}' is required")
