"""
GOV.UK Frontend components rendered from Python.

Each ``govuk_*`` function takes the option mapping documented for the
matching GOV.UK Frontend Nunjucks macro and returns ``TrustedHtml``
(``markupsafe.Markup``), ready to drop into Jinja or any other template.

Example:
    >>> from govuk_frontend import govuk_button
    >>> govuk_button({"text": "Save and continue"})
"""
from __future__ import annotations

from typing import Callable, Dict

from . import components as _components
from .components import *  # noqa: F401,F403
from .errors import ComponentParameterError, ConfigurationError, GovukFrontendError
from .template import govuk_template
from .utils import (
    UNDEFINED,
    AttributeDescriptor,
    I18nRequest,
    TrustedHtml,
    encode_attribute,
    encode_attributes,
    encode_i18n_attributes,
    escape_html,
)

__version__ = "0.1.0"


# Kebab-case component name -> render function, e.g. COMPONENTS["back-link"]
COMPONENTS: Dict[str, Callable[..., TrustedHtml]] = {
    name[len("govuk_"):].replace("_", "-"): getattr(_components, name)
    for name in sorted(_components.__all__)
    if name.startswith("govuk_")
}

__all__ = list(_components.__all__) + [
    "COMPONENTS",
    "ComponentParameterError",
    "ConfigurationError",
    "GovukFrontendError",
    "govuk_template",
    "UNDEFINED",
    "AttributeDescriptor",
    "I18nRequest",
    "TrustedHtml",
    "encode_attribute",
    "encode_attributes",
    "encode_i18n_attributes",
    "escape_html",
]
