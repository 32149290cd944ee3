# Attribute, i18n and escaping primitives shared by all components

from .values import UNDEFINED, coalesce, is_nullish, to_string
from .escaping import TrustedHtml, escape_attribute, escape_html, html_or_text, trusted
from .attributes import AttributeDescriptor, AttributesInput, encode_attribute, encode_attributes
from .i18n import I18nRequest, encode_i18n_attributes

__all__ = [
    "UNDEFINED",
    "coalesce",
    "is_nullish",
    "to_string",
    "TrustedHtml",
    "escape_attribute",
    "escape_html",
    "html_or_text",
    "trusted",
    "AttributeDescriptor",
    "AttributesInput",
    "encode_attribute",
    "encode_attributes",
    "I18nRequest",
    "encode_i18n_attributes",
]
