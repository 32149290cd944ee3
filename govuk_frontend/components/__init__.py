# GOV.UK Frontend components
# One Component subclass plus a govuk_* render function per component

from .base import Component
from .accordion import Accordion, govuk_accordion
from .back_link import BackLink, govuk_back_link
from .breadcrumbs import Breadcrumbs, govuk_breadcrumbs
from .button import Button, govuk_button
from .character_count import CharacterCount, govuk_character_count
from .checkboxes import Checkboxes, govuk_checkboxes
from .cookie_banner import CookieBanner, govuk_cookie_banner
from .date_input import DateInput, govuk_date_input
from .details import Details, govuk_details
from .error_message import ErrorMessage, govuk_error_message
from .error_summary import ErrorSummary, govuk_error_summary
from .exit_this_page import ExitThisPage, govuk_exit_this_page
from .fieldset import Fieldset, govuk_fieldset
from .file_upload import FileUpload, govuk_file_upload
from .footer import Footer, govuk_footer
from .header import Header, govuk_header
from .hint import Hint, govuk_hint
from .input import Input, govuk_input
from .inset_text import InsetText, govuk_inset_text
from .label import Label, govuk_label
from .notification_banner import NotificationBanner, govuk_notification_banner
from .pagination import Pagination, govuk_pagination
from .panel import Panel, govuk_panel
from .password_input import PasswordInput, govuk_password_input
from .phase_banner import PhaseBanner, govuk_phase_banner
from .radios import Radios, govuk_radios
from .select import Select, govuk_select
from .service_navigation import ServiceNavigation, govuk_service_navigation
from .skip_link import SkipLink, govuk_skip_link
from .summary_list import SummaryList, govuk_summary_list
from .table import Table, govuk_table
from .tabs import Tabs, govuk_tabs
from .tag import Tag, govuk_tag
from .task_list import TaskList, govuk_task_list
from .textarea import Textarea, govuk_textarea
from .warning_text import WarningText, govuk_warning_text

__all__ = [
    "Component",
    "Accordion",
    "BackLink",
    "Breadcrumbs",
    "Button",
    "CharacterCount",
    "Checkboxes",
    "CookieBanner",
    "DateInput",
    "Details",
    "ErrorMessage",
    "ErrorSummary",
    "ExitThisPage",
    "Fieldset",
    "FileUpload",
    "Footer",
    "Header",
    "Hint",
    "Input",
    "InsetText",
    "Label",
    "NotificationBanner",
    "Pagination",
    "Panel",
    "PasswordInput",
    "PhaseBanner",
    "Radios",
    "Select",
    "ServiceNavigation",
    "SkipLink",
    "SummaryList",
    "Table",
    "Tabs",
    "Tag",
    "TaskList",
    "Textarea",
    "WarningText",
    "govuk_accordion",
    "govuk_back_link",
    "govuk_breadcrumbs",
    "govuk_button",
    "govuk_character_count",
    "govuk_checkboxes",
    "govuk_cookie_banner",
    "govuk_date_input",
    "govuk_details",
    "govuk_error_message",
    "govuk_error_summary",
    "govuk_exit_this_page",
    "govuk_fieldset",
    "govuk_file_upload",
    "govuk_footer",
    "govuk_header",
    "govuk_hint",
    "govuk_input",
    "govuk_inset_text",
    "govuk_label",
    "govuk_notification_banner",
    "govuk_pagination",
    "govuk_panel",
    "govuk_password_input",
    "govuk_phase_banner",
    "govuk_radios",
    "govuk_select",
    "govuk_service_navigation",
    "govuk_skip_link",
    "govuk_summary_list",
    "govuk_table",
    "govuk_tabs",
    "govuk_tag",
    "govuk_task_list",
    "govuk_textarea",
    "govuk_warning_text",
]
