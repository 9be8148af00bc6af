"""
iso9075-sdk - Format dates and times according to ISO 9075
"""

from iso9075_sdk.converters.plaintext.iso9075.formatter import format_iso9075, format_iso9075_result
from iso9075_sdk.logic.functions import add_leading_zeros, is_valid, to_datetime
from iso9075_sdk.logic.literals import TFormat, TRepresentation
from iso9075_sdk.logic.models import (
    FormatISO9075Options,
    FormatISO9075OptionsArgs,
    InvalidDateError,
    InvalidOptionError,
    ISO9075FormatError,
)

__all__ = [
    # Formatting
    "format_iso9075",
    "format_iso9075_result",
    # Options
    "FormatISO9075Options",
    "FormatISO9075OptionsArgs",
    "TFormat",
    "TRepresentation",
    # Errors
    "InvalidDateError",
    "InvalidOptionError",
    "ISO9075FormatError",
    # Helpers
    "add_leading_zeros",
    "is_valid",
    "to_datetime",
]
