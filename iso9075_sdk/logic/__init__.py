"""Logic layer for ISO 9075 formatting."""

from iso9075_sdk.logic.literals import TFormat, TRepresentation
from iso9075_sdk.logic.models import (
    DateTimeParts,
    FormatISO9075Options,
    FormatISO9075OptionsArgs,
    InvalidDateError,
    InvalidOptionError,
    ISO9075FormatError,
    TDateLike,
    TOptionsLike,
)

__all__ = [
    # Models
    "DateTimeParts",
    "FormatISO9075Options",
    "FormatISO9075OptionsArgs",
    "TDateLike",
    "TFormat",
    "TOptionsLike",
    "TRepresentation",
    # Errors
    "InvalidDateError",
    "InvalidOptionError",
    "ISO9075FormatError",
]
