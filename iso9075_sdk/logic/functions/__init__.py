"""Helper functions for ISO 9075 formatting."""

from iso9075_sdk.logic.functions.dates import date_time_parts, is_valid, to_datetime
from iso9075_sdk.logic.functions.options import resolve_options
from iso9075_sdk.logic.functions.padding import add_leading_zeros

__all__ = [
    "add_leading_zeros",
    "date_time_parts",
    "is_valid",
    "resolve_options",
    "to_datetime",
]
