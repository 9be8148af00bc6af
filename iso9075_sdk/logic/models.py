from __future__ import annotations
from datetime import date, datetime
from typing import Any, Mapping, TypedDict
import attrs

from iso9075_sdk.logic.literals import FORMAT_VALUES, REPRESENTATION_VALUES, TFormat, TRepresentation


############
# Errors
############


class ISO9075FormatError(ValueError):
    """
    Base class for the errors raised while formatting a date.
    """

    pass


class InvalidDateError(ISO9075FormatError):

    def __init__(self, message: str = "Invalid time value") -> None:
        super().__init__(message)


_OPTION_ERROR_MESSAGES = {
    "format": "format must be 'extended' or 'basic'",
    "representation": "representation must be 'date', 'time', or 'complete'",
}


class InvalidOptionError(ISO9075FormatError):
    """
    An option was given a value outside of its allowed set.

    Args:
        field: name of the offending option
        value: the value that was passed
    """

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(_OPTION_ERROR_MESSAGES.get(field, f"Unknown option '{field}'"))


############
# Dates
############


type TDateLike = datetime | date | int | float


@attrs.define(frozen=True, slots=True)
class DateTimeParts:
    """
    Civil calendar fields of a point in time, as read from the date itself (no timezone shifting).

    Args:
        year: int
        month: int, 1-based
        day: int
        hour: int, 24-hour clock
        minute: int
        second: int
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int


############
# Options
############


class FormatISO9075OptionsArgs(TypedDict, total=False):
    format: TFormat
    representation: TRepresentation


@attrs.define(frozen=True, slots=True)
class FormatISO9075Options:
    """
    Options for ISO 9075 formatting.

    Example:
        FormatISO9075Options() renders `2019-09-18 19:00:52`.
        FormatISO9075Options(format="basic", representation="time") renders `190052`.

    Args:
        format: TFormat = "extended"
        representation: TRepresentation = "complete"
    """

    format: TFormat = "extended"
    representation: TRepresentation = "complete"

    def __attrs_post_init__(self) -> None:
        if self.format not in FORMAT_VALUES:
            raise InvalidOptionError("format", self.format)

        if self.representation not in REPRESENTATION_VALUES:
            raise InvalidOptionError("representation", self.representation)


type TOptionsLike = FormatISO9075Options | FormatISO9075OptionsArgs | Mapping[str, Any] | None
