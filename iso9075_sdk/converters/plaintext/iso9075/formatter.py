import traceback
from aletk.ResultMonad import Ok, Err
from aletk.utils import get_logger
from iso9075_sdk.logic.functions.dates import date_time_parts, to_datetime
from iso9075_sdk.logic.functions.options import resolve_options
from iso9075_sdk.logic.functions.padding import add_leading_zeros
from iso9075_sdk.logic.models import (
    DateTimeParts,
    InvalidDateError,
    InvalidOptionError,
    ISO9075FormatError,
    TDateLike,
    TOptionsLike,
)

lgr = get_logger(__name__)


def _format_date_part(parts: DateTimeParts, delimiter: str) -> str:
    year = add_leading_zeros(parts.year, 4)
    month = add_leading_zeros(parts.month, 2)
    day = add_leading_zeros(parts.day, 2)

    # yyyyMMdd or yyyy-MM-dd
    return f"{year}{delimiter}{month}{delimiter}{day}"


def _format_time_part(parts: DateTimeParts, delimiter: str) -> str:
    hour = add_leading_zeros(parts.hour, 2)
    minute = add_leading_zeros(parts.minute, 2)
    second = add_leading_zeros(parts.second, 2)

    # HHmmss or HH:mm:ss
    return f"{hour}{delimiter}{minute}{delimiter}{second}"


def format_iso9075(date: TDateLike, options: TOptionsLike = None) -> str:
    """
    Format a date according to ISO 9075, as used by SQL databases (e.g. MySQL's `GET_FORMAT`).

    Example:
        format_iso9075(datetime(2019, 9, 18, 19, 0, 52)) == "2019-09-18 19:00:52"
        format_iso9075(datetime(2019, 9, 18, 19, 0, 52), {"format": "basic"}) == "20190918 190052"
        format_iso9075(datetime(2019, 9, 18, 19, 0, 52), {"representation": "date"}) == "2019-09-18"
        format_iso9075(datetime(2019, 9, 18, 19, 0, 52), {"representation": "time"}) == "19:00:52"

    Args:
        date: a `datetime`, a `date`, or a timestamp in milliseconds since the Unix epoch
        options: 'format' ('extended' or 'basic') and 'representation' ('complete', 'date' or 'time')

    Raises:
        InvalidDateError: if `date` is not a real calendar moment. Checked before the options
        InvalidOptionError: if 'format' or 'representation' has an unrecognized value
    """
    moment = to_datetime(date)
    if moment is None:
        raise InvalidDateError()

    opts = resolve_options(options)
    parts = date_time_parts(moment)

    date_delimiter = "-" if opts.format == "extended" else ""
    time_delimiter = ":" if opts.format == "extended" else ""

    match opts.representation:

        case "date":
            return _format_date_part(parts, date_delimiter)

        case "time":
            return _format_time_part(parts, time_delimiter)

        case "complete":
            return f"{_format_date_part(parts, date_delimiter)} {_format_time_part(parts, time_delimiter)}"

        case _:
            raise InvalidOptionError("representation", opts.representation)


def format_iso9075_result(date: TDateLike, options: TOptionsLike = None) -> Ok[str] | Err:
    """
    Return either the ISO 9075 string, or the formatting error.
    """
    try:
        return Ok(format_iso9075(date, options))

    except ISO9075FormatError as e:
        lgr.debug(f"Could not format date [[ {date!r} ]] with options [[ {options!r} ]]: {e}")
        return Err(
            message=f"Could not format date [[ {date!r} ]]. {e.__class__.__name__}: {e}",
            code=-1,
            error_type=e.__class__.__name__,
            error_trace=f"{traceback.format_exc()}",
        )
