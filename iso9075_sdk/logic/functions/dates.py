import math
from datetime import date, datetime, time

from iso9075_sdk.logic.models import DateTimeParts


def _from_timestamp_ms(timestamp_ms: int | float) -> datetime | None:
    if isinstance(timestamp_ms, float):
        if not math.isfinite(timestamp_ms):
            return None
        # Fractional milliseconds are dropped, truncating toward zero
        timestamp_ms = int(timestamp_ms)

    seconds, milliseconds = divmod(timestamp_ms, 1000)
    try:
        return datetime.fromtimestamp(seconds).replace(microsecond=milliseconds * 1000)
    except (OverflowError, OSError, ValueError):
        return None


def to_datetime(value: object) -> datetime | None:
    """
    Coerce a date-like value into a `datetime`, or return None if it does not represent a real calendar moment.

    Accepted values:
        - `datetime`, naive or aware, returned as-is
        - `date`, taken at midnight
        - `int` or `float`, milliseconds since the Unix epoch, read in local time
    """
    match value:
        case bool():
            return None

        case datetime():
            return value

        case date():
            return datetime.combine(value, time())

        case int() | float():
            return _from_timestamp_ms(value)

        case _:
            return None


def is_valid(value: object) -> bool:
    return to_datetime(value) is not None


def date_time_parts(moment: datetime) -> DateTimeParts:
    return DateTimeParts(
        year=moment.year,
        month=moment.month,
        day=moment.day,
        hour=moment.hour,
        minute=moment.minute,
        second=moment.second,
    )
