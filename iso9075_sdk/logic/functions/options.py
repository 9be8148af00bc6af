from collections.abc import Mapping
from aletk.utils import get_logger
from iso9075_sdk.logic.models import FormatISO9075Options, TOptionsLike

lgr = get_logger(__name__)

RECOGNIZED_OPTION_KEYS = ("format", "representation")


def resolve_options(options: TOptionsLike) -> FormatISO9075Options:
    """
    Turn whatever the caller passed as options into a validated `FormatISO9075Options`.

    A missing key, or a key set to None, falls back to its default. Keys other than 'format' and 'representation' are ignored.

    Raises:
        InvalidOptionError: if 'format' or 'representation' has an unrecognized value
        TypeError: if `options` is neither None, a mapping, nor a `FormatISO9075Options`
    """

    match options:

        case None:
            return FormatISO9075Options()

        case FormatISO9075Options():
            return options

        case Mapping():
            ignored = [key for key in options if key not in RECOGNIZED_OPTION_KEYS]
            if ignored:
                lgr.debug(f"Ignoring unrecognized option keys: {ignored}")

            format_value = options.get("format")
            representation_value = options.get("representation")

            return FormatISO9075Options(
                format="extended" if format_value is None else format_value,
                representation="complete" if representation_value is None else representation_value,
            )

        case _:
            raise TypeError(f"Invalid type for options: '{type(options).__name__}'")
