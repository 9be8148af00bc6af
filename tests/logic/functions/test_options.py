import pytest

from iso9075_sdk.logic.functions.options import resolve_options
from iso9075_sdk.logic.models import FormatISO9075Options, InvalidOptionError


def test_resolve_options_defaults() -> None:
    assert resolve_options(None) == FormatISO9075Options()
    assert resolve_options({}) == FormatISO9075Options()
    assert resolve_options({"format": None, "representation": None}) == FormatISO9075Options()


def test_resolve_options_from_mapping() -> None:
    options = resolve_options({"format": "basic", "representation": "time"})
    assert options == FormatISO9075Options(format="basic", representation="time")

    options = resolve_options({"representation": "date"})
    assert options == FormatISO9075Options(format="extended", representation="date")


def test_resolve_options_passes_instances_through() -> None:
    options = FormatISO9075Options(format="basic")
    assert resolve_options(options) is options


def test_resolve_options_ignores_unknown_keys() -> None:
    assert resolve_options({"locale": "de", "format": "basic"}) == FormatISO9075Options(format="basic")


def test_resolve_options_invalid_values() -> None:

    with pytest.raises(InvalidOptionError) as excinfo:
        resolve_options({"format": "compact"})
    assert excinfo.value.field == "format"

    with pytest.raises(InvalidOptionError) as excinfo:
        resolve_options({"representation": "datetime"})
    assert excinfo.value.field == "representation"


def test_resolve_options_invalid_type() -> None:

    with pytest.raises(TypeError):
        resolve_options("basic")  # type: ignore[arg-type]
