import pytest

from iso9075_sdk.logic.functions.padding import add_leading_zeros


@pytest.mark.parametrize(
    "number, target_length, expected",
    [
        (0, 2, "00"),
        (7, 2, "07"),
        (12, 2, "12"),
        (123, 2, "123"),
        (9, 4, "0009"),
        (2019, 4, "2019"),
        (12345, 4, "12345"),
        (-5, 4, "-0005"),
        (-12345, 4, "-12345"),
        (5, 0, "5"),
    ],
)
def test_add_leading_zeros(number: int, target_length: int, expected: str) -> None:
    assert add_leading_zeros(number, target_length) == expected
