import pytest

from caes.textcheck import is_double_fixed, is_llong_dec


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123", True),
        ("  -42 \n", True),
        ("12a", False),
        ("", False),
        ("-", False),
        ("--5", False),
        ("1 2", False),
        ("9" * 18, True),
        ("9" * 19, False),
        ("-" + "9" * 18, True),
        ("3.5", False),
    ],
)
def test_is_llong_dec(text, expected):
    assert is_llong_dec(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3.25", True),
        ("-0.5", True),
        ("  17 ", True),
        (".", True),
        ("1.2.3", False),
        ("1e5", False),
        ("", False),
        ("-", False),
        ("1" * 35, True),
        ("1" * 36, False),
    ],
)
def test_is_double_fixed(text, expected):
    assert is_double_fixed(text) is expected


def test_every_integer_is_also_fixed():
    for text in ("0", "-7", "123456789012345678"):
        assert is_llong_dec(text)
        assert is_double_fixed(text)