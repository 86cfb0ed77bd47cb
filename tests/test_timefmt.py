import pytest

from caes.timefmt import hms_to_sec, sec_to_hms


def test_format_full():
    assert sec_to_hms(3725.5) == "01:02:05.5000"


def test_format_seconds_only():
    assert sec_to_hms(5.25) == "05.2500"


def test_format_padded():
    assert sec_to_hms(5.25, True) == "00:00:05.2500"


@pytest.mark.parametrize("t", [0.0, 12.5, 59.5, 61.0, 3599.25, 7322.125])
def test_round_trip_padded(t):
    assert hms_to_sec(sec_to_hms(t, True)) == pytest.approx(t)


@pytest.mark.parametrize("t", [3725.5, 125.75, 42.0])
def test_round_trip_unpadded(t):
    assert hms_to_sec(sec_to_hms(t)) == pytest.approx(t)


def test_parse_minutes_seconds():
    assert hms_to_sec("1:30") == 60 * 1 + 30


def test_parse_leading_colon_ignored():
    assert hms_to_sec(":30") == 30


def test_parse_ignores_leading_garbage():
    assert hms_to_sec("abc12") == 12


@pytest.mark.parametrize("bad", ["", "75", "1:75:00", "75:00:00", "abc", "12:"])
def test_parse_errors(bad):
    with pytest.raises(ValueError):
        hms_to_sec(bad)