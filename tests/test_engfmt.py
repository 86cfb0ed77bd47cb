import pytest

from caes.engfmt import eng_string, parse_eng_mark, string_eng

PREFIXES = "afpnumRkMGTPY"


def test_parse_eng_mark_unit_and_period_agree():
    assert parse_eng_mark(".") == parse_eng_mark("R")


def test_parse_eng_mark_steps_evenly():
    marks = [parse_eng_mark(c) for c in PREFIXES]
    steps = {b - a for a, b in zip(marks, marks[1:])}
    assert len(steps) == 1
    assert marks == sorted(marks)
    assert marks[PREFIXES.index("R")] == 0


@pytest.mark.parametrize("c", ["x", "e", "", "kk"])
def test_parse_eng_mark_rejects(c):
    assert parse_eng_mark(c) is None


def test_eng_string_zero():
    assert eng_string(0.0, 3, "V") == "0.000 V"


@pytest.mark.parametrize("value, expected", [(1e30, "big"), (-1e30, "-big"), (1e-30, "small")])
def test_eng_string_out_of_range(value, expected):
    assert eng_string(value, 3, "") == expected


@pytest.mark.parametrize("value", [1.234, 12.34, 123.4, 0.5, 4.7e6])
def test_eng_string_significant_figures(value):
    text = eng_string(value, 5, "")
    assert sum(ch.isdigit() for ch in text) == 5


def test_eng_string_prefix_before_units():
    assert eng_string(1500.0, 4, "Hz").endswith("kHz")
    assert eng_string(0.0022, 4, "F").endswith("mF")


@pytest.mark.parametrize("value", [1500.0, 0.002, 4.7e7, -33.0, 2.2e-9, 7.0])
def test_round_trip(value):
    assert string_eng(eng_string(value, 6, "")) == pytest.approx(value, rel=1e-5)


def test_round_trip_with_units():
    assert string_eng(eng_string(1500.0, 4, "Hz")) == pytest.approx(1500.0)


def test_sci_and_eng_agree():
    assert string_eng("1e3") == pytest.approx(string_eng("1k"))
    assert string_eng("2.5M") == pytest.approx(string_eng("2.5e6"))
    assert string_eng("4k7") == pytest.approx(string_eng("4.7e3"))


def test_plain_number_with_blanks():
    assert string_eng("  12  ") == pytest.approx(12.0)
    assert string_eng("1.5") == pytest.approx(1.5)


def test_bare_mark_means_one():
    assert string_eng("k") == pytest.approx(string_eng("1k"))


def test_second_mark_is_residue():
    assert string_eng("1k2M") == pytest.approx(string_eng("1k2"))


@pytest.mark.parametrize("bad", ["", "   ", "xyz"])
def test_string_eng_errors(bad):
    with pytest.raises(ValueError):
        string_eng(bad)