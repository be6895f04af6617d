import pytest

from algodrills.roman import int_to_roman, roman_to_int, roman_to_int_lookahead


@pytest.mark.parametrize(
    "number, numeral",
    [(3749, "MMMDCCXLIX"), (58, "LVIII"), (1994, "MCMXCIV")],
)
def test_int_to_roman_known(number, numeral):
    assert int_to_roman(number) == numeral


@pytest.mark.parametrize("reader", [roman_to_int, roman_to_int_lookahead])
@pytest.mark.parametrize(
    "numeral, number",
    [("MMMDCCXLIX", 3749), ("LVIII", 58), ("MCMXCIV", 1994)],
)
def test_roman_to_int_known(reader, numeral, number):
    assert reader(numeral) == number


@pytest.mark.parametrize("reader", [roman_to_int, roman_to_int_lookahead])
def test_round_trip_full_range(reader):
    for number in range(1, 4000):
        assert reader(int_to_roman(number)) == number


def test_non_positive_gives_empty_numeral():
    assert int_to_roman(0) == ""
    assert int_to_roman(-5) == ""


def test_empty_numeral_reads_as_zero():
    assert roman_to_int("") == 0


def test_lookahead_rejects_empty_numeral():
    with pytest.raises(ValueError):
        roman_to_int_lookahead("")


def test_numerals_use_only_roman_symbols():
    for number in (1, 4, 9, 40, 90, 400, 900, 3888):
        assert set(int_to_roman(number)) <= set("MDCLXVI")