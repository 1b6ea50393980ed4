"""Tests for resume date range and graduation year parsing."""

import pytest

from utils.date_parser import PRESENT_LABEL, find_graduation_year, is_present_token, parse_date_range


@pytest.mark.parametrize(
    "line, expected",
    [
        ("2020 - 2023", ("2020", "2023")),
        ("2020–2023", ("2020", "2023")),
        ("2019 - présent", ("2019", PRESENT_LABEL)),
        ("2019 - Present", ("2019", PRESENT_LABEL)),
        ("2021 – Actuel", ("2021", PRESENT_LABEL)),
        ("2018 - aujourd'hui", ("2018", PRESENT_LABEL)),
        ("Septembre 2019 à Aujourd'hui", ("2019", PRESENT_LABEL)),
        ("Jan 2020 - Mar 2022", ("2020", "2022")),
        ("Octobre 2015 – Juin 2018", ("2015", "2018")),
    ],
)
def test_parse_date_range(line, expected):
    assert parse_date_range(line) == expected


@pytest.mark.parametrize("line", ["2020", "Lead Developer", "", "since 2020 until now"])
def test_parse_date_range_none(line):
    assert parse_date_range(line) is None


def test_is_present_token():
    assert is_present_token("PRÉSENT")
    assert is_present_token("actuel")
    assert not is_present_token("2023")
    assert not is_present_token("")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("2016", "2016"),
        ("Master Informatique 2016", "2016"),
        ("2014 - 2016", "2016"),
        ("2014–2016", "2016"),
        ("Licence", None),
        ("Promotion 12345", None),
    ],
)
def test_find_graduation_year(line, expected):
    assert find_graduation_year(line) == expected
