from __future__ import annotations

from datetime import date, datetime

import pytest

from sellerdesk.viewmodels import field_constraints
from sellerdesk.viewmodels.formatting import (
    format_amount,
    format_date,
    is_blank,
    parse_date,
    start_of_day,
    try_parse_float,
    try_parse_int,
)


@pytest.mark.parametrize("text, expected", [("42", 42), ("", None), (None, None), ("4x", None)])
def test_try_parse_int(text, expected) -> None:
    assert try_parse_int(text) == expected


def test_try_parse_float_with_custom_decimal_point() -> None:
    assert try_parse_float("3,25", decimal_point=",") == 3.25
    assert try_parse_float("abc") is None


def test_format_amount_is_locale_independent() -> None:
    assert format_amount(1234567.891) == "1234567.89"
    assert format_amount(0) == "0.00"
    assert format_amount(None) == ""
    assert format_amount(2.5, decimal_places=3, decimal_point=",") == "2,500"


def test_date_pattern_day_month_year() -> None:
    assert format_date(date(2024, 2, 9), "%d/%m/%Y") == "09/02/2024"
    assert parse_date("09/02/2024", "%d/%m/%Y") == date(2024, 2, 9)
    assert parse_date("2024-02-09", "%d/%m/%Y") is None
    assert parse_date("  ", "%d/%m/%Y") is None


def test_start_of_day_is_local_midnight() -> None:
    assert start_of_day(date(2024, 2, 9)) == datetime(2024, 2, 9, 0, 0)
    assert start_of_day(None) is None


def test_is_blank() -> None:
    assert is_blank(None)
    assert is_blank(" \t")
    assert not is_blank("x")


@pytest.mark.parametrize("text, ok", [("", True), ("123", True), ("12a", False), ("-1", False)])
def test_integer_constraint(text, ok) -> None:
    assert field_constraints.accepts_integer(text) is ok


@pytest.mark.parametrize(
    "text, ok",
    [("", True), ("12", True), ("12.", True), (".5", True), ("1.2.3", False), ("1,5", False)],
)
def test_decimal_constraint(text, ok) -> None:
    assert field_constraints.accepts_decimal(text) is ok


def test_max_length_constraint() -> None:
    check = field_constraints.max_length(3)
    assert check("abc")
    assert not check("abcd")
    with pytest.raises(ValueError):
        field_constraints.max_length(0)


@pytest.mark.parametrize(
    "text, ok",
    [
        ("", True),
        ("1", True),
        ("17/0", True),
        ("17/05/1990", True),
        ("17/05/19901", False),
        ("1990-05-17", False),
        ("17-05", False),
        ("ab", False),
    ],
)
def test_date_pattern_constraint_follows_day_month_year(text, ok) -> None:
    assert field_constraints.date_pattern("%d/%m/%Y")(text) is ok


def test_date_pattern_accepts_anything_for_variable_width_formats() -> None:
    assert field_constraints.date_pattern("%d %B %Y")("17 May 1990")
