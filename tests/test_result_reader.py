import math

import pytest

from pricing_gateway.engine.result_reader import (
    coerce_number,
    first_present,
    read_discount_amount,
    read_feasible,
    read_markup_amount,
)


@pytest.mark.parametrize("value, expected", [
    (10, 10),
    (2.5, 2.5),
    ("7", 7),
    (" 7.25 ", 7.25),
    ("", 0),
    ("abc", 0),
    (None, 0),
    ({"a": 1}, 0),
    ([1], 0),
    (True, 1),
    (False, 0),
    (math.nan, 0),
    (math.inf, 0),
    ("nan", 0),
])
def test_coerce_number(value, expected):
    assert coerce_number(value) == expected


def test_coerce_number_keeps_integer_strings_integral():
    assert isinstance(coerce_number("12"), int)


def test_first_present_skips_none_values():
    assert first_present({"a": None, "b": 0}, "a", "b") == 0


def test_first_present_requires_record():
    assert first_present([{"a": 1}], "a") is None
    assert first_present(None, "a") is None


class TestReadMarkup:
    def test_prefers_markup_amount(self):
        assert read_markup_amount({"markupAmount": 10, "markup": 99}) == 10

    def test_falls_back_to_markup(self):
        assert read_markup_amount({"markup": "12.5"}) == 12.5

    def test_absent_is_zero(self):
        assert read_markup_amount({}) == 0
        assert read_markup_amount(None) == 0


class TestReadDiscount:
    def test_prefers_discount_value(self):
        assert read_discount_amount({"discountValue": 5, "discount": 99}) == 5

    def test_falls_back_to_discount(self):
        assert read_discount_amount({"discount": 3}) == 3

    def test_non_numeric_is_zero(self):
        assert read_discount_amount({"discountValue": "n/a"}) == 0


@pytest.mark.parametrize("result, expected", [
    ({"isFeasible": True}, True),
    ({"isFeasible": "yes"}, True),
    ({"isFeasible": 1}, True),
    ({"isFeasible": False}, False),
    ({"isFeasible": 0}, False),
    ({"isFeasible": ""}, False),
    ({}, False),
    (None, False),
    ("feasible", False),
])
def test_read_feasible(result, expected):
    assert read_feasible(result) is expected
