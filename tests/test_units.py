"""Tests for unit conversion and number formatting."""

from __future__ import annotations

import pytest

from grocer.units import clean_number, format_currency, grams_of


@pytest.mark.parametrize(
    ("unit", "expected"),
    [("kg", 1000.0), ("g", 1.0), ("mg", 0.001), ("lb", 453.592)],
)
def test_grams_of_known_units(unit, expected):
    assert grams_of(1, unit) == pytest.approx(expected)


@pytest.mark.parametrize("unit", ["KG", "Kg", "LB", "Mg"])
def test_grams_of_is_case_insensitive(unit):
    assert grams_of(2, unit) == pytest.approx(grams_of(2, unit.lower()))


@pytest.mark.parametrize("unit", ["L", "ml", "pack", "dozen", ""])
def test_grams_of_unknown_unit_passes_amount_through(unit):
    assert grams_of(3.5, unit) == 3.5


def test_clean_number():
    assert clean_number(2.0) == "2"
    assert clean_number(1.5) == "1.50"
    assert clean_number(0.3) == "0.30"


def test_format_currency():
    assert format_currency(60, "₹") == "₹60.00"
    assert format_currency(12.5, "$") == "$12.50"
