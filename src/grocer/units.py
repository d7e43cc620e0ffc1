"""Weight unit conversion and number formatting helpers."""

from __future__ import annotations

import math

DEFAULT_UNITS: tuple[str, ...] = ("g", "kg", "L", "ml", "pack")

GRAMS_PER_POUND = 453.592


def grams_of(amount: float, unit: str) -> float:
    """Return ``amount`` expressed in grams.

    Matching on ``unit`` is case-insensitive. Units without a known weight
    conversion (``L``, ``pack``, anything user-defined) are treated as grams
    already, so the amount comes back unchanged.
    """

    normalized = unit.lower()
    if normalized == "kg":
        return amount * 1000
    if normalized == "g":
        return amount
    if normalized == "mg":
        return amount / 1000
    if normalized == "lb":
        return amount * GRAMS_PER_POUND
    return amount


def clean_number(value: float) -> str:
    """Render whole numbers without decimals and anything else with two."""

    if math.isfinite(value) and value == math.floor(value):
        return f"{value:.0f}"
    return f"{value:.2f}"


def format_currency(value: float, symbol: str) -> str:
    return f"{symbol}{value:.2f}"


__all__ = ["DEFAULT_UNITS", "GRAMS_PER_POUND", "grams_of", "clean_number", "format_currency"]
