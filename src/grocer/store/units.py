"""Registry of unit strings offered when adding items."""

from __future__ import annotations

import logging

from grocer.db.kv import UNITS_KEY, KeyValueStore
from grocer.units import DEFAULT_UNITS

from .codec import decode_units, encode_units

logger = logging.getLogger(__name__)


class UnitRegistry:
    """Known units, most recently added custom unit first."""

    def __init__(self, kv: KeyValueStore, key: str = UNITS_KEY):
        self._kv = kv
        self._key = key
        stored = decode_units(key, kv.read(key))
        self._units: list[str] = stored if stored is not None else list(DEFAULT_UNITS)

    def known_units(self) -> tuple[str, ...]:
        return tuple(self._units)

    def __contains__(self, unit: object) -> bool:
        return unit in self._units

    def recognizes(self, unit: str) -> bool:
        """True when ``unit`` matches a known unit ignoring case and padding."""

        wanted = unit.strip().lower()
        return any(known.lower() == wanted for known in self._units)

    def add_custom_unit(self, unit: str) -> bool:
        """Register ``unit`` at the front of the list.

        Returns False when the trimmed unit is empty or already known
        (exact, case-sensitive match), in which case nothing is written.
        """

        trimmed = unit.strip()
        if not trimmed or trimmed in self._units:
            return False
        self._units.insert(0, trimmed)
        self._kv.write(self._key, encode_units(self._units))
        logger.info("Registered custom unit %r", trimmed)
        return True


__all__ = ["UnitRegistry"]
