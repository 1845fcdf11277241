"""Distance unit conversion.

Feet-based targets (feet, miles) convert through feet; meter-based targets
(meters, kilometers) convert through meters. Unknown source units convert
with a factor of 1 and unknown target units leave the value unchanged, so
homebrew unit labels pass through instead of failing. No rounding is applied.

Example:
    >>> convert(1, "mile", "ft")
    5280.0
    >>> convert(2, "Kilometers", "m")
    2000.0
"""

from __future__ import annotations

from dnd_hud.core.constants import (
    FEET_BASED_UNITS,
    FEET_PER_UNIT,
    METER_BASED_UNITS,
    METERS_PER_UNIT,
    UNIT_ALIASES,
)


def normalize_units(units: str | None) -> str | None:
    """Map a unit label to its canonical tag.

    Args:
        units: Unit label in any supported spelling or case.

    Returns:
        ``ft``, ``mi``, ``m`` or ``km``; the lowercased label when unknown;
        None for an empty label.
    """
    if not units:
        return None
    label = units.strip().lower()
    return UNIT_ALIASES.get(label, label)


def convert(value: float, from_units: str | None, to_units: str | None) -> float:
    """Convert a distance between units.

    Args:
        value: Distance in ``from_units``.
        from_units: Source units.
        to_units: Target units.

    Returns:
        Distance in ``to_units``.
    """
    if not value:
        return value

    source = normalize_units(from_units)
    target = normalize_units(to_units)
    if source == target:
        return value

    if target in FEET_BASED_UNITS:
        table = FEET_PER_UNIT
    elif target in METER_BASED_UNITS:
        table = METERS_PER_UNIT
    else:
        return value

    return value * table.get(source, 1.0) / table[target]


__all__ = [
    "normalize_units",
    "convert",
]
