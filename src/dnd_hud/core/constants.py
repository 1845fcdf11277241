"""Rules constants for the D&D 5E HUD rules library.

This module collects the fixed tables the targeting and inventory rules read:
unit conversion factors, special range units, template shapes, actor
capability flags, status allow-lists, and the item field fallback chains that
track how the upstream data model has shifted across ruleset versions.
"""

from __future__ import annotations

# =============================================================================
# Distance Units
# =============================================================================

UNIT_ALIASES: dict[str, str] = {
    "ft": "ft",
    "foot": "ft",
    "feet": "ft",
    "mi": "mi",
    "mile": "mi",
    "miles": "mi",
    "m": "m",
    "meter": "m",
    "meters": "m",
    "metre": "m",
    "metres": "m",
    "km": "km",
    "kilometer": "km",
    "kilometers": "km",
    "kilometre": "km",
    "kilometres": "km",
}
"""Accepted spellings of each distance unit, mapped to its canonical tag."""

FEET_PER_UNIT: dict[str, float] = {
    "ft": 1.0,
    "mi": 5280.0,
    "m": 3.28084,
    "km": 3280.84,
}
"""Conversion factors used when the target unit is feet-based."""

METERS_PER_UNIT: dict[str, float] = {
    "m": 1.0,
    "km": 1000.0,
    "ft": 0.3048,
    "mi": 1609.34,
}
"""Conversion factors used when the target unit is meter-based."""

FEET_BASED_UNITS = frozenset({"ft", "mi"})
METER_BASED_UNITS = frozenset({"m", "km"})

FEET_PER_MILE = 5280
METERS_PER_KILOMETER = 1000

DEFAULT_RANGE_UNITS = "ft"

# =============================================================================
# Special Range Units
# =============================================================================

SELF_RANGE_UNITS = "self"
TOUCH_RANGE_UNITS = "touch"

UNLIMITED_RANGE_UNITS = frozenset({"unlimited", "special", "spec", "any"})
"""Range units that carry no numeric restriction."""

# =============================================================================
# Scene Grid Defaults
# =============================================================================

DEFAULT_GRID_DISTANCE = 5.0
"""Distance covered by one grid square, in grid units."""

DEFAULT_GRID_UNITS = "ft"

DEFAULT_GRID_SIZE = 100.0
"""Pixels per grid square."""

TOUCH_RANGE_SQUARES = 1.0
"""Touch range without a reach bonus: the adjacent square."""

# =============================================================================
# Targeting
# =============================================================================

NO_TARGET_TYPES = frozenset({"self", "none"})

ATTACK_ACTION_TYPES = frozenset({"attack", "mwak", "rwak", "msak", "rsak"})

SHARPSHOOTER_FLAG = "sharpShooter"
"""Ranged weapon attacks use their long range without penalty."""

SPELL_SNIPER_FLAG = "spellSniper"
"""Ranged spell attacks have their range doubled."""

NON_CREATURE_TYPES = frozenset({"object"})

INCAPACITATING_STATUSES: tuple[str, ...] = (
    "prone",
    "paralyzed",
    "stunned",
    "unconscious",
    "restrained",
    "incapacitated",
)
"""Status tags surfaced in target info, in display order."""

# =============================================================================
# Items
# =============================================================================

CATEGORY_SORT_ORDER: tuple[str, ...] = (
    "weapon",
    "feat",
    "equipment",
    "spell",
    "consumable",
    "tool",
    "loot",
)
"""Category priority for hotbar sorting; unlisted categories sort last."""

UNKNOWN_SPELL_LEVEL = 99

SUBTYPE_FIELDS: tuple[str, ...] = ("type.value", "type.subtype", "consumableType")
"""Item subtype field paths, newest data model first."""

SPELL_METHOD_FIELDS: tuple[str, ...] = ("method", "preparation.mode")
SPELL_PREPARED_FIELDS: tuple[str, ...] = ("prepared", "preparation.prepared")

AUTO_POPULATE_GRIDS: tuple[str, ...] = ("grid0", "grid1", "grid2")


__all__ = [
    "UNIT_ALIASES",
    "FEET_PER_UNIT",
    "METERS_PER_UNIT",
    "FEET_BASED_UNITS",
    "METER_BASED_UNITS",
    "FEET_PER_MILE",
    "METERS_PER_KILOMETER",
    "DEFAULT_RANGE_UNITS",
    "SELF_RANGE_UNITS",
    "TOUCH_RANGE_UNITS",
    "UNLIMITED_RANGE_UNITS",
    "DEFAULT_GRID_DISTANCE",
    "DEFAULT_GRID_UNITS",
    "DEFAULT_GRID_SIZE",
    "TOUCH_RANGE_SQUARES",
    "NO_TARGET_TYPES",
    "ATTACK_ACTION_TYPES",
    "SHARPSHOOTER_FLAG",
    "SPELL_SNIPER_FLAG",
    "NON_CREATURE_TYPES",
    "INCAPACITATING_STATUSES",
    "CATEGORY_SORT_ORDER",
    "UNKNOWN_SPELL_LEVEL",
    "SUBTYPE_FIELDS",
    "SPELL_METHOD_FIELDS",
    "SPELL_PREPARED_FIELDS",
    "AUTO_POPULATE_GRIDS",
]
