"""Targeting and range resolution for D&D 5E abilities.

An ability-use workflow calls ``needs_targeting`` first; when targets are
required it builds ``get_target_requirements`` once, then calls
``is_valid_target`` and ``get_target_info`` per candidate. All functions are
pure and hold no state between calls.

Modules:
    units: Distance unit conversion.
    range: Range resolution into grid squares.
    requirements: Whether and how an ability targets.
    validation: Target legality checks.
    info: Advisory display facts for a candidate.
"""

from __future__ import annotations

from dnd_hud.targeting.info import (
    disposition_label,
    distance_in_squares,
    get_target_info,
    incapacitating_statuses,
)
from dnd_hud.targeting.range import (
    apply_actor_modifiers,
    calculate_range,
    resolve_range,
    select_range,
)
from dnd_hud.targeting.requirements import (
    get_target_requirements,
    is_area_ability,
    needs_targeting,
    variant_needs_targeting,
)
from dnd_hud.targeting.units import convert, normalize_units
from dnd_hud.targeting.validation import (
    is_ally,
    is_creature,
    is_enemy,
    is_valid_target,
)


__all__ = [
    # Units
    "convert",
    "normalize_units",
    # Range
    "resolve_range",
    "calculate_range",
    "select_range",
    "apply_actor_modifiers",
    # Requirements
    "needs_targeting",
    "get_target_requirements",
    "is_area_ability",
    "variant_needs_targeting",
    # Validation
    "is_valid_target",
    "is_enemy",
    "is_ally",
    "is_creature",
    # Info
    "get_target_info",
    "disposition_label",
    "distance_in_squares",
    "incapacitating_statuses",
]
