"""Range resolution for abilities and activation variants.

Ranges are resolved into grid squares, the unit the HUD compares distances
in, while the pre-division value in scene units is kept for display.

Resolution order:
    1. Pick the variant's range, else the ability's range.
    2. Self, touch and unlimited units short-circuit.
    3. Miles are pre-normalized to feet, kilometers to meters.
    4. Actor capabilities adjust ranged weapon and ranged spell attacks.
    5. Values are converted to scene units and divided by the square size.

Example:
    >>> from dnd_hud.models import AbilityDescriptor, SceneGridContext
    >>> bow = AbilityDescriptor.model_validate(
    ...     {"range": {"value": 150, "long": 600, "units": "ft"}}
    ... )
    >>> resolve_range(bow, grid=SceneGridContext(distance=5)).range
    30.0
"""

from __future__ import annotations

from dnd_hud.core.constants import (
    DEFAULT_RANGE_UNITS,
    FEET_PER_MILE,
    METERS_PER_KILOMETER,
    SELF_RANGE_UNITS,
    SHARPSHOOTER_FLAG,
    SPELL_SNIPER_FLAG,
    TOUCH_RANGE_SQUARES,
    TOUCH_RANGE_UNITS,
    UNLIMITED_RANGE_UNITS,
)
from dnd_hud.core.logging import get_logger
from dnd_hud.models.descriptors import (
    AbilityDescriptor,
    ActivationVariant,
    ActorContext,
    RangeDescriptor,
    SceneGridContext,
)
from dnd_hud.models.enums import ActionType, RangeUnits
from dnd_hud.models.results import RangeResult
from dnd_hud.targeting.units import convert, normalize_units


logger = get_logger(__name__)


def select_range(
    ability: AbilityDescriptor,
    variant: ActivationVariant | None = None,
) -> RangeDescriptor | None:
    """Pick the range declaration that applies.

    Args:
        ability: The ability.
        variant: Optional activation variant being used.

    Returns:
        The variant's range when declared, else the ability's range.
    """
    if variant is not None and variant.range is not None:
        return variant.range
    return ability.range


def _action_type(ability: AbilityDescriptor, variant: ActivationVariant | None) -> str | None:
    if variant is not None and variant.action_type:
        return variant.action_type
    return ability.action_type


def apply_actor_modifiers(
    range_value: float,
    long_range: float,
    action_type: str | None,
    actor: ActorContext,
) -> tuple[float, float]:
    """Apply actor capabilities to a numeric range.

    Ranged weapon attacks with the sharpshooter capability use their long
    range as normal range. Ranged spell attacks with the spell sniper
    capability double both ranges. Other categories are unchanged.

    Args:
        range_value: Normal range in native units.
        long_range: Long range in native units (0 when absent).
        action_type: The ability's action category.
        actor: The acting actor.

    Returns:
        Adjusted ``(range, long_range)``.
    """
    if action_type == ActionType.RANGED_WEAPON_ATTACK:
        if actor.has_capability(SHARPSHOOTER_FLAG) and long_range > range_value:
            range_value = long_range
    elif action_type == ActionType.RANGED_SPELL_ATTACK and actor.has_capability(SPELL_SNIPER_FLAG):
        range_value *= 2
        if long_range:
            long_range *= 2
    return range_value, long_range


def _touch_range(
    config: RangeDescriptor,
    ability: AbilityDescriptor,
    grid: SceneGridContext,
) -> RangeResult:
    reach = config.reach or (ability.range.reach if ability.range else None)
    if reach:
        return RangeResult(
            range=reach / grid.distance,
            range_in_native_units=reach,
            units=TOUCH_RANGE_UNITS,
            is_touch=True,
        )
    return RangeResult(
        range=TOUCH_RANGE_SQUARES,
        range_in_native_units=grid.distance,
        units=TOUCH_RANGE_UNITS,
        is_touch=True,
    )


def resolve_range(
    ability: AbilityDescriptor | None,
    variant: ActivationVariant | None = None,
    actor: ActorContext | None = None,
    grid: SceneGridContext | None = None,
) -> RangeResult:
    """Compute the effective range of an ability.

    Args:
        ability: The ability being used.
        variant: Optional activation variant being used.
        actor: Optional acting actor; modifiers apply only when given.
        grid: Scene grid; defaults to a 5 ft square grid.

    Returns:
        The resolved range. An ability without any range declaration yields
        an empty result (no range restriction).
    """
    if ability is None:
        return RangeResult()

    config = select_range(ability, variant)
    if config is None:
        return RangeResult()

    grid = grid or SceneGridContext()
    units = config.units or DEFAULT_RANGE_UNITS

    if units == SELF_RANGE_UNITS:
        return RangeResult(range=0.0, units=units, is_self=True)

    if units == TOUCH_RANGE_UNITS:
        return _touch_range(config, ability, grid)

    if units in UNLIMITED_RANGE_UNITS:
        return RangeResult(units=units, is_unlimited=True)

    range_value = config.base_value
    long_range = config.long_value

    canonical = normalize_units(units)
    if canonical == RangeUnits.MILES:
        range_value *= FEET_PER_MILE
        long_range *= FEET_PER_MILE
        units = RangeUnits.FEET.value
    elif canonical == RangeUnits.KILOMETERS:
        range_value *= METERS_PER_KILOMETER
        long_range *= METERS_PER_KILOMETER
        units = RangeUnits.METERS.value

    if actor is not None:
        range_value, long_range = apply_actor_modifiers(
            range_value,
            long_range,
            _action_type(ability, variant),
            actor,
        )

    native_range = convert(range_value, units, grid.units)
    native_long = convert(long_range, units, grid.units)

    result = RangeResult(
        range=native_range / grid.distance,
        long_range=native_long / grid.distance,
        range_in_native_units=native_range,
        long_range_in_native_units=native_long,
        units=grid.units,
    )
    logger.debug(
        "Range resolved",
        ability=ability.name,
        squares=result.range,
        long_squares=result.long_range,
        units=result.units,
    )
    return result


calculate_range = resolve_range


__all__ = [
    "select_range",
    "apply_actor_modifiers",
    "resolve_range",
    "calculate_range",
]
