"""Targeting requirement extraction.

Decides whether using an ability should open target selection at all, and
what the selection is constrained to. Area abilities are excluded: their
templates are placed by a separate tool, not by picking tokens.
"""

from __future__ import annotations

import math

from dnd_hud.core.constants import (
    ATTACK_ACTION_TYPES,
    NO_TARGET_TYPES,
    SELF_RANGE_UNITS,
)
from dnd_hud.core.logging import get_logger
from dnd_hud.models.descriptors import (
    AbilityDescriptor,
    ActivationVariant,
    ActorContext,
    RangeDescriptor,
    SceneGridContext,
    TargetDescriptor,
)
from dnd_hud.models.enums import ActionType, ItemCategory, TargetType, TemplateShape
from dnd_hud.models.results import TargetRequirements
from dnd_hud.targeting.range import resolve_range


logger = get_logger(__name__)

_AREA_SHAPES = frozenset(TemplateShape)


def _has_area_template(target: TargetDescriptor | None) -> bool:
    return target is not None and target.template_shape in _AREA_SHAPES


def _has_positive_range(range_config: RangeDescriptor | None) -> bool:
    return (
        range_config is not None
        and range_config.base_value > 0
        and range_config.units != SELF_RANGE_UNITS
    )


def is_area_ability(ability: AbilityDescriptor) -> bool:
    """Check whether the ability places an area template.

    Args:
        ability: The ability.

    Returns:
        True if the ability or any of its variants declares a template
        shape resolved by area placement.
    """
    if _has_area_template(ability.target):
        return True
    return any(_has_area_template(variant.target) for variant in ability.activities)


def variant_needs_targeting(variant: ActivationVariant) -> bool:
    """Check whether one activation variant asks for targets.

    Args:
        variant: The activation variant.

    Returns:
        True for a positive numeric range in non-self units, or for declared
        target information other than self/none. Variants carrying any
        template are never targeted.
    """
    target = variant.target
    if target is not None and target.template_shape:
        return False

    if _has_positive_range(variant.range):
        return True

    if target is None:
        return False
    target_type = target.effective_type
    if target_type in NO_TARGET_TYPES:
        return False
    return bool(target_type) or (target.affects is not None and target.affects.count is not None)


def needs_targeting(
    ability: AbilityDescriptor | None,
    variant: ActivationVariant | None = None,
) -> bool:
    """Decide whether using an ability requires picking targets.

    The first matching rule wins:

    1. An explicit self/none target type never targets.
    2. Area templates are placed, not targeted.
    3. Any other declared target type targets.
    4. With activation variants, targeting is required iff some variant
       needs it.
    5. Attack rolls target.
    6. Saving throws target unless self-only.
    7. Spells with a target type or a positive non-self range target.

    Args:
        ability: The ability being used.
        variant: Optional activation variant being used. The decision
            always covers the ability as a whole, every variant included.

    Returns:
        True if the caller should run target selection.
    """
    if ability is None:
        return False

    target_type = ability.target.effective_type if ability.target else None
    if target_type in NO_TARGET_TYPES:
        return False

    variants = ability.activities

    if is_area_ability(ability):
        return False

    if target_type:
        return True

    if variants:
        result = any(variant_needs_targeting(candidate) for candidate in variants)
        logger.debug("Targeting decided by variants", ability=ability.name, needs_targeting=result)
        return result

    action_type = ability.action_type
    if action_type in ATTACK_ACTION_TYPES:
        return True

    if action_type == ActionType.SAVE and target_type != TargetType.SELF:
        return True

    if ability.type == ItemCategory.SPELL and _has_positive_range(ability.range):
        return True

    return False


def get_target_requirements(
    ability: AbilityDescriptor | None,
    variant: ActivationVariant | None = None,
    actor: ActorContext | None = None,
    grid: SceneGridContext | None = None,
) -> TargetRequirements:
    """Extract targeting constraints for an ability.

    Args:
        ability: The ability being used.
        variant: Optional activation variant; its target declaration takes
            precedence over the ability's.
        actor: Optional acting actor, for range modifiers.
        grid: Scene grid for range resolution.

    Returns:
        The target requirements. Missing declarations fall back to one
        target of any type.
    """
    if ability is None:
        return TargetRequirements()

    target = variant.target if variant is not None and variant.target else ability.target

    target_type = TargetType.ANY.value
    min_targets = 1
    max_targets: int | float = 1
    template = None

    if target is not None:
        target_type = target.effective_type or TargetType.ANY.value

        affects = target.affects
        count = (affects.count if affects else None) or target.value or 1
        min_targets = max(1, count)
        max_targets = min_targets
        if affects is not None and (affects.type == TargetType.ANY or affects.special):
            max_targets = math.inf

        if target.template is not None and target.template.type:
            template = target.template.model_dump(exclude_none=True)

    range_result = resolve_range(ability, variant, actor, grid)

    requirements = TargetRequirements(
        min_targets=min_targets,
        max_targets=max_targets,
        target_type=target_type,
        range=range_result.range,
        long_range=range_result.long_range,
        has_template=template is not None,
        template=template,
    )
    logger.debug(
        "Target requirements extracted",
        ability=ability.name,
        target_type=requirements.target_type,
        max_targets=requirements.max_targets,
        range=requirements.range,
    )
    return requirements


__all__ = [
    "is_area_ability",
    "variant_needs_targeting",
    "needs_targeting",
    "get_target_requirements",
]
