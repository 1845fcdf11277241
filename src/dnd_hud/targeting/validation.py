"""Target legality checks.

Checks run in a fixed order and stop at the first failure, so the reported
reason is always the most fundamental one. Range is deliberately not checked
here: out-of-range attempts are allowed (usually at disadvantage), and the
target info projector reports range as an advisory flag instead.
"""

from __future__ import annotations

from dnd_hud.core.constants import NON_CREATURE_TYPES
from dnd_hud.core.logging import get_logger
from dnd_hud.models.descriptors import TokenRef
from dnd_hud.models.enums import Disposition, ReasonCode, TargetType
from dnd_hud.models.results import TargetRequirements, ValidationResult


logger = get_logger(__name__)


def is_enemy(source: TokenRef | None, candidate: TokenRef | None) -> bool:
    """Check whether a candidate is an enemy of the source.

    Friendly sources oppose hostile tokens and hostile sources oppose
    friendly ones; any other source treats hostile tokens as enemies.

    Args:
        source: Acting token.
        candidate: Candidate target.

    Returns:
        True if the dispositions are opposed.
    """
    if source is None or candidate is None:
        return False

    if source.disposition == Disposition.FRIENDLY:
        return candidate.disposition == Disposition.HOSTILE
    if source.disposition == Disposition.HOSTILE:
        return candidate.disposition == Disposition.FRIENDLY
    return candidate.disposition == Disposition.HOSTILE


def is_ally(source: TokenRef | None, candidate: TokenRef | None) -> bool:
    """Check whether a candidate is an ally of the source.

    Args:
        source: Acting token.
        candidate: Candidate target.

    Returns:
        True for the same token or a matching disposition.
    """
    if source is None or candidate is None:
        return False
    if source.is_same(candidate):
        return True
    return source.disposition == candidate.disposition


def is_creature(candidate: TokenRef) -> bool:
    """Check whether a candidate's actor has a creature classification."""
    creature_type = candidate.actor.creature_type if candidate.actor else None
    return bool(creature_type) and creature_type not in NON_CREATURE_TYPES


def _check_target_type(
    source: TokenRef | None,
    candidate: TokenRef,
    target_type: str,
) -> ReasonCode | None:
    if target_type == TargetType.SELF:
        if not candidate.is_same(source):
            return ReasonCode.SELF_ONLY
    elif target_type in (TargetType.OTHER, TargetType.ENEMY):
        if candidate.is_same(source):
            return ReasonCode.CANNOT_TARGET_SELF
        if target_type == TargetType.ENEMY and not is_enemy(source, candidate):
            return ReasonCode.MUST_BE_ENEMY
    elif target_type in (TargetType.ALLY, TargetType.WILLING):
        if not is_ally(source, candidate):
            return ReasonCode.MUST_BE_ALLY
    elif target_type == TargetType.CREATURE:
        if not is_creature(candidate):
            return ReasonCode.MUST_BE_CREATURE
    return None


def is_valid_target(
    source: TokenRef | None,
    candidate: TokenRef | None,
    requirements: TargetRequirements | str | None,
) -> ValidationResult:
    """Decide whether a candidate token may be selected.

    Args:
        source: Acting token.
        candidate: Candidate target token.
        requirements: Extracted requirements, or a bare target type.

    Returns:
        ``valid=True``, or ``valid=False`` with the first failing reason.
    """
    if candidate is None:
        return ValidationResult.reject(ReasonCode.INVALID_TARGET)

    if candidate.actor is None:
        return ValidationResult.reject(ReasonCode.NO_ACTOR)

    if not candidate.visible or candidate.hidden:
        return ValidationResult.reject(ReasonCode.NOT_VISIBLE)

    if isinstance(requirements, TargetRequirements):
        target_type = requirements.target_type
    else:
        target_type = requirements or TargetType.ANY.value

    reason = _check_target_type(source, candidate, target_type)
    if reason is not None:
        logger.debug(
            "Target rejected",
            candidate=candidate.name,
            target_type=target_type,
            reason=reason.value,
        )
        return ValidationResult.reject(reason)

    return ValidationResult.ok()


__all__ = [
    "is_enemy",
    "is_ally",
    "is_creature",
    "is_valid_target",
]
