"""Display facts for a candidate target.

Nothing here blocks an action: range flags are advisory and the caller
decides how to present them.
"""

from __future__ import annotations

import math

from dnd_hud.core.constants import INCAPACITATING_STATUSES
from dnd_hud.models.descriptors import (
    AbilityDescriptor,
    ActivationVariant,
    SceneGridContext,
    TokenRef,
)
from dnd_hud.models.enums import Disposition
from dnd_hud.models.results import TargetInfo
from dnd_hud.targeting.range import resolve_range


_DISPOSITION_LABELS = {
    Disposition.HOSTILE: "hostile",
    Disposition.NEUTRAL: "neutral",
    Disposition.FRIENDLY: "friendly",
}


def disposition_label(token: TokenRef | None) -> str:
    """Label a token's disposition.

    Args:
        token: Token to label.

    Returns:
        ``hostile``, ``neutral``, ``friendly`` or ``unknown``.
    """
    if token is None:
        return "unknown"
    return _DISPOSITION_LABELS.get(token.disposition, "unknown")


def distance_in_squares(source: TokenRef, target: TokenRef, grid: SceneGridContext) -> float:
    """Straight-line center-to-center distance in grid squares."""
    dx = target.center.x - source.center.x
    dy = target.center.y - source.center.y
    return math.hypot(dx, dy) / grid.size


def incapacitating_statuses(token: TokenRef) -> tuple[str, ...]:
    """Incapacitating status tags on a token, in display order."""
    if token.actor is None:
        return ()
    return tuple(status for status in INCAPACITATING_STATUSES if status in token.actor.statuses)


def get_target_info(
    source: TokenRef | None,
    target: TokenRef | None,
    ability: AbilityDescriptor | None,
    variant: ActivationVariant | None = None,
    grid: SceneGridContext | None = None,
) -> TargetInfo:
    """Compute display facts about a candidate target.

    Args:
        source: Acting token; its actor supplies range modifiers.
        target: Candidate target token.
        ability: The ability being used.
        variant: Optional activation variant being used.
        grid: Scene grid; defaults to a 5 ft, 100 px square grid.

    Returns:
        Target info. Without both tokens only the name, image and
        disposition are filled in.
    """
    defaults = {
        "disposition": disposition_label(target),
    }
    if target is not None:
        if target.name:
            defaults["name"] = target.name
        if target.image:
            defaults["image"] = target.image

    if source is None or target is None:
        return TargetInfo(**defaults)

    grid = grid or SceneGridContext()
    squares = distance_in_squares(source, target, grid)

    range_result = resolve_range(ability, variant, source.actor, grid)
    in_range = not (range_result.range and squares > range_result.range)
    in_long_range = not (range_result.long_range and squares > range_result.long_range)

    return TargetInfo(
        **defaults,
        distance=squares * grid.distance,
        in_range=in_range,
        in_long_range=in_long_range,
        status_effects=incapacitating_statuses(target),
    )


__all__ = [
    "disposition_label",
    "distance_in_squares",
    "incapacitating_statuses",
    "get_target_info",
]
