"""dnd_hud - D&D 5E rules for a generic combat HUD.

Teaches a system-agnostic hotbar/HUD how to read D&D 5E abilities: whether an
ability needs targets, how far it reaches in grid squares, which tokens are
legal targets, and how to fill and order hotbar grids from an inventory.

Example:
    >>> from dnd_hud import AbilityDescriptor, SceneGridContext, get_target_requirements
    >>> ray = AbilityDescriptor.model_validate(
    ...     {"name": "Ray of Frost", "type": "spell", "actionType": "rsak",
    ...      "range": {"value": 60, "units": "ft"}, "target": {"type": "creature"}}
    ... )
    >>> get_target_requirements(ray, grid=SceneGridContext(distance=5)).range
    12.0

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 descriptors and results.
    targeting: Range resolution, targeting requirements, legality, info.
    inventory: Item classification, usability, sorting, auto-population.
"""

from __future__ import annotations

# Core
from dnd_hud.core.config import Settings, get_settings
from dnd_hud.core.exceptions import DndHudError
from dnd_hud.core.logging import configure_logging, get_logger

# Models
from dnd_hud.models import (
    AbilityDescriptor,
    ActivationVariant,
    ActorContext,
    ActorKind,
    Disposition,
    ItemRecord,
    Position,
    RangeResult,
    ReasonCode,
    SceneGridContext,
    TargetInfo,
    TargetRequirements,
    TokenRef,
    ValidationResult,
)

# Targeting
from dnd_hud.targeting import (
    calculate_range,
    convert,
    get_target_info,
    get_target_requirements,
    is_valid_target,
    needs_targeting,
    resolve_range,
)

# Inventory
from dnd_hud.inventory import (
    get_matching_items,
    is_usable,
    matches_selected_types,
    populate_grids,
    sort_items,
)


__version__ = "0.1.0"

__all__ = [
    # Core
    "Settings",
    "get_settings",
    "DndHudError",
    "configure_logging",
    "get_logger",
    # Models
    "AbilityDescriptor",
    "ActivationVariant",
    "ActorContext",
    "ActorKind",
    "Disposition",
    "ItemRecord",
    "Position",
    "RangeResult",
    "ReasonCode",
    "SceneGridContext",
    "TargetInfo",
    "TargetRequirements",
    "TokenRef",
    "ValidationResult",
    # Targeting
    "convert",
    "resolve_range",
    "calculate_range",
    "needs_targeting",
    "get_target_requirements",
    "is_valid_target",
    "get_target_info",
    # Inventory
    "matches_selected_types",
    "is_usable",
    "sort_items",
    "get_matching_items",
    "populate_grids",
]
