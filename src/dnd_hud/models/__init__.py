"""Pydantic V2 schemas for the D&D 5E HUD rules library.

Submodules:
    enums: Closed vocabularies (range units, target types, reason codes...).
    descriptors: Ability, actor, token and scene grid inputs.
    results: Range, requirement, validation and target info outputs.
    items: Item records and selection keys for auto-population.

Example:
    >>> from dnd_hud.models import AbilityDescriptor, TokenRef
    >>> bow = AbilityDescriptor.model_validate(
    ...     {"name": "Longbow", "type": "weapon", "actionType": "rwak",
    ...      "range": {"value": 150, "long": 600, "units": "ft"}}
    ... )
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from dnd_hud.models.enums import (
    AbilityKind,
    ActionType,
    ActorKind,
    Disposition,
    ItemCategory,
    RangeUnits,
    ReasonCode,
    SpellMethod,
    TargetType,
    TemplateShape,
)

# =============================================================================
# Descriptors
# =============================================================================
from dnd_hud.models.descriptors import (
    AbilityDescriptor,
    ActivationVariant,
    ActorContext,
    AffectsDescriptor,
    Position,
    RangeDescriptor,
    SceneGridContext,
    TargetDescriptor,
    TemplateDescriptor,
    TokenRef,
)

# =============================================================================
# Results
# =============================================================================
from dnd_hud.models.results import (
    RangeResult,
    TargetInfo,
    TargetRequirements,
    ValidationResult,
)

# =============================================================================
# Items
# =============================================================================
from dnd_hud.models.items import (
    ItemRecord,
    TypeKey,
    parse_type_key,
    read_first,
    read_path,
)


__all__ = [
    # === Enumerations ===
    "AbilityKind",
    "ActionType",
    "ActorKind",
    "Disposition",
    "ItemCategory",
    "RangeUnits",
    "ReasonCode",
    "SpellMethod",
    "TargetType",
    "TemplateShape",
    # === Descriptors ===
    "AbilityDescriptor",
    "ActivationVariant",
    "ActorContext",
    "AffectsDescriptor",
    "Position",
    "RangeDescriptor",
    "SceneGridContext",
    "TargetDescriptor",
    "TemplateDescriptor",
    "TokenRef",
    # === Results ===
    "RangeResult",
    "TargetInfo",
    "TargetRequirements",
    "ValidationResult",
    # === Items ===
    "ItemRecord",
    "TypeKey",
    "parse_type_key",
    "read_first",
    "read_path",
]
