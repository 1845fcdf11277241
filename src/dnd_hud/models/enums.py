"""Enumeration types for the D&D 5E HUD rules library.

These enums name the closed vocabularies of the dnd5e data model that the
targeting and inventory rules branch on. Descriptor fields keep raw strings
(third-party records may carry values outside these sets), and rules compare
against enum members, which are ``str``/``int`` subclasses.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class RangeUnits(StrEnum):
    """Range units an ability descriptor may declare."""

    FEET = "ft"
    MILES = "mi"
    METERS = "m"
    KILOMETERS = "km"
    SELF = "self"
    TOUCH = "touch"
    SPECIAL = "spec"
    UNLIMITED = "any"


class TargetType(StrEnum):
    """Who an ability may affect."""

    SELF = "self"
    NONE = "none"
    OTHER = "other"
    ENEMY = "enemy"
    ALLY = "ally"
    WILLING = "willing"
    CREATURE = "creature"
    ANY = "any"


class TemplateShape(StrEnum):
    """Area-of-effect template geometries."""

    CONE = "cone"
    CUBE = "cube"
    CYLINDER = "cylinder"
    LINE = "line"
    RADIUS = "radius"
    SPHERE = "sphere"


class ActionType(StrEnum):
    """dnd5e action categories."""

    ATTACK = "attack"
    MELEE_WEAPON_ATTACK = "mwak"
    RANGED_WEAPON_ATTACK = "rwak"
    MELEE_SPELL_ATTACK = "msak"
    RANGED_SPELL_ATTACK = "rsak"
    SAVE = "save"
    HEAL = "heal"
    UTILITY = "util"
    OTHER = "other"


class Disposition(IntEnum):
    """Token disposition values as stored on placed tokens."""

    SECRET = -2
    HOSTILE = -1
    NEUTRAL = 0
    FRIENDLY = 1


class AbilityKind(StrEnum):
    """Tagged variant of an ability derived from its range units."""

    SELF = "self"
    TOUCH = "touch"
    RANGED = "ranged"
    UNLIMITED = "unlimited"


class ReasonCode(StrEnum):
    """Reasons a candidate target is rejected."""

    INVALID_TARGET = "invalid_target"
    NO_ACTOR = "no_actor"
    NOT_VISIBLE = "not_visible"
    SELF_ONLY = "self_only"
    CANNOT_TARGET_SELF = "cannot_target_self"
    MUST_BE_ENEMY = "must_be_enemy"
    MUST_BE_ALLY = "must_be_ally"
    MUST_BE_CREATURE = "must_be_creature"

    @property
    def message_key(self) -> str:
        """Get the HUD localization key for this reason.

        Returns:
            Localization key the host UI resolves into a message.
        """
        if self is ReasonCode.INVALID_TARGET:
            return "bg3-hud-core.TargetSelector.InvalidTarget"
        suffix = "".join(part.capitalize() for part in self.value.split("_"))
        if self is ReasonCode.NOT_VISIBLE:
            suffix = "TokenNotVisible"
        return f"BG3.TargetSelector.{suffix}"


class ItemCategory(StrEnum):
    """Item document types known to the hotbar sort order."""

    WEAPON = "weapon"
    FEATURE = "feat"
    EQUIPMENT = "equipment"
    SPELL = "spell"
    CONSUMABLE = "consumable"
    TOOL = "tool"
    LOOT = "loot"


class ActorKind(StrEnum):
    """Owner kind used for independently configurable spell filtering."""

    PLAYER = "character"
    NPC = "npc"


class SpellMethod(StrEnum):
    """Spellcasting methods (preparation modes)."""

    PREPARED = "prepared"
    SPELL = "spell"
    ALWAYS = "always"
    ATWILL = "atwill"
    INNATE = "innate"
    PACT = "pact"
    RITUAL = "ritual"
    APOTHECARY = "apothecary"


__all__ = [
    "RangeUnits",
    "TargetType",
    "TemplateShape",
    "ActionType",
    "Disposition",
    "AbilityKind",
    "ReasonCode",
    "ItemCategory",
    "ActorKind",
    "SpellMethod",
]
