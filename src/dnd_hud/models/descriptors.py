"""Pydantic V2 descriptors consumed by the targeting rules.

Ability descriptors are read-only views of third-party item data, so their
validation is lenient: unknown keys are ignored and malformed numbers become
None instead of failing. Actor, token and grid descriptors are supplied
explicitly by the caller on every call.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Annotated, Any
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from dnd_hud.core.constants import (
    DEFAULT_GRID_DISTANCE,
    DEFAULT_GRID_SIZE,
    DEFAULT_GRID_UNITS,
    SELF_RANGE_UNITS,
    TOUCH_RANGE_UNITS,
    UNLIMITED_RANGE_UNITS,
)
from dnd_hud.models.enums import AbilityKind, ActorKind, Disposition


if TYPE_CHECKING:
    from dnd_hud.core.config import Settings
    from dnd_hud.models.items import ItemRecord


# =============================================================================
# Lenient Field Types
# =============================================================================


def _coerce_number(value: Any) -> float | None:
    """Coerce a loosely typed numeric field, mapping garbage to None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _coerce_count(value: Any) -> int | None:
    number = _coerce_number(value)
    return None if number is None else int(number)


def _coerce_tag(value: Any) -> str | None:
    """Coerce a string tag, mapping empty and non-string values to None."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


LenientFloat = Annotated[float | None, BeforeValidator(_coerce_number)]
LenientInt = Annotated[int | None, BeforeValidator(_coerce_count)]
Tag = Annotated[str | None, BeforeValidator(_coerce_tag)]


_DESCRIPTOR_CONFIG = ConfigDict(frozen=True, extra="ignore")


# =============================================================================
# Ability Descriptors
# =============================================================================


class RangeDescriptor(BaseModel):
    """Declared range of an ability or activation variant.

    Attributes:
        value: Normal range (current data model).
        normal: Normal range (legacy weapon data model).
        long: Long range, if any.
        reach: Reach bonus for touch abilities, in native units.
        units: Native range units (``ft``, ``mi``, ``self``, ``touch``...).
    """

    model_config = _DESCRIPTOR_CONFIG

    value: LenientFloat = None
    normal: LenientFloat = None
    long: LenientFloat = None
    reach: LenientFloat = None
    units: Tag = None

    @property
    def base_value(self) -> float:
        """Normal range with the ``value`` -> ``normal`` -> 0 fallback."""
        return self.value or self.normal or 0.0

    @property
    def long_value(self) -> float:
        """Long range, 0 when absent."""
        return self.long or 0.0


class TemplateDescriptor(BaseModel):
    """Area-of-effect template attached to a target declaration."""

    model_config = _DESCRIPTOR_CONFIG

    type: Tag = None
    size: LenientFloat = None
    width: LenientFloat = None
    units: Tag = None


class AffectsDescriptor(BaseModel):
    """Target affects block of the activity data model."""

    model_config = _DESCRIPTOR_CONFIG

    type: Tag = None
    count: LenientInt = None
    special: Tag = None


class TargetDescriptor(BaseModel):
    """Declared targets of an ability or activation variant.

    Attributes:
        type: Legacy target type.
        value: Legacy target count.
        affects: Activity-model target block (type, count, special).
        template: Area template, if any.
    """

    model_config = _DESCRIPTOR_CONFIG

    type: Tag = None
    value: LenientInt = None
    affects: AffectsDescriptor | None = None
    template: TemplateDescriptor | None = None

    @property
    def effective_type(self) -> str | None:
        """Target type, preferring the activity-model ``affects`` block."""
        if self.affects and self.affects.type:
            return self.affects.type
        return self.type

    @property
    def template_shape(self) -> str | None:
        """Template shape tag, if a template is declared."""
        return self.template.type if self.template else None


class ActivationVariant(BaseModel):
    """One usable mode of an ability, with its own range and targets."""

    model_config = _DESCRIPTOR_CONFIG

    id: str | None = None
    name: str = ""
    action_type: Tag = Field(
        default=None,
        validation_alias=AliasChoices("action_type", "actionType"),
    )
    range: RangeDescriptor | None = None
    target: TargetDescriptor | None = None


def _kind_for_units(units: str | None) -> AbilityKind:
    if units == SELF_RANGE_UNITS:
        return AbilityKind.SELF
    if units == TOUCH_RANGE_UNITS:
        return AbilityKind.TOUCH
    if units in UNLIMITED_RANGE_UNITS:
        return AbilityKind.UNLIMITED
    return AbilityKind.RANGED


class AbilityDescriptor(BaseModel):
    """Read-only view of a usable game entity (spell, weapon, feature).

    Attributes:
        id: Item identifier.
        name: Display name.
        type: Item category (``spell``, ``weapon``, ``feat``...).
        action_type: Action category (``rwak``, ``save``...).
        range: Declared range.
        target: Declared targets.
        activities: Activation variants, in declaration order.

    Example:
        >>> bolt = AbilityDescriptor.model_validate({
        ...     "name": "Fire Bolt",
        ...     "type": "spell",
        ...     "actionType": "rsak",
        ...     "range": {"value": 120, "units": "ft"},
        ...     "target": {"affects": {"type": "creature", "count": 1}},
        ... })
        >>> bolt.kind
        <AbilityKind.RANGED: 'ranged'>
    """

    model_config = _DESCRIPTOR_CONFIG

    id: str | None = None
    name: str = ""
    type: str = ""
    action_type: Tag = Field(
        default=None,
        validation_alias=AliasChoices("action_type", "actionType"),
    )
    range: RangeDescriptor | None = None
    target: TargetDescriptor | None = None
    activities: list[ActivationVariant] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("activities", mode="before")
    @classmethod
    def coerce_activities(cls, value: Any) -> list[Any]:
        """Accept activities as a list or as an id -> activity mapping.

        Any other value, strings included, yields no activities.
        """
        if value is None:
            return []
        if isinstance(value, Mapping):
            return [
                {"id": key, **activity} if isinstance(activity, Mapping) else activity
                for key, activity in value.items()
            ]
        if isinstance(value, list | tuple):
            return list(value)
        return []

    @property
    def kind(self) -> AbilityKind:
        """Tagged variant derived from the declared range units."""
        return _kind_for_units(self.range.units if self.range else None)

    @classmethod
    def from_item(cls, item: ItemRecord) -> AbilityDescriptor:
        """Build a descriptor from an owned item's raw system data.

        Args:
            item: The item record.

        Returns:
            The ability descriptor for the item.
        """
        data = {key: value for key, value in item.system.items() if key != "type"}
        data.update(id=item.id, name=item.name, type=item.type)
        return cls.model_validate(data)


# =============================================================================
# Actors, Tokens, and Grid
# =============================================================================


class ActorContext(BaseModel):
    """Actor data the rules consult: capabilities, creature type, statuses.

    Attributes:
        id: Actor identifier.
        name: Display name.
        kind: Player character or NPC.
        creature_type: Creature classification (``humanoid``, ``object``...).
        flags: Named boolean capabilities (``sharpShooter``...).
        statuses: Active status tags.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str = ""
    kind: ActorKind = ActorKind.NPC
    creature_type: Tag = None
    flags: dict[str, bool] = Field(default_factory=dict)
    statuses: frozenset[str] = Field(default_factory=frozenset)

    def has_capability(self, name: str) -> bool:
        """Check whether a named capability flag is set.

        Args:
            name: Flag name.

        Returns:
            True if the flag is present and truthy.
        """
        return bool(self.flags.get(name, False))


class Position(BaseModel):
    """Pixel coordinates on the scene canvas."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    x: float = 0.0
    y: float = 0.0


class TokenRef(BaseModel):
    """A placed creature instance.

    Two references denote the same token when their ids match.

    Attributes:
        id: Token identifier.
        name: Display name.
        image: Token image path.
        center: Token center in pixels.
        visible: Whether the viewer can currently see the token.
        hidden: Whether the token is explicitly hidden.
        disposition: Raw disposition value (see ``Disposition``).
        actor: The token's actor, or None for bare objects.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str = ""
    image: str | None = None
    center: Position = Field(default_factory=Position)
    visible: bool = True
    hidden: bool = False
    disposition: int = Disposition.NEUTRAL
    actor: ActorContext | None = None

    def is_same(self, other: TokenRef | None) -> bool:
        """Check token identity.

        Args:
            other: Another token reference.

        Returns:
            True if both references denote the same token.
        """
        return other is not None and (other is self or other.id == self.id)


class SceneGridContext(BaseModel):
    """Scene grid configuration read at resolution time.

    Attributes:
        distance: Distance covered by one square, in ``units``.
        units: Grid distance units.
        size: Square size in pixels.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    distance: float = Field(default=DEFAULT_GRID_DISTANCE, gt=0)
    units: str = DEFAULT_GRID_UNITS
    size: float = Field(default=DEFAULT_GRID_SIZE, gt=0)

    @classmethod
    def from_settings(cls, settings: Settings) -> SceneGridContext:
        """Build the fallback grid from library settings.

        Args:
            settings: Loaded library settings.

        Returns:
            Grid context mirroring ``settings.grid``.
        """
        return cls(
            distance=settings.grid.distance,
            units=settings.grid.units,
            size=settings.grid.size,
        )


__all__ = [
    "RangeDescriptor",
    "TemplateDescriptor",
    "AffectsDescriptor",
    "TargetDescriptor",
    "ActivationVariant",
    "AbilityDescriptor",
    "ActorContext",
    "Position",
    "TokenRef",
    "SceneGridContext",
]
