"""Auto-population of hotbar grids from an actor's inventory.

The host calls these when a token is created (or the player asks for a
refill): each configured grid receives the owned items matching its
selection keys, filtered to usable entries and sorted into hotbar order.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from dnd_hud.core.config import AutoPopulateSettings
from dnd_hud.core.constants import AUTO_POPULATE_GRIDS
from dnd_hud.core.logging import get_logger
from dnd_hud.inventory.classification import is_usable, matches_selected_types
from dnd_hud.inventory.sorting import sort_items
from dnd_hud.models.enums import ActorKind, ItemCategory
from dnd_hud.models.items import ItemRecord


logger = get_logger(__name__)


class ItemTypeChoice(BaseModel):
    """One selectable item type."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class ItemTypeChoiceGroup(BaseModel):
    """A labelled group of selectable item types."""

    model_config = ConfigDict(frozen=True)

    group: str
    choices: tuple[ItemTypeChoice, ...]


_CHOICES: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "Combat",
        (
            ("weapon", "Weapons"),
            ("feat", "Features & Actions"),
            ("spell", "Spells"),
        ),
    ),
    (
        "Consumables",
        (
            ("consumable:ammo", "Ammunition"),
            ("consumable:potion", "Potions"),
            ("consumable:poison", "Poisons"),
            ("consumable:scroll", "Scrolls"),
            ("consumable:food", "Food & Drink"),
        ),
    ),
    (
        "Wondrous",
        (
            ("equipment", "Equipment"),
            ("consumable:wand", "Wands"),
            ("consumable:rod", "Rods"),
            ("consumable:trinket", "Trinkets"),
        ),
    ),
    (
        "Other",
        (
            ("tool", "Tools"),
            ("loot", "Loot"),
        ),
    ),
)


def get_item_type_choices() -> list[ItemTypeChoiceGroup]:
    """Selection keys offered by the grid configuration dialog.

    Returns:
        Grouped choices, in display order.
    """
    return [
        ItemTypeChoiceGroup(
            group=group,
            choices=tuple(ItemTypeChoice(value=value, label=label) for value, label in choices),
        )
        for group, choices in _CHOICES
    ]


def has_activities(item: ItemRecord) -> bool:
    """Check whether an item can be activated from the hotbar.

    Args:
        item: Item to check.

    Returns:
        True when it declares activities, else a legacy activation type
        other than ``none``, else when it is a weapon or equipment.
    """
    if item.activities:
        return True
    activation = item.activation_type
    if activation and activation != "none":
        return True
    return item.type in (ItemCategory.WEAPON, ItemCategory.EQUIPMENT)


def get_matching_items(
    items: Iterable[ItemRecord],
    selected_types: Iterable[str],
    actor_kind: ActorKind | str,
    settings: AutoPopulateSettings,
) -> list[ItemRecord]:
    """Select and order the items for one grid.

    Args:
        items: Items owned by the actor.
        selected_types: Selection keys configured for the grid.
        actor_kind: Kind of the owning actor.
        settings: Auto-populate settings.

    Returns:
        Matching, usable, activatable items in hotbar order.
    """
    keys = list(selected_types)
    matched = [
        item
        for item in items
        if matches_selected_types(item, keys)
        and is_usable(item, actor_kind, settings)
        and has_activities(item)
    ]
    return sort_items(matched)


def populate_grids(
    items: Iterable[ItemRecord],
    actor_kind: ActorKind | str,
    settings: AutoPopulateSettings,
) -> dict[str, list[str]]:
    """Fill every configured grid.

    An item lands in the first grid whose selection matches it. Every grid
    stays empty while auto-population is disabled.

    Args:
        items: Items owned by the actor.
        actor_kind: Kind of the owning actor.
        settings: Auto-populate settings, including the grid configuration.

    Returns:
        Item ids per grid name.
    """
    if not settings.enabled:
        logger.debug("Auto-populate disabled")
        return {grid_name: [] for grid_name in AUTO_POPULATE_GRIDS}

    remaining = list(items)
    grids: dict[str, list[str]] = {}
    for grid_name in AUTO_POPULATE_GRIDS:
        selected = settings.grids.get(grid_name, [])
        matched = get_matching_items(remaining, selected, actor_kind, settings) if selected else []
        grids[grid_name] = [item.id for item in matched]
        placed = {item.id for item in matched}
        remaining = [item for item in remaining if item.id not in placed]
    logger.debug(
        "Grids populated",
        counts={name: len(ids) for name, ids in grids.items()},
    )
    return grids


def get_passive_features(
    items: Iterable[ItemRecord],
    settings: AutoPopulateSettings,
) -> list[str]:
    """Feats that cannot be activated, for the passives container.

    Args:
        items: Items owned by the actor.
        settings: Auto-populate settings.

    Returns:
        Item ids in alphabetical order; empty when passives population is
        off.
    """
    if not settings.passives_enabled:
        return []
    passives = [
        item
        for item in items
        if item.type == ItemCategory.FEATURE
        and not item.activities
        and item.activation_type in (None, "none")
    ]
    passives.sort(key=lambda item: item.name.casefold())
    return [item.id for item in passives]


__all__ = [
    "ItemTypeChoice",
    "ItemTypeChoiceGroup",
    "get_item_type_choices",
    "has_activities",
    "get_matching_items",
    "populate_grids",
    "get_passive_features",
]
