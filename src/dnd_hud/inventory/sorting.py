"""Hotbar sort order for items.

Priority: weapon > feat > equipment > spell > consumable > tool > loot, then
any other category. Spells sort by level, feats by feature type, and every
category falls back to a case-insensitive name. ``list.sort`` is stable, so
items with equal keys keep their input order.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from dnd_hud.core.constants import CATEGORY_SORT_ORDER, UNKNOWN_SPELL_LEVEL
from dnd_hud.models.enums import ItemCategory
from dnd_hud.models.items import ItemRecord


class SortData(BaseModel):
    """Per-item values the sort reads.

    Attributes:
        name: Item name.
        spell_level: Spell level for spells, 99 otherwise.
        feature_type: Feature subtype for feats, empty otherwise.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = ""
    spell_level: int = UNKNOWN_SPELL_LEVEL
    feature_type: str = ""


def build_sort_data(item: ItemRecord) -> SortData:
    """Extract sort data from an item record.

    Args:
        item: Item to enrich.

    Returns:
        The item's sort data.
    """
    return SortData(
        name=item.name,
        spell_level=item.spell_level if item.type == ItemCategory.SPELL else UNKNOWN_SPELL_LEVEL,
        feature_type=(item.subtype() or "") if item.type == ItemCategory.FEATURE else "",
    )


def category_priority(category: str) -> int:
    """Position of a category in the sort order; unknown categories sort last."""
    try:
        return CATEGORY_SORT_ORDER.index(category)
    except ValueError:
        return len(CATEGORY_SORT_ORDER)


def sort_key(item: ItemRecord) -> tuple[int, int, str, str]:
    """Total sort key for an item.

    Args:
        item: Item to key.

    Returns:
        ``(category priority, spell level, feature type, folded name)``; the
        middle fields are constant outside spells and feats.
    """
    data = build_sort_data(item)
    level = data.spell_level if item.type == ItemCategory.SPELL else 0
    return (category_priority(item.type), level, data.feature_type, data.name.casefold())


def sort_items(items: list[ItemRecord]) -> list[ItemRecord]:
    """Sort items in place into hotbar order.

    Args:
        items: Items to sort.

    Returns:
        The same list, for chaining.
    """
    items.sort(key=sort_key)
    return items


__all__ = [
    "SortData",
    "build_sort_data",
    "category_priority",
    "sort_key",
    "sort_items",
]
