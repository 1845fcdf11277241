"""Item classification, usability and sorting for hotbar auto-population.

Modules:
    classification: Selection key matching and spell usability.
    sorting: Hotbar sort order.
    populate: Grid auto-population built on the two above.
"""

from __future__ import annotations

from dnd_hud.inventory.classification import (
    is_usable,
    matches_selected_types,
    matches_type_key,
    spell_filter_enabled,
)
from dnd_hud.inventory.populate import (
    ItemTypeChoice,
    ItemTypeChoiceGroup,
    get_item_type_choices,
    get_matching_items,
    get_passive_features,
    has_activities,
    populate_grids,
)
from dnd_hud.inventory.sorting import (
    SortData,
    build_sort_data,
    category_priority,
    sort_items,
    sort_key,
)


__all__ = [
    # Classification
    "matches_selected_types",
    "matches_type_key",
    "is_usable",
    "spell_filter_enabled",
    # Sorting
    "SortData",
    "build_sort_data",
    "category_priority",
    "sort_key",
    "sort_items",
    # Populate
    "ItemTypeChoice",
    "ItemTypeChoiceGroup",
    "get_item_type_choices",
    "has_activities",
    "get_matching_items",
    "populate_grids",
    "get_passive_features",
]
