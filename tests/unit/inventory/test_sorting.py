"""Tests for hotbar sort order."""

from __future__ import annotations

from dnd_hud.inventory.sorting import build_sort_data, category_priority, sort_items
from dnd_hud.models import ItemRecord


class TestSortData:
    """Tests for sort data extraction."""

    def test_spell_level(self) -> None:
        """Spells carry their level; others the sentinel."""
        spell = ItemRecord(name="Shield", type="spell", system={"level": 1})
        sword = ItemRecord(name="Sword", type="weapon", system={"level": 3})
        assert build_sort_data(spell).spell_level == 1
        assert build_sort_data(sword).spell_level == 99

    def test_feature_type(self) -> None:
        """Feats carry their feature subtype."""
        feat = ItemRecord(name="Rage", type="feat", system={"type": {"value": "class"}})
        assert build_sort_data(feat).feature_type == "class"
        assert build_sort_data(ItemRecord(type="feat")).feature_type == ""


class TestCategoryPriority:
    """Tests for category priority."""

    def test_known_order(self) -> None:
        """Weapons come first and loot last among known categories."""
        assert category_priority("weapon") < category_priority("feat") < category_priority("spell")
        assert category_priority("tool") < category_priority("loot")

    def test_unknown_last(self) -> None:
        """Unknown categories sort after loot."""
        assert category_priority("backpack") > category_priority("loot")


class TestSortItems:
    """Tests for sort_items."""

    def test_full_order(self, inventory: list[ItemRecord]) -> None:
        """Category, then level or feature type, then name."""
        ordered = [item.id for item in sort_items(list(inventory))]
        assert ordered == [
            "weapon-2",
            "weapon-1",
            "feat-1",
            "feat-2",
            "spell-0",
            "spell-1",
            "spell-3",
            "potion-1",
            "scroll-1",
            "loot-1",
        ]

    def test_in_place(self, inventory: list[ItemRecord]) -> None:
        """The input list itself is sorted and returned."""
        assert sort_items(inventory) is inventory
        assert inventory[0].id == "weapon-2"

    def test_case_insensitive_names(self) -> None:
        """Names compare without case."""
        items = [
            ItemRecord(id="b", name="bolt", type="loot"),
            ItemRecord(id="a", name="Arrow", type="loot"),
        ]
        assert [item.id for item in sort_items(items)] == ["a", "b"]

    def test_stable(self) -> None:
        """Equal keys keep their input order."""
        items = [
            ItemRecord(id="first", name="Torch", type="loot"),
            ItemRecord(id="second", name="torch", type="loot"),
            ItemRecord(id="third", name="Torch", type="loot"),
        ]
        assert [item.id for item in sort_items(items)] == ["first", "second", "third"]

    def test_unknown_spell_level_last(self) -> None:
        """Spells without a level sort after leveled spells."""
        items = [
            ItemRecord(id="odd", name="Aid", type="spell", system={"level": "x"}),
            ItemRecord(id="nine", name="Wish", type="spell", system={"level": 9}),
        ]
        assert [item.id for item in sort_items(items)] == ["nine", "odd"]
