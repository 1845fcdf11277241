"""Item classification against selection keys, and spell usability."""

from __future__ import annotations

from collections.abc import Iterable

from dnd_hud.core.config import AutoPopulateSettings
from dnd_hud.core.constants import SUBTYPE_FIELDS
from dnd_hud.core.exceptions import InvalidTypeKeyError
from dnd_hud.core.logging import get_logger
from dnd_hud.models.enums import ActorKind, ItemCategory, SpellMethod
from dnd_hud.models.items import ItemRecord, TypeKey, parse_type_key


logger = get_logger(__name__)

_PREPARED_METHODS = frozenset({SpellMethod.PREPARED, SpellMethod.SPELL})


def matches_type_key(
    item: ItemRecord,
    key: TypeKey,
    subtype_fields: Iterable[str] = SUBTYPE_FIELDS,
) -> bool:
    """Check an item against one parsed selection key.

    Args:
        item: Item to classify.
        key: Parsed selection key.
        subtype_fields: Ordered subtype field paths.

    Returns:
        True if the category matches and, for compound keys, the subtype too.
    """
    if item.type != key.category:
        return False
    if key.subtype is None:
        return True
    return item.subtype(subtype_fields) == key.subtype


def matches_selected_types(
    item: ItemRecord,
    selected_type_keys: Iterable[str],
    subtype_fields: Iterable[str] = SUBTYPE_FIELDS,
) -> bool:
    """Check whether an item matches any selected type key.

    Args:
        item: Item to classify.
        selected_type_keys: Keys such as ``weapon`` or ``consumable:potion``.
        subtype_fields: Ordered subtype field paths.

    Returns:
        True if any key matches. Malformed keys never match.
    """
    fields = tuple(subtype_fields)
    for raw_key in selected_type_keys:
        try:
            key = parse_type_key(raw_key)
        except InvalidTypeKeyError:
            logger.debug("Skipping malformed selection key", key=raw_key)
            continue
        if matches_type_key(item, key, fields):
            return True
    return False


def spell_filter_enabled(actor_kind: ActorKind | str, settings: AutoPopulateSettings) -> bool:
    """Whether unprepared spells are filtered out for this owner kind."""
    if actor_kind == ActorKind.PLAYER:
        return settings.filter_player_spells
    return settings.filter_npc_spells


def is_usable(
    item: ItemRecord,
    actor_kind: ActorKind | str,
    settings: AutoPopulateSettings,
) -> bool:
    """Check whether an item can currently be used from the hotbar.

    Only spells are gated. A spell without a casting method is never usable;
    innate, at-will, pact and similar methods always are; a standard learned
    spell is usable when filtering is off for the owner kind or when it is
    prepared.

    Args:
        item: Item to check.
        actor_kind: Kind of the owning actor.
        settings: Auto-populate settings.

    Returns:
        True if the item should be offered.
    """
    if item.type != ItemCategory.SPELL:
        return True

    method = item.casting_method
    if not method:
        return False
    if method not in _PREPARED_METHODS:
        return True
    if not spell_filter_enabled(actor_kind, settings):
        return True
    return item.prepared != 0


__all__ = [
    "matches_type_key",
    "matches_selected_types",
    "spell_filter_enabled",
    "is_usable",
]
