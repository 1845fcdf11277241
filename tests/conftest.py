"""Pytest configuration and shared fixtures.

This module provides common fixtures for the HUD rules test suite: a scene
grid, tokens of every disposition, representative abilities, and a small
inventory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from dnd_hud.models import (
    AbilityDescriptor,
    ActorContext,
    ActorKind,
    Disposition,
    ItemRecord,
    Position,
    SceneGridContext,
    TokenRef,
)


if TYPE_CHECKING:
    from collections.abc import Callable, Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from dnd_hud.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def grid() -> SceneGridContext:
    """A standard 5 ft grid with 100 px squares."""
    return SceneGridContext(distance=5, units="ft", size=100)


# =============================================================================
# Token Fixtures
# =============================================================================


def make_token(
    name: str,
    *,
    disposition: int = Disposition.NEUTRAL,
    x: float = 0.0,
    y: float = 0.0,
    creature_type: str | None = "humanoid",
    flags: dict[str, bool] | None = None,
    statuses: set[str] | None = None,
    with_actor: bool = True,
    **token_fields: Any,
) -> TokenRef:
    """Build a token with an attached actor."""
    actor = None
    if with_actor:
        actor = ActorContext(
            name=name,
            kind=ActorKind.PLAYER if disposition == Disposition.FRIENDLY else ActorKind.NPC,
            creature_type=creature_type,
            flags=flags or {},
            statuses=frozenset(statuses or ()),
        )
    return TokenRef(
        name=name,
        center=Position(x=x, y=y),
        disposition=disposition,
        actor=actor,
        **token_fields,
    )


@pytest.fixture
def token_factory() -> Callable[..., TokenRef]:
    """Expose ``make_token`` to tests."""
    return make_token


@pytest.fixture
def hero() -> TokenRef:
    """A friendly player token at the origin."""
    return make_token("Thorin", disposition=Disposition.FRIENDLY)


@pytest.fixture
def companion() -> TokenRef:
    """A second friendly token, one square east."""
    return make_token("Elara", disposition=Disposition.FRIENDLY, x=100)


@pytest.fixture
def goblin() -> TokenRef:
    """A hostile token six squares east."""
    return make_token("Goblin", disposition=Disposition.HOSTILE, x=600)


@pytest.fixture
def villager() -> TokenRef:
    """A neutral token."""
    return make_token("Villager", disposition=Disposition.NEUTRAL, y=200)


# =============================================================================
# Ability Fixtures
# =============================================================================


@pytest.fixture
def longbow() -> AbilityDescriptor:
    """A ranged weapon attack with normal and long range."""
    return AbilityDescriptor.model_validate(
        {
            "name": "Longbow",
            "type": "weapon",
            "actionType": "rwak",
            "range": {"value": 150, "long": 600, "units": "ft"},
            "target": {"type": "creature", "value": 1},
        }
    )


@pytest.fixture
def fire_bolt() -> AbilityDescriptor:
    """A ranged spell attack cantrip."""
    return AbilityDescriptor.model_validate(
        {
            "name": "Fire Bolt",
            "type": "spell",
            "actionType": "rsak",
            "range": {"value": 120, "units": "ft"},
            "target": {"affects": {"type": "creature", "count": 1}},
        }
    )


@pytest.fixture
def fireball() -> AbilityDescriptor:
    """An area spell placed with a sphere template."""
    return AbilityDescriptor.model_validate(
        {
            "name": "Fireball",
            "type": "spell",
            "actionType": "save",
            "range": {"value": 150, "units": "ft"},
            "target": {
                "affects": {"type": "creature"},
                "template": {"type": "sphere", "size": 20, "units": "ft"},
            },
        }
    )


# =============================================================================
# Item Fixtures
# =============================================================================


@pytest.fixture
def inventory() -> list[ItemRecord]:
    """A mixed inventory spanning every sort category."""
    raw: list[dict[str, Any]] = [
        {"id": "loot-1", "name": "Gold Idol", "type": "loot", "system": {}},
        {
            "id": "spell-3",
            "name": "Fireball",
            "type": "spell",
            "system": {"level": 3, "method": "spell", "prepared": 1, "activities": {"a": {}}},
        },
        {
            "id": "potion-1",
            "name": "Potion of Healing",
            "type": "consumable",
            "system": {"type": {"value": "potion"}, "activities": {"a": {}}},
        },
        {
            "id": "weapon-1",
            "name": "longsword",
            "type": "weapon",
            "system": {"activities": {"a": {}}},
        },
        {
            "id": "spell-0",
            "name": "Fire Bolt",
            "type": "spell",
            "system": {"level": 0, "method": "spell", "prepared": 1, "activities": {"a": {}}},
        },
        {
            "id": "feat-1",
            "name": "Second Wind",
            "type": "feat",
            "system": {"type": {"value": "class"}, "activities": {"a": {}}},
        },
        {
            "id": "feat-2",
            "name": "Darkvision",
            "type": "feat",
            "system": {"type": {"value": "race"}},
        },
        {
            "id": "weapon-2",
            "name": "Dagger",
            "type": "weapon",
            "system": {"activities": {"a": {}}},
        },
        {
            "id": "spell-1",
            "name": "Shield",
            "type": "spell",
            "system": {"level": 1, "method": "spell", "prepared": 0, "activities": {"a": {}}},
        },
        {
            "id": "scroll-1",
            "name": "Scroll of Fly",
            "type": "consumable",
            "system": {"type": {"value": "scroll"}, "activities": {"a": {}}},
        },
    ]
    return [ItemRecord.model_validate(entry) for entry in raw]
