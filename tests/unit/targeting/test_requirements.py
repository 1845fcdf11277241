"""Tests for targeting requirement extraction."""

from __future__ import annotations

import math
from typing import Any

import pytest

from dnd_hud.models import AbilityDescriptor, ActivationVariant, SceneGridContext
from dnd_hud.targeting.requirements import (
    get_target_requirements,
    is_area_ability,
    needs_targeting,
    variant_needs_targeting,
)


def _ability(**fields: Any) -> AbilityDescriptor:
    return AbilityDescriptor.model_validate(fields)


class TestNeedsTargeting:
    """Tests for the targeting decision."""

    @pytest.mark.parametrize("target_type", ["self", "none"])
    def test_no_target_types_never_target(self, target_type: str) -> None:
        """Self and none types win over a large range."""
        ability = _ability(
            type="spell",
            actionType="rsak",
            range={"value": 500, "units": "ft"},
            target={"type": target_type},
        )
        assert needs_targeting(ability) is False

    def test_sphere_template_not_targeted(self) -> None:
        """Area templates are placed even with an ``other`` target type."""
        ability = _ability(
            range={"value": 150, "units": "ft"},
            target={"type": "other", "template": {"type": "sphere", "size": 20}},
        )
        assert needs_targeting(ability) is False

    def test_fireball(self, fireball: AbilityDescriptor) -> None:
        """Fireball is placed, not targeted."""
        assert needs_targeting(fireball) is False

    def test_area_in_variant(self) -> None:
        """A template on any variant makes the ability an area ability."""
        ability = _ability(
            actionType="save",
            activities={"breath": {"target": {"template": {"type": "cone", "size": 15}}}},
        )
        assert is_area_ability(ability) is True
        assert needs_targeting(ability) is False

    def test_declared_target_type(self) -> None:
        """Any other declared type requires targets."""
        assert needs_targeting(_ability(target={"type": "ally"})) is True

    def test_variants_decide(self) -> None:
        """Without a declared type, variants decide."""
        ability = _ability(
            actionType="attack",
            activities={
                "use": {"target": {"type": "self"}},
                "throw": {"range": {"value": 20, "units": "ft"}},
            },
        )
        assert needs_targeting(ability) is True
        assert needs_targeting(ability, ability.activities[0]) is True
        assert needs_targeting(ability, ability.activities[1]) is True

    def test_area_variant_wins_for_every_variant(self) -> None:
        """An area variant keeps the whole ability untargeted."""
        ability = _ability(
            type="spell",
            activities={
                "blast": {"target": {"template": {"type": "sphere", "size": 10}}},
                "bolt": {
                    "range": {"value": 60, "units": "ft"},
                    "target": {"affects": {"type": "creature", "count": 1}},
                },
            },
        )
        blast, bolt = ability.activities
        assert needs_targeting(ability) is False
        assert needs_targeting(ability, blast) is False
        assert needs_targeting(ability, bolt) is False

    def test_variants_without_targets(self) -> None:
        """Variants that never target override the attack rule."""
        ability = _ability(actionType="mwak", activities=[{"target": {"type": "none"}}])
        assert needs_targeting(ability) is False

    @pytest.mark.parametrize("action_type", ["attack", "mwak", "rwak", "msak", "rsak"])
    def test_attack_rolls_target(self, action_type: str) -> None:
        """Attack rolls target without any other data."""
        assert needs_targeting(_ability(actionType=action_type)) is True

    def test_saves_target(self) -> None:
        """Saving throws target."""
        assert needs_targeting(_ability(actionType="save")) is True

    def test_spell_with_range(self) -> None:
        """Spells with a positive non-self range target."""
        spell = _ability(type="spell", actionType="util", range={"value": 60, "units": "ft"})
        assert needs_targeting(spell) is True

    def test_spell_self_range(self) -> None:
        """Self-range spells do not target."""
        spell = _ability(type="spell", actionType="util", range={"value": 10, "units": "self"})
        assert needs_targeting(spell) is False

    def test_utility_item(self) -> None:
        """Nothing else targets."""
        assert needs_targeting(_ability(type="tool", actionType="util")) is False
        assert needs_targeting(None) is False


class TestVariantNeedsTargeting:
    """Tests for single-variant decisions."""

    def test_positive_range(self) -> None:
        """A positive non-self range targets."""
        variant = ActivationVariant.model_validate({"range": {"value": 30, "units": "ft"}})
        assert variant_needs_targeting(variant) is True

    def test_any_template_blocks(self) -> None:
        """A template of any shape blocks targeting."""
        variant = ActivationVariant.model_validate(
            {"range": {"value": 30}, "target": {"template": {"type": "wall"}}}
        )
        assert variant_needs_targeting(variant) is False

    def test_affects_count(self) -> None:
        """A declared count targets."""
        variant = ActivationVariant.model_validate({"target": {"affects": {"count": 2}}})
        assert variant_needs_targeting(variant) is True

    def test_empty(self) -> None:
        """An empty variant does not target."""
        assert variant_needs_targeting(ActivationVariant()) is False


class TestGetTargetRequirements:
    """Tests for requirement extraction."""

    def test_other_thirty_feet(self) -> None:
        """A 30 ft single-target ability on a 5 ft grid reaches 6 squares."""
        ability = _ability(target={"type": "other"}, range={"value": 30, "units": "feet"})
        requirements = get_target_requirements(
            ability, grid=SceneGridContext(distance=5, units="feet")
        )
        assert requirements.range == pytest.approx(6)
        assert requirements.min_targets == 1
        assert requirements.max_targets == 1
        assert requirements.target_type == "other"

    def test_defaults(self) -> None:
        """Missing target declarations mean one target of any type."""
        requirements = get_target_requirements(_ability(name="Help"))
        assert requirements.target_type == "any"
        assert requirements.min_targets == 1
        assert requirements.max_targets == 1
        assert requirements.has_template is False

    def test_affects_count(self) -> None:
        """The affects count sets both bounds."""
        ability = _ability(target={"affects": {"type": "creature", "count": 3}})
        requirements = get_target_requirements(ability)
        assert requirements.min_targets == 3
        assert requirements.max_targets == 3
        assert requirements.target_type == "creature"

    def test_legacy_value(self) -> None:
        """The legacy target value is used without affects."""
        requirements = get_target_requirements(_ability(target={"type": "enemy", "value": 2}))
        assert requirements.min_targets == 2

    def test_zero_count_clamped(self) -> None:
        """At least one target is always required."""
        requirements = get_target_requirements(_ability(target={"affects": {"count": 0}}))
        assert requirements.min_targets == 1

    @pytest.mark.parametrize(
        "affects",
        [{"type": "any"}, {"type": "creature", "special": "Any number of creatures"}],
    )
    def test_unbounded(self, affects: dict[str, Any]) -> None:
        """``any`` or a special note lifts the maximum."""
        requirements = get_target_requirements(_ability(target={"affects": affects}))
        assert math.isinf(requirements.max_targets)

    def test_template_copied(self, fireball: AbilityDescriptor, grid: SceneGridContext) -> None:
        """Template declarations are copied into the requirements."""
        requirements = get_target_requirements(fireball, grid=grid)
        assert requirements.has_template is True
        assert requirements.template == {"type": "sphere", "size": 20.0, "units": "ft"}
        assert requirements.range == 30.0

    def test_variant_target_preferred(self, longbow: AbilityDescriptor) -> None:
        """A variant's target declaration overrides the ability's."""
        variant = ActivationVariant.model_validate({"target": {"type": "enemy", "value": 2}})
        requirements = get_target_requirements(longbow, variant)
        assert requirements.target_type == "enemy"
        assert requirements.min_targets == 2
        assert requirements.range == 30.0

    def test_no_ability(self) -> None:
        """A missing ability yields defaults."""
        assert get_target_requirements(None).target_type == "any"
