"""Tests for descriptor and result models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dnd_hud.models import (
    AbilityDescriptor,
    AbilityKind,
    ActorContext,
    ItemRecord,
    RangeDescriptor,
    ReasonCode,
    TargetDescriptor,
    TokenRef,
    ValidationResult,
)
from dnd_hud.targeting.requirements import get_target_requirements, needs_targeting


class TestRangeDescriptor:
    """Tests for lenient range parsing."""

    def test_value_fallback_chain(self) -> None:
        """Normal range falls back from value to normal to 0."""
        assert RangeDescriptor(value=30).base_value == 30
        assert RangeDescriptor(normal=80, long=320).base_value == 80
        assert RangeDescriptor().base_value == 0
        assert RangeDescriptor().long_value == 0

    def test_numeric_strings_coerced(self) -> None:
        """Numeric strings from form data become floats."""
        assert RangeDescriptor.model_validate({"value": "60"}).value == 60.0

    def test_malformed_values_become_none(self) -> None:
        """Garbage values fall back to None instead of failing."""
        config = RangeDescriptor.model_validate({"value": "far", "long": [1], "units": 5})
        assert config.value is None
        assert config.long is None
        assert config.units is None

    def test_unknown_keys_ignored(self) -> None:
        """Extra keys from newer data models are ignored."""
        config = RangeDescriptor.model_validate({"value": 5, "override": True})
        assert config.value == 5


class TestTargetDescriptor:
    """Tests for target declarations."""

    def test_affects_type_preferred(self) -> None:
        """The affects block wins over the legacy type."""
        target = TargetDescriptor.model_validate(
            {"type": "creature", "affects": {"type": "enemy"}}
        )
        assert target.effective_type == "enemy"

    def test_legacy_type(self) -> None:
        """The legacy type is used without an affects block."""
        assert TargetDescriptor(type="ally").effective_type == "ally"

    def test_template_shape(self) -> None:
        """Template shape is exposed when declared."""
        target = TargetDescriptor.model_validate({"template": {"type": "cone", "size": 15}})
        assert target.template_shape == "cone"
        assert TargetDescriptor().template_shape is None


class TestAbilityDescriptor:
    """Tests for ability descriptors."""

    @pytest.mark.parametrize(
        "units,kind",
        [
            ("self", AbilityKind.SELF),
            ("touch", AbilityKind.TOUCH),
            ("ft", AbilityKind.RANGED),
            ("spec", AbilityKind.UNLIMITED),
            ("any", AbilityKind.UNLIMITED),
        ],
    )
    def test_kind_from_units(self, units: str, kind: AbilityKind) -> None:
        """The tagged kind follows the range units."""
        ability = AbilityDescriptor.model_validate({"range": {"units": units}})
        assert ability.kind == kind

    def test_activities_mapping_accepted(self) -> None:
        """Activities keyed by id become an ordered list with ids."""
        ability = AbilityDescriptor.model_validate(
            {
                "activities": {
                    "atk": {"actionType": "mwak", "range": {"units": "touch"}},
                    "heal": {"target": {"type": "ally"}},
                }
            }
        )
        assert [variant.id for variant in ability.activities] == ["atk", "heal"]
        assert ability.activities[0].action_type == "mwak"

    def test_from_item(self) -> None:
        """Descriptors build from raw item system data."""
        item = ItemRecord(
            id="item-1",
            name="Javelin",
            type="weapon",
            system={
                "type": {"value": "simpleR"},
                "actionType": "rwak",
                "range": {"value": 30, "long": 120, "units": "ft"},
            },
        )
        ability = AbilityDescriptor.from_item(item)
        assert ability.id == "item-1"
        assert ability.type == "weapon"
        assert ability.action_type == "rwak"
        assert ability.range is not None
        assert ability.range.long == 120

    @pytest.mark.parametrize("activities", [5, "abc", True])
    def test_malformed_activities_ignored(self, activities: object) -> None:
        """Activities that are neither a list nor a mapping yield no variants."""
        ability = AbilityDescriptor.model_validate({"activities": activities})
        assert ability.activities == []

    def test_from_item_activity_data(self) -> None:
        """Items with keyed activities and string fields resolve like hand-built ones."""
        item = ItemRecord(
            id="spell-1",
            name="Scorching Ray",
            type="spell",
            system={
                "type": {"value": ""},
                "activities": {
                    "ray": {
                        "type": "attack",
                        "range": {"value": "60", "units": "ft"},
                        "target": {
                            "affects": {"type": "creature", "count": "2", "special": ""},
                            "template": {"type": ""},
                        },
                    },
                },
            },
        )
        ability = AbilityDescriptor.from_item(item)
        (variant,) = ability.activities
        assert ability.type == "spell"
        assert variant.id == "ray"
        assert needs_targeting(ability) is True
        assert needs_targeting(ability, variant) is True

        requirements = get_target_requirements(ability, variant)
        assert requirements.min_targets == 2
        assert requirements.max_targets == 2
        assert requirements.target_type == "creature"
        assert requirements.has_template is False
        assert requirements.range == 12.0

    def test_descriptor_is_frozen(self) -> None:
        """Descriptors are read-only views."""
        ability = AbilityDescriptor(name="Dash")
        with pytest.raises(ValidationError):
            ability.name = "Sprint"  # type: ignore[misc]


class TestTokenRef:
    """Tests for token references."""

    def test_identity_by_id(self) -> None:
        """Two references with one id denote the same token."""
        first = TokenRef(id="tok", name="Thorin")
        second = TokenRef(id="tok", name="Thorin (copy)")
        assert first.is_same(second)
        assert not first.is_same(TokenRef(id="other", name="Thorin"))
        assert not first.is_same(None)

    def test_actor_capability(self) -> None:
        """Capability flags read as booleans."""
        actor = ActorContext(flags={"sharpShooter": True})
        assert actor.has_capability("sharpShooter") is True
        assert actor.has_capability("spellSniper") is False


class TestValidationResult:
    """Tests for validation results."""

    def test_reject_carries_message_key(self) -> None:
        """Rejections expose the HUD localization key."""
        result = ValidationResult.reject(ReasonCode.MUST_BE_ENEMY)
        assert result.valid is False
        assert result.message_key == "BG3.TargetSelector.MustBeEnemy"

    def test_ok(self) -> None:
        """Accepted results carry no reason."""
        result = ValidationResult.ok()
        assert result.valid is True
        assert result.reason is None
        assert result.message_key is None

    @pytest.mark.parametrize(
        "reason,key",
        [
            (ReasonCode.INVALID_TARGET, "bg3-hud-core.TargetSelector.InvalidTarget"),
            (ReasonCode.NO_ACTOR, "BG3.TargetSelector.NoActor"),
            (ReasonCode.NOT_VISIBLE, "BG3.TargetSelector.TokenNotVisible"),
            (ReasonCode.CANNOT_TARGET_SELF, "BG3.TargetSelector.CannotTargetSelf"),
        ],
    )
    def test_message_keys(self, reason: ReasonCode, key: str) -> None:
        """Each reason maps to its localization key."""
        assert reason.message_key == key
