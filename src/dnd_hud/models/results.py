"""Immutable results returned by the targeting rules."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from dnd_hud.core.constants import DEFAULT_RANGE_UNITS
from dnd_hud.models.enums import ReasonCode


_RESULT_CONFIG = ConfigDict(frozen=True, extra="forbid")


class RangeResult(BaseModel):
    """Resolved range of an ability.

    Attributes:
        range: Normal range in grid squares (None when unrestricted).
        long_range: Long range in grid squares.
        range_in_native_units: Normal range before division by the grid
            distance, for display.
        long_range_in_native_units: Long range before division, for display.
        units: Units of the native values.
        is_self: Self-range ability.
        is_touch: Touch-range ability.
        is_unlimited: Unrestricted range.
    """

    model_config = _RESULT_CONFIG

    range: float | None = None
    long_range: float | None = None
    range_in_native_units: float | None = None
    long_range_in_native_units: float | None = None
    units: str = DEFAULT_RANGE_UNITS
    is_self: bool = False
    is_touch: bool = False
    is_unlimited: bool = False


class TargetRequirements(BaseModel):
    """Targeting constraints extracted from an ability.

    Attributes:
        min_targets: Minimum number of targets to pick.
        max_targets: Maximum number of targets (``math.inf`` when unbounded).
        target_type: Required target type (``any`` when unspecified).
        range: Normal range in grid squares.
        long_range: Long range in grid squares.
        has_template: Whether an area template is declared.
        template: Copy of the template declaration.
    """

    model_config = _RESULT_CONFIG

    min_targets: int = Field(default=1, ge=1)
    max_targets: int | float = 1
    target_type: str = "any"
    range: float | None = None
    long_range: float | None = None
    has_template: bool = False
    template: dict[str, Any] | None = None


class ValidationResult(BaseModel):
    """Outcome of a target legality check.

    Attributes:
        valid: Whether the candidate may be selected.
        reason: Why the candidate was rejected, None when valid.
    """

    model_config = _RESULT_CONFIG

    valid: bool
    reason: ReasonCode | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message_key(self) -> str | None:
        """Localization key of the rejection reason."""
        return self.reason.message_key if self.reason else None

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def reject(cls, reason: ReasonCode) -> ValidationResult:
        return cls(valid=False, reason=reason)


class TargetInfo(BaseModel):
    """Display facts about a candidate target. Purely advisory.

    Attributes:
        name: Target name.
        image: Target image path.
        distance: Center-to-center distance in grid units, None if unknown.
        in_range: Within normal range (True when unrestricted).
        in_long_range: Within long range (True when unrestricted).
        cover_status: Cover level, always ``none`` (cover is not computed).
        is_flanked: Flanking state, always False (flanking is not computed).
        disposition: Disposition label.
        status_effects: Incapacitating status tags on the target.
    """

    model_config = _RESULT_CONFIG

    name: str = "Unknown"
    image: str = "icons/svg/mystery-man.svg"
    distance: float | None = None
    in_range: bool = True
    in_long_range: bool = True
    cover_status: str = "none"
    is_flanked: bool = False
    disposition: str = "unknown"
    status_effects: tuple[str, ...] = ()


__all__ = [
    "RangeResult",
    "TargetRequirements",
    "ValidationResult",
    "TargetInfo",
]
