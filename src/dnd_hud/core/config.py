"""Configuration management for the D&D 5E HUD rules library.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides. The
rules themselves take their inputs explicitly; settings only supply defaults
(scene grid fallbacks) and the host's auto-populate preferences.

Example:
    >>> from dnd_hud.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.auto_populate.filter_player_spells
    True

Environment Variables:
    DND_HUD_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DND_HUD_JSON_LOGS: Emit JSON log lines instead of console output
    DND_HUD_GRID_DISTANCE: Default distance covered by one grid square
    DND_HUD_GRID_UNITS: Default grid distance units
    DND_HUD_AUTO_POPULATE_ENABLED: Populate hotbar grids on token creation
    DND_HUD_AUTO_POPULATE_GRIDS: JSON mapping of grid name to selection keys
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dnd_hud.core.constants import (
    AUTO_POPULATE_GRIDS,
    DEFAULT_GRID_DISTANCE,
    DEFAULT_GRID_SIZE,
    DEFAULT_GRID_UNITS,
)
from dnd_hud.core.exceptions import ConfigurationError, InvalidTypeKeyError


class GridSettings(BaseSettings):
    """Fallback scene grid used when the caller supplies none.

    Attributes:
        distance: Distance covered by one grid square, in grid units.
        units: Grid distance units label.
        size: Grid square size in pixels.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_HUD_GRID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    distance: float = Field(
        default=DEFAULT_GRID_DISTANCE,
        gt=0,
        description="Distance per grid square",
    )
    units: str = Field(
        default=DEFAULT_GRID_UNITS,
        min_length=1,
        description="Grid distance units",
    )
    size: float = Field(
        default=DEFAULT_GRID_SIZE,
        gt=0,
        description="Grid square size in pixels",
    )


class AutoPopulateSettings(BaseSettings):
    """Preferences for populating hotbar grids from an actor's inventory.

    Attributes:
        enabled: Populate grids automatically when a token is created.
        passives_enabled: Populate the passives container with passive feats.
        filter_player_spells: Hide unprepared spells for player characters.
        filter_npc_spells: Hide unprepared spells for non-player characters.
        grids: Selection keys (``category`` or ``category:subtype``) per grid.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_HUD_AUTO_POPULATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    enabled: bool = Field(
        default=False,
        description="Auto-populate on token creation",
    )
    passives_enabled: bool = Field(
        default=True,
        description="Auto-populate passive features",
    )
    filter_player_spells: bool = Field(
        default=True,
        description="Only include prepared spells for player characters",
    )
    filter_npc_spells: bool = Field(
        default=True,
        description="Only include prepared spells for NPCs",
    )
    grids: dict[str, list[str]] = Field(
        default_factory=lambda: {name: [] for name in AUTO_POPULATE_GRIDS},
        description="Selection keys per hotbar grid",
    )

    @field_validator("grids", mode="after")
    @classmethod
    def validate_grid_keys(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        """Reject unknown grid names and malformed selection keys.

        Args:
            value: Mapping of grid name to selection keys.

        Returns:
            The validated mapping.

        Raises:
            ConfigurationError: If a grid name or selection key is invalid.
        """
        from dnd_hud.models.items import parse_type_key

        for grid_name, keys in value.items():
            if grid_name not in AUTO_POPULATE_GRIDS:
                raise ConfigurationError(
                    f"Unknown auto-populate grid {grid_name!r}",
                    config_key="grids",
                    details={"allowed": list(AUTO_POPULATE_GRIDS)},
                )
            for key in keys:
                try:
                    parse_type_key(key)
                except InvalidTypeKeyError as exc:
                    raise ConfigurationError(
                        f"Invalid selection key {key!r} in {grid_name}",
                        config_key="grids",
                    ) from exc
        return value


class Settings(BaseSettings):
    """Main library settings aggregating all configuration domains.

    Attributes:
        app_name: Library name.
        app_version: Library version string.
        debug: Enable debug mode (forces DEBUG logging).
        log_level: Logging level.
        json_logs: Emit JSON logs.
        grid: Fallback scene grid settings.
        auto_populate: Hotbar auto-populate settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_HUD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="D&D 5E HUD Rules",
        description="Library name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Library version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON formatted logs",
    )

    grid: GridSettings = Field(default_factory=GridSettings)
    auto_populate: AutoPopulateSettings = Field(default_factory=AutoPopulateSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the library settings singleton.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load library settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "GridSettings",
    "AutoPopulateSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
