"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        DndHudError: Base exception for all library errors.
        ConfigurationError: Configuration-related errors.
        DescriptorError: Rejected descriptor values.
        InvalidTypeKeyError: Malformed item selection keys.

    Configuration:
        Settings: Main library settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up library logging.
        get_logger: Get a configured logger instance.
"""

from __future__ import annotations

from dnd_hud.core.exceptions import (
    ConfigurationError,
    DescriptorError,
    DndHudError,
    InvalidTypeKeyError,
)
from dnd_hud.core.config import (
    AutoPopulateSettings,
    GridSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from dnd_hud.core.logging import (
    configure_from_settings,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "DndHudError",
    "ConfigurationError",
    "DescriptorError",
    "InvalidTypeKeyError",
    # Configuration
    "Settings",
    "GridSettings",
    "AutoPopulateSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
]
