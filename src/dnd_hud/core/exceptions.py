"""Custom exception hierarchy for the D&D 5E HUD rules library.

The rules core prefers well-defined fallbacks over exceptions: partially
populated item data resolves to neutral defaults, and an illegal target is
reported as a ``ValidationResult`` rather than raised. Exceptions are reserved
for configuration problems and for explicit parsing helpers whose callers asked
to be told about malformed input.

Example:
    >>> from dnd_hud.core.exceptions import InvalidTypeKeyError
    >>> raise InvalidTypeKeyError("Malformed selection key", key="consumable:")
"""

from __future__ import annotations

from typing import Any


class DndHudError(Exception):
    """Base exception for all D&D HUD rules errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(DndHudError):
    """Raised when library configuration is invalid.

    This includes invalid environment values and auto-populate grid
    selections that cannot be parsed.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Descriptor Exceptions
# =============================================================================


class DescriptorError(DndHudError):
    """Raised when a descriptor value is explicitly parsed and rejected."""

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize descriptor error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed parsing.
            invalid_value: The value that failed parsing.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


class InvalidTypeKeyError(DescriptorError):
    """Raised when an item selection key is not ``category`` or ``category:subtype``."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, field_name="type_key", invalid_value=key, details=details)
        self.key = key


__all__ = [
    "DndHudError",
    "ConfigurationError",
    "DescriptorError",
    "InvalidTypeKeyError",
]
