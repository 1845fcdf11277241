"""Item records and selection keys for hotbar auto-population.

Item data arrives as raw ``system`` mappings whose shape has drifted across
dnd5e releases, so every read goes through an explicit, ordered chain of
dotted field paths (see ``dnd_hud.core.constants``).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from dnd_hud.core.constants import (
    SPELL_METHOD_FIELDS,
    SPELL_PREPARED_FIELDS,
    SUBTYPE_FIELDS,
    UNKNOWN_SPELL_LEVEL,
)
from dnd_hud.core.exceptions import InvalidTypeKeyError


_MISSING = object()


def read_path(data: Mapping[str, Any], path: str) -> Any:
    """Read a dotted path from nested mappings.

    Args:
        data: Root mapping.
        path: Dotted path such as ``"preparation.mode"``.

    Returns:
        The value, or None when any segment is absent.
    """
    current: Any = data
    for segment in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(segment, _MISSING)
        if current is _MISSING:
            return None
    return current


def read_first(data: Mapping[str, Any], paths: Iterable[str]) -> Any:
    """Read the first non-None value along an ordered chain of paths.

    Args:
        data: Root mapping.
        paths: Candidate dotted paths, in priority order.

    Returns:
        The first value that is not None, or None.
    """
    for path in paths:
        value = read_path(data, path)
        if value is not None:
            return value
    return None


class TypeKey(BaseModel):
    """A parsed item selection key.

    Attributes:
        category: Item document type (``weapon``, ``consumable``...).
        subtype: Optional subtype (``potion`` in ``consumable:potion``).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    category: str = Field(min_length=1)
    subtype: str | None = None

    def __str__(self) -> str:
        return f"{self.category}:{self.subtype}" if self.subtype else self.category


def parse_type_key(key: str) -> TypeKey:
    """Parse a ``category`` or ``category:subtype`` selection key.

    Args:
        key: Raw selection key.

    Returns:
        The parsed key.

    Raises:
        InvalidTypeKeyError: If the key is empty or has empty/extra parts.
    """
    if not isinstance(key, str) or not key.strip():
        raise InvalidTypeKeyError("Selection key must be a non-empty string", key=key)

    parts = key.strip().split(":")
    if len(parts) > 2 or any(not part for part in parts):
        raise InvalidTypeKeyError(
            "Selection key must be 'category' or 'category:subtype'",
            key=key,
        )
    if len(parts) == 2:
        return TypeKey(category=parts[0], subtype=parts[1])
    return TypeKey(category=parts[0])


class ItemRecord(BaseModel):
    """Read-only view of one item owned by an actor.

    Attributes:
        id: Item identifier (document UUID in the host).
        name: Display name.
        type: Item category (document type).
        system: Raw system data for the item.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str = ""
    type: str = ""
    system: dict[str, Any] = Field(default_factory=dict)

    def subtype(self, fields: Iterable[str] = SUBTYPE_FIELDS) -> str | None:
        """Resolve the item subtype through a field fallback chain.

        Args:
            fields: Ordered dotted paths to try.

        Returns:
            The subtype, or None when no path yields a string.
        """
        value = read_first(self.system, fields)
        return value if isinstance(value, str) and value else None

    @property
    def spell_level(self) -> int:
        """Spell level, cantrips being 0; missing levels sort as 99."""
        level = self.system.get("level")
        if isinstance(level, bool) or not isinstance(level, int | float):
            return UNKNOWN_SPELL_LEVEL
        return int(level)

    @property
    def casting_method(self) -> str:
        """Spellcasting method, empty when the record declares none."""
        value = read_first(self.system, SPELL_METHOD_FIELDS)
        return value if isinstance(value, str) else ""

    @property
    def prepared(self) -> int:
        """Prepared counter; booleans from older records map to 0 or 1."""
        value = read_first(self.system, SPELL_PREPARED_FIELDS)
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int | float):
            return int(value)
        return 0

    @property
    def activities(self) -> list[Any]:
        """Activities declared on the item, as a list."""
        value = self.system.get("activities")
        if isinstance(value, Mapping):
            return list(value.values())
        if isinstance(value, list | tuple):
            return list(value)
        return []

    @property
    def activation_type(self) -> str | None:
        """Legacy single activation type (pre-activities data model)."""
        value = read_path(self.system, "activation.type")
        return value if isinstance(value, str) and value else None


__all__ = [
    "read_path",
    "read_first",
    "TypeKey",
    "parse_type_key",
    "ItemRecord",
]
