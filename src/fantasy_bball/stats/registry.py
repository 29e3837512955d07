"""
Stat schema registry.

Maps each stat name (``ppg``, ``td3``, ...) to a fixed slot so every
PlayerStats vector shares one layout. The layout is the key order of a
reference player's most recent season total.

Usage:
    registry = get_registry()            # built once, then cached
    registry.index_of("ppg")             # strict: raises on unknown names
    registry.is_valid("not_a_stat")      # False
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional

from ..core.config import get_settings
from ..models import PlayerProfile
from ..providers import NBADataClient

logger = logging.getLogger(__name__)


class SchemaMismatchError(KeyError):
    """A stat found in provider data has no slot in the registry."""

    def __init__(self, stat: str):
        super().__init__(stat)
        self.stat = stat

    def __str__(self) -> str:
        return (
            f"Stat '{self.stat}' is not in the stat schema; "
            "the provider document layout has changed"
        )


class StatSchemaRegistry:
    """Immutable, ordered stat name -> slot index mapping."""

    __slots__ = ("_index", "_names")

    def __init__(self, names: Iterable[str]):
        index: dict[str, int] = {}
        for name in names:
            if name not in index:
                index[name] = len(index)
        self._index: Mapping[str, int] = MappingProxyType(index)
        self._names: tuple[str, ...] = tuple(index)

    @classmethod
    def from_total(cls, total: Mapping[str, Any]) -> "StatSchemaRegistry":
        """Build from a season total, keeping its key order."""
        return cls(total.keys())

    @classmethod
    def from_profile(cls, profile: PlayerProfile) -> "StatSchemaRegistry":
        """Build from the latest season total of a normalized profile."""
        return cls.from_total(profile.latest_total())

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @property
    def mapping(self) -> Mapping[str, int]:
        """Read-only view of the name -> index mapping."""
        return self._index

    def is_valid(self, name: str) -> bool:
        return name in self._index

    def index_of(self, name: str) -> int:
        """
        Strict lookup used while laying out provider data.

        Raises:
            SchemaMismatchError: If ``name`` is not registered
        """
        try:
            return self._index[name]
        except KeyError:
            raise SchemaMismatchError(name) from None

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatSchemaRegistry):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"StatSchemaRegistry({len(self)} stats)"


def load_registry(
    client: Optional[NBADataClient] = None,
    person_id: Optional[int] = None,
) -> StatSchemaRegistry:
    """
    Build a registry from the reference player's profile.

    Args:
        client: Provider client (a temporary one is created if omitted)
        person_id: Reference player (defaults to settings.reference_person_id)

    Raises:
        TransportError / InvalidContentsError: If the reference profile cannot be read
        DocumentShapeError: If the reference profile has no usable season total
    """
    if person_id is None:
        person_id = get_settings().reference_person_id

    if client is None:
        with NBADataClient() as own_client:
            profile = own_client.get_player_profile(person_id)
    else:
        profile = client.get_player_profile(person_id)

    registry = StatSchemaRegistry.from_profile(profile)
    logger.info(f"Built stat schema with {len(registry)} stats from player {person_id}")
    return registry


# Global instance
_registry: Optional[StatSchemaRegistry] = None
_registry_lock = threading.Lock()


def get_registry(client: Optional[NBADataClient] = None) -> StatSchemaRegistry:
    """
    Get the process-wide registry, building it on first use.

    Concurrent first calls build it once. A failed build leaves no registry
    behind, so the next call tries again.
    """
    global _registry

    if _registry is not None:
        return _registry

    with _registry_lock:
        if _registry is None:
            _registry = load_registry(client)
    return _registry


def set_registry(registry: StatSchemaRegistry) -> None:
    """Install a prebuilt registry (startup injection or tests)."""
    global _registry
    with _registry_lock:
        _registry = registry


def reset_registry() -> None:
    """Drop the cached registry."""
    global _registry
    with _registry_lock:
        _registry = None


def is_stat_valid(name: str) -> bool:
    """Whether ``name`` is a registered stat. False until the registry is built."""
    registry = _registry
    return registry is not None and registry.is_valid(name)
