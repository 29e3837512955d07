"""
Per-player stat vector.

A PlayerStats holds one float per registered stat, laid out by the shared
StatSchemaRegistry. Values are stored as floats even for counting stats
(e.g. total steals).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional

from ..models import parse_stat_value
from ..providers import NBADataClient
from .registry import StatSchemaRegistry, get_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndividualStat:
    """A single named stat value."""

    stat_name: str
    value: float = 0.0

    def __str__(self) -> str:
        return f"{self.stat_name}: {self.value}"


class PlayerStats:
    """
    Stats of one player's most recent season.

    Lookups by name are permissive: ``get_stat`` returns 0.0 for names the
    registry does not know. Construction is strict: a stat in the provider
    data without a registry slot raises SchemaMismatchError.
    """

    def __init__(
        self,
        registry: StatSchemaRegistry,
        total: Mapping[str, Any],
        person_id: Optional[int] = None,
    ):
        values = [0.0] * len(registry)
        for name, value in total.items():
            values[registry.index_of(name)] = parse_stat_value(value, f"total.{name}")
        self._registry = registry
        self._values = tuple(values)
        self.person_id = person_id

    @classmethod
    def fetch(
        cls,
        person_id: int,
        client: Optional[NBADataClient] = None,
        registry: Optional[StatSchemaRegistry] = None,
    ) -> "PlayerStats":
        """
        Fetch a player and build their stat vector.

        The registry is built first (unless one is passed in), so nothing is
        fetched for the player if the reference profile is unavailable.

        Args:
            person_id: Provider player id, e.g. 203500
            client: Provider client (a temporary one is created if omitted)
            registry: Stat layout (defaults to the process-wide registry)

        Raises:
            TransportError / InvalidContentsError: If a profile cannot be read
            DocumentShapeError: If the profile has no usable season total
            SchemaMismatchError: If the profile has a stat the registry lacks
        """
        if client is None:
            with NBADataClient() as own_client:
                return cls.fetch(person_id, client=own_client, registry=registry)

        if registry is None:
            registry = get_registry(client)

        profile = client.get_player_profile(person_id)
        record = cls(registry, profile.latest_total(), person_id=person_id)
        logger.debug(f"Loaded {record.size()} stats for player {person_id}")
        return record

    @property
    def registry(self) -> StatSchemaRegistry:
        return self._registry

    def get_stat(self, stat: str) -> float:
        """
        Value of ``stat``, or 0.0 if ``stat`` is not a registered stat name.

        Stat names are the provider's abbreviations: "ppg" is points per
        game, "td3" is triple doubles.
        """
        if self._registry.is_valid(stat):
            return self._values[self._registry.index_of(stat)]
        return 0.0

    def size(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return self.size()

    def iterate(self) -> Iterator[IndividualStat]:
        """Fresh iterator over every stat, in registry order."""
        for name, value in zip(self._registry.names, self._values):
            yield IndividualStat(name, value)

    def __iter__(self) -> Iterator[IndividualStat]:
        return self.iterate()

    def as_dict(self) -> dict[str, float]:
        return {stat.stat_name: stat.value for stat in self.iterate()}

    def __str__(self) -> str:
        return ", ".join(str(stat) for stat in self.iterate())

    def __repr__(self) -> str:
        return f"PlayerStats(person_id={self.person_id}, stats={self.size()})"
