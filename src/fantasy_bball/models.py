"""
Pydantic models for the data.nba.net player profile document.

Only the part of the document used for stats is modelled:

    league.standard.stats.regularSeason.season[]

Each season element holds the per-team stat sets under ``teams`` and the
season aggregate under ``total``. Stat values arrive as numeric strings
(e.g. ``"12.4"``); they are kept as-is here and converted on read.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

STANDARD_PATH = ("league", "standard")
SEASONS_PATH = ("stats", "regularSeason", "season")
TEAM_ID_FIELD = "teamId"


class DocumentShapeError(ValueError):
    """A path in a provider document is missing or holds the wrong type."""

    def __init__(self, path: str, message: Optional[str] = None):
        super().__init__(message or f"Missing or malformed field at '{path}'")
        self.path = path


def parse_stat_value(value: Any, path: str) -> float:
    """Convert a provider stat value (usually a numeric string) to float."""
    if isinstance(value, bool):
        raise DocumentShapeError(path, f"Stat at '{path}' is not numeric: {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise DocumentShapeError(path, f"Stat at '{path}' is not numeric: {value!r}")


def _step(node: Any, key: str, path: str) -> Any:
    if not isinstance(node, dict) or key not in node:
        raise DocumentShapeError(path)
    return node[key]


def find_seasons(document: dict[str, Any]) -> tuple[str, list[Any]]:
    """
    Locate the regular season list in a provider document.

    Accepts either the full document or its ``league.standard`` object.

    Returns:
        The dotted path of the list and the list itself

    Raises:
        DocumentShapeError: naming the first path that could not be followed
    """
    if isinstance(document, dict) and "league" in document:
        node: Any = document
        path = ""
        for key in STANDARD_PATH:
            path = f"{path}.{key}" if path else key
            node = _step(node, key, path)
    else:
        node = document
        path = ".".join(STANDARD_PATH)

    for key in SEASONS_PATH:
        path = f"{path}.{key}"
        node = _step(node, key, path)

    if not isinstance(node, list):
        raise DocumentShapeError(path, f"Expected a list at '{path}'")
    return path, node


class SeasonEntry(BaseModel):
    """One regular season of a player, split by team."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    season_year: Optional[int] = Field(default=None, alias="seasonYear")
    teams: list[dict[str, Any]]
    total: Optional[dict[str, Any]] = None

    @property
    def is_multi_team(self) -> bool:
        return len(self.teams) > 1

    @property
    def team_ids(self) -> list[str]:
        return [str(team.get(TEAM_ID_FIELD)) for team in self.teams if TEAM_ID_FIELD in team]


class PlayerProfile(BaseModel):
    """Regular season history of one player, most recent season first."""

    model_config = ConfigDict(frozen=True)

    person_id: Optional[int] = None
    seasons: list[SeasonEntry] = Field(default_factory=list)

    @classmethod
    def from_document(
        cls,
        document: dict[str, Any],
        person_id: Optional[int] = None,
    ) -> "PlayerProfile":
        """
        Build a profile from a provider document.

        Raises:
            DocumentShapeError: if the season list or one of its entries is malformed
        """
        path, raw_seasons = find_seasons(document)

        seasons = []
        for i, raw in enumerate(raw_seasons):
            try:
                seasons.append(SeasonEntry.model_validate(raw))
            except ValidationError as e:
                raise DocumentShapeError(f"{path}[{i}]", f"Malformed season at '{path}[{i}]': {e}") from e

        return cls(person_id=person_id, seasons=seasons)

    def latest_season(self) -> SeasonEntry:
        """The provider lists seasons newest first."""
        if not self.seasons:
            raise DocumentShapeError(
                "league.standard.stats.regularSeason.season[0]",
                f"Player {self.person_id} has no regular season entries",
            )
        return self.seasons[0]

    def latest_total(self) -> dict[str, Any]:
        """Aggregate stats of the most recent season (call on a normalized profile)."""
        season = self.latest_season()
        if season.total is None:
            raise DocumentShapeError("league.standard.stats.regularSeason.season[0].total")
        return season.total
