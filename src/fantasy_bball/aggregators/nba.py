"""
NBA season aggregator.

Handles players who changed teams during a season. The provider lists one
stat set per team under ``teams`` but its ``total`` for such seasons cannot
be relied on, so the season total is rebuilt here as the per-team average.

The average is taken over team entries, not weighted by games played. A
player with 70 games on one team and 5 on another gets both stat lines
counted equally. This is a known approximation.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..models import (
    TEAM_ID_FIELD,
    DocumentShapeError,
    PlayerProfile,
    SeasonEntry,
    find_seasons,
    parse_stat_value,
)

logger = logging.getLogger(__name__)


class SeasonNormalizer:
    """Give every season exactly one aggregate ``total`` stat set."""

    @staticmethod
    def format_stat(value: float) -> str:
        """Render a stat the way the provider does: at most two decimals, no trailing zeros.

        Args:
            value: Stat value

        Returns:
            String such as ``"15"``, ``"7.5"`` or ``"10.33"``
        """
        text = f"{value:.2f}".rstrip("0").rstrip(".")
        return "0" if text == "-0" else text

    @staticmethod
    def average_team_stats(teams: List[Dict[str, Any]]) -> Dict[str, str]:
        """Average every stat except the team id across a season's team entries.

        A stat missing from some entries only contributes where present, but
        the divisor is always the number of entries.

        Args:
            teams: Per-team stat sets for one season

        Returns:
            Stat name -> averaged value, in order of first appearance
        """
        if not teams:
            return {}

        sums: Dict[str, float] = {}
        for i, team in enumerate(teams):
            for stat, value in team.items():
                if stat == TEAM_ID_FIELD:
                    continue
                sums[stat] = sums.get(stat, 0.0) + parse_stat_value(value, f"teams[{i}].{stat}")

        team_count = len(teams)
        return {
            stat: SeasonNormalizer.format_stat(total / team_count)
            for stat, total in sums.items()
        }

    @staticmethod
    def _single_team_total(teams: List[Dict[str, Any]]) -> Dict[str, Any]:
        if not teams:
            return {}
        return {k: v for k, v in teams[0].items() if k != TEAM_ID_FIELD}

    @staticmethod
    def normalize_season(season: SeasonEntry) -> SeasonEntry:
        """Return the season with its aggregate total in place.

        Single-team seasons keep the provider's total; if the provider left
        it out, the sole team entry is used instead.
        """
        if season.is_multi_team:
            total = SeasonNormalizer.average_team_stats(season.teams)
            return season.model_copy(update={"total": total})
        if season.total is None:
            return season.model_copy(
                update={"total": SeasonNormalizer._single_team_total(season.teams)}
            )
        return season

    @staticmethod
    def normalize(profile: PlayerProfile) -> PlayerProfile:
        """Normalize every season of a profile.

        Args:
            profile: Profile as parsed from the provider

        Returns:
            A new profile; the input is left untouched
        """
        seasons = []
        for season in profile.seasons:
            if season.is_multi_team:
                logger.debug(
                    f"Averaging teams {season.team_ids} for player {profile.person_id} "
                    f"season {season.season_year}"
                )
            seasons.append(SeasonNormalizer.normalize_season(season))
        return profile.model_copy(update={"seasons": seasons})

    @staticmethod
    def normalize_document(document: Dict[str, Any]) -> Dict[str, Any]:
        """Normalize a raw provider document in place.

        Args:
            document: Full provider document or its ``league.standard`` object

        Returns:
            The same document, with ``total`` rewritten where needed

        Raises:
            DocumentShapeError: if a season has no ``teams`` list or a team
                entry is not an object
        """
        path, seasons = find_seasons(document)
        for i, season in enumerate(seasons):
            teams = season.get("teams") if isinstance(season, dict) else None
            if not isinstance(teams, list):
                raise DocumentShapeError(f"{path}[{i}].teams")
            for j, team in enumerate(teams):
                if not isinstance(team, dict):
                    raise DocumentShapeError(f"{path}[{i}].teams[{j}]")
            if len(teams) > 1:
                season["total"] = SeasonNormalizer.average_team_stats(teams)
            elif "total" not in season:
                season["total"] = SeasonNormalizer._single_team_total(teams)
        return document
