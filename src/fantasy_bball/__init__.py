"""
Fantasy Basketball Analysis

Fetches NBA player profiles from data.nba.net, folds multi-team seasons into
a single season total, and exposes named stats per player.

Usage:
    from fantasy_bball import PlayerStats

    stats = PlayerStats.fetch(203500)
    stats.get_stat("ppg")
    stats.get_stat("td3")
    print(stats)
"""

from .aggregators import SeasonNormalizer
from .core.config import Settings, get_settings
from .core.http import ExternalAPIError, InvalidContentsError, TransportError
from .models import DocumentShapeError, PlayerProfile, SeasonEntry
from .providers import NBADataClient, player_page_url
from .stats import (
    IndividualStat,
    PlayerStats,
    SchemaMismatchError,
    StatSchemaRegistry,
    get_registry,
    is_stat_valid,
    reset_registry,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ExternalAPIError",
    "InvalidContentsError",
    "TransportError",
    "DocumentShapeError",
    "SchemaMismatchError",
    # Provider
    "NBADataClient",
    "player_page_url",
    # Models
    "PlayerProfile",
    "SeasonEntry",
    # Stats
    "SeasonNormalizer",
    "StatSchemaRegistry",
    "get_registry",
    "is_stat_valid",
    "reset_registry",
    "IndividualStat",
    "PlayerStats",
]
