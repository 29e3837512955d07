"""Stat schema registry and per-player stat records."""

from .record import IndividualStat, PlayerStats
from .registry import (
    SchemaMismatchError,
    StatSchemaRegistry,
    get_registry,
    is_stat_valid,
    load_registry,
    reset_registry,
    set_registry,
)

__all__ = [
    "IndividualStat",
    "PlayerStats",
    "SchemaMismatchError",
    "StatSchemaRegistry",
    "get_registry",
    "is_stat_valid",
    "load_registry",
    "reset_registry",
    "set_registry",
]
