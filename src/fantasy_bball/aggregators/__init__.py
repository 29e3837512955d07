"""
Sport-specific statistics aggregators.

These aggregators turn raw provider seasons into one aggregate stat set per
season. For example, a player traded mid-season appears once per team and
needs a single season total.
"""

from .nba import SeasonNormalizer

__all__ = ["SeasonNormalizer"]
