"""
Data provider clients.

Usage:
    from fantasy_bball.providers import NBADataClient

    with NBADataClient() as client:
        profile = client.get_player_profile(203500)
        print(profile.latest_total()["ppg"])
"""

from .nba_data import NBADataClient, player_page_url

__all__ = ["NBADataClient", "player_page_url"]
