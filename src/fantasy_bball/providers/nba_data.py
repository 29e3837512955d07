"""data.nba.net player profile client."""

import logging
from typing import Any

from ..aggregators import SeasonNormalizer
from ..core.config import get_settings
from ..core.http import JsonFetcher
from ..models import PlayerProfile

logger = logging.getLogger(__name__)


def player_page_url(person_id: int | str, base_url: str | None = None) -> str:
    """
    Build the URL of a player's profile document.

    Args:
        person_id: Provider-assigned player id, e.g. 203500 (Steven Adams)
        base_url: Directory holding the profile documents (defaults to settings)

    Returns:
        ``<base_url>/<person_id>_profile.json``
    """
    person_id = str(person_id).strip()
    if not (person_id.isascii() and person_id.isdigit()):
        raise ValueError(f"personId must be a non-negative integer, got {person_id!r}")
    base = (base_url or get_settings().nba_data_base_url).rstrip("/")
    return f"{base}/{person_id}_profile.json"


class NBADataClient(JsonFetcher):
    """data.nba.net profile client."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        **kwargs: Any,
    ):
        settings = get_settings()
        super().__init__(
            base_url=base_url or settings.nba_data_base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
            **kwargs,
        )

    def __enter__(self) -> "NBADataClient":
        return self

    def player_page(self, person_id: int | str) -> str:
        """URL of a player's profile document."""
        return player_page_url(person_id, self.base_url)

    def get_profile_document(self, person_id: int | str) -> dict[str, Any]:
        """Fetch the raw profile document of a player."""
        return self.get_json(self.player_page(person_id))

    def get_player_profile(self, person_id: int) -> PlayerProfile:
        """
        Fetch a player's profile and normalize its seasons.

        Raises:
            TransportError: If the profile cannot be fetched
            InvalidContentsError: If the body is not JSON
            DocumentShapeError: If the document lacks the season list
        """
        document = self.get_profile_document(person_id)
        profile = PlayerProfile.from_document(document, person_id=int(person_id))
        logger.debug(f"Fetched {len(profile.seasons)} seasons for player {person_id}")
        return SeasonNormalizer.normalize(profile)
