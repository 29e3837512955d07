"""
Pytest configuration for fantasy_bball tests.

HTTP is served from frozen profile documents in tests/fixtures through
httpx.MockTransport, so no test touches the network.
"""

import json
from pathlib import Path

import httpx
import pytest

from fantasy_bball.providers import NBADataClient
from fantasy_bball.stats import reset_registry

FIXTURES_DIR = Path(__file__).parent / "fixtures"
TEST_BASE_URL = "http://data.test/prod/v1/2019/players"

REFERENCE_PERSON_ID = 203500  # Steven Adams, single team
TRADED_PERSON_ID = 202738  # Isaiah Thomas, CLE -> LAL in 2017


def load_fixture(name: str) -> dict:
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


class ProfileServer:
    """Serves ``<personId>_profile.json`` from an in-memory table and records hits."""

    def __init__(self, documents: dict):
        self.documents = {str(k): v for k, v in documents.items()}
        self.requests: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(str(request.url))
        name = request.url.path.rsplit("/", 1)[-1]
        person_id = name.removesuffix("_profile.json")
        if person_id not in self.documents:
            return httpx.Response(404, text="Not Found")
        body = self.documents[person_id]
        if isinstance(body, str):
            return httpx.Response(200, text=body)
        return httpx.Response(200, json=body)

    def hits(self, person_id) -> int:
        suffix = f"/{person_id}_profile.json"
        return sum(1 for url in self.requests if url.endswith(suffix))


@pytest.fixture(autouse=True)
def clean_registry():
    """Every test starts without a process-wide registry."""
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def server():
    return ProfileServer(
        {
            REFERENCE_PERSON_ID: load_fixture("203500_profile.json"),
            TRADED_PERSON_ID: load_fixture("202738_profile.json"),
        }
    )


@pytest.fixture
def client(server):
    with NBADataClient(base_url=TEST_BASE_URL, transport=httpx.MockTransport(server)) as c:
        yield c
