"""Shared test fixtures.

The upstream API is never contacted: ``FakeUpstream`` replaces the
client's single HTTP helper and serves canned payloads by URL.
"""

import copy

import pytest
from fastapi.testclient import TestClient

from pokecatalog.catalog import pokeapi_service
from pokecatalog.main import app

BASE = "https://pokeapi.co/api/v2"
CATALOG_URL = f"{BASE}/pokemon/?limit=100000&offset=0"
BULBASAUR_URL = f"{BASE}/pokemon/1/"
CHARMANDER_URL = f"{BASE}/pokemon/4/"


def detail_payload(pid: int, name: str, sprite: str, *types: str) -> dict:
    return {
        "id": pid,
        "name": name,
        "sprites": {"front_default": sprite, "back_default": None},
        "types": [
            {"slot": i + 1, "type": {"name": t, "url": f"{BASE}/type/{t}/"}}
            for i, t in enumerate(types)
        ],
        "height": 7,
    }


def category_payload(name: str, count: int) -> dict:
    return {
        "id": 10,
        "name": name,
        "pokemon": [
            {"slot": 1, "pokemon": {"name": f"{name}-{i}", "url": f"{BASE}/pokemon/{i}/"}}
            for i in range(1, count + 1)
        ],
    }


class FakeUpstream:
    """Stand-in for ``_http_get_json``: canned payloads keyed by URL."""

    def __init__(self) -> None:
        self.payloads = {}
        self.calls = []

    def __call__(self, url):
        self.calls.append(url)
        return copy.deepcopy(self.payloads.get(url))

    def calls_to(self, prefix: str):
        return [url for url in self.calls if url.startswith(prefix)]


@pytest.fixture()
def upstream(monkeypatch) -> FakeUpstream:
    fake = FakeUpstream()
    monkeypatch.setattr(pokeapi_service, "_http_get_json", fake)
    return fake


@pytest.fixture()
def starter_upstream(upstream: FakeUpstream) -> FakeUpstream:
    """Catalogue of two entries; only bulbasaur's details resolve."""
    upstream.payloads[CATALOG_URL] = {
        "count": 2,
        "next": None,
        "previous": None,
        "results": [
            {"name": "bulbasaur", "url": BULBASAUR_URL},
            {"name": "charmander", "url": CHARMANDER_URL},
        ],
    }
    upstream.payloads[BULBASAUR_URL] = detail_payload(1, "bulbasaur", "img1", "grass", "poison")
    return upstream


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)
