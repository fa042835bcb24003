import base64
import json

import pytest
from fastapi.testclient import TestClient
from itsdangerous import TimestampSigner

import main
from cache import cache
from config import SESSION_SECRET
from data.catalog import Catalog


@pytest.fixture(scope="session")
def catalog():
    return Catalog()


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(main, "STEAM_API_KEY", "")
    main.limiter.enabled = False
    with TestClient(main.app) as c:
        yield c


def session_cookie(data: dict) -> str:
    """Sign a session payload the way Starlette's SessionMiddleware does."""
    payload = base64.b64encode(json.dumps(data).encode("utf-8"))
    return TimestampSigner(str(SESSION_SECRET)).sign(payload).decode("utf-8")


def fake_fetch_json(responses: dict, calls: list | None = None):
    """Build an async fetch_json stand-in answering by URL substring."""
    async def _fetch(url, params=None, timeout=None):
        if calls is not None:
            calls.append(url)
        for fragment, payload in responses.items():
            if fragment in url:
                return payload
        return None
    return _fetch


SAMPLE_MATCHES = [
    {
        "match_id": 1001, "hero_id": 11, "player_team": 1, "match_result": 1,
        "player_kills": 10, "player_deaths": 2, "player_assists": 8,
        "net_worth": 32000, "match_duration_s": 1900,
        "items": [{"item_id": 2502493491}, {"item_id": 1537272748}, {"item_id": 999999999}],
    },
    {
        "match_id": 1002, "hero_id": 11, "player_team": 0, "match_result": 1,
        "player_kills": 4, "player_deaths": 6, "player_assists": 5,
        "net_worth": 21000, "match_duration_s": 2100,
    },
    {
        "match_id": 1003, "hero_id": 15, "player_team": 0, "match_result": 0,
        "player_kills": 6, "player_deaths": 0, "player_assists": 12,
        "net_worth": 27000, "match_duration_s": 1700,
    },
]
