import os
import sys
import tempfile
from pathlib import Path

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

# keep log files and runtime config out of the working tree
_scratch = tempfile.mkdtemp(prefix="pokedex-tests-")
os.environ.setdefault("POKEDEX_LOGS_DIR", str(Path(_scratch) / "logs"))
os.environ.setdefault("POKEDEX_DATA_DIR", str(Path(_scratch) / "data"))

LIST_URL = "https://pokeapi.co/api/v2/pokemon"


def detail_url(n: int) -> str:
    return f"https://pokeapi.co/api/v2/pokemon/{n}/"


def detail_payload(n: int, types=("fire",), weight=85, base_experience=62) -> dict:
    return {
        "id": n,
        "name": f"ignored-{n}",
        "sprites": {"front_default": f"https://img.example/{n}.png", "back_default": None},
        "types": [{"slot": i + 1, "type": {"name": t, "url": "x"}} for i, t in enumerate(types)],
        "weight": weight,
        "base_experience": base_experience,
        "height": 6,
    }


def listing_payload(names: list[str], start: int = 1) -> dict:
    return {
        "count": 1302,
        "next": None,
        "previous": None,
        "results": [{"name": name, "url": detail_url(start + i)} for i, name in enumerate(names)],
    }


class FakeUpstream:
    """Stands in for httpx.AsyncClient; routes GETs to canned responses.

    A route value is either a ``(status, json)`` pair or an async callable
    taking the request URL and returning one.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def __call__(self, *args, **kwargs):
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        pass

    async def get(self, url, params=None):
        self.requests.append((url, params))
        route = self.routes.get(url)
        if route is None:
            raise httpx.ConnectError("no route", request=httpx.Request("GET", url))
        if callable(route):
            route = await route(url)
        status, body = route
        return httpx.Response(status, json=body, request=httpx.Request("GET", url, params=params))

    def serve(self, names: list[str], **detail_kwargs) -> None:
        self.routes[LIST_URL] = (200, listing_payload(names))
        for i, _ in enumerate(names):
            self.routes[detail_url(i + 1)] = (200, detail_payload(i + 1, **detail_kwargs))


@pytest.fixture
def upstream(monkeypatch):
    fake = FakeUpstream()
    monkeypatch.setattr(httpx, "AsyncClient", fake)
    return fake
