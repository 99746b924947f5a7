from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import httpx
import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from calls.factory import build_call_client  # noqa: E402
from config.settings import Settings, get_settings  # noqa: E402


class RecordingTransport:
    """MockTransport handler that records requests and replays queued responses.

    Responses are queued per ``(method, path)``; the last queued response is
    reused once the queue is down to one. Unrouted requests get an empty 204.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], list[httpx.Response]] = {}

    def add(self, method: str, path: str, status_code: int = 200, json: Any = None) -> None:
        if json is None:
            response = httpx.Response(status_code)
        else:
            response = httpx.Response(status_code, json=json)
        self._routes.setdefault((method, path), []).append(response)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self._routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(204)
        return queue.pop(0) if len(queue) > 1 else queue[0]

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def calls(self) -> list[tuple[str, str]]:
        return [(r.method, r.url.path) for r in self.requests]


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        nexmo_api_key="key",
        nexmo_api_secret="secret",
        nexmo_search_page_size=2,
    )


@pytest.fixture()
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture()
def http_client(settings: Settings, transport: RecordingTransport):
    client = httpx.Client(
        base_url=settings.nexmo_api_base_url,
        transport=httpx.MockTransport(transport),
    )
    yield client
    client.close()


@pytest.fixture()
def call_client(settings: Settings, http_client: httpx.Client):
    return build_call_client(settings, http_client=http_client)
