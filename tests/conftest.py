"""Shared fixtures for srenity tests."""

from collections.abc import Callable, Iterator
from pathlib import Path

import httpx
import pytest

from srenity.cli import configure_logging
from srenity.handler import Handler

API_URL = "https://api.srenity.test/v1"
AUTH_URL = "https://auth.srenity.test"

Responder = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Configure logging as the CLI entry point does, so log lines stay out of captured stdout."""
    configure_logging("critical")


@pytest.fixture
def handler() -> Handler:
    """Create a handler pointing at test base URLs."""
    return Handler(api_url=API_URL, auth_url=AUTH_URL)


@pytest.fixture
def sent() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_client(sent: list[httpx.Request]) -> Iterator[Callable[[Responder], httpx.Client]]:
    """Create httpx clients backed by a mock transport that records requests."""
    clients: list[httpx.Client] = []

    def _make(respond: Responder) -> httpx.Client:
        def _record(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return respond(request)

        client = httpx.Client(transport=httpx.MockTransport(_record))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate the home and working directories."""
    home_dir = tmp_path / "home"
    work_dir = tmp_path / "work"
    home_dir.mkdir()
    work_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.chdir(work_dir)
    return home_dir
