"""Test configuration and fixtures for the API Security Scanner."""

from pathlib import Path
from typing import Callable

import httpx
import pytest

from api_scanner.core.config import Settings
from api_scanner.core.logging import configure_logging
from api_scanner.prober.client import HTTPClient
from api_scanner.reports.findings import FindingsWriter


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep diagnostic logs out of captured stdout."""
    configure_logging(level="WARNING")


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Output directory for scan results (not created yet)."""
    return tmp_path / "api_scan_results"


@pytest.fixture
def settings(output_dir: Path) -> Settings:
    """Default settings writing into a temporary output directory."""
    settings = Settings()
    settings.scanner.output_dir = output_dir
    return settings


@pytest.fixture
def writer(output_dir: Path) -> FindingsWriter:
    """Findings writer with its output directory already created."""
    writer = FindingsWriter(output_dir)
    writer.prepare()
    return writer


@pytest.fixture
def make_client(settings: Settings):
    """Build HTTPClients whose requests are answered by a handler function."""
    clients: list[HTTPClient] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> HTTPClient:
        client = HTTPClient(settings.prober, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


def refuse(request: httpx.Request) -> httpx.Response:
    """Handler simulating an unreachable target."""
    raise httpx.ConnectError("Connection refused", request=request)
