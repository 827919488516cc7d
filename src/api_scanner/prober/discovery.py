"""Wordlist-driven endpoint discovery."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from api_scanner.core.config import ProberSettings
from api_scanner.core.logging import get_logger
from api_scanner.core.models import NO_RESPONSE, DiscoveredEndpoint, DiscoveryResult
from api_scanner.prober.client import HTTPClient
from api_scanner.reports.findings import FindingsWriter

console = Console()
logger = get_logger(__name__)

# Statuses that do not count as a discovered endpoint
MISS_STATUSES = frozenset({NO_RESPONSE, 404, 403})


def build_candidate_url(target: str, entry: str) -> str:
    """Join target and wordlist entry with exactly one slash between them."""
    return f"{target.removesuffix('/')}/{entry.removeprefix('/')}"


def is_readable_file(path: Optional[Path]) -> bool:
    return path is not None and path.is_file() and os.access(path, os.R_OK)


def load_wordlist(path: Path) -> list[str]:
    """Read wordlist entries in file order, skipping empty lines.

    Entries are used verbatim apart from the line ending. Undecodable bytes
    become U+FFFD rather than vanishing from the path.
    """
    with open(path, encoding="utf-8", errors="replace", newline="\n") as f:
        lines = [line.removesuffix("\n").removesuffix("\r") for line in f]
    return [line for line in lines if line]


class EndpointDiscovery:
    """
    Brute-forces paths under the target from a wordlist.

    Every candidate that answers with anything but 404, 403 or a failed
    request is printed, appended to the discovery results file and counted.
    Requests use ``discovery_timeout`` rather than the global timeout.
    """

    def __init__(
        self,
        settings: ProberSettings,
        client: HTTPClient,
        writer: FindingsWriter,
    ):
        self.settings = settings
        self.client = client
        self.writer = writer

    def run(self, target: str, wordlist: Optional[Path]) -> DiscoveryResult:
        if not is_readable_file(wordlist):
            logger.debug("discovery_skipped", wordlist=str(wordlist) if wordlist else None)
            return DiscoveryResult(skipped=True)

        try:
            entries = load_wordlist(wordlist)
        except OSError as e:
            logger.warning("wordlist_unreadable", wordlist=str(wordlist), error=str(e))
            return DiscoveryResult(skipped=True)

        console.print("\n[yellow][PHASE] Endpoint Discovery[/yellow]")
        result = DiscoveryResult()

        for entry in entries:
            url = build_candidate_url(target, entry)
            result.probed.append(url)

            status_code = self.client.status(
                "GET", url, timeout=self.settings.discovery_timeout
            )
            if status_code in MISS_STATUSES:
                continue

            console.print(
                f"[green][FOUND] {escape(url)} - Status: {status_code}[/green]",
                soft_wrap=True,
            )
            self.writer.add_discovered_endpoint(url)
            result.found.append(DiscoveredEndpoint(url=url, status_code=status_code))

        console.print(f"[blue][INFO] Discovered {result.count} endpoints[/blue]")
        return result
