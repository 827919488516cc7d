"""Sensitive keyword search over the target's response body."""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.markup import escape

from api_scanner.core.config import ProberSettings
from api_scanner.core.exceptions import ProbeError
from api_scanner.core.logging import get_logger
from api_scanner.core.models import DisclosureResult
from api_scanner.prober.client import HTTPClient

console = Console()
logger = get_logger(__name__)


def find_keywords(body: str, keywords: Iterable[str]) -> list[str]:
    """Return the keywords occurring in ``body``, ignoring case, in keyword order."""
    haystack = body.lower()
    return [keyword for keyword in keywords if keyword.lower() in haystack]


class DisclosureProbe:
    """Flags a response body that mentions passwords, secrets, tokens and the like."""

    def __init__(self, settings: ProberSettings, client: HTTPClient):
        self.settings = settings
        self.client = client

    def run(self, url: str) -> DisclosureResult:
        console.print("\n[yellow][TEST] Information Disclosure Check[/yellow]")

        reachable = True
        try:
            body = self.client.request("GET", url, timeout=self.settings.timeout).text
        except ProbeError as e:
            logger.info("disclosure_probe_no_response", url=url, error=str(e))
            body = ""
            reachable = False

        matched = find_keywords(body, self.settings.sensitive_keywords)
        for keyword in matched:
            console.print(
                f"[yellow][INFO] Potential information disclosure: "
                f"'{escape(keyword)}' found[/yellow]"
            )

        return DisclosureResult(url=url, matched_keywords=matched, reachable=reachable)
