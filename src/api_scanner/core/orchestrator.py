"""Runs the probes in order against a single target."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from api_scanner.core.config import ProberSettings, Settings
from api_scanner.core.logging import log_scan_event
from api_scanner.prober.client import HTTPClient
from api_scanner.reports.findings import FindingsWriter

console = Console()


def build_client(settings: ProberSettings) -> HTTPClient:
    """Create the HTTP client used for a scan."""
    return HTTPClient(settings)


@dataclass
class ScanOutcome:
    """Bookkeeping for a finished scan. Findings live in the output files."""

    scan_id: str
    target: str
    output_dir: Path
    duration_seconds: float


class ScanOrchestrator:
    """Orchestrates the scan pipeline: CORS → Methods → Disclosure → Discovery."""

    def __init__(self, settings: Settings, client: Optional[HTTPClient] = None):
        self.settings = settings
        self._client = client

    def run(self, target: str, wordlist: Optional[Path] = None) -> ScanOutcome:
        """Execute every probe against ``target``.

        Probes share nothing but the HTTP client and the findings writer;
        a failing request inside one probe never stops the next.

        Args:
            target: Target base URL, used as given
            wordlist: Optional wordlist enabling endpoint discovery
        """
        from api_scanner.prober import (
            CorsProbe,
            DisclosureProbe,
            EndpointDiscovery,
            MethodProbe,
        )

        scan_id = str(uuid.uuid4())[:8]
        start_time = time.time()
        output_dir = self.settings.scanner.output_dir
        prober_settings = self.settings.prober

        console.print(
            f"\n[green][START] Security scan initiated for: {escape(target)}[/green]",
            soft_wrap=True,
        )
        log_scan_event("scan_started", scan_id, target=target, output_dir=str(output_dir))

        writer = FindingsWriter(output_dir)
        writer.prepare()

        client = self._client or build_client(prober_settings)
        try:
            CorsProbe(prober_settings, client, writer).run(target)
            MethodProbe(prober_settings, client).run(target)
            DisclosureProbe(prober_settings, client).run(target)
            EndpointDiscovery(prober_settings, client, writer).run(target, wordlist)
        finally:
            if self._client is None:
                client.close()

        duration = time.time() - start_time
        log_scan_event("scan_completed", scan_id, target=target, duration_seconds=round(duration, 2))
        console.print(
            f"\n[green][COMPLETE] Scan results saved to: {escape(str(output_dir))}/[/green]",
            soft_wrap=True,
        )

        return ScanOutcome(
            scan_id=scan_id,
            target=target,
            output_dir=output_dir,
            duration_seconds=duration,
        )
