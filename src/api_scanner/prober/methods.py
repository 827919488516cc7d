"""HTTP method enumeration probe."""

from __future__ import annotations

from rich.console import Console

from api_scanner.core.config import ProberSettings
from api_scanner.core.models import MethodProbeResult, MethodStatus
from api_scanner.prober.client import HTTPClient

console = Console()


class MethodProbe:
    """
    Requests the target once per configured HTTP method and reports every
    method whose status is not 404, 405 or a failed request.

    This is a presence signal only; a 401 or 500 still means the server
    routed the method somewhere.
    """

    def __init__(self, settings: ProberSettings, client: HTTPClient):
        self.settings = settings
        self.client = client

    def run(self, url: str) -> MethodProbeResult:
        console.print("\n[yellow][TEST] HTTP Method Testing[/yellow]")

        result = MethodProbeResult(url=url)

        for http_method in self.settings.methods_to_test:
            method = http_method.value
            status_code = self.client.status(method, url, timeout=self.settings.timeout)
            status = MethodStatus(method=method, status_code=status_code)
            result.statuses.append(status)

            if status.interesting:
                console.print(
                    f"[blue][INFO] {method} method allowed - Status: {status_code}[/blue]"
                )

        return result
