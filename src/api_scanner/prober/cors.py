"""CORS misconfiguration probe."""

from __future__ import annotations

from typing import Mapping, Optional

from rich.console import Console
from rich.markup import escape

from api_scanner.core.config import ProberSettings
from api_scanner.core.exceptions import ProbeError
from api_scanner.core.logging import get_logger
from api_scanner.core.models import CorsResult, Verdict
from api_scanner.prober.client import HTTPClient
from api_scanner.reports.findings import FindingsWriter

console = Console()
logger = get_logger(__name__)

ALLOW_ORIGIN_HEADER = "access-control-allow-origin"


def classify_cors(headers: Mapping[str, str]) -> tuple[Verdict, Optional[str]]:
    """
    Classify a response by its Access-Control-Allow-Origin header.

    ``headers`` must do case-insensitive lookups (``httpx.Headers`` does).

    Returns:
        The verdict and the header value, if the header was present
    """
    allow_origin = headers.get(ALLOW_ORIGIN_HEADER)
    if allow_origin is None:
        return Verdict.SAFE, None
    if allow_origin.strip() == "*":
        return Verdict.VULNERABLE, allow_origin
    return Verdict.INFORMATIONAL, allow_origin


class CorsProbe:
    """
    Sends a cross-origin preflight-style HEAD request and checks whether the
    API answers with a wildcard Access-Control-Allow-Origin.
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

    def run(self, url: str) -> CorsResult:
        console.print("\n[yellow][TEST] CORS Misconfiguration Check[/yellow]")

        request_headers = {
            "Origin": self.settings.cors_origin,
            "Access-Control-Request-Method": "GET",
        }

        try:
            response = self.client.request("HEAD", url, headers=request_headers)
            headers = response.headers
        except ProbeError as e:
            # An unreachable target is indistinguishable from one without CORS headers
            logger.info("cors_probe_no_response", url=url, error=str(e))
            headers = {}

        verdict, allow_origin = classify_cors(headers)

        if verdict is Verdict.VULNERABLE:
            console.print(
                "[red][VULNERABLE] CORS misconfiguration - Access-Control-Allow-Origin: *[/red]"
            )
            self.writer.add_cors_vulnerability(url)
        elif verdict is Verdict.INFORMATIONAL:
            console.print(
                f"[yellow][INFO] CORS headers present but restricted "
                f"({escape(allow_origin)})[/yellow]",
                soft_wrap=True,
            )
        else:
            console.print("[green][SAFE] No CORS misconfiguration detected[/green]")

        return CorsResult(url=url, verdict=verdict, allow_origin=allow_origin)
