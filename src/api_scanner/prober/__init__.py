"""Prober module - Individual HTTP probes run against the target."""

from api_scanner.prober.client import HTTPClient, ProbeResponse
from api_scanner.prober.cors import CorsProbe
from api_scanner.prober.disclosure import DisclosureProbe
from api_scanner.prober.discovery import EndpointDiscovery
from api_scanner.prober.methods import MethodProbe

__all__ = [
    "HTTPClient",
    "ProbeResponse",
    "CorsProbe",
    "MethodProbe",
    "DisclosureProbe",
    "EndpointDiscovery",
]
