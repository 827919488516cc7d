"""Data models for the API Security Scanner."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field

# Status recorded when a request fails outright (refused, timed out, bad URL)
NO_RESPONSE = 0


class Verdict(str, Enum):
    """Classification emitted by a probe."""

    VULNERABLE = "vulnerable"
    INFORMATIONAL = "informational"
    SAFE = "safe"


class HTTPMethod(str, Enum):
    """HTTP methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"


class CorsResult(BaseModel):
    """Outcome of the CORS misconfiguration probe."""

    url: str
    verdict: Verdict
    allow_origin: str | None = Field(
        default=None,
        description="Value of Access-Control-Allow-Origin, if present"
    )


class MethodStatus(BaseModel):
    """Status code observed for one HTTP method."""

    method: str
    status_code: int = NO_RESPONSE

    # 404/405 and failed requests say nothing about the method being accepted
    IGNORED_STATUSES: ClassVar[frozenset[int]] = frozenset({NO_RESPONSE, 404, 405})

    @property
    def interesting(self) -> bool:
        return self.status_code not in self.IGNORED_STATUSES


class MethodProbeResult(BaseModel):
    """Outcome of the HTTP method probe."""

    url: str
    statuses: list[MethodStatus] = Field(default_factory=list)

    @property
    def allowed(self) -> list[MethodStatus]:
        """Methods answered with something other than 404/405/no response."""
        return [s for s in self.statuses if s.interesting]


class DisclosureResult(BaseModel):
    """Outcome of the information disclosure probe."""

    url: str
    matched_keywords: list[str] = Field(default_factory=list)
    reachable: bool = True

    @property
    def verdict(self) -> Verdict:
        return Verdict.INFORMATIONAL if self.matched_keywords else Verdict.SAFE


class DiscoveredEndpoint(BaseModel):
    """A wordlist candidate that answered with an interesting status."""

    url: str
    status_code: int


class DiscoveryResult(BaseModel):
    """Outcome of wordlist endpoint discovery."""

    probed: list[str] = Field(default_factory=list)
    found: list[DiscoveredEndpoint] = Field(default_factory=list)
    skipped: bool = False

    @property
    def count(self) -> int:
        return len(self.found)
