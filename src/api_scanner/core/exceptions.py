"""Custom exceptions for the API Security Scanner.

Fatal errors (configuration, missing dependencies) stop the run before any
request is sent. Probe errors are raised by the HTTP client and absorbed by
the individual probes, which substitute an empty body or the sentinel status.
"""

from __future__ import annotations


class ScannerError(Exception):
    """Base exception for all scanner errors.

    All custom exceptions inherit from this class, allowing callers to
    catch every scanner-specific error with a single except clause.
    """
    pass


class ConfigurationError(ScannerError):
    """Raised when a configuration file cannot be read or validated."""
    pass


class DependencyError(ScannerError):
    """Raised when a required library or executable cannot be resolved."""

    def __init__(self, name: str, kind: str = "module"):
        self.name = name
        self.kind = kind
        super().__init__(f"Required {kind} missing: {name}")


class ProbeError(ScannerError):
    """Raised when a single HTTP request made by a probe fails.

    This includes:
    - Connection refused or DNS failure
    - Request timeouts
    - Protocol errors from the HTTP client
    """
    pass


class NetworkTimeoutError(ProbeError):
    """Raised when a network request times out."""
    pass


class RequestFailedError(ProbeError):
    """Raised when a request fails for any reason other than a timeout."""
    pass


class OutputError(ScannerError):
    """Raised when a result file cannot be written."""
    pass
