"""Reports module - Flat-file findings output."""

from api_scanner.reports.findings import FindingsWriter

__all__ = [
    "FindingsWriter",
]
