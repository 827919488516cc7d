"""Core module - Configuration, models, and orchestration."""

from api_scanner.core.config import Settings
from api_scanner.core.exceptions import ScannerError
from api_scanner.core.models import NO_RESPONSE, Verdict

__all__ = [
    "Settings",
    "ScannerError",
    "NO_RESPONSE",
    "Verdict",
]
