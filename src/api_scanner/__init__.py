"""API Security Scanner - Ad-hoc CORS, method, disclosure and endpoint probing."""

__version__ = "1.0.0"

from api_scanner.core.config import Settings
from api_scanner.core.models import Verdict

__all__ = [
    "Settings",
    "Verdict",
]
