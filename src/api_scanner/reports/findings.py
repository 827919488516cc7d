"""Flat-file findings output.

Each result file is an append-only list of URLs, one per line, UTF-8, with
no header or footer.
"""

from __future__ import annotations

from pathlib import Path

from api_scanner.core.exceptions import OutputError
from api_scanner.core.logging import get_logger

logger = get_logger(__name__)

CORS_FINDINGS_FILE = "cors_vulnerabilities.txt"
DISCOVERY_FINDINGS_FILE = "discovered_endpoints.txt"


class FindingsWriter:
    """Appends finding URLs to the result files under the output directory."""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    @property
    def cors_file(self) -> Path:
        return self.output_dir / CORS_FINDINGS_FILE

    @property
    def discovery_file(self) -> Path:
        return self.output_dir / DISCOVERY_FINDINGS_FILE

    def prepare(self) -> None:
        """Create the output directory if it does not already exist."""
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError(f"Cannot create output directory {self.output_dir}: {e}") from e

    def add_cors_vulnerability(self, url: str) -> None:
        self._append(self.cors_file, url)

    def add_discovered_endpoint(self, url: str) -> None:
        self._append(self.discovery_file, url)

    def _append(self, path: Path, line: str) -> None:
        try:
            with open(path, "a", encoding="utf-8") as f:
                f.write(f"{line}\n")
        except OSError as e:
            raise OutputError(f"Cannot write to {path}: {e}") from e

        logger.debug("finding_written", file=path.name, url=line)
