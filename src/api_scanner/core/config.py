"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from api_scanner.core.exceptions import ConfigurationError
from api_scanner.core.models import HTTPMethod


class ScannerSettings(BaseModel):
    """Scan-wide configuration."""

    output_dir: Path = Field(
        default=Path("api_scan_results"),
        description="Directory receiving the result files"
    )

    required_tools: list[str] = Field(
        default_factory=list,
        description="Extra executables that must resolve on PATH before scanning"
    )


class ProberSettings(BaseModel):
    """Prober module configuration."""

    timeout: float = Field(
        default=10.0,
        gt=0,
        le=300,
        description="Per-request timeout in seconds"
    )

    discovery_timeout: float = Field(
        default=5.0,
        gt=0,
        le=300,
        description="Per-request timeout used by wordlist endpoint discovery"
    )

    follow_redirects: bool = Field(
        default=False,
        description="Follow HTTP redirects"
    )

    verify_ssl: bool = Field(
        default=True,
        description="Verify SSL certificates"
    )

    user_agent: str = Field(
        default="APIScanner/1.0",
        description="User-Agent header for requests"
    )

    cors_origin: str = Field(
        default="https://evil.com",
        description="Origin header sent by the CORS probe"
    )

    methods_to_test: list[HTTPMethod] = Field(
        default_factory=lambda: list(HTTPMethod),
        description="HTTP methods tried by the method probe, in order"
    )

    sensitive_keywords: list[str] = Field(
        default=["password", "secret", "key", "token", "database", "internal", "debug"],
        description="Keywords searched for in the target's response body"
    )


class Settings(BaseSettings):
    """Main configuration container."""

    model_config = SettingsConfigDict(
        env_prefix="API_SCANNER_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    scanner: ScannerSettings = Field(default_factory=ScannerSettings)
    prober: ProberSettings = Field(default_factory=ProberSettings)

    dry_run: bool = Field(
        default=False,
        description="Dry run mode - no actual network requests"
    )

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML configuration file."""
        import yaml

        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid config file {path}: {e}") from e

    @classmethod
    def from_file_or_default(cls, path: Path | None = None) -> "Settings":
        """Load from file if exists, otherwise return defaults."""
        default_paths = [
            Path("api-scanner.yaml"),
            Path("api-scanner.yml"),
            Path(".api-scanner.yaml"),
            Path.home() / ".config" / "api-scanner" / "config.yaml",
        ]

        if path is not None:
            if not path.exists():
                raise ConfigurationError(f"Config file {path} does not exist")
            return cls.from_yaml(path)

        for default_path in default_paths:
            if default_path.exists():
                return cls.from_yaml(default_path)

        return cls()
