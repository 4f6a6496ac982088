"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- SiteConfig: Public URL, title and runtime environment
- ReputationConfig: Comment reputation service (Akismet) settings
- FilterConfig: Filter chains used when rendering content
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import os
from typing import Any

import yaml


@dataclass
class SiteConfig:
    """Configuration for the published site.

    Attributes:
        url: Base URL that entry permalinks are built under
        title: Site title
        environment: "production" enables outbound spam checks; anything else
            keeps the process network-independent
    """

    url: str = "http://localhost:4567"
    title: str = "My Weblog"
    environment: str = "development"

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"


@dataclass
class ReputationConfig:
    """Configuration for the comment reputation service.

    Attributes:
        provider: Client implementation name ("akismet" currently supported)
        api_key: Optional inline API key (overrides env var)
        api_key_env: Environment variable name containing the API key
        base_url: Base URL of the service REST API
        timeout_seconds: Timeout applied to every outbound call
        recycle_seconds: Age after which the shared client is replaced
        trust_env: Whether to respect system proxy settings
        user_agent: HTTP User-Agent header string
    """

    provider: str = "akismet"
    api_key: str | None = None
    api_key_env: str = "AKISMET_API_KEY"
    base_url: str = "https://rest.akismet.com/1.1"
    timeout_seconds: float = 10.0
    recycle_seconds: float = 600.0
    trust_env: bool = True
    user_agent: str = "weblog/0.1.0 | Akismet/1.1"


@dataclass
class FilterConfig:
    """Configuration for the content filter pipeline.

    Attributes:
        comment_filters: Chain applied to every comment body
        summary_filters: Chain applied to entry summaries
        chains: Named chains an entry's ``filter`` field may refer to
    """

    comment_filters: list[str] = field(default_factory=lambda: ["sanitize", "smartify"])
    summary_filters: list[str] = field(default_factory=lambda: ["markdown"])
    chains: dict[str, list[str]] = field(
        default_factory=lambda: {
            "safe_markdown": ["markdown", "sanitize"],
            "text": ["html", "smartify"],
        }
    )


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
        directory: Directory for the log file; file logging is skipped when unset
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "weblog.jsonl"
    directory: str | None = None


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    site: SiteConfig = field(default_factory=SiteConfig)
    reputation: ReputationConfig = field(default_factory=ReputationConfig)
    filters: FilterConfig = field(default_factory=FilterConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return asdict(cfg)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        site=SiteConfig(**data["site"]),
        reputation=ReputationConfig(**data["reputation"]),
        filters=FilterConfig(**data["filters"]),
        logging=LoggingConfig(**data["logging"]),
    )


def get_api_key(cfg: ReputationConfig) -> str | None:
    """Get API key from inline config or environment variable."""
    if cfg.api_key:
        return cfg.api_key
    return os.getenv(cfg.api_key_env)
