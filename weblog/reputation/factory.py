"""Client factory and registry for reputation service backends."""

from __future__ import annotations

from ..config import ReputationConfig, get_api_key
from .akismet import AkismetClient
from .base import ReputationClient


ClientBuilder = type[ReputationClient]

_CLIENT_REGISTRY: dict[str, ClientBuilder] = {
    "akismet": AkismetClient,
}


def available_clients() -> list[str]:
    """Return the set of registered client names."""
    return sorted(_CLIENT_REGISTRY.keys())


def create_client(cfg: ReputationConfig, site_url: str) -> ReputationClient:
    """Build a client instance from runtime config."""
    name = cfg.provider.lower().strip()
    builder = _CLIENT_REGISTRY.get(name)
    if builder is None:
        supported = ", ".join(available_clients())
        raise ValueError(f"Unsupported reputation provider: {cfg.provider}. Supported: {supported}")
    api_key = get_api_key(cfg)
    return builder(cfg, api_key, site_url)
