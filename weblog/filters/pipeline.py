"""
Filter pipeline: ordered, fault-tolerant application of named transforms.

A chain is either an explicit sequence of transform names or a single
string naming a configured chain or one registered transform. Chains are
resolved in full before any transform runs, so an unknown name raises
ConfigurationError instead of rendering partially.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from markupsafe import escape

from ..errors import ConfigurationError, TransformError
from .registry import TransformRegistry

logger = logging.getLogger(__name__)

Chain = str | Sequence[str]


def error_fragment(error: BaseException) -> str:
    """Visible diagnostic rendered in place of content that failed to filter."""
    return f"<p><strong>Boom!</strong></p><pre>{escape(str(error))}</pre>"


class FilterPipeline:
    """Applies filter chains against a transform registry.

    Attributes:
        registry: Source of transform functions
        chains: Named chains, keyed by the name content records refer to
    """

    def __init__(
        self,
        registry: TransformRegistry,
        chains: Mapping[str, Sequence[str]] | None = None,
    ):
        self.registry = registry
        self.chains = {name: tuple(names) for name, names in (chains or {}).items()}

    def resolve(self, chain: Chain) -> tuple[str, ...]:
        """Expand a chain reference into transform names and validate them."""
        if isinstance(chain, str):
            name = chain.strip()
            if name in self.chains:
                names = self.chains[name]
            elif name in self.registry:
                names = (name,)
            else:
                raise ConfigurationError(f"Unknown filter chain or transform: {chain!r}")
        else:
            names = tuple(chain)
        for name in names:
            self.registry.lookup(name)
        return names

    def apply(self, text: str | None, chain: Chain) -> str:
        """Run ``text`` through each transform in ``chain``, left to right.

        Returns an empty string for empty input. If a transform raises, the
        remaining transforms are skipped and an escaped diagnostic fragment
        is returned instead of propagating the error.
        """
        names = self.resolve(chain)
        if not text:
            return ""

        result = text
        for name in names:
            transform = self.registry.lookup(name)
            try:
                result = transform(result)
            except Exception as exc:  # noqa: BLE001
                error = exc if isinstance(exc, TransformError) else TransformError(name, exc)
                logger.warning("Transform failed: %s", error, exc_info=True)
                return error_fragment(error)
        return result
