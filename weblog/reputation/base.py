"""Abstract interface for comment reputation services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping


class ReputationClient(ABC):
    """Client for a service that judges whether a comment is spam.

    Implementations hold network resources and must be closed when retired.
    """

    @abstractmethod
    def check(self, params: Mapping[str, str | None]) -> bool:
        """Return True if the service judges the comment to be spam."""
        raise NotImplementedError

    @abstractmethod
    def submit_spam(self, params: Mapping[str, str | None]) -> None:
        """Report a comment the service missed as spam."""
        raise NotImplementedError

    def close(self) -> None:
        """Release network resources."""

    def verify_key(self) -> bool:
        """Return True if the service accepts the configured credentials."""
        raise NotImplementedError
