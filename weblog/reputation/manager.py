"""
Lifecycle management for the shared reputation client.

The underlying client is suspected to leak resources when kept alive
indefinitely, so the manager replaces it once it is older than the recycle
threshold, whether or not it has shown any failures. Recycling is checked
lazily whenever a caller asks for the client.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
import logging
import threading
import time
from typing import Callable, Iterator

from ..errors import ConfigurationError
from .base import ReputationClient

logger = logging.getLogger(__name__)

DEFAULT_RECYCLE_SECONDS = 600.0


@dataclass(eq=False)
class ClientHandle:
    """A live client stamped with its creation time.

    Attributes:
        client: The wrapped reputation client
        created_at: Manager clock reading when the client was built
        in_flight: Number of calls currently using this handle
        retired: True once a newer handle has replaced this one
        closed: True once the client has been closed
    """

    client: ReputationClient
    created_at: float
    in_flight: int = 0
    retired: bool = False
    closed: bool = False


class ReputationClientManager:
    """Owns the single live reputation client handle.

    ``current()`` and ``acquire()`` run their read-check-replace step under
    one lock. A replaced handle is closed as soon as no call is using it.
    """

    def __init__(
        self,
        factory: Callable[[], ReputationClient],
        recycle_seconds: float = DEFAULT_RECYCLE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._factory = factory
        self.recycle_seconds = recycle_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._handle: ClientHandle | None = None

    def current(self) -> ClientHandle:
        """Return the live handle, replacing it first if it has aged out.

        The returned handle is not tracked as in use and may be closed by the
        next recycle. Callers making service calls must use ``acquire()``.
        """
        with self._lock:
            return self._current_locked()

    @contextmanager
    def acquire(self) -> Iterator[ClientHandle]:
        """Yield the live handle, keeping it open until the block exits.

        The caller's network call runs outside the manager lock.
        """
        with self._lock:
            handle = self._current_locked()
            handle.in_flight += 1
        try:
            yield handle
        finally:
            with self._lock:
                handle.in_flight -= 1
                close_now = handle.retired and handle.in_flight == 0
            if close_now:
                self._close(handle)

    def close(self) -> None:
        """Retire the live handle, closing it once idle."""
        with self._lock:
            handle = self._handle
            self._handle = None
            if handle is None:
                return
            handle.retired = True
            close_now = handle.in_flight == 0
        if close_now:
            self._close(handle)

    def _current_locked(self) -> ClientHandle:
        now = self._clock()
        handle = self._handle
        if handle is not None and now - handle.created_at <= self.recycle_seconds:
            return handle

        try:
            client = self._factory()
        except ValueError as exc:
            raise ConfigurationError(f"Cannot build reputation client: {exc}") from exc
        new_handle = ClientHandle(client=client, created_at=now)
        self._handle = new_handle
        if handle is not None:
            handle.retired = True
            logger.info(
                "Recycling reputation client after %.0fs", now - handle.created_at
            )
            if handle.in_flight == 0:
                self._close(handle)
        return new_handle

    def _close(self, handle: ClientHandle) -> None:
        if handle.closed:
            return
        handle.closed = True
        try:
            handle.client.close()
        except Exception:  # noqa: BLE001
            logger.warning("Failed to close retired reputation client", exc_info=True)
