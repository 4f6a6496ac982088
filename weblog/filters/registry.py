"""Transform registry mapping names to text transforms."""

from __future__ import annotations

from typing import Callable

from ..errors import ConfigurationError
from . import transforms

Transform = Callable[[str], str]

_BUILTIN_TRANSFORMS: dict[str, Transform] = {
    "markdown": transforms.markdown,
    "sanitize": transforms.sanitize,
    "smartify": transforms.smartify,
    "html": transforms.html,
}


class TransformRegistry:
    """Append-only mapping of transform names to functions.

    Registration happens during start-up. After ``freeze()`` the registry is
    read-only and may be shared across threads.
    """

    def __init__(self) -> None:
        self._transforms: dict[str, Transform] = {}
        self._frozen = False

    def register(self, name: str, fn: Transform) -> None:
        if self._frozen:
            raise ConfigurationError(f"Transform registry is frozen; cannot register {name!r}")
        if name in self._transforms:
            raise ConfigurationError(f"Transform already registered: {name}")
        self._transforms[name] = fn

    def lookup(self, name: str) -> Transform:
        try:
            return self._transforms[name]
        except KeyError:
            supported = ", ".join(self.names())
            raise ConfigurationError(
                f"Unknown transform: {name}. Registered: {supported}"
            ) from None

    def names(self) -> list[str]:
        return sorted(self._transforms)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return name in self._transforms


def default_registry() -> TransformRegistry:
    """Return a frozen registry holding the built-in transforms."""
    registry = TransformRegistry()
    for name, fn in _BUILTIN_TRANSFORMS.items():
        registry.register(name, fn)
    registry.freeze()
    return registry
