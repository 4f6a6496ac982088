"""Content filters: transform registry, built-in transforms and pipeline."""

from .pipeline import FilterPipeline, error_fragment
from .registry import TransformRegistry, default_registry
from .transforms import html, markdown, sanitize, smartify

__all__ = [
    "FilterPipeline",
    "TransformRegistry",
    "default_registry",
    "error_fragment",
    "html",
    "markdown",
    "sanitize",
    "smartify",
]
