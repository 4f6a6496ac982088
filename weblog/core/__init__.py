"""
Core domain models.

This package contains data types that are independent of rendering,
storage and the reputation service.
"""

from .types import (
    ClassificationResult,
    ClassificationState,
    Comment,
    Entry,
    parse_tag_names,
)

__all__ = [
    "ClassificationResult",
    "ClassificationState",
    "Comment",
    "Entry",
    "parse_tag_names",
]
