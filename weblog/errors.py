"""Exception types shared across the weblog package.

Recovery points:
- TransformError: caught by the filter pipeline, rendered as a diagnostic.
- ConfigurationError: never caught; a chain names an unknown transform.
- ClassificationError / ReportError: caught by the comment classifier.
"""

from __future__ import annotations


class WeblogError(Exception):
    """Base class for weblog errors."""


class ConfigurationError(WeblogError):
    """A filter chain or component is misconfigured."""


class TransformError(WeblogError):
    """A named transform failed on its input."""

    def __init__(self, name: str, cause: BaseException):
        super().__init__(f"{name}: {cause}")
        self.name = name
        self.cause = cause


class ClassificationError(WeblogError):
    """The reputation service could not classify a comment."""


class ReportError(WeblogError):
    """The reputation service rejected or failed a spam report."""
