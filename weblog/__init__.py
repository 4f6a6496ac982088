"""
Weblog - a small personal-publishing engine.

This package renders entries and comments through configurable filter
chains (markdown, sanitize, smartify) and screens reader comments with an
external reputation service (Akismet).

Main entry point is the CLI via the `weblog` command.

Example:
    $ weblog render -i post.md -f safe_markdown
"""

__all__ = [
    "__version__",
    "ClassificationState",
    "Comment",
    "CommentClassifier",
    "ContentRenderer",
    "Entry",
    "FilterPipeline",
]
__version__ = "0.1.0"

from .core.types import ClassificationState, Comment, Entry
from .filters.pipeline import FilterPipeline
from .moderation.classifier import CommentClassifier
from .renderer import ContentRenderer
