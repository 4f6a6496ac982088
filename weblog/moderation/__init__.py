"""Comment moderation: spam classification and manual spam reports."""

from .classifier import CommentClassifier, comment_params, create_classifier

__all__ = ["CommentClassifier", "comment_params", "create_classifier"]
