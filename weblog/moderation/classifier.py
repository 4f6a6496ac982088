"""
Comment spam classification against the reputation service.

Failures are fail-open: a comment whose check could not run is still
accepted, but lands in CHECK_FAILED so it is surfaced for review instead of
being trusted as ham.
"""

from __future__ import annotations

import logging

import httpx

from ..config import AppConfig
from ..core.types import ClassificationResult, ClassificationState, Comment
from ..errors import ClassificationError, ConfigurationError, ReportError
from ..reputation.factory import create_client
from ..reputation.manager import ReputationClientManager
from ..store import CommentStore

_CHECK_ERRORS = (ClassificationError, ConfigurationError, httpx.HTTPError, OSError)
_REPORT_ERRORS = (ReportError, ConfigurationError, httpx.HTTPError, OSError)


def comment_params(comment: Comment, site_url: str) -> dict[str, str | None]:
    """Build the parameter set the reputation service expects for a comment."""
    permalink = comment.entry.permalink(site_url) if comment.entry else None
    return {
        "user_ip": comment.ip,
        "user_agent": comment.user_agent,
        "referrer": comment.referrer,
        "permalink": permalink,
        "comment_type": "comment",
        "comment_author": comment.display_author,
        "comment_author_url": comment.author_url,
        "comment_content": comment.body,
    }


class CommentClassifier:
    """Decides and records whether comments are spam.

    Attributes:
        manager: Supplies the shared reputation client
        site_url: Base URL used for entry permalinks
        production: When False, comments are accepted as ham without any
            outbound call
        store: Persists comments after ``check`` and ``report_spam``
        logger: Receives classification and report failures
    """

    def __init__(
        self,
        manager: ReputationClientManager,
        site_url: str,
        production: bool,
        store: CommentStore | None = None,
        logger: logging.Logger | None = None,
    ):
        self.manager = manager
        self.site_url = site_url
        self.production = production
        self.store = store
        self.logger = logger or logging.getLogger(__name__)

    def classify(self, comment: Comment) -> ClassificationResult:
        """Classify ``comment`` in place. Never raises on service errors."""
        if comment.state is ClassificationState.SPAM:
            return ClassificationResult(ClassificationState.SPAM, "already-spam")

        if not self.production:
            comment.state = ClassificationState.HAM
            comment.checked = True
            return ClassificationResult(ClassificationState.HAM, "not-production")

        params = comment_params(comment, self.site_url)
        try:
            with self.manager.acquire() as handle:
                is_spam = handle.client.check(params)
        except _CHECK_ERRORS as exc:
            self.logger.error(
                "An error occurred while connecting to the reputation service: %s", exc
            )
            comment.state = ClassificationState.CHECK_FAILED
            comment.checked = False
            return ClassificationResult(ClassificationState.CHECK_FAILED, "service-error")

        comment.state = ClassificationState.SPAM if is_spam else ClassificationState.HAM
        comment.checked = True
        return ClassificationResult(comment.state, "service")

    def check(self, comment: Comment) -> ClassificationResult:
        """Classify ``comment`` and persist the outcome."""
        result = self.classify(comment)
        self._save(comment)
        return result

    def report_spam(self, comment: Comment) -> None:
        """Mark ``comment`` as spam and report it to the reputation service.

        The local state change is saved even when the report fails.
        """
        comment.state = ClassificationState.SPAM
        if not self.production:
            self._save(comment)
            return

        params = comment_params(comment, self.site_url)
        try:
            with self.manager.acquire() as handle:
                handle.client.submit_spam(params)
        except _REPORT_ERRORS as exc:
            self.logger.error("Failed to report spam to the reputation service: %s", exc)
        finally:
            self._save(comment)

    def _save(self, comment: Comment) -> None:
        if self.store is not None:
            self.store.save(comment)


def create_classifier(
    cfg: AppConfig,
    store: CommentStore | None = None,
    logger: logging.Logger | None = None,
) -> CommentClassifier:
    """Build a classifier and its client manager from runtime config."""
    manager = ReputationClientManager(
        lambda: create_client(cfg.reputation, cfg.site.url),
        recycle_seconds=cfg.reputation.recycle_seconds,
    )
    return CommentClassifier(
        manager,
        site_url=cfg.site.url,
        production=cfg.site.is_production,
        store=store,
        logger=logger,
    )
