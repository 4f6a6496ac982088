"""
Core data types for the weblog.

This module defines the records the rendering and moderation code works on:
- Entry: A published or draft article or bookmark
- Comment: A reader comment attached to an entry
- ClassificationState: Spam-check status of a comment
- ClassificationResult: Outcome of a single classification call

Storage of these records is handled elsewhere; see ``weblog.store``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
import re
from typing import Iterable


class ClassificationState(str, Enum):
    """Spam-check status of a comment.

    Transitions: UNCHECKED -> {HAM, SPAM, CHECK_FAILED}; CHECK_FAILED may be
    retried; any state -> SPAM on a manual report. Nothing leaves SPAM
    automatically.
    """

    UNCHECKED = "unchecked"
    HAM = "ham"
    SPAM = "spam"
    CHECK_FAILED = "check-failed"


@dataclass
class ClassificationResult:
    """Outcome of classifying a single comment.

    Attributes:
        state: Resulting classification state
        reason: Short machine-readable reason ("service", "not-production",
            "already-spam", "service-error")
    """

    state: ClassificationState
    reason: str = ""


_PUBLISH_VALUES = {"publish", "1", "true", "yes"}
_DOMAIN_RE = re.compile(r"https?://([^/]+)")
_TAG_SPLIT_RE = re.compile(r"[\s,]+")


@dataclass
class Entry:
    """Represents an article or bookmark.

    Attributes:
        slug: URL-safe unique identifier
        title: Entry headline
        kind: "article" or "bookmark"
        body: Raw body text, interpreted by the filter chain
        summary: Optional raw summary text
        filter: Filter chain or transform name used to render the body
        url: External link (bookmarks)
        published: Whether the entry is publicly visible
        created_at: Creation time
        updated_at: Last modification time
        tags: Tag names
    """

    slug: str
    title: str
    kind: str = "article"
    body: str | None = None
    summary: str | None = None
    filter: str | None = "markdown"
    url: str | None = None
    published: bool = False
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    tags: list[str] = field(default_factory=list)

    @property
    def stem(self) -> str:
        if self.kind == "bookmark":
            return f"linkings/{self.slug}"
        return f"writings/{self.slug}"

    def permalink(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}/{self.stem}"

    @property
    def domain(self) -> str | None:
        if not self.url:
            return None
        match = _DOMAIN_RE.search(self.url)
        if not match:
            return None
        host = match.group(1).strip()
        return host[4:] if host.startswith("www.") else host

    @property
    def effective_filter(self) -> str:
        # Bookmark bodies come from an external service and are always markdown.
        if self.kind == "bookmark":
            return "markdown"
        return self.filter or "markdown"

    @property
    def is_draft(self) -> bool:
        return not self.published

    def publish(self, value: object) -> None:
        """Set the published flag from a form-style value.

        Publishing a draft stamps both timestamps with the current time.
        """
        flag = str(value).strip().lower() in _PUBLISH_VALUES
        if flag and self.is_draft:
            now = datetime.now()
            self.created_at = now
            self.updated_at = now
        self.published = flag

    def set_tag_names(self, value: str | Iterable[str] | None) -> None:
        self.tags = parse_tag_names(value)


def parse_tag_names(value: str | Iterable[str] | None) -> list[str]:
    """Split a tag string on whitespace and commas, keeping first occurrences."""
    if value is None:
        return []
    if isinstance(value, str):
        names = [name for name in _TAG_SPLIT_RE.split(value) if name]
    else:
        names = [str(name) for name in value]
    return list(dict.fromkeys(names))


@dataclass
class Comment:
    """A reader comment and the request metadata used to screen it.

    Attributes:
        body: Raw comment text, rendered through the comment filter chain
        entry: Entry being commented on
        id: Storage identifier, if persisted
        author: Display name as submitted
        ip: Submitter IP address
        url: Author URL as submitted
        referrer: HTTP Referer of the submission
        user_agent: HTTP User-Agent of the submission
        created_at: Submission time
        state: Spam-check status
        checked: True once the reputation service answered for this comment
    """

    body: str | None
    entry: Entry | None = None
    id: int | None = None
    author: str | None = None
    ip: str | None = None
    url: str | None = None
    referrer: str | None = None
    user_agent: str | None = None
    created_at: datetime = field(default_factory=datetime.now)
    state: ClassificationState = ClassificationState.UNCHECKED
    checked: bool = False

    @property
    def display_author(self) -> str:
        if not self.author or not self.author.strip():
            return "Anonymous Coward"
        return self.author

    @property
    def author_url(self) -> str | None:
        if not self.url or not self.url.strip():
            return None
        return self.url.strip()

    @property
    def author_link(self) -> str | None:
        url = self.author_url
        if url is None:
            return None
        if re.match(r"^mailto:.*@", url) or re.match(r"^https?:", url):
            return url
        if "@" in url:
            return f"mailto:{url}"
        return f"http://{url}"

    @property
    def is_spam(self) -> bool:
        return self.state is ClassificationState.SPAM

    @property
    def is_ham(self) -> bool:
        return self.state is ClassificationState.HAM

    @property
    def needs_review(self) -> bool:
        return self.state in (ClassificationState.UNCHECKED, ClassificationState.CHECK_FAILED)

    def excerpt(self, length: int = 65) -> str:
        collapsed = re.sub(r"\s+", " ", self.body or "")
        return collapsed[: length + 1] + " ..."
