"""
Comment persistence interface and a JSON file implementation.

The moderation code only needs ``save``; querying and listing comments
belong to whatever storage layer the site runs on.
"""

from __future__ import annotations

from datetime import datetime
import json
from pathlib import Path
from typing import Any, Protocol

from .core.types import ClassificationState, Comment, Entry


class CommentStore(Protocol):
    def save(self, comment: Comment) -> None: ...


class JsonCommentStore:
    """Stores a single comment (with its entry reference) in a JSON file."""

    def __init__(self, path: Path):
        self.path = path

    def load(self) -> Comment:
        data = json.loads(self.path.read_text(encoding="utf-8"))
        return comment_from_dict(data)

    def save(self, comment: Comment) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(comment_to_dict(comment), ensure_ascii=False, indent=2)
        self.path.write_text(payload + "\n", encoding="utf-8")


def comment_from_dict(data: dict[str, Any]) -> Comment:
    entry_data = data.get("entry")
    entry = None
    if entry_data:
        entry = Entry(
            slug=entry_data["slug"],
            title=entry_data.get("title", ""),
            kind=entry_data.get("kind", "article"),
        )
    created_at = data.get("created_at")
    return Comment(
        body=data.get("body"),
        entry=entry,
        id=data.get("id"),
        author=data.get("author"),
        ip=data.get("ip"),
        url=data.get("url"),
        referrer=data.get("referrer"),
        user_agent=data.get("user_agent"),
        created_at=datetime.fromisoformat(created_at) if created_at else datetime.now(),
        state=ClassificationState(data.get("state", ClassificationState.UNCHECKED.value)),
        checked=bool(data.get("checked", False)),
    )


def comment_to_dict(comment: Comment) -> dict[str, Any]:
    entry = comment.entry
    return {
        "id": comment.id,
        "entry": (
            {"slug": entry.slug, "title": entry.title, "kind": entry.kind} if entry else None
        ),
        "author": comment.author,
        "ip": comment.ip,
        "url": comment.url,
        "body": comment.body,
        "referrer": comment.referrer,
        "user_agent": comment.user_agent,
        "created_at": comment.created_at.isoformat(),
        "state": comment.state.value,
        "checked": comment.checked,
    }
