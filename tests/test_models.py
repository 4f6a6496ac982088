"""Tests for entry and comment model helpers."""

from datetime import datetime

from weblog.core.types import ClassificationState, Comment, Entry, parse_tag_names


def test_entry_stem_and_permalink():
    article = Entry(slug="hello-world", title="Hello")
    bookmark = Entry(slug="d41d8", title="Link", kind="bookmark")

    assert article.permalink("https://example.org/") == "https://example.org/writings/hello-world"
    assert bookmark.stem == "linkings/d41d8"


def test_entry_domain_strips_www():
    assert Entry(slug="a", title="A", url="https://www.example.com/path").domain == "example.com"
    assert Entry(slug="a", title="A", url="ftp://example.com/").domain is None
    assert Entry(slug="a", title="A").domain is None


def test_entry_effective_filter_defaults_to_markdown():
    assert Entry(slug="a", title="A", filter=None).effective_filter == "markdown"
    assert Entry(slug="a", title="A", filter="text").effective_filter == "text"


def test_publish_stamps_draft_timestamps():
    old = datetime(2001, 1, 1)
    entry = Entry(slug="a", title="A", created_at=old, updated_at=old)

    entry.publish("Publish")

    assert entry.published
    assert entry.created_at > old
    assert entry.updated_at == entry.created_at

    entry.publish("no")
    assert entry.is_draft


def test_parse_tag_names():
    assert parse_tag_names("python, web  python,ruby") == ["python", "web", "ruby"]
    assert parse_tag_names(["a", "b", "a"]) == ["a", "b"]
    assert parse_tag_names(None) == []


def test_comment_author_defaults_and_links():
    assert Comment(body="x", author="  ").display_author == "Anonymous Coward"
    assert Comment(body="x", url=" example.com ").author_link == "http://example.com"
    assert Comment(body="x", url="me@example.com").author_link == "mailto:me@example.com"
    assert Comment(body="x", url="https://example.com").author_link == "https://example.com"
    assert Comment(body="x", url="").author_link is None


def test_comment_excerpt_collapses_whitespace():
    comment = Comment(body="one\n\n  two\tthree")

    assert comment.excerpt() == "one two three ..."
    assert Comment(body="abcdef").excerpt(3) == "abcd ..."


def test_comment_needs_review_until_classified():
    comment = Comment(body="x")
    assert comment.needs_review

    comment.state = ClassificationState.CHECK_FAILED
    assert comment.needs_review
    assert not comment.is_ham

    comment.state = ClassificationState.HAM
    assert not comment.needs_review
