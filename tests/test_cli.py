"""Tests for the Typer command-line interface."""

import json

from typer.testing import CliRunner

from weblog.cli import app

runner = CliRunner()


def test_render_prints_html(tmp_path):
    source = tmp_path / "post.md"
    source.write_text("Hello, *World*.", encoding="utf-8")

    result = runner.invoke(app, ["render", "-i", str(source), "-f", "safe_markdown"])

    assert result.exit_code == 0
    assert "<em>World</em>" in result.stdout


def test_render_rejects_unknown_filter(tmp_path):
    source = tmp_path / "post.md"
    source.write_text("text", encoding="utf-8")

    result = runner.invoke(app, ["render", "-i", str(source), "-f", "textile"])

    assert result.exit_code == 2
    assert "textile" in result.stdout


def test_transforms_lists_builtins():
    result = runner.invoke(app, ["transforms"])

    assert result.exit_code == 0
    assert "sanitize" in result.stdout
    assert "smartify" in result.stdout


def test_check_comment_in_development_saves_ham(tmp_path):
    path = tmp_path / "comment.json"
    path.write_text(
        json.dumps({"body": "Nice post", "entry": {"slug": "hello", "title": "Hello"}}),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["check-comment", "-i", str(path), "--env", "development"])

    assert result.exit_code == 0
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["state"] == "ham"
    assert saved["checked"] is True


def test_report_spam_in_development_saves_spam(tmp_path):
    path = tmp_path / "comment.json"
    path.write_text(json.dumps({"body": "Buy pills", "state": "ham"}), encoding="utf-8")

    result = runner.invoke(app, ["report-spam", "-i", str(path), "--env", "development"])

    assert result.exit_code == 0
    assert json.loads(path.read_text(encoding="utf-8"))["state"] == "spam"


class _InvalidKeyClient:
    def verify_key(self):
        return False

    def close(self):
        pass


def test_verify_key_without_key_exits_with_usage_error(monkeypatch):
    monkeypatch.delenv("AKISMET_API_KEY", raising=False)

    result = runner.invoke(app, ["verify-key"])

    assert result.exit_code == 2
    assert "API key" in result.stdout


def test_verify_key_rejected_key_exits_with_failure(monkeypatch):
    monkeypatch.setattr("weblog.cli.create_client", lambda cfg, site_url: _InvalidKeyClient())

    result = runner.invoke(app, ["verify-key", "--api-key", "bogus"])

    assert result.exit_code == 1
    assert "not valid" in result.stdout
