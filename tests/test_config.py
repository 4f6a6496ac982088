"""Tests for YAML configuration loading."""

from weblog.config import AppConfig, ReputationConfig, get_api_key, load_config


def test_load_config_without_path_returns_defaults():
    cfg = load_config(None)

    assert cfg == AppConfig()
    assert cfg.filters.comment_filters == ["sanitize", "smartify"]
    assert cfg.reputation.recycle_seconds == 600.0
    assert not cfg.site.is_production


def test_load_config_merges_sections_and_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "\n".join(
            [
                "site:",
                "  url: https://blog.example.com",
                "  environment: Production",
                "reputation:",
                "  timeout_seconds: 3",
                "filters:",
                "  chains:",
                "    plain: [html]",
                "unknown_section:",
                "  foo: bar",
            ]
        ),
        encoding="utf-8",
    )

    cfg = load_config(str(path))

    assert cfg.site.url == "https://blog.example.com"
    assert cfg.site.is_production
    assert cfg.reputation.timeout_seconds == 3
    assert cfg.reputation.provider == "akismet"
    assert cfg.filters.chains == {"plain": ["html"]}
    assert cfg.filters.summary_filters == ["markdown"]


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(str(path)) == AppConfig()


def test_get_api_key_prefers_inline_key(monkeypatch):
    monkeypatch.setenv("AKISMET_API_KEY", "from-env")

    assert get_api_key(ReputationConfig(api_key="inline")) == "inline"
    assert get_api_key(ReputationConfig()) == "from-env"
