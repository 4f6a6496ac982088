"""
Command-line interface for the weblog engine.

Uses Typer to expose rendering and comment moderation. Supports loading
.env files for the reputation service API key.
"""

from __future__ import annotations

from pathlib import Path
import sys

import typer
from rich.console import Console
from rich.table import Table

from .config import AppConfig, load_config
from .errors import ClassificationError, ConfigurationError
from .filters.registry import default_registry
from .logging_utils import log_event, setup_logging
from .moderation.classifier import create_classifier
from .renderer import ContentRenderer
from .reputation.factory import create_client
from .store import JsonCommentStore

try:
    from dotenv import load_dotenv
except Exception:  # noqa: BLE001
    load_dotenv = None

app = typer.Typer(add_completion=False)
console = Console()


def _load(
    config: Path | None,
    env: str | None = None,
    api_key: str | None = None,
    log_level: str | None = None,
) -> AppConfig:
    # Load environment variables from .env if available
    if load_dotenv is not None:
        load_dotenv()

    cfg = load_config(str(config) if config else None)
    if env:
        cfg.site.environment = env
    if api_key:
        cfg.reputation.api_key = api_key
    if log_level:
        cfg.logging.level = log_level
    setup_logging(cfg.logging)
    return cfg


@app.command()
def render(
    input: Path = typer.Option(..., "--input", "-i", exists=True, readable=True),
    filter: str = typer.Option("markdown", "--filter", "-f", help="Chain or transform name."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
):
    """Render a text file through a filter chain and print the HTML."""
    cfg = _load(config)
    try:
        renderer = ContentRenderer(cfg.filters)
        html = renderer.render(input.read_text(encoding="utf-8"), filter)
    except ConfigurationError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    sys.stdout.write(html)
    if html and not html.endswith("\n"):
        sys.stdout.write("\n")


@app.command()
def transforms(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
):
    """List registered transforms and configured filter chains."""
    cfg = _load(config)
    registry = default_registry()

    table = Table(title="Filters")
    table.add_column("Name")
    table.add_column("Kind")
    table.add_column("Transforms")
    for name in registry.names():
        table.add_row(name, "transform", name)
    for name, names in sorted(cfg.filters.chains.items()):
        table.add_row(name, "chain", " -> ".join(names))
    table.add_row("(comments)", "chain", " -> ".join(cfg.filters.comment_filters))
    table.add_row("(summaries)", "chain", " -> ".join(cfg.filters.summary_filters))
    console.print(table)


@app.command("check-comment")
def check_comment(
    input: Path = typer.Option(..., "--input", "-i", exists=True, readable=True),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    env: str | None = typer.Option(
        None, "--env", envvar="WEBLOG_ENV", help="Runtime environment (production enables checks)."
    ),
    api_key: str | None = typer.Option(
        None, "--api-key", envvar="AKISMET_API_KEY", help="Override reputation service API key."
    ),
    save: bool = typer.Option(True, "--save/--no-save", help="Write the outcome back to the file."),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Classify a comment stored as JSON and print its state."""
    cfg = _load(config, env=env, api_key=api_key, log_level=log_level)
    store = JsonCommentStore(input)
    comment = store.load()
    classifier = create_classifier(cfg, store=store if save else None)
    try:
        result = classifier.check(comment)
    finally:
        classifier.manager.close()

    log_event(
        classifier.logger,
        "comment_classified",
        state=result.state.value,
        reason=result.reason,
        excerpt=comment.excerpt(),
    )
    style = {"ham": "green", "spam": "red"}.get(result.state.value, "yellow")
    console.print(f"[{style}]{result.state.value}[/{style}] ({result.reason})")
    if comment.needs_review:
        console.print("Comment needs manual review.")


@app.command("report-spam")
def report_spam(
    input: Path = typer.Option(..., "--input", "-i", exists=True, readable=True),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    env: str | None = typer.Option(None, "--env", envvar="WEBLOG_ENV"),
    api_key: str | None = typer.Option(None, "--api-key", envvar="AKISMET_API_KEY"),
):
    """Mark a comment stored as JSON as spam and report it."""
    cfg = _load(config, env=env, api_key=api_key)
    store = JsonCommentStore(input)
    comment = store.load()
    classifier = create_classifier(cfg, store=store)
    try:
        classifier.report_spam(comment)
    finally:
        classifier.manager.close()
    console.print(f"[red]spam[/red] {comment.excerpt()}")


@app.command("verify-key")
def verify_key(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    api_key: str | None = typer.Option(None, "--api-key", envvar="AKISMET_API_KEY"),
):
    """Check the reputation service API key against the configured site."""
    cfg = _load(config, api_key=api_key)
    try:
        client = create_client(cfg.reputation, cfg.site.url)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc
    try:
        valid = client.verify_key()
    except ClassificationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    finally:
        client.close()
    if not valid:
        console.print("[red]API key is not valid for this site.[/red]")
        raise typer.Exit(code=1)
    console.print("[green]API key is valid.[/green]")


if __name__ == "__main__":
    app()
