"""CLI command implementations"""

from datetime import date
from pathlib import Path
from typing import Annotated, Optional

import typer

from briefmail.config import Settings, load_config
from briefmail.core.deliver import DeliveryError
from briefmail.core.fetch import FetchError
from briefmail.core.pipeline import run_fetch, run_render, run_send
from briefmail.core.utils.log import configure


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure(settings.log_level)
    return settings


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"Cannot read {path}", e)


def _write(text: str, out: Optional[Path]) -> None:
    """Write text to out, or to stdout when out is None."""
    if out is None:
        typer.echo(text)
        return
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
    except OSError as e:
        _fail(f"Cannot write {out}", e)
    typer.echo(f"Wrote {out}", err=True)


def _fetch(settings: Settings, today: date) -> str:
    try:
        return run_fetch(settings, today)
    except ValueError as e:
        _fail(str(e))
    except FetchError as e:
        _fail("Fetch failed", e)


def render_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown briefing to render")],
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Output file (default: stdout)")] = None,
    fragment: Annotated[bool, typer.Option("--fragment", help="Emit only the body fragment, without the newsletter chrome")] = False,
    ):
    """Render a markdown briefing to newsletter HTML."""
    settings = _settings()
    html = run_render(_read(path), date.today(), settings, fragment=fragment)
    _write(html, out)


def fetch_cmd(
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Output file (default: stdout)")] = None,
    model: Annotated[Optional[str], typer.Option("--model", help="Anthropic model id")] = None,
    searches: Annotated[Optional[int], typer.Option("--max-searches", help="Web search tool max_uses")] = None,
    ):
    """Fetch today's briefing markdown from the model."""
    settings = _settings(overrides={"model": model, "max_searches": searches})
    _write(_fetch(settings, date.today()), out)


def send_cmd(
    markdown_path: Annotated[Optional[Path], typer.Option("--markdown", help="Send this markdown instead of fetching")] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Render but do not send")] = False,
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Also write the rendered HTML here")] = None,
    to: Annotated[Optional[str], typer.Option("--to", help="Comma-separated recipients")] = None,
    model: Annotated[Optional[str], typer.Option("--model", help="Anthropic model id")] = None,
    ):
    """Run the full pipeline: fetch -> render -> send."""
    settings = _settings(overrides={"to_emails": to, "model": model})
    today = date.today()

    markdown = _read(markdown_path) if markdown_path else _fetch(settings, today)
    html = run_render(markdown, today, settings)
    if out is not None:
        _write(html, out)

    if dry_run:
        if out is None:
            _write(html, None)
        typer.echo("Dry run - nothing sent.", err=True)
        return

    try:
        recipients = run_send(settings, markdown, html, today)
    except DeliveryError as e:
        _fail("Delivery failed", e)
    typer.echo(f"Sent to {len(recipients)} recipient(s): {', '.join(recipients)}")
