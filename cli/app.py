from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import typer

from app.schemas import ExtractionResponse
from cli.render import render_report
from extraction.exceptions import DocumentError
from logging_config import configure_logging
from services.fetcher import DocumentFetcher
from services.scraper import ScraperService
from settings import Settings, get_settings


@dataclass
class CLIState:
    settings: Settings
    scraper: ScraperService


app = typer.Typer(
    help="Extract LoRaWAN sensor readings from the dashboard readings table.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    parser: Optional[str] = typer.Option(
        None,
        "--parser",
        help="BeautifulSoup tree builder (defaults to SCRAPER_HTML_PARSER env or lxml).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for the dashboard to respond.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to LOG_LEVEL env or INFO).",
    ),
) -> None:
    """Entry point for the CLI."""
    settings = get_settings()
    configure_logging(log_level or settings.log_level, force=True)
    fetcher = DocumentFetcher(
        timeout=timeout if timeout is not None else settings.request_timeout,
        user_agent=settings.user_agent,
    )
    scraper = ScraperService(fetcher=fetcher, parser=parser or settings.html_parser)
    ctx.obj = CLIState(settings=settings, scraper=scraper)
    ctx.call_on_close(scraper.close)


@app.command("readings")
def readings_command(
    ctx: typer.Context,
    source: Optional[str] = typer.Argument(
        None,
        help="URL or path of the dashboard page (defaults to SCRAPER_SOURCE env).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print readings as JSON."),
    show_skipped: bool = typer.Option(
        False,
        "--show-skipped",
        help="List rows that could not be decoded.",
    ),
) -> None:
    """Fetch a dashboard page and print its readings."""
    state = _get_state(ctx)
    target = source or state.settings.source
    if not target:
        raise typer.BadParameter("No source given and SCRAPER_SOURCE is not set.")

    try:
        report = state.scraper.scrape(target)
    except DocumentError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(ExtractionResponse.from_report(report, source=target).model_dump_json(indent=2))
        return
    render_report(report, show_skipped=show_skipped)
