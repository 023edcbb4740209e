"""extract-href CLI — write the unique absolute links of one HTML page.

Usage:
    python cli/main.py -u <url> [-o <path>] [-s <selector>]
    python cli/main.py --help

Links go to the file given with ``-o``; without it they go to standard error
and the summary counts are not printed.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from extract_href.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from extract_href.config import settings
from extract_href.errors import ExtractError
from extract_href.pipeline import fetch_and_write_hrefs
from extract_href.scraper.models import ExtractConfig
from extract_href.writer import FileSink, open_sink

HELP_TEXT = """\
extract-href is a command line tool for extracting urls from a HTML web page,
writing each url on a new line.

Each matched url is:

 * absolute - resolved against the source url

 * unique - no duplicates are added to the list

 * a separate resource - url fragments are removed

It uses a CSS selector to search the HTML document for elements that have an
href attribute and builds a de-duplicated list of their urls.

Example:

    extract-href -u https://www.epa.gov/endangered-species -s '.main-column.clearfix a'

selects every "a" element inside an element with both the "main-column" and
"clearfix" classes. Add `-o urls.txt` to save the results to a file and see
the counts instead.

Pick the most general part of the page that holds all the links you are
after. When in doubt, keep the default "a" selector and prune the output file
by hand.
"""

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

app = typer.Typer(
    name="extract-href",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _close(sink: FileSink) -> bool:
    """Close *sink*, reporting a failure. Return ``True`` on success."""
    try:
        sink.close()
    except ExtractError as exc:
        typer.echo(f"Error: {exc}")
        return False
    return True


@app.command(help=HELP_TEXT, context_settings=CONTEXT_SETTINGS)
def extract(
    ctx: typer.Context,
    url: Optional[str] = typer.Option(None, "-u", "--url", help="URL to fetch links from (required)."),
    output: Optional[str] = typer.Option(
        None, "-o", "--output", help="Path to write the links to. Defaults to standard error."
    ),
    selector: str = typer.Option("a", "-s", "--selector", help="CSS selector to scope the link search to."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log debug output to standard error."),
) -> None:
    # no options at all is a request for help, not an error
    if all(ctx.get_parameter_source(name).name == "DEFAULT" for name in ctx.params):
        typer.echo(ctx.get_help())
        raise typer.Exit()

    _configure_logging(verbose)

    # an empty -o means no output file, like leaving it out
    output_path = Path(output) if output else None
    config = ExtractConfig(source_url=url or "", selector=selector, output_path=output_path)
    try:
        config.validate()
        sink = open_sink(config.output_path)
    except ExtractError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1)

    try:
        stats = fetch_and_write_hrefs(config, sink)
    except ExtractError as exc:
        typer.echo(f"Error: {exc}")
        if isinstance(sink, FileSink):
            _close(sink)
        raise typer.Exit(code=1)

    # Counts only accompany file output; the stderr stream carries the links.
    if isinstance(sink, FileSink):
        typer.echo(stats.summary())
        if not _close(sink):
            raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
