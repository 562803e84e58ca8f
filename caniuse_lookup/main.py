"""caniuse lookup command line entry point"""

from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from .src.config.config_loader import ConfigLoader
from .src.config.logging_config import setup_logging
from .src.models.errors import CompatLookupError, EmptyResultError
from .src.services.caniuse_client import CaniuseClient
from .src.services.lookup_service import CompatLookupService
from .src.services.report_renderer import ReportRenderer


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("search_term", metavar="<search_term>", type=click.STRING)
@click.option("--debug", is_flag=True, default=False, help="Log every request and response to stderr.")
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=None,
    help="Only fetch data for the first N matching features.",
)
@click.version_option(package_name="caniuse-lookup", prog_name="caniuse-lookup")
@click.pass_context
def main(ctx: click.Context, search_term: str, debug: bool, limit: Optional[int]) -> None:
    """
    Query caniuse.com from the terminal

    \b
    Example usages:
      caniuse-lookup websocket
      caniuse-lookup "css grid" --limit 3
    """
    if not search_term.strip():
        raise click.UsageError("<search_term> must not be blank", ctx=ctx)

    err_console = Console(stderr=True)

    try:
        config = ConfigLoader.load_config()
    except ValueError as e:
        err_console.print(f"[red]Configuration Error: {escape(str(e))}[/red]")
        ctx.exit(1)

    setup_logging(debug or config.debug)

    service = CompatLookupService(CaniuseClient(config))
    try:
        result = service.lookup(search_term, limit=limit)
    except EmptyResultError:
        err_console.print(f"[yellow]No results found for '{escape(search_term)}'[/yellow]")
        ctx.exit(1)
    except CompatLookupError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        ctx.exit(1)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted[/yellow]")
        ctx.exit(130)

    ReportRenderer(Console()).render(result)


if __name__ == "__main__":
    main()
