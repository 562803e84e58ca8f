"""Logging setup for the command line tool"""

import logging
from rich.console import Console
from rich.logging import RichHandler


def setup_logging(debug: bool = False) -> None:
    """Route log records to stderr through rich.

    Debug mode shows every request and response; otherwise only warnings
    and errors are emitted so standard output carries the report alone.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # urllib3 connection chatter drowns out our own request lines
    logging.getLogger("urllib3").setLevel(logging.INFO if debug else logging.WARNING)
