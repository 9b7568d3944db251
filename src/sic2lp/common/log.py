# src/sic2lp/common/log.py

import logging

from rich.console import Console
from rich.logging import RichHandler

# User-facing output goes to stderr so stdout stays clean for pipes
console = Console(stderr=True)


def setup_logging(verbosity: int = 0, quiet: bool = False) -> None:
    """Routes every ``sic2lp`` logger through a rich handler on stderr.

    ``verbosity`` 0 logs INFO and above, 1+ adds the per-field DEBUG trail.
    ``quiet`` wins over ``verbosity`` and only keeps warnings (attachment
    saves) and errors.
    """
    if quiet:
        level = logging.WARNING
    elif verbosity > 0:
        level = logging.DEBUG
    else:
        level = logging.INFO

    handler = RichHandler(
        console=console,
        show_path=verbosity > 1,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("sic2lp")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
