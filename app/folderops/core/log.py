"""Logging setup for the command line.

Library modules only create module-level loggers; handlers are
installed here, once, by the CLI entry point.
"""

import logging

from rich.logging import RichHandler

from folderops.utils.formatting import err_console


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI verbosity flags to a logging level.

    ``quiet`` wins when both flags are set.
    """
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route folderops log records to stderr through Rich.

    Records stop at the folderops logger, so a handler a host application
    installs on the root logger does not print them a second time.

    Args:
        verbose: Show debug records (every copied or deleted entry).
        quiet: Show errors only.
    """
    logger = logging.getLogger("folderops")
    logger.setLevel(resolve_level(verbose, quiet))

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
