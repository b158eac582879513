"""Logging utilities for graph-hunter.

Modules log through ``get_logger(__name__)``; everything lands under the
``graph_hunter`` namespace, which the CLI configures once with
``setup_logger``.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


ROOT_LOGGER_NAME = "graph_hunter"

# Marks handlers installed by setup_logger; only those are replaced when
# it runs again.
_OWNED_ATTR = "_graph_hunter_owned"


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the graph_hunter namespace.

    Accepts a module ``__name__`` (``graph_hunter.analyzers.dead_code``) as
    well as a bare name (``dead_code``), which is placed under the root.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def _parse_level(level: str) -> int:
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


def _console_handler(rich_output: bool) -> logging.Handler:
    if rich_output:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=False,
            markup=False
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    return handler


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    return handler


def setup_logger(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    rich_output: bool = True
) -> logging.Logger:
    """Configure the graph_hunter namespace logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR); unknown names fall back to INFO
        log_file: Optional file path for log output
        rich_output: Use rich formatting for console output

    Returns:
        The namespace root logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(_parse_level(level))

    for handler in [h for h in logger.handlers if getattr(h, _OWNED_ATTR, False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers = [_console_handler(rich_output)]
    if log_file:
        handlers.append(_file_handler(Path(log_file)))

    for handler in handlers:
        setattr(handler, _OWNED_ATTR, True)
        logger.addHandler(handler)

    return logger
