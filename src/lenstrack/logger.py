# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(log_level: str = "WARNING") -> None:
    """Route all logging through a rich handler on stderr.

    Args:
        log_level: Name of the root logging level, case-insensitive
    """
    level_name = log_level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(
            f"invalid log level: {log_level}. Valid options: {', '.join(LOG_LEVELS)}"
        )

    logging.basicConfig(
        level=getattr(logging, level_name),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_path=False,
            )
        ],
        force=True,
    )
