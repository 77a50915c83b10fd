"""
Utility functions and helpers.

This module contains shared utilities used across SchemaSmith components.

Components:
    - setup_logging: Logging configuration with a Rich console handler

Example:
    ```python
    from schemasmith.utils import setup_logging

    # Configure logging
    setup_logging(level="DEBUG")
    ```
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", console: Optional[Console] = None) -> None:
    """
    Configure the root logger to write through Rich.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)
        console: Console to log to (defaults to a stderr console)
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True
    )
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True
    )


__all__ = ["setup_logging"]
