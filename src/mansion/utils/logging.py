from __future__ import annotations
import logging
from functools import wraps
from typing import Any, Callable

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> None:
    """Route log records to stderr through rich; unknown level names fall back to WARNING."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    # Console without a fixed file writes to whatever sys.stderr is at emit time
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(level=numeric, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True)


def log_calls(logger_name: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator to log function calls, results and errors at DEBUG level; errors are re-raised."""

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        name = logger_name or func.__module__
        logger = logging.getLogger(name)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            logger.debug("Calling %s args=%s kwargs=%s", func.__name__, args, kwargs)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.debug("Error in %s: %s", func.__name__, e, exc_info=True)
                raise
            logger.debug("%s returned %r", func.__name__, result)
            return result

        return _wrapper

    return _decorator
