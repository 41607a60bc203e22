"""Logging setup and the logger interface the login flow writes to."""

import logging
from typing import Any, Protocol


class AuthLogger(Protocol):
    """The subset of a logger the login flow uses."""

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...


def configure_logging(level: str = "INFO") -> None:
    numeric_level = getattr(logging, (level or "INFO").upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )

    # Playwright's own logger is chatty at INFO
    logging.getLogger("playwright").setLevel(logging.WARNING)
