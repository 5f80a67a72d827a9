"""
Logging Setup Utilities.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.logging import RichHandler

# SDK and HTTP transport loggers are too chatty at INFO
_NOISY_LOGGERS = ("httpx", "httpcore", "anthropic", "openai")

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_file: str | Path | None = None,
) -> None:
    """
    Configure the root logger for the CLI and the API server.

    Console output goes through rich; with ``log_file`` every record at
    DEBUG and above (including uvicorn's, which propagate to the root when
    the server runs with ``log_config=None``) is also appended to that file.

    Args:
        level: Console logging level
        log_file: Optional file that receives the full log
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = RichHandler(
        show_time=False,
        show_path=level <= logging.DEBUG,
        rich_tracebacks=True,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    root_level = level
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root_logger.addHandler(file_handler)
        root_level = logging.DEBUG

    root_logger.setLevel(root_level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
