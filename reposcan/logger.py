"""Optional debug logging to a dated file under the user's home directory."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any

_LOGGER_NAME = "reposcan"
_enabled = False
_logger = logging.getLogger(_LOGGER_NAME)


def _create_log_file(log_file_dir: str) -> Path:
    log_dir = Path.home() / log_file_dir.lstrip("/\\")
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f"{date.today().isoformat()}.log"


def init_logger(enabled: bool, log_file_dir: str) -> None:
    """Enable or disable logging; when enabled, log to today's file in log_file_dir."""
    global _enabled
    _enabled = enabled
    for handler in list(_logger.handlers):
        _logger.removeHandler(handler)
        handler.close()
    if not enabled:
        return

    handler = logging.FileHandler(_create_log_file(log_file_dir), mode="a", encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("time=%(asctime)s level=%(levelname)s msg=%(message)s")
    )
    _logger.addHandler(handler)
    _logger.setLevel(logging.DEBUG)
    _logger.propagate = False
    _logger.info("Logger initialized")


def _render(msg: str, args: tuple[Any, ...]) -> str:
    parts = [msg]
    items = list(args)
    while items:
        item = items.pop(0)
        if isinstance(item, tuple) and len(item) == 2:
            parts.append(f"{item[0]}={item[1]}")
        elif isinstance(item, str) and items:
            parts.append(f"{item}={items.pop(0)}")
        else:
            parts.append(f"!BADKEY={item}")
    return " ".join(parts)


def _log(level: int, msg: str, args: tuple[Any, ...]) -> None:
    if _enabled:
        _logger.log(level, _render(msg, args))


def debug(msg: str, *args: Any) -> None:
    _log(logging.DEBUG, msg, args)


def info(msg: str, *args: Any) -> None:
    _log(logging.INFO, msg, args)


def warn(msg: str, *args: Any) -> None:
    _log(logging.WARNING, msg, args)


def error(msg: str, *args: Any) -> None:
    _log(logging.ERROR, msg, args)