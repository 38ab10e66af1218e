"""Logging helpers used by the USERDIR CLI.

This module configures console logging with Rich and an in-memory "flight
recorder" that buffers log records and writes them to disk on flush. Records
from third-party loggers get a short ``[libname]`` prefix on the console.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

from userdir.adapters.db.engine import redacted
from userdir.config import DB_URL_ENV

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "userdir"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``"[libname]"`` for non-project loggers.

    Project records get an empty prefix. The filter never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            # "sqlalchemy.engine.Engine" -> "[sqlalchemy]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (forced to DEBUG in debug_mode).
        debug_mode: Show timestamps, logger names and source paths.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler suitable to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure an in-memory flight recorder backed by a file.

    Up to `capacity` records are buffered and written to `path` once a record
    at `flush_level` or above arrives, or on close if `flush_on_close` is set.

    Args:
        path: Destination file for flushed records.
        capacity: Number of records to buffer in memory.
        flush_level: Level at or above which the buffer is flushed.
        flush_on_close: Flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory-backed handler with a FileHandler target.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )
def _diagnostics(
    *,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> list[tuple[str, object]]:
    """Return the ``(label, value)`` pairs logged at DEBUG on startup."""
    db_url = os.environ.get(DB_URL_ENV)
    items: list[tuple[str, object]] = [
        ("Python", sys.version.split()[0]),
        ("Platform", f"{platform.system()} {platform.release()}"),
        ("PID", os.getpid()),
        ("CWD", Path.cwd()),
        ("SQLAlchemy", sqlalchemy.__version__),
        ("Database", redacted(db_url) if db_url else "<unset>"),
        ("Handlers", [type(h).__name__ for h in handlers]),
    ]
    if flight_recorder:
        items.append(
            (
                "Flight recorder",
                f"path={log_path or '<none>'}, capacity={flight_capacity}, "
                f"flush_on_close={force_flush_fr}",
            )
        )
    overrides = {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
    items.append(("Per-logger overrides", overrides or "<none>"))
    return items


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary at INFO and diagnostics at DEBUG.

    The DEBUG lines cover the interpreter, platform, process, SQLAlchemy
    version, the configured ``USERDIR_DB_URL`` (password hidden), the active
    handlers, flight-recorder settings and per-logger overrides.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        handlers: Active logging handlers attached to the root logger.
        log_path: Path to the flight-recorder output file, or None.
        flight_recorder: Whether the in-memory flight recorder is enabled.
        flight_capacity: Configured capacity of the flight recorder, or None.
        force_flush_fr: Whether the flight recorder flushes on close.
        logger_levels: Mapping of logger names to their configured levels.
    """
    logger.info(
        "USERDIR %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )
    for label, value in _diagnostics(
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_capacity,
        force_flush_fr=force_flush_fr,
        logger_levels=logger_levels,
    ):
        logger.debug("%s: %s", label, value)
