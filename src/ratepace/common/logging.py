# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rich console and file logging for worker processes.

Each log line renders as::

    HH:MM:SS.mmm LEVEL    message content (logger_name:lineno)

Usage::

    from ratepace.common.logging import setup_rich_logging

    setup_rich_logging("DEBUG", log_folder=Path("artifacts/logs"))
"""

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console, ConsoleRenderable, Group
from rich.logging import RichHandler
from rich.text import Text
from rich.traceback import Traceback

from ratepace.common.enums import RatePaceLogLevel
from ratepace.common.environment import Environment
from ratepace.common.ratepace_logger import RatePaceLogger

_logger = RatePaceLogger(__name__)


def setup_rich_logging(
    level: str | RatePaceLogLevel | None = None,
    log_folder: Path | None = None,
    console: Console | None = None,
) -> None:
    """Set up rich console logging on the root logger, and optionally a log file.

    Existing root handlers are removed to avoid duplicate output.
    """
    level = str(level or Environment.LOGGING.LEVEL).upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for existing_handler in root_logger.handlers[:]:
        root_logger.removeHandler(existing_handler)

    rich_handler = CustomRichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console or Console(),
        show_time=False,
        show_level=False,
        tracebacks_show_locals=False,
    )
    rich_handler.setLevel(level)
    root_logger.addHandler(rich_handler)

    if log_folder is not None:
        root_logger.addHandler(create_file_handler(log_folder, level))

    _logger.debug(lambda: f"Logging initialized with level: {level}")


def create_file_handler(
    log_folder: Path,
    level: str | int,
) -> logging.FileHandler:
    """Configure a file handler for logging."""

    log_folder.mkdir(parents=True, exist_ok=True)
    log_file_path = log_folder / Environment.LOGGING.LOG_FILE

    file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return file_handler


class CustomRichHandler(RichHandler):
    """Rich logging handler with a compact, fixed-width prefix.

    Renders a millisecond timestamp, a colored level name, the message, and a dim
    `(logger_name:lineno)` suffix. Messages longer than
    `MAX_CONSOLE_MESSAGE_LENGTH` are truncated.
    """

    LOG_LEVEL_STYLES = {
        "TRACE": "dim",
        "DEBUG": "dim",
        "INFO": "cyan",
        "NOTICE": "blue",
        "WARNING": "yellow",
        "SUCCESS": "green",
        "ERROR": "red",
        "CRITICAL": "bold red",
    }

    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]
        level_style = self.LOG_LEVEL_STYLES.get(record.levelname, "white")
        message = record.getMessage()[: Environment.LOGGING.MAX_CONSOLE_MESSAGE_LENGTH]

        line = Text()
        line.append(f"{timestamp} ", style="dim")
        line.append(f"{record.levelname:<8} ", style=level_style)
        line.append(message)
        line.append(f" ({record.name}:{record.lineno})", style="dim italic")

        if traceback is not None:
            return Group(line, traceback)
        return line
