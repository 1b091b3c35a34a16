# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logger wrapper with custom levels and lazily formatted messages.

Messages may be passed either as strings or as zero-argument callables. A callable
is only evaluated when the level is enabled, which keeps expensive f-strings out of
hot paths::

    _logger = RatePaceLogger(__name__)
    _logger.debug(lambda: f"Loaded {len(records):,} records from {path}")
"""

import logging
from collections.abc import Callable

_TRACE = logging.DEBUG - 5
_NOTICE = logging.INFO + 5
_SUCCESS = logging.WARNING + 5

logging.addLevelName(_TRACE, "TRACE")
logging.addLevelName(_NOTICE, "NOTICE")
logging.addLevelName(_SUCCESS, "SUCCESS")

MessageT = str | Callable[..., str]


class RatePaceLogger:
    """Thin wrapper around :class:`logging.Logger` adding TRACE, NOTICE and SUCCESS levels
    and support for lazily evaluated messages."""

    def __init__(self, logger_name: str) -> None:
        self.logger_name = logger_name
        self._logger = logging.getLogger(logger_name)

    @property
    def is_trace_enabled(self) -> bool:
        return self._logger.isEnabledFor(_TRACE)

    @property
    def is_debug_enabled(self) -> bool:
        return self._logger.isEnabledFor(logging.DEBUG)

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def log(self, level: int, message: MessageT, *args, **kwargs) -> None:
        """Log a message at the given level, evaluating callables only when enabled."""
        if not self._logger.isEnabledFor(level):
            return
        if callable(message):
            message = message()
        # stacklevel=3 attributes the record to the caller of debug()/info()/etc.
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, message, *args, **kwargs)

    def trace_or_debug(self, trace_msg: MessageT, debug_msg: MessageT) -> None:
        """Log the trace message if trace is enabled, otherwise the debug message."""
        if self.is_trace_enabled:
            self.log(_TRACE, trace_msg)
        else:
            self.log(logging.DEBUG, debug_msg)

    def trace(self, message: MessageT, *args, **kwargs) -> None:
        self.log(_TRACE, message, *args, **kwargs)

    def debug(self, message: MessageT, *args, **kwargs) -> None:
        self.log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: MessageT, *args, **kwargs) -> None:
        self.log(logging.INFO, message, *args, **kwargs)

    def notice(self, message: MessageT, *args, **kwargs) -> None:
        self.log(_NOTICE, message, *args, **kwargs)

    def warning(self, message: MessageT, *args, **kwargs) -> None:
        self.log(logging.WARNING, message, *args, **kwargs)

    def success(self, message: MessageT, *args, **kwargs) -> None:
        self.log(_SUCCESS, message, *args, **kwargs)

    def error(self, message: MessageT, *args, **kwargs) -> None:
        self.log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: MessageT, *args, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self.log(logging.ERROR, message, *args, **kwargs)

    def critical(self, message: MessageT, *args, **kwargs) -> None:
        self.log(logging.CRITICAL, message, *args, **kwargs)
