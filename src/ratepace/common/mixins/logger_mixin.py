# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from ratepace.common.ratepace_logger import MessageT, RatePaceLogger


class RatePaceLoggerMixin:
    """Gives a class `self.debug(...)`, `self.warning(...)` etc.

    A logger may be injected with `logger=`; otherwise one is created under
    `logger_name`, defaulting to the class name.
    """

    def __init__(
        self,
        logger_name: str | None = None,
        logger: RatePaceLogger | None = None,
        **kwargs,
    ) -> None:
        self.logger = logger or RatePaceLogger(
            logger_name or self.__class__.__name__
        )
        super().__init__(**kwargs)

    @property
    def is_trace_enabled(self) -> bool:
        return self.logger.is_trace_enabled

    @property
    def is_debug_enabled(self) -> bool:
        return self.logger.is_debug_enabled

    def trace(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.trace(message, *args, **kwargs)

    def debug(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.debug(message, *args, **kwargs)

    def info(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.info(message, *args, **kwargs)

    def notice(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.notice(message, *args, **kwargs)

    def warning(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.warning(message, *args, **kwargs)

    def success(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.success(message, *args, **kwargs)

    def error(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.error(message, *args, **kwargs)

    def exception(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.exception(message, *args, **kwargs)
