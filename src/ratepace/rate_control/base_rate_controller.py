# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import ClassVar

from pydantic import ValidationError

from ratepace.common.exceptions import ConfigurationError
from ratepace.common.mixins import RatePaceLoggerMixin
from ratepace.common.models import RatePaceBaseModel, TestMessage
from ratepace.common.protocols import SleeperProtocol, StatisticsCollectorProtocol
from ratepace.common.ratepace_logger import RatePaceLogger
from ratepace.common.utils import time_ms
from ratepace.rate_control.sleepers import AsyncioSleeper


class BaseRateController(RatePaceLoggerMixin, ABC):
    """
    Base class for rate controllers.

    Holds the round configuration and the collaborators every strategy needs: the
    statistics collector of the worker (read, never written), the sleeper that
    suspends the worker, and the millisecond clock used to measure elapsed round time.
    The strategy options are validated against `options_class` at construction.
    """

    options_class: ClassVar[type[RatePaceBaseModel]] = RatePaceBaseModel

    def __init__(
        self,
        *,
        test_message: TestMessage,
        stats: StatisticsCollectorProtocol,
        worker_index: int,
        sleeper: SleeperProtocol | None = None,
        logger: RatePaceLogger | None = None,
        clock: Callable[[], float] | None = None,
        **kwargs,
    ) -> None:
        super().__init__(logger=logger, **kwargs)
        self.test_message = test_message
        self.stats = stats
        self.worker_index = worker_index
        self.round_index = test_message.round_index
        self.total_workers = test_message.total_workers
        self.sleeper: SleeperProtocol = sleeper or AsyncioSleeper()
        self.clock: Callable[[], float] = clock or time_ms
        self.options = self._parse_options()

    def _parse_options(self) -> RatePaceBaseModel:
        rate_control = self.test_message.rate_control
        try:
            return self.options_class.model_validate(rate_control.opts)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid options for {rate_control.type} rate controller in worker "
                f"#{self.worker_index} in round #{self.round_index}: {e}"
            ) from e

    def elapsed_ms(self) -> float:
        """Milliseconds since the start of the round, per the statistics collector."""
        return self.clock() - self.stats.get_round_start_time()

    @abstractmethod
    async def apply_rate_control(self) -> None:
        """Suspend the worker until the next transaction should be submitted."""

    async def end(self) -> None:
        """Called once the round is over. Nothing to release by default."""
