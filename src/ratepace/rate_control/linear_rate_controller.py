# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from ratepace.common.config import LinearRateOptions
from ratepace.common.constants import MILLIS_PER_SECOND, MIN_SLEEP_THRESHOLD_MS
from ratepace.common.enums import RateControlType
from ratepace.common.exceptions import ConfigurationError
from ratepace.common.factories import RateControllerFactory
from ratepace.rate_control.base_rate_controller import BaseRateController


@RateControllerFactory.register(RateControlType.LINEAR_RATE)
class LinearRateController(BaseRateController):
    """Ramps the submission rate linearly over the round.

    The period between submissions moves linearly from `1000 / startingTps` to
    `1000 / finishingTps` milliseconds (rates split across the workers). Duration-based
    rounds interpolate over elapsed time, count-based rounds over submitted transactions.

    Raises:
        ConfigurationError: If the round has neither a duration nor a transaction count.
    """

    options_class = LinearRateOptions

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.options: LinearRateOptions

        self.starting_sleep_time: float = MILLIS_PER_SECOND / (
            self.options.starting_tps / self.total_workers
        )
        self.finishing_sleep_time: float = MILLIS_PER_SECOND / (
            self.options.finishing_tps / self.total_workers
        )
        sleep_time_range = self.finishing_sleep_time - self.starting_sleep_time

        if self.test_message.tx_duration is not None:
            self.duration_based = True
            self.gradient = sleep_time_range / (
                self.test_message.tx_duration * MILLIS_PER_SECOND
            )
        elif self.test_message.tx_number is not None:
            self.duration_based = False
            self.gradient = sleep_time_range / self.test_message.tx_number
        else:
            raise ConfigurationError(
                f"Linear rate control requires a round duration or transaction count "
                f"in worker #{self.worker_index} in round #{self.round_index}"
            )

    def current_sleep_time(self) -> float:
        """Interpolated period for the next submission, in milliseconds."""
        if self.duration_based:
            progress = self.elapsed_ms()
        else:
            progress = self.stats.get_total_submitted_tx()
        return self.starting_sleep_time + progress * self.gradient

    async def apply_rate_control(self) -> None:
        sleep_time = self.current_sleep_time()
        if sleep_time >= MIN_SLEEP_THRESHOLD_MS:
            await self.sleeper.sleep(sleep_time)
