# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from ratepace.common.config import FixedRateOptions
from ratepace.common.constants import MILLIS_PER_SECOND, MIN_SLEEP_THRESHOLD_MS
from ratepace.common.enums import RateControlType
from ratepace.common.factories import RateControllerFactory
from ratepace.rate_control.base_rate_controller import BaseRateController


@RateControllerFactory.register(RateControlType.FIXED_RATE)
class FixedRateController(BaseRateController):
    """Submits at a constant rate.

    The aggregate `tps` is split evenly across the workers of the round. The n-th
    transaction of a worker is due `n * sleep_time` milliseconds after the round start.
    """

    options_class = FixedRateOptions

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.options: FixedRateOptions
        tps_per_worker = self.options.tps / self.total_workers
        self.sleep_time: float = (
            MILLIS_PER_SECOND / tps_per_worker if tps_per_worker > 0 else 0.0
        )
        self.debug(
            lambda: f"Fixed rate of {tps_per_worker} TPS ({self.sleep_time} ms period) "
            f"for worker #{self.worker_index} in round #{self.round_index}"
        )

    async def apply_rate_control(self) -> None:
        if self.sleep_time == 0:
            return

        submitted = self.stats.get_total_submitted_tx()
        sleep_time = self.sleep_time * submitted - self.elapsed_ms()
        if sleep_time >= MIN_SLEEP_THRESHOLD_MS:
            await self.sleeper.sleep(sleep_time)
