# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rate controller that replays a recorded submission cadence."""

from ratepace.common.config import ReplayRateOptions
from ratepace.common.constants import MIN_SLEEP_THRESHOLD_MS
from ratepace.common.enums import RateControlType, ReplayState
from ratepace.common.factories import RateControllerFactory
from ratepace.common.utils import format_number
from ratepace.rate_control.base_rate_controller import BaseRateController
from ratepace.rate_control.trace_io import TraceLoader


@RateControllerFactory.register(RateControlType.REPLAY)
class ReplayRateController(BaseRateController):
    """Replays the submission offsets of a trace file.

    The trace holds, for the n-th transaction of the round, the offset in milliseconds
    from the round start at which it should be submitted. Before each submission the
    worker sleeps until the offset of its next transaction, measured against the
    actual elapsed round time so drift does not accumulate.

    The index into the trace is the submitted transaction count reported by the
    statistics collector, so no local counter has to be kept in sync with it.

    Once the worker has submitted as many transactions as the trace holds, it falls
    back to sleeping `defaultSleepTime` milliseconds before every submission, for the
    rest of the round.

    States::

        REPLAYING ──(submitted count reaches trace length)──► EXHAUSTED

    An empty trace starts in EXHAUSTED.

    Raises:
        ConfigurationError: If the path template is missing, or the trace file does not
            exist or cannot be read.
        TraceFormatError: If the trace file does not match its input format.
    """

    options_class = ReplayRateOptions

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.options: ReplayRateOptions
        self.default_sleep_time: float = self.options.default_sleep_time

        loader = TraceLoader(
            worker_index=self.worker_index,
            round_index=self.round_index,
            logger=self.logger,
        )
        self.path_template: str | None = self.options.path_template
        self.trace_path = loader.resolve_path(self.path_template)
        self.input_format = loader.select_format(self.options.input_format)
        self.records: tuple[float, ...] = loader.load(
            self.trace_path, self.input_format
        )

        self._exhausted = len(self.records) == 0
        self._exhausted_warning_sent = False

    @property
    def state(self) -> ReplayState:
        return ReplayState.EXHAUSTED if self._exhausted else ReplayState.REPLAYING

    async def apply_rate_control(self) -> None:
        current_index = self.stats.get_total_submitted_tx()

        if not self._exhausted and current_index < len(self.records):
            sleep_time = self.records[current_index] - self.elapsed_ms()
            if sleep_time >= MIN_SLEEP_THRESHOLD_MS:
                await self.sleeper.sleep(sleep_time)
            return

        self._exhausted = True
        if not self._exhausted_warning_sent:
            self._exhausted_warning_sent = True
            self.warning(
                f"Using default sleep time of {format_number(self.default_sleep_time)} ms "
                f"from now on for worker #{self.worker_index} in round #{self.round_index}"
            )
        await self.sleeper.sleep(self.default_sleep_time)
