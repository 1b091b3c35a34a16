# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from ratepace.common.config import RecordRateOptions
from ratepace.common.enums import RateControlType
from ratepace.common.exceptions import ConfigurationError
from ratepace.common.factories import RateControllerFactory
from ratepace.common.protocols import RateControllerProtocol
from ratepace.rate_control.base_rate_controller import BaseRateController
from ratepace.rate_control.trace_io import TraceLoader, write_trace


@RateControllerFactory.register(RateControlType.RECORD)
class RecordRateController(BaseRateController):
    """Records the submission offsets achieved by another rate controller.

    Every call delegates to the wrapped controller first, then stores the elapsed round
    time at the index of the transaction about to be submitted. When the round ends the
    offsets are written to the trace file, in a format the replay controller can read
    back.
    """

    options_class = RecordRateOptions

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.options: RecordRateOptions

        if self.options.rate_controller.type == RateControlType.RECORD:
            raise ConfigurationError(
                "The record rate controller cannot wrap another record rate controller"
            )

        trace_io = TraceLoader(
            worker_index=self.worker_index,
            round_index=self.round_index,
            logger=self.logger,
        )
        self.trace_path = trace_io.resolve_path(
            self.options.path_template,
            missing_message="The path to save the recording to is undefined",
        )
        self.output_format = trace_io.select_format(
            self.options.output_format, direction="Output"
        )

        self.rate_controller: RateControllerProtocol = (
            RateControllerFactory.create_instance(
                self.options.rate_controller.type,
                test_message=self.test_message.model_copy(
                    update={"rate_control": self.options.rate_controller}
                ),
                stats=self.stats,
                worker_index=self.worker_index,
                sleeper=self.sleeper,
                logger=self.logger,
                clock=self.clock,
            )
        )
        self._records: list[float] = []

    @property
    def records(self) -> tuple[float, ...]:
        return tuple(self._records)

    async def apply_rate_control(self) -> None:
        await self.rate_controller.apply_rate_control()

        index = self.stats.get_total_submitted_tx()
        offset = self.elapsed_ms()
        if index < len(self._records):
            self._records[index] = offset
        else:
            # Indexes skipped by the submission path take the current offset
            self._records.extend([offset] * (index - len(self._records) + 1))

    async def end(self) -> None:
        await self.rate_controller.end()
        await write_trace(self.trace_path, self._records, self.output_format)

        message = (
            f"Recorded {len(self._records):,} submission offsets to {self.trace_path} "
            f"for worker #{self.worker_index} in round #{self.round_index}"
        )
        if self.options.log_end:
            self.info(message)
        else:
            self.debug(message)
