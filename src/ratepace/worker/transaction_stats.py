# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Callable

from ratepace.common.exceptions import InvalidStateError
from ratepace.common.mixins import RatePaceLoggerMixin
from ratepace.common.utils import time_ms


class TransactionStatisticsCollector(RatePaceLoggerMixin):
    """Tracks the round start time and transaction counts of one worker.

    Updated by the submission path. Rate controllers only read the round start time
    and the submitted count.
    """

    def __init__(
        self,
        worker_index: int = 0,
        round_index: int = 0,
        clock: Callable[[], float] | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.worker_index = worker_index
        self.round_index = round_index
        self._clock = clock or time_ms
        self._round_start_time: float | None = None
        self._total_submitted_tx = 0
        self._total_finished_tx = 0

    @property
    def active(self) -> bool:
        return self._round_start_time is not None

    def activate(self, round_start_time: float | None = None) -> None:
        """Start the round, at `round_start_time` milliseconds since the epoch or now."""
        self._round_start_time = (
            round_start_time if round_start_time is not None else self._clock()
        )
        self._total_submitted_tx = 0
        self._total_finished_tx = 0
        self.debug(
            lambda: f"Statistics activated for worker #{self.worker_index} in round "
            f"#{self.round_index} at {self._round_start_time:.3f} ms"
        )

    def tx_submitted(self, count: int = 1) -> None:
        if count < 0:
            raise ValueError(f"Submitted transaction count must be >= 0, got {count}")
        self._total_submitted_tx += count

    def tx_finished(self, count: int = 1) -> None:
        if count < 0:
            raise ValueError(f"Finished transaction count must be >= 0, got {count}")
        if self._total_finished_tx + count > self._total_submitted_tx:
            raise InvalidStateError(
                f"Cannot finish {count} transaction(s): only "
                f"{self._total_submitted_tx - self._total_finished_tx} in flight"
            )
        self._total_finished_tx += count

    def get_round_start_time(self) -> float:
        """Start of the round in milliseconds since the epoch.

        Raises:
            InvalidStateError: If the round has not been activated.
        """
        if self._round_start_time is None:
            raise InvalidStateError("Statistics collector has not been activated")
        return self._round_start_time

    def get_total_submitted_tx(self) -> int:
        return self._total_submitted_tx

    def get_total_finished_tx(self) -> int:
        return self._total_finished_tx
