# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

    from ratepace.common.models import TestMessage
    from ratepace.common.ratepace_logger import RatePaceLogger


@runtime_checkable
class StatisticsCollectorProtocol(Protocol):
    """Read-only view of the per-worker transaction statistics of the current round.

    Owned and updated by the submission path; rate controllers only read from it.
    """

    def get_round_start_time(self) -> float:
        """Start of the current round, in milliseconds since the epoch."""
        ...

    def get_total_submitted_tx(self) -> int:
        """Number of transactions this worker has submitted in the current round."""
        ...


@runtime_checkable
class SleeperProtocol(Protocol):
    """Suspends the calling worker task, and only that task, for a number of milliseconds."""

    async def sleep(self, duration_ms: float) -> None: ...


@runtime_checkable
class RateControllerProtocol(Protocol):
    """Protocol for pluggable rate control strategies.

    Strategies define:
    1. __init__(): Receive the round message and all dependencies. May raise.
    2. apply_rate_control(): Called before each submission; suspends the worker for as
       long as the strategy decides.
    3. end(): Called once when the round is over.

    A fresh controller is created for every worker and round.
    """

    def __init__(
        self,
        *,
        test_message: TestMessage,
        stats: StatisticsCollectorProtocol,
        worker_index: int,
        sleeper: SleeperProtocol | None = None,
        logger: RatePaceLogger | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None: ...

    async def apply_rate_control(self) -> None:
        """Suspend the worker until the next transaction should be submitted."""
        ...

    async def end(self) -> None:
        """Release or flush anything the strategy holds for the round."""
        ...
