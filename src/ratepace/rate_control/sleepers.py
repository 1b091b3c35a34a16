# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Suspension primitives used by the rate controllers.

A sleeper only suspends the calling worker task. Other workers, and other tasks on
the same event loop, keep running.
"""

import asyncio

from ratepace.common.constants import MILLIS_PER_SECOND


class AsyncioSleeper:
    """Sleeps with :func:`asyncio.sleep`."""

    async def sleep(self, duration_ms: float) -> None:
        await asyncio.sleep(max(duration_ms, 0.0) / MILLIS_PER_SECOND)


class RoundBoundSleeper:
    """Sleeps until the duration elapses or the round finishes, whichever comes first.

    Keeps a worker from sleeping past the logical end of its round.
    """

    def __init__(self, round_finished_event: asyncio.Event | None = None) -> None:
        self.round_finished_event = round_finished_event or asyncio.Event()

    def finish_round(self) -> None:
        """Wake up any pending sleep, and make all further sleeps return immediately."""
        self.round_finished_event.set()

    async def sleep(self, duration_ms: float) -> None:
        if self.round_finished_event.is_set():
            return
        try:
            await asyncio.wait_for(
                self.round_finished_event.wait(),
                timeout=max(duration_ms, 0.0) / MILLIS_PER_SECOND,
            )
        except asyncio.TimeoutError:
            # Slept for the full duration
            return
