# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Deterministic stand-ins for the sleeper and clock of a rate controller."""

from dataclasses import dataclass, field


@dataclass
class FakeClock:
    """Millisecond clock that only moves when told to."""

    now_ms: float = 1_000_000.0

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, duration_ms: float) -> None:
        self.now_ms += duration_ms


@dataclass
class FakeSleeper:
    """Records requested sleeps instead of sleeping.

    If a clock is attached, each sleep advances it by the requested duration, as a
    real sleep would.
    """

    clock: FakeClock | None = None
    sleeps: list[float] = field(default_factory=list)

    async def sleep(self, duration_ms: float) -> None:
        self.sleeps.append(duration_ms)
        if self.clock is not None:
            self.clock.advance(duration_ms)

    @property
    def call_count(self) -> int:
        return len(self.sleeps)

    @property
    def total_ms(self) -> float:
        return sum(self.sleeps)
