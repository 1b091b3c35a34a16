# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from ratepace.common.enums import RateControlType
from ratepace.common.models import TestMessage
from ratepace.common.ratepace_logger import RatePaceLogger
from ratepace.worker import TransactionStatisticsCollector
from tests.harness import FakeClock, FakeSleeper


def make_message(
    rate_control_type: RateControlType | str,
    opts: dict[str, Any],
    **kwargs,
) -> TestMessage:
    """Build a round message the way it arrives from the orchestrator (camelCase keys)."""
    return TestMessage.model_validate(
        {"rateControl": {"type": rate_control_type, "opts": opts}, **kwargs}
    )


def write_text_trace(path: Path, records: list[float]) -> Path:
    path.write_text("".join(f"{record}\n" for record in records))
    return path


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_sleeper() -> FakeSleeper:
    """Sleeper that records sleeps without advancing the clock."""
    return FakeSleeper()


@pytest.fixture
def mock_logger() -> MagicMock:
    return MagicMock(spec=RatePaceLogger)


@pytest.fixture
def stats(fake_clock: FakeClock) -> TransactionStatisticsCollector:
    """Statistics collector whose round starts at the current fake time."""
    collector = TransactionStatisticsCollector(clock=fake_clock)
    collector.activate()
    return collector


@pytest.fixture
def trace_file(tmp_path: Path) -> Path:
    return write_text_trace(tmp_path / "trace.txt", [100, 200, 300])
