# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest

from ratepace.common.enums import RateControlType
from ratepace.common.exceptions import ConfigurationError
from ratepace.rate_control import LinearRateController, create_rate_controller
from tests.unit.rate_control.conftest import make_message


@pytest.fixture
def create_controller(stats, fake_sleeper, fake_clock, mock_logger):
    def _create(
        starting_tps: float = 20, finishing_tps: float = 80, **kwargs
    ) -> LinearRateController:
        message = make_message(
            RateControlType.LINEAR_RATE,
            {"startingTps": starting_tps, "finishingTps": finishing_tps},
            **kwargs,
        )
        return create_rate_controller(
            message,
            stats,
            0,
            sleeper=fake_sleeper,
            logger=mock_logger,
            clock=fake_clock,
        )

    return _create


class TestLinearRateController:
    def test_requires_round_bound(self, create_controller):
        with pytest.raises(ConfigurationError, match="round duration or transaction count"):
            create_controller()

    @pytest.mark.parametrize("option", ["startingTps", "finishingTps"])
    def test_rates_must_be_positive(self, stats, fake_sleeper, option):
        opts = {"startingTps": 10, "finishingTps": 10, option: 0}
        with pytest.raises(ConfigurationError, match="Invalid options for linear-rate"):
            create_rate_controller(
                make_message(RateControlType.LINEAR_RATE, opts, txNumber=10),
                stats,
                0,
                sleeper=fake_sleeper,
            )

    def test_sleep_times_split_rate_across_workers(self, create_controller):
        controller = create_controller(txNumber=10, totalWorkers=2)
        assert controller.starting_sleep_time == pytest.approx(100.0)
        assert controller.finishing_sleep_time == pytest.approx(25.0)

    @pytest.mark.parametrize(
        "submitted, expected",
        [(0, 50.0), (4, 35.0), (10, 12.5)],
    )
    def test_count_based_interpolation(self, create_controller, stats, submitted, expected):
        controller = create_controller(txNumber=10)
        stats.tx_submitted(submitted)
        assert not controller.duration_based
        assert controller.current_sleep_time() == pytest.approx(expected)

    @pytest.mark.parametrize(
        "elapsed_ms, expected",
        [(0, 50.0), (5_000, 31.25), (10_000, 12.5)],
    )
    def test_duration_based_interpolation(
        self, create_controller, fake_clock, elapsed_ms, expected
    ):
        controller = create_controller(txDuration=10)
        fake_clock.advance(elapsed_ms)
        assert controller.duration_based
        assert controller.current_sleep_time() == pytest.approx(expected)

    @pytest.mark.asyncio
    async def test_sleeps_for_interpolated_period(
        self, create_controller, stats, fake_sleeper
    ):
        controller = create_controller(txNumber=10)
        stats.tx_submitted(4)
        await controller.apply_rate_control()
        assert fake_sleeper.sleeps == [pytest.approx(35.0)]

    @pytest.mark.asyncio
    async def test_short_periods_are_not_slept(self, create_controller, fake_sleeper):
        controller = create_controller(
            starting_tps=1000, finishing_tps=2000, txNumber=10
        )
        await controller.apply_rate_control()
        assert fake_sleeper.sleeps == []
