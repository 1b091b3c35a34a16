# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Callable

from ratepace.common.factories import RateControllerFactory
from ratepace.common.models import TestMessage
from ratepace.common.protocols import (
    RateControllerProtocol,
    SleeperProtocol,
    StatisticsCollectorProtocol,
)
from ratepace.common.ratepace_logger import RatePaceLogger

# Importing the controller modules registers them with the factory.
from ratepace.rate_control import (  # noqa: F401
    fixed_rate_controller,
    linear_rate_controller,
    record_rate_controller,
    replay_rate_controller,
)


def create_rate_controller(
    test_message: TestMessage,
    stats: StatisticsCollectorProtocol,
    worker_index: int,
    *,
    sleeper: SleeperProtocol | None = None,
    logger: RatePaceLogger | None = None,
    clock: Callable[[], float] | None = None,
) -> RateControllerProtocol:
    """Create the rate controller selected by the round message.

    Raises:
        FactoryCreationError: If no controller is registered for the rate control type.
        ConfigurationError: If the controller rejects its options.
        TraceFormatError: If a trace file read at construction is malformed.
    """
    return RateControllerFactory.create_instance(
        test_message.rate_control.type,
        test_message=test_message,
        stats=stats,
        worker_index=worker_index,
        sleeper=sleeper,
        logger=logger,
        clock=clock,
    )
