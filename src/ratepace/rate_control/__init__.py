# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from ratepace.rate_control.base_rate_controller import (
    BaseRateController,
)
from ratepace.rate_control.factory import (
    create_rate_controller,
)
from ratepace.rate_control.fixed_rate_controller import (
    FixedRateController,
)
from ratepace.rate_control.linear_rate_controller import (
    LinearRateController,
)
from ratepace.rate_control.record_rate_controller import (
    RecordRateController,
)
from ratepace.rate_control.replay_rate_controller import (
    ReplayRateController,
)
from ratepace.rate_control.sleepers import (
    AsyncioSleeper,
    RoundBoundSleeper,
)
from ratepace.rate_control.trace_io import (
    TraceLoader,
    encode_trace,
    parse_binary_trace,
    parse_text_trace,
    write_trace,
)

__all__ = [
    "AsyncioSleeper",
    "BaseRateController",
    "FixedRateController",
    "LinearRateController",
    "RecordRateController",
    "ReplayRateController",
    "RoundBoundSleeper",
    "TraceLoader",
    "create_rate_controller",
    "encode_trace",
    "parse_binary_trace",
    "parse_text_trace",
    "write_trace",
]
