# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from ratepace.common.config.config_defaults import (
    FixedRateDefaults,
    LinearRateDefaults,
    RecordRateDefaults,
    ReplayRateDefaults,
)
from ratepace.common.config.rate_control_config import (
    FixedRateOptions,
    LinearRateOptions,
    RecordRateOptions,
    ReplayRateOptions,
)

__all__ = [
    "FixedRateDefaults",
    "FixedRateOptions",
    "LinearRateDefaults",
    "LinearRateOptions",
    "RecordRateDefaults",
    "RecordRateOptions",
    "ReplayRateDefaults",
    "ReplayRateOptions",
]
