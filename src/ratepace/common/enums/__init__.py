# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from ratepace.common.enums.base_enums import (
    CaseInsensitiveStrEnum,
)
from ratepace.common.enums.logging_enums import (
    RatePaceLogLevel,
)
from ratepace.common.enums.rate_control_enums import (
    RateControlType,
    ReplayState,
    TraceInputFormat,
)

__all__ = [
    "CaseInsensitiveStrEnum",
    "RateControlType",
    "RatePaceLogLevel",
    "ReplayState",
    "TraceInputFormat",
]
