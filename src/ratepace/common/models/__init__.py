# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from ratepace.common.models.base_models import (
    RatePaceBaseModel,
)
from ratepace.common.models.message_models import (
    RateControlSpec,
    TestMessage,
)

__all__ = [
    "RateControlSpec",
    "RatePaceBaseModel",
    "TestMessage",
]
