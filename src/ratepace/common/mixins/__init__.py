# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from ratepace.common.mixins.logger_mixin import (
    RatePaceLoggerMixin,
)

__all__ = [
    "RatePaceLoggerMixin",
]
