# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from ratepace.worker.transaction_stats import (
    TransactionStatisticsCollector,
)

__all__ = [
    "TransactionStatisticsCollector",
]
