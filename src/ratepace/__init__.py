# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rate control for distributed benchmark workers.

A worker process sets up logging once, then creates a rate controller per round::

    from ratepace import create_rate_controller, setup_rich_logging

    setup_rich_logging("INFO")
    controller = create_rate_controller(test_message, stats, worker_index)
"""

from ratepace.common.logging import setup_rich_logging
from ratepace.rate_control import create_rate_controller

__version__ = "0.1.0"

__all__ = [
    "create_rate_controller",
    "setup_rich_logging",
]
