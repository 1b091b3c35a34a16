# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from tests.harness.fake_sleeper import FakeClock, FakeSleeper

__all__ = [
    "FakeClock",
    "FakeSleeper",
]
