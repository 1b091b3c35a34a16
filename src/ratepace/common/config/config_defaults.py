# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass


@dataclass(frozen=True)
class ReplayRateDefaults:
    DEFAULT_SLEEP_TIME = 20.0


@dataclass(frozen=True)
class FixedRateDefaults:
    TPS = 10.0


@dataclass(frozen=True)
class LinearRateDefaults:
    STARTING_TPS = 20.0
    FINISHING_TPS = 80.0


@dataclass(frozen=True)
class RecordRateDefaults:
    LOG_END = False
