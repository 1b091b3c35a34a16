# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Option models for the rate control strategies.

Each controller validates the `opts` of its `RateControlSpec` against one of these
models. The trace formats are left unvalidated here so that a missing or
unsupported value can be reported and defaulted by the controller instead of
failing validation.
"""

from typing import Any

from pydantic import Field

from ratepace.common.config.config_defaults import (
    FixedRateDefaults,
    LinearRateDefaults,
    RecordRateDefaults,
    ReplayRateDefaults,
)
from ratepace.common.models import RateControlSpec, RatePaceBaseModel


class ReplayRateOptions(RatePaceBaseModel):
    """Options of the replay strategy."""

    path_template: str | None = Field(
        default=None,
        description="Path of the trace file. <C> is replaced with the worker index and <R> with the round index.",
    )
    input_format: Any = Field(
        default=None,
        description="Encoding of the trace file: TEXT, BIN_BE or BIN_LE.",
    )
    default_sleep_time: float = Field(
        default=ReplayRateDefaults.DEFAULT_SLEEP_TIME,
        ge=0,
        description="Milliseconds to sleep before each submission once the trace is exhausted.",
    )


class FixedRateOptions(RatePaceBaseModel):
    """Options of the fixed-rate strategy."""

    tps: float = Field(
        default=FixedRateDefaults.TPS,
        ge=0,
        description="Aggregate transactions per second across all workers. 0 disables pacing.",
    )


class LinearRateOptions(RatePaceBaseModel):
    """Options of the linear-rate strategy."""

    starting_tps: float = Field(
        default=LinearRateDefaults.STARTING_TPS,
        gt=0,
        description="Aggregate transactions per second at the start of the round.",
    )
    finishing_tps: float = Field(
        default=LinearRateDefaults.FINISHING_TPS,
        gt=0,
        description="Aggregate transactions per second at the end of the round.",
    )


class RecordRateOptions(RatePaceBaseModel):
    """Options of the record strategy."""

    rate_controller: RateControlSpec = Field(
        ...,
        description="The strategy whose achieved submission offsets are recorded.",
    )
    path_template: str | None = Field(
        default=None,
        description="Path of the trace file to write. <C> is replaced with the worker index and <R> with the round index.",
    )
    output_format: Any = Field(
        default=None,
        description="Encoding of the written trace file: TEXT, BIN_BE or BIN_LE.",
    )
    log_end: bool = Field(
        default=RecordRateDefaults.LOG_END,
        description="Log the written trace path at info level instead of debug.",
    )
