# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from pydantic import Field, model_validator
from typing_extensions import Self

from ratepace.common.enums import RateControlType
from ratepace.common.models.base_models import RatePaceBaseModel


class RateControlSpec(RatePaceBaseModel):
    """Which pacing strategy a worker uses, and its strategy-specific options."""

    type: RateControlType = Field(
        ...,
        description="The pacing strategy to use.",
    )
    opts: dict[str, Any] = Field(
        default_factory=dict,
        description="Strategy-specific options, validated by the selected controller.",
    )


class TestMessage(RatePaceBaseModel):
    """Configuration message sent to a worker at the start of a round."""

    __test__ = False  # not a pytest test class

    label: str = Field(
        default="round",
        description="Human readable label of the round.",
    )
    round_index: int = Field(
        default=0,
        ge=0,
        alias="round",
        description="Index of the round this message configures.",
    )
    total_workers: int = Field(
        default=1,
        ge=1,
        description="Number of workers sharing the aggregate load of the round.",
    )
    tx_number: int | None = Field(
        default=None,
        ge=1,
        description="Number of transactions each worker submits, for count-based rounds.",
    )
    tx_duration: float | None = Field(
        default=None,
        gt=0,
        description="Length of the round in seconds, for duration-based rounds.",
    )
    rate_control: RateControlSpec = Field(
        ...,
        description="The pacing strategy of the round.",
    )

    @model_validator(mode="after")
    def validate_round_bounds(self) -> Self:
        """A round is bounded either by a transaction count or by a duration, not both."""
        if self.tx_number is not None and self.tx_duration is not None:
            raise ValueError("txNumber and txDuration cannot be used together")
        return self
