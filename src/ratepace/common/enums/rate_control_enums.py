# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from ratepace.common.enums.base_enums import CaseInsensitiveStrEnum


class RateControlType(CaseInsensitiveStrEnum):
    """The pacing strategies a worker can use between transaction submissions."""

    REPLAY = "replay"
    """Replay a previously recorded submission cadence from a trace file."""

    FIXED_RATE = "fixed-rate"
    """Submit at a constant aggregate rate, split evenly across the workers."""

    LINEAR_RATE = "linear-rate"
    """Ramp the aggregate rate linearly from a starting to a finishing value over the round."""

    RECORD = "record"
    """Wrap another strategy and record the achieved submission offsets to a trace file."""


class TraceInputFormat(CaseInsensitiveStrEnum):
    """The encodings a trace file can be stored in."""

    TEXT = "TEXT"
    """One offset per line, as a decimal floating-point number."""

    BIN_BE = "BIN_BE"
    """A flat sequence of 8-byte big-endian IEEE-754 doubles."""

    BIN_LE = "BIN_LE"
    """A flat sequence of 8-byte little-endian IEEE-754 doubles."""

    @property
    def is_binary(self) -> bool:
        return self != TraceInputFormat.TEXT


class ReplayState(CaseInsensitiveStrEnum):
    """The state of a replay controller within a round."""

    REPLAYING = "replaying"
    """Submissions are paced by the scheduled offsets of the trace."""

    EXHAUSTED = "exhausted"
    """The trace has run out and the default sleep time is used for every submission."""
