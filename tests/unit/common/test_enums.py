# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest

from ratepace.common.enums import RateControlType, ReplayState, TraceInputFormat


class TestCaseInsensitiveStrEnum:
    @pytest.mark.parametrize("value", ["BIN_BE", "bin_be", "Bin_Be"])
    def test_lookup_ignores_case(self, value):
        assert TraceInputFormat(value) is TraceInputFormat.BIN_BE

    def test_equality_with_strings(self):
        assert RateControlType.FIXED_RATE == "FIXED-RATE"
        assert RateControlType.FIXED_RATE != "linear-rate"

    def test_hash_matches_value(self):
        assert {RateControlType.REPLAY: 1}.get("replay") == 1

    def test_str_is_value(self):
        assert str(RateControlType.LINEAR_RATE) == "linear-rate"
        assert f"{TraceInputFormat.TEXT}" == "TEXT"

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("text", TraceInputFormat.TEXT),
            (TraceInputFormat.BIN_LE, TraceInputFormat.BIN_LE),
            ("CSV", None),
            ("", None),
            (None, None),
            (3, None),
        ],
    )
    def test_try_parse(self, value, expected):
        assert TraceInputFormat.try_parse(value) is expected


class TestTraceInputFormat:
    @pytest.mark.parametrize(
        "trace_format, is_binary",
        [
            (TraceInputFormat.TEXT, False),
            (TraceInputFormat.BIN_BE, True),
            (TraceInputFormat.BIN_LE, True),
        ],
    )
    def test_is_binary(self, trace_format, is_binary):
        assert trace_format.is_binary is is_binary


def test_replay_states():
    assert [state.value for state in ReplayState] == ["replaying", "exhausted"]
