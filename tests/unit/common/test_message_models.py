# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest
from pydantic import ValidationError

from ratepace.common.config import (
    FixedRateOptions,
    LinearRateOptions,
    RecordRateOptions,
    ReplayRateOptions,
)
from ratepace.common.enums import RateControlType
from ratepace.common.models import RateControlSpec, TestMessage


class TestTestMessage:
    def test_camel_case_keys(self):
        message = TestMessage.model_validate(
            {
                "label": "warmup",
                "round": 2,
                "totalWorkers": 4,
                "txNumber": 500,
                "rateControl": {"type": "replay", "opts": {"pathTemplate": "t.txt"}},
            }
        )
        assert message.label == "warmup"
        assert message.round_index == 2
        assert message.total_workers == 4
        assert message.tx_number == 500
        assert message.tx_duration is None
        assert message.rate_control.type is RateControlType.REPLAY
        assert message.rate_control.opts == {"pathTemplate": "t.txt"}

    def test_defaults(self):
        message = TestMessage(rate_control=RateControlSpec(type=RateControlType.RECORD))
        assert message.round_index == 0
        assert message.total_workers == 1
        assert message.rate_control.opts == {}

    def test_rate_control_required(self):
        with pytest.raises(ValidationError):
            TestMessage.model_validate({"round": 0})

    def test_unknown_rate_control_type_rejected(self):
        with pytest.raises(ValidationError):
            RateControlSpec.model_validate({"type": "zero-rate"})

    def test_count_and_duration_are_exclusive(self):
        with pytest.raises(ValidationError, match="cannot be used together"):
            TestMessage.model_validate(
                {"txNumber": 10, "txDuration": 30, "rateControl": {"type": "fixed-rate"}}
            )

    @pytest.mark.parametrize(
        "field, value",
        [("round", -1), ("totalWorkers", 0), ("txNumber", 0), ("txDuration", 0)],
    )
    def test_bounds(self, field, value):
        with pytest.raises(ValidationError):
            TestMessage.model_validate({field: value, "rateControl": {"type": "replay"}})


class TestRateControlOptions:
    def test_replay_defaults(self):
        options = ReplayRateOptions.model_validate({})
        assert options.path_template is None
        assert options.input_format is None
        assert options.default_sleep_time == 20.0

    def test_replay_camel_case(self):
        options = ReplayRateOptions.model_validate(
            {"pathTemplate": "t-<C>.bin", "inputFormat": "BIN_BE", "defaultSleepTime": 5}
        )
        assert options.path_template == "t-<C>.bin"
        assert options.input_format == "BIN_BE"
        assert options.default_sleep_time == 5.0

    def test_replay_unsupported_format_is_not_a_validation_error(self):
        assert ReplayRateOptions.model_validate({"inputFormat": "CSV"}).input_format == "CSV"

    @pytest.mark.parametrize("value", [5, 2.0, False])
    def test_replay_non_string_format_is_not_a_validation_error(self, value):
        assert ReplayRateOptions.model_validate({"inputFormat": value}).input_format == value

    def test_replay_negative_default_sleep_rejected(self):
        with pytest.raises(ValidationError):
            ReplayRateOptions.model_validate({"defaultSleepTime": -1})

    def test_fixed_and_linear_defaults(self):
        assert FixedRateOptions().tps == 10.0
        linear = LinearRateOptions()
        assert (linear.starting_tps, linear.finishing_tps) == (20.0, 80.0)

    def test_record_nested_spec(self):
        options = RecordRateOptions.model_validate(
            {
                "rateController": {"type": "linear-rate", "opts": {"startingTps": 5}},
                "pathTemplate": "out.txt",
                "logEnd": True,
            }
        )
        assert options.rate_controller.type is RateControlType.LINEAR_RATE
        assert options.rate_controller.opts == {"startingTps": 5}
        assert options.output_format is None
        assert options.log_end is True
