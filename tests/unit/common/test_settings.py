# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pathlib import Path

import pytest
from pydantic import ValidationError

from ratepace.common.enums import RatePaceLogLevel
from ratepace.common.environment import _LoggingSettings, _RateControlSettings


class TestLoggingSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RATEPACE_LOGGING_LEVEL", raising=False)
        settings = _LoggingSettings()
        assert settings.LEVEL == RatePaceLogLevel.INFO
        assert settings.LOG_FILE == "ratepace.log"

    def test_level_from_env_ignores_case(self, monkeypatch):
        monkeypatch.setenv("RATEPACE_LOGGING_LEVEL", "debug")
        assert _LoggingSettings().LEVEL == RatePaceLogLevel.DEBUG

    def test_invalid_message_length(self, monkeypatch):
        monkeypatch.setenv("RATEPACE_LOGGING_MAX_CONSOLE_MESSAGE_LENGTH", "0")
        with pytest.raises(ValidationError):
            _LoggingSettings()


class TestRateControlSettings:
    def test_workspace_unset_by_default(self, monkeypatch):
        monkeypatch.delenv("RATEPACE_RATE_CONTROL_WORKSPACE", raising=False)
        assert _RateControlSettings().WORKSPACE is None

    def test_workspace_from_env(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("RATEPACE_RATE_CONTROL_WORKSPACE", str(tmp_path))
        assert _RateControlSettings().WORKSPACE == tmp_path
