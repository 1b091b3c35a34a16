# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Process-wide settings, overridable through environment variables.

Usage::

    from ratepace.common.environment import Environment

    workspace = Environment.RATE_CONTROL.WORKSPACE
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ratepace.common.enums import RatePaceLogLevel


class _LoggingSettings(BaseSettings):
    """Console and file logging settings (`RATEPACE_LOGGING_*`)."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_prefix="RATEPACE_LOGGING_",
    )

    LEVEL: RatePaceLogLevel = Field(
        default=RatePaceLogLevel.INFO,
        description="Default log level when none is passed to setup_rich_logging.",
    )
    LOG_FILE: str = Field(
        default="ratepace.log",
        description="Name of the log file written inside the log folder.",
    )
    MAX_CONSOLE_MESSAGE_LENGTH: int = Field(
        default=4096,
        ge=1,
        description="Console messages longer than this are truncated.",
    )


class _RateControlSettings(BaseSettings):
    """Rate controller settings (`RATEPACE_RATE_CONTROL_*`)."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_prefix="RATEPACE_RATE_CONTROL_",
    )

    WORKSPACE: Path | None = Field(
        default=None,
        description="Directory that relative trace path templates are resolved against. "
        "Defaults to the current working directory.",
    )


class _Environment:
    LOGGING = _LoggingSettings()
    RATE_CONTROL = _RateControlSettings()


Environment = _Environment()
