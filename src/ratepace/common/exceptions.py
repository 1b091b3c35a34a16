# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class RatePaceError(Exception):
    """Base class for all exceptions raised by ratepace."""

    def __str__(self) -> str:
        """Return the string representation of the exception with the class name."""
        return super().__str__()


class ConfigurationError(RatePaceError):
    """Exception raised when something fails to configure, or there is a configuration error."""


class FactoryCreationError(RatePaceError):
    """Exception raised when a factory encounters an error while creating a class."""


class TraceFormatError(RatePaceError):
    """Exception raised when a trace file does not match its declared input format."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class InvalidStateError(RatePaceError):
    """Exception raised when something is in an invalid state."""
