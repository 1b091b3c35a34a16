# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import re
import time
from pathlib import Path

from ratepace.common.constants import (
    MILLIS_PER_SECOND,
    ROUND_INDEX_PLACEHOLDER,
    WORKER_INDEX_PLACEHOLDER,
)


def time_ms() -> float:
    """Current wall-clock time in milliseconds since the epoch."""
    return time.time() * MILLIS_PER_SECOND


def resolve_path_template(
    path_template: str,
    worker_index: int,
    round_index: int,
    workspace: Path | None = None,
) -> Path:
    """Substitute the worker and round placeholders in a path template and resolve it.

    `<C>` is replaced with the worker index and `<R>` with the round index, ignoring case.
    A relative result is resolved against `workspace`, or the current working directory.
    """
    path_str = re.sub(
        re.escape(WORKER_INDEX_PLACEHOLDER),
        str(worker_index),
        path_template,
        flags=re.IGNORECASE,
    )
    path_str = re.sub(
        re.escape(ROUND_INDEX_PLACEHOLDER),
        str(round_index),
        path_str,
        flags=re.IGNORECASE,
    )
    path = Path(path_str).expanduser()
    if not path.is_absolute():
        path = (workspace or Path.cwd()) / path
    return path.resolve()


def format_number(value: float) -> str:
    """Format a number for log messages, dropping the fraction of integral values.

    >>> format_number(100.0), format_number(12.5)
    ('100', '12.5')
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
