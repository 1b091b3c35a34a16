# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Reading and writing of submission traces.

A trace is an ordered sequence of millisecond offsets from the start of a round, one
per transaction. Three encodings are supported:

- ``TEXT``: one offset per line. Surrounding whitespace is ignored and blank lines
  are skipped.
- ``BIN_BE`` / ``BIN_LE``: a flat sequence of 8-byte IEEE-754 doubles in big- or
  little-endian byte order, with no header.
"""

import math
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import aiofiles
import numpy as np

from ratepace.common.constants import TRACE_RECORD_WIDTH_BYTES
from ratepace.common.enums import TraceInputFormat
from ratepace.common.environment import Environment
from ratepace.common.exceptions import ConfigurationError, TraceFormatError
from ratepace.common.mixins import RatePaceLoggerMixin
from ratepace.common.utils import resolve_path_template

DEFAULT_TRACE_FORMAT = TraceInputFormat.TEXT

_BINARY_DTYPES: dict[TraceInputFormat, np.dtype] = {
    TraceInputFormat.BIN_BE: np.dtype(">f8"),
    TraceInputFormat.BIN_LE: np.dtype("<f8"),
}


class TraceLoader(RatePaceLoggerMixin):
    """Resolves trace path templates and parses trace files for one worker and round.

    The loader keeps no state about the traces it loads.
    """

    def __init__(self, worker_index: int, round_index: int, **kwargs) -> None:
        super().__init__(**kwargs)
        self.worker_index = worker_index
        self.round_index = round_index

    def select_format(self, value: Any, direction: str = "Input") -> TraceInputFormat:
        """Pick the trace encoding for a configured value.

        A missing or unsupported value falls back to TEXT with a warning. Neither is
        an error.
        """
        if value is None:
            self.warning(
                f'{direction} format is undefined. Defaulting to "{DEFAULT_TRACE_FORMAT}" format'
            )
            return DEFAULT_TRACE_FORMAT

        trace_format = TraceInputFormat.try_parse(value)
        if trace_format is None:
            self.warning(
                f'{direction} format "{value}" is not supported. Defaulting to "{DEFAULT_TRACE_FORMAT}" format'
            )
            return DEFAULT_TRACE_FORMAT

        self.debug(
            f'{direction} format is set to "{trace_format}" format in worker #{self.worker_index} in round #{self.round_index}'
        )
        return trace_format

    def resolve_path(
        self,
        path_template: str | None,
        missing_message: str = "The path to load the recording from is undefined",
    ) -> Path:
        """Resolve the worker and round placeholders of a path template.

        Raises:
            ConfigurationError: If the template is missing or empty.
        """
        if not path_template:
            raise ConfigurationError(missing_message)
        return resolve_path_template(
            path_template,
            worker_index=self.worker_index,
            round_index=self.round_index,
            workspace=Environment.RATE_CONTROL.WORKSPACE,
        )

    def load(self, path: Path, trace_format: TraceInputFormat) -> tuple[float, ...]:
        """Read and parse the trace file at `path`.

        Raises:
            ConfigurationError: If the file does not exist or cannot be read.
            TraceFormatError: If the contents do not match `trace_format`.
        """
        if not path.exists():
            raise ConfigurationError(f"Trace file does not exist: {path}")

        try:
            data = path.read_bytes()
        except OSError as e:
            raise ConfigurationError(f"Failed to read trace file {path}: {e}") from e

        if trace_format.is_binary:
            records = parse_binary_trace(data, trace_format, path=path)
        else:
            try:
                content = data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise TraceFormatError(
                    f"Trace file {path} is not valid UTF-8 text: {e}", path=str(path)
                ) from e
            records = parse_text_trace(content, path=path)

        self.debug(
            lambda: f"Loaded {len(records):,} records from {path} for worker #{self.worker_index} "
            f"in round #{self.round_index}"
        )
        return records


def parse_text_trace(content: str, path: Path | None = None) -> tuple[float, ...]:
    """Parse a TEXT trace: one offset per line, blank lines skipped."""
    records: list[float] = []
    for line_number, line in enumerate(content.splitlines(), start=1):
        if (line := line.strip()) == "":
            continue
        try:
            value = float(line)
        except ValueError as e:
            raise TraceFormatError(
                f"Invalid trace record {line!r} on line {line_number} of {path or 'trace'}",
                path=str(path) if path else None,
            ) from e
        if not math.isfinite(value):
            raise TraceFormatError(
                f"Non-finite trace record {line!r} on line {line_number} of {path or 'trace'}",
                path=str(path) if path else None,
            )
        records.append(value)
    return tuple(records)


def parse_binary_trace(
    data: bytes, trace_format: TraceInputFormat, path: Path | None = None
) -> tuple[float, ...]:
    """Parse a BIN_BE or BIN_LE trace of 8-byte doubles."""
    if len(data) % TRACE_RECORD_WIDTH_BYTES != 0:
        raise TraceFormatError(
            f"Binary trace {path or 'data'} has {len(data)} bytes, which is not a multiple "
            f"of the {TRACE_RECORD_WIDTH_BYTES}-byte record width",
            path=str(path) if path else None,
        )
    values = np.frombuffer(data, dtype=_BINARY_DTYPES[trace_format])
    finite = np.isfinite(values)
    if not finite.all():
        index = int(np.argmin(finite))
        raise TraceFormatError(
            f"Non-finite trace record {values[index]} at index {index} of {path or 'data'}",
            path=str(path) if path else None,
        )
    return tuple(values.tolist())


def encode_trace(records: Sequence[float], trace_format: TraceInputFormat) -> bytes:
    """Encode offsets in the given trace format."""
    if trace_format.is_binary:
        return np.asarray(records, dtype=_BINARY_DTYPES[trace_format]).tobytes()
    return "".join(f"{float(record)!r}\n" for record in records).encode("utf-8")


async def write_trace(
    path: Path, records: Sequence[float], trace_format: TraceInputFormat
) -> None:
    """Write offsets to `path` in the given trace format, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    async with aiofiles.open(path, "wb") as f:
        await f.write(encode_trace(records, trace_format))
