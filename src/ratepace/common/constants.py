# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

MILLIS_PER_SECOND = 1000

MIN_SLEEP_THRESHOLD_MS = 5.0
"""Computed sleeps shorter than this are skipped."""

TRACE_RECORD_WIDTH_BYTES = 8
"""Width of a single IEEE-754 double record in a binary trace file."""

WORKER_INDEX_PLACEHOLDER = "<C>"
ROUND_INDEX_PLACEHOLDER = "<R>"
