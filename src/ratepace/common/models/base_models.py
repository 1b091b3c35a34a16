# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RatePaceBaseModel(BaseModel):
    """Base model for all ratepace models.

    Fields are exposed in snake_case, and also accept the camelCase names used in the
    benchmark configuration files (e.g. `pathTemplate` for `path_template`).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )
