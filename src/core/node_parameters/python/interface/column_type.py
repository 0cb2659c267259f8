# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Column types reported by the upstream inference engine."""

from enum import Enum
from typing import Optional


class ColumnType(str, Enum):
    """Type of a single data frame column (wire value is the lower case name)."""

    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    STRING = "string"
    TIMESTAMP = "timestamp"
    ARRAY = "array"
    VECTOR = "vector"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: object) -> Optional["ColumnType"]:
        """Return the matching column type, or None if ``raw`` names no known type."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None
