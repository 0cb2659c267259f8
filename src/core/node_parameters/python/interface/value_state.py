# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Classification of raw parameter values as absent, empty or populated."""

from enum import Enum
from typing import Any, Mapping


class ValueState(Enum):
    ABSENT = "absent"
    EMPTY = "empty"
    POPULATED = "populated"


def value_state(value: Any) -> ValueState:
    """
    Classify a raw value.

    Only None is absent. Empty strings and empty collections are empty.
    Everything else, including ``0`` and ``False``, is populated.
    """
    if value is None:
        return ValueState.ABSENT
    if isinstance(value, (str, list, tuple, Mapping)) and len(value) == 0:
        return ValueState.EMPTY
    return ValueState.POPULATED


def is_populated(value: Any) -> bool:
    return value_state(value) is ValueState.POPULATED
