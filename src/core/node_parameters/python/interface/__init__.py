# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Interface definitions for node parameters."""

from .column_type import ColumnType
from .generic_parameter import GenericParameter, ParameterNode
from .knowledge import ColumnField, DataFrameSchema, InferenceResult, Knowledge
from .value_state import ValueState, value_state, is_populated

__all__ = [
    "ColumnType",
    "GenericParameter",
    "ParameterNode",
    "ColumnField",
    "DataFrameSchema",
    "InferenceResult",
    "Knowledge",
    "ValueState",
    "value_state",
    "is_populated",
]
