# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Node Parameters

Parameter model for configuring pipeline nodes in the workflow editor.

Architecture:
- Interface: GenericParameter, ParameterNode, Knowledge, DataFrameSchema
- Selector: SelectorParameter and its items (column, index, columnList, indexRange, typeList)
- Parameters: BooleanParameter, NumericParameter, StringParameter, create_parameters
- ParameterList: all parameters of one node, serialized together
"""

# Export interface types
from .interface import (
    ColumnType,
    ColumnField,
    DataFrameSchema,
    InferenceResult,
    Knowledge,
    GenericParameter,
    ParameterNode,
)

# Export selector
from .selector import SelectorParameter, SelectorItem, create_item

# Export other parameter kinds and the loader
from .parameters import (
    BooleanParameter,
    NumericParameter,
    StringParameter,
    UnknownParameterTypeError,
    create_parameter,
    create_parameters,
)
from .parameter_list import ParameterList

__all__ = [
    # Interface
    "ColumnType",
    "ColumnField",
    "DataFrameSchema",
    "InferenceResult",
    "Knowledge",
    "GenericParameter",
    "ParameterNode",
    # Selector
    "SelectorParameter",
    "SelectorItem",
    "create_item",
    # Parameters
    "BooleanParameter",
    "NumericParameter",
    "StringParameter",
    "UnknownParameterTypeError",
    "create_parameter",
    "create_parameters",
    "ParameterList",
]
