# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Scalar parameter kinds, validators and the node configuration loader."""

from .scalar_parameters import ScalarParameter, BooleanParameter, NumericParameter, StringParameter
from .validators import Validator, RangeValidator, RegexValidator, create_validator
from .parameter_factory import (
    PARAMETER_TYPES,
    UnknownParameterTypeError,
    create_parameter,
    create_parameters,
)

__all__ = [
    "ScalarParameter",
    "BooleanParameter",
    "NumericParameter",
    "StringParameter",
    "Validator",
    "RangeValidator",
    "RegexValidator",
    "create_validator",
    "PARAMETER_TYPES",
    "UnknownParameterTypeError",
    "create_parameter",
    "create_parameters",
]
