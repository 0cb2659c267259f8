# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Scalar node parameters (boolean, numeric, string).

Each holds a single JSON value. An unset value serializes to None and the
backend falls back to the schema default.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from ..interface.generic_parameter import ParameterNode
from .validators import Validator, create_validator


class ScalarParameter(ABC):
    """Shared implementation of the single-value parameter kinds."""

    def __init__(self, options: Mapping[str, Any], node: Optional[ParameterNode] = None):
        """
        Initialize the parameter from its options.

        Args:
            options: ``{"name", "value"?, "schema"}``
            node: Owning graph node (unused; scalar values do not depend on knowledge)

        Raises:
            KeyError: If ``name`` or ``schema`` is missing from options
            ValueError: If the schema declares an invalid validator configuration
        """
        self.name: str = options["name"]
        self.schema: Mapping[str, Any] = options["schema"]
        self.value: Any = options.get("value")
        self.default_value: Any = self.schema.get("default")
        self.validator: Optional[Validator] = create_validator(self.schema.get("validator"))

    @abstractmethod
    def accepts_type(self, value: Any) -> bool:
        """Check the Python type of a candidate value."""
        pass

    @property
    def effective_value(self) -> Any:
        """The value the backend will use: the set value, else the default."""
        return self.value if self.value is not None else self.default_value

    def serialize(self) -> Any:
        return self.value

    def validate(self) -> bool:
        if self.value is None:
            return True
        if not self.accepts_type(self.value):
            return False
        if self.validator is not None:
            return self.validator.validate(self.value)
        return True

    def refresh(self, node: ParameterNode) -> None:
        pass

    def reset_to_default(self) -> None:
        self.value = self.default_value

    def is_default(self) -> bool:
        return self.effective_value == self.default_value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', value={self.value!r})"


class BooleanParameter(ScalarParameter):
    """True/false flag."""

    def accepts_type(self, value: Any) -> bool:
        return isinstance(value, bool)


class NumericParameter(ScalarParameter):
    """Integer or real number, optionally constrained by a range validator."""

    def accepts_type(self, value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)


class StringParameter(ScalarParameter):
    """Free text, optionally constrained by a regex validator."""

    def accepts_type(self, value: Any) -> bool:
        return isinstance(value, str)
