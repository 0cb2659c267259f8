# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Value validators declared in parameter schemas.

Schemas carry validators as::

    {"type": "range", "configuration": {"begin": 0, "end": 1, "beginIncluded": True, "endIncluded": False, "step": 0.1}}
    {"type": "regex", "configuration": {"regex": "[a-z]+"}}
"""

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import numpy as np
from loguru import logger


class Validator(ABC):
    """Base class for value validators (immutable)."""

    @abstractmethod
    def validate(self, value: Any) -> bool:
        """Check if a value is accepted by this validator."""
        pass


@dataclass(frozen=True)
class RangeValidator(Validator):
    """Numeric range with optional open bounds and step."""

    begin: float = -math.inf
    end: float = math.inf
    begin_included: bool = True
    end_included: bool = True
    step: Optional[float] = None

    def __post_init__(self):
        if self.begin > self.end:
            raise ValueError(f"Range begin {self.begin} is greater than end {self.end}")
        if self.step is not None and self.step <= 0:
            raise ValueError(f"Range step must be positive, got {self.step}")

    def validate(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        if math.isnan(value):
            return False

        if value < self.begin or (value == self.begin and not self.begin_included):
            return False
        if value > self.end or (value == self.end and not self.end_included):
            return False

        if self.step is not None and math.isfinite(self.begin):
            steps = (value - self.begin) / self.step
            return bool(np.isclose(steps, round(steps)))
        return True

    @classmethod
    def from_dict(cls, configuration: Mapping[str, Any]) -> "RangeValidator":
        # JSON null means an unbounded side
        begin = configuration.get("begin")
        end = configuration.get("end")
        for bound in (begin, end, configuration.get("step")):
            if bound is not None and (isinstance(bound, bool) or not isinstance(bound, (int, float))):
                raise ValueError(f"Range configuration values must be numbers, got {bound!r}")
        return cls(
            begin=begin if begin is not None else -math.inf,
            end=end if end is not None else math.inf,
            begin_included=bool(configuration.get("beginIncluded", True)),
            end_included=bool(configuration.get("endIncluded", True)),
            step=configuration.get("step"),
        )


@dataclass(frozen=True)
class RegexValidator(Validator):
    """Whole-string regular expression match."""

    regex: str

    def __post_init__(self):
        try:
            re.compile(self.regex)
        except re.error as e:
            raise ValueError(f"Invalid regex '{self.regex}': {e}") from e

    def validate(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        return re.fullmatch(self.regex, value) is not None

    @classmethod
    def from_dict(cls, configuration: Mapping[str, Any]) -> "RegexValidator":
        return cls(regex=configuration.get("regex", ".*"))


_VALIDATORS = {
    "range": RangeValidator,
    "regex": RegexValidator,
}


def create_validator(raw: Optional[Mapping[str, Any]]) -> Optional[Validator]:
    """
    Build the validator described in a schema.

    Args:
        raw: ``{"type", "configuration"}`` mapping, or None

    Returns:
        The validator, or None if absent or of an unknown type

    Raises:
        ValueError: If the configuration of a known validator type is invalid
    """
    if raw is None:
        return None
    validator_type = raw.get("type")
    validator_cls = _VALIDATORS.get(validator_type) if isinstance(validator_type, str) else None
    if validator_cls is None:
        logger.warning(f"Ignoring unknown validator type: {validator_type!r}")
        return None
    return validator_cls.from_dict(raw.get("configuration", {}))
