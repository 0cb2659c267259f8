# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Selector items.

A selector item is one unit of a column selection: a column name, a column
index, a list of names, an index range or a list of column types. Items are
immutable and are only created by the item factory (or directly in tests).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple

import numpy as np

from ..interface.column_type import ColumnType
from ..interface.knowledge import DataFrameSchema


def is_column_index(value: Any) -> bool:
    """Whether ``value`` is a usable zero-based column index."""
    # bool is an int subclass but never a valid index
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True)
class SelectorItem(ABC):
    """Base class for selector item variants."""

    TYPE: ClassVar[str] = ""

    @property
    def type(self) -> str:
        """Wire discriminator of this variant."""
        return self.TYPE

    @abstractmethod
    def serialize(self) -> Dict[str, Any]:
        """Serialize to the JSON wire shape."""
        pass

    @abstractmethod
    def validate(self, data_frame_schema: Optional[DataFrameSchema] = None) -> bool:
        """
        Check the item against the upstream schema.

        Args:
            data_frame_schema: Currently inferred schema, None if not known yet

        Returns:
            True if the item can be applied (always True without a schema)
        """
        pass

    @abstractmethod
    def select(self, data_frame_schema: DataFrameSchema) -> np.ndarray:
        """Boolean mask over the schema's columns selected by this item."""
        pass


@dataclass(frozen=True)
class ColumnItem(SelectorItem):
    """A single column referenced by name."""

    TYPE: ClassVar[str] = "column"

    name: str

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise ValueError(f"Column name must be a string, got {self.name!r}")

    def serialize(self) -> Dict[str, Any]:
        return {"type": self.TYPE, "value": self.name}

    def validate(self, data_frame_schema: Optional[DataFrameSchema] = None) -> bool:
        if data_frame_schema is None:
            return True
        return self.name in data_frame_schema

    def select(self, data_frame_schema: DataFrameSchema) -> np.ndarray:
        mask = np.zeros(len(data_frame_schema), dtype=bool)
        index = data_frame_schema.index_of(self.name)
        if index is not None:
            mask[index] = True
        return mask


@dataclass(frozen=True)
class IndexItem(SelectorItem):
    """A single column referenced by its zero-based position."""

    TYPE: ClassVar[str] = "index"

    index: int

    def __post_init__(self):
        if not is_column_index(self.index):
            raise ValueError(f"Column index must be a non-negative integer, got {self.index!r}")

    def serialize(self) -> Dict[str, Any]:
        return {"type": self.TYPE, "value": self.index}

    def validate(self, data_frame_schema: Optional[DataFrameSchema] = None) -> bool:
        if data_frame_schema is None:
            return True
        return self.index < len(data_frame_schema)

    def select(self, data_frame_schema: DataFrameSchema) -> np.ndarray:
        mask = np.zeros(len(data_frame_schema), dtype=bool)
        if self.index < len(mask):
            mask[self.index] = True
        return mask


@dataclass(frozen=True)
class ColumnListItem(SelectorItem):
    """Columns referenced by name, in user order (duplicates allowed)."""

    TYPE: ClassVar[str] = "columnList"

    names: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "names", tuple(self.names))
        if not all(isinstance(n, str) for n in self.names):
            raise ValueError(f"Column names must be strings, got {self.names!r}")

    def serialize(self) -> Dict[str, Any]:
        return {"type": self.TYPE, "values": list(self.names)}

    def validate(self, data_frame_schema: Optional[DataFrameSchema] = None) -> bool:
        if data_frame_schema is None:
            return True
        return all(n in data_frame_schema for n in self.names)

    def select(self, data_frame_schema: DataFrameSchema) -> np.ndarray:
        wanted = set(self.names)
        names = data_frame_schema.column_names
        return np.fromiter((n in wanted for n in names), dtype=bool, count=len(names))


@dataclass(frozen=True)
class IndexRangeItem(SelectorItem):
    """An inclusive range of column positions."""

    TYPE: ClassVar[str] = "indexRange"

    start: int
    end: int

    def __post_init__(self):
        if not (is_column_index(self.start) and is_column_index(self.end)):
            raise ValueError(
                f"Index range bounds must be non-negative integers, got [{self.start!r}, {self.end!r}]"
            )
        if self.start > self.end:
            raise ValueError(f"Index range start {self.start} is greater than end {self.end}")

    def serialize(self) -> Dict[str, Any]:
        return {"type": self.TYPE, "values": [self.start, self.end]}

    def validate(self, data_frame_schema: Optional[DataFrameSchema] = None) -> bool:
        if data_frame_schema is None:
            return True
        return self.end < len(data_frame_schema)

    def select(self, data_frame_schema: DataFrameSchema) -> np.ndarray:
        mask = np.zeros(len(data_frame_schema), dtype=bool)
        mask[self.start:self.end + 1] = True
        return mask


@dataclass(frozen=True)
class TypeListItem(SelectorItem):
    """Every column whose type is one of ``types``."""

    TYPE: ClassVar[str] = "typeList"

    types: Tuple[ColumnType, ...] = ()

    def __post_init__(self):
        parsed = tuple(ColumnType.parse(t) for t in self.types)
        if any(t is None for t in parsed):
            raise ValueError(f"Unknown column type in {list(self.types)!r}")
        object.__setattr__(self, "types", parsed)

    def serialize(self) -> Dict[str, Any]:
        return {"type": self.TYPE, "values": [t.value for t in self.types]}

    def validate(self, data_frame_schema: Optional[DataFrameSchema] = None) -> bool:
        return True

    def select(self, data_frame_schema: DataFrameSchema) -> np.ndarray:
        wanted = set(self.types)
        column_types = data_frame_schema.column_types
        return np.fromiter((t in wanted for t in column_types), dtype=bool, count=len(column_types))
