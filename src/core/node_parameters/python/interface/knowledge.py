# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Inferred knowledge attached to node ports.

Knowledge is produced by the backend inference engine and only consumed here.
The containers below mirror its JSON shape::

    {
        "typeQualifier": ["DataFrame"],
        "result": {
            "schema": {
                "fields": [{"name": "price", "dataType": "numeric"}, ...]
            }
        }
    }
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .column_type import ColumnType


@dataclass(frozen=True)
class ColumnField:
    """A single column of an inferred data frame schema."""

    name: str
    data_type: ColumnType = ColumnType.OTHER

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ColumnField":
        data_type = ColumnType.parse(raw.get("dataType")) or ColumnType.OTHER
        return cls(name=raw["name"], data_type=data_type)

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "dataType": self.data_type.value}


@dataclass(frozen=True)
class DataFrameSchema:
    """Column layout of the tabular data flowing into an input port."""

    fields: List[ColumnField] = field(default_factory=list)

    @property
    def column_names(self) -> List[str]:
        """Column names in schema order."""
        return [f.name for f in self.fields]

    @property
    def column_types(self) -> List[ColumnType]:
        """Column types in schema order."""
        return [f.data_type for f in self.fields]

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, column_name: object) -> bool:
        return any(f.name == column_name for f in self.fields)

    def index_of(self, column_name: str) -> Optional[int]:
        """
        Get the position of a column.

        Args:
            column_name: Name of the column to look up

        Returns:
            Index of the first column with that name, or None if absent
        """
        for i, f in enumerate(self.fields):
            if f.name == column_name:
                return i
        return None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "DataFrameSchema":
        return cls(fields=[ColumnField.from_dict(f) for f in raw.get("fields", [])])

    def to_dict(self) -> Dict[str, Any]:
        return {"fields": [f.to_dict() for f in self.fields]}


@dataclass(frozen=True)
class InferenceResult:
    """Inferred result details of a port; ``schema`` is set for data frame ports."""

    schema: Optional[DataFrameSchema] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "InferenceResult":
        schema = raw.get("schema")
        return cls(schema=DataFrameSchema.from_dict(schema) if schema is not None else None)


@dataclass(frozen=True)
class Knowledge:
    """
    Knowledge inferred for one port.

    ``result`` is None until inference has produced details for the port.
    """

    type_qualifier: List[str] = field(default_factory=list)
    result: Optional[InferenceResult] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Knowledge":
        result = raw.get("result")
        return cls(
            type_qualifier=list(raw.get("typeQualifier", [])),
            result=InferenceResult.from_dict(result) if result is not None else None,
        )
