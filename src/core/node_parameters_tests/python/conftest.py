# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Pytest configuration and fixtures for nodeparams tests."""

from typing import Dict, Optional

import pytest
from nodeparams.interface import (
    ColumnField,
    ColumnType,
    DataFrameSchema,
    InferenceResult,
    Knowledge,
)


class FakeNode:
    """Graph node stand-in whose port knowledge can be swapped between calls."""

    def __init__(self, knowledge: Optional[Dict[int, Knowledge]] = None):
        self.knowledge: Dict[int, Knowledge] = dict(knowledge or {})
        self.requested_ports = []

    def get_incoming_knowledge(self, port_index: int) -> Optional[Knowledge]:
        self.requested_ports.append(port_index)
        return self.knowledge.get(port_index)

    def set_schema(self, port_index: int, schema: Optional[DataFrameSchema]) -> None:
        self.knowledge[port_index] = Knowledge(
            type_qualifier=["DataFrame"], result=InferenceResult(schema=schema)
        )


@pytest.fixture
def sales_schema():
    """Five-column data frame schema."""
    return DataFrameSchema(
        fields=[
            ColumnField("id", ColumnType.NUMERIC),
            ColumnField("name", ColumnType.STRING),
            ColumnField("price", ColumnType.NUMERIC),
            ColumnField("active", ColumnType.BOOLEAN),
            ColumnField("created", ColumnType.TIMESTAMP),
        ]
    )


@pytest.fixture
def empty_node():
    """Node with no inferred knowledge on any port."""
    return FakeNode()


@pytest.fixture
def sales_node(sales_schema):
    """Node whose port 0 carries the sales schema."""
    node = FakeNode()
    node.set_schema(0, sales_schema)
    return node


@pytest.fixture
def make_node():
    """Factory for nodes with custom knowledge."""
    return FakeNode
