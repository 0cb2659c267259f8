# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for knowledge containers and column types."""

from nodeparams.interface import (
    ColumnField,
    ColumnType,
    DataFrameSchema,
    Knowledge,
    ValueState,
    value_state,
)


class TestColumnType:
    """Tests for ColumnType parsing."""

    def test_parse_known_types(self):
        """Test parsing wire names and enum members."""
        assert ColumnType.parse("numeric") is ColumnType.NUMERIC
        assert ColumnType.parse("timestamp") is ColumnType.TIMESTAMP
        assert ColumnType.parse(ColumnType.VECTOR) is ColumnType.VECTOR

    def test_parse_unknown_returns_none(self):
        """Test unknown or non-string values parse to None."""
        assert ColumnType.parse("decimal") is None
        assert ColumnType.parse(3) is None
        assert ColumnType.parse(None) is None


class TestDataFrameSchema:
    """Tests for DataFrameSchema."""

    def test_from_dict(self):
        """Test building a schema from its JSON shape."""
        schema = DataFrameSchema.from_dict(
            {
                "fields": [
                    {"name": "a", "dataType": "numeric"},
                    {"name": "b", "dataType": "somethingNew"},
                ]
            }
        )
        assert schema.column_names == ["a", "b"]
        assert schema.column_types == [ColumnType.NUMERIC, ColumnType.OTHER]
        assert len(schema) == 2

    def test_lookup(self, sales_schema):
        """Test membership and index lookup."""
        assert "price" in sales_schema
        assert "missing" not in sales_schema
        assert sales_schema.index_of("price") == 2
        assert sales_schema.index_of("missing") is None

    def test_to_dict(self):
        """Test schema serialization back to JSON shape."""
        schema = DataFrameSchema(fields=[ColumnField("x", ColumnType.ARRAY)])
        assert schema.to_dict() == {"fields": [{"name": "x", "dataType": "array"}]}


class TestKnowledge:
    """Tests for Knowledge parsing."""

    def test_from_dict_with_schema(self):
        """Test knowledge with an inferred data frame schema."""
        knowledge = Knowledge.from_dict(
            {
                "typeQualifier": ["DataFrame"],
                "result": {"schema": {"fields": [{"name": "a", "dataType": "string"}]}},
            }
        )
        assert knowledge.type_qualifier == ["DataFrame"]
        assert knowledge.result is not None
        assert knowledge.result.schema.column_names == ["a"]

    def test_from_dict_without_result(self):
        """Test knowledge that has not been inferred yet."""
        knowledge = Knowledge.from_dict({"typeQualifier": ["DataFrame"]})
        assert knowledge.result is None


class TestValueState:
    """Tests for absent/empty/populated classification."""

    def test_absent(self):
        assert value_state(None) is ValueState.ABSENT

    def test_empty(self):
        assert value_state([]) is ValueState.EMPTY
        assert value_state({}) is ValueState.EMPTY
        assert value_state("") is ValueState.EMPTY

    def test_falsy_scalars_are_populated(self):
        """Test that 0 and False count as set values."""
        assert value_state(0) is ValueState.POPULATED
        assert value_state(False) is ValueState.POPULATED
        assert value_state([{"type": "index", "value": 0}]) is ValueState.POPULATED
