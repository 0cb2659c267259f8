# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the node configuration loader and ParameterList."""

import json
import os
import tempfile

import pytest
from nodeparams import (
    BooleanParameter,
    NumericParameter,
    ParameterList,
    SelectorParameter,
    UnknownParameterTypeError,
    create_parameter,
    create_parameters,
)


OPERATION_SCHEMAS = [
    {"name": "columns", "type": "selector", "isSingle": False, "portIndex": 0},
    {"name": "target", "type": "selector", "isSingle": True, "portIndex": 0},
    {"name": "drop nulls", "type": "boolean", "default": False},
    {
        "name": "threshold",
        "type": "numeric",
        "default": 0.5,
        "validator": {"type": "range", "configuration": {"begin": 0, "end": 1}},
    },
]


class TestCreateParameter:
    """Tests for create_parameter()."""

    def test_dispatch_by_type(self, empty_node):
        """Test the schema type picks the parameter class."""
        selector = create_parameter({"name": "c", "schema": OPERATION_SCHEMAS[0]}, empty_node)
        flag = create_parameter({"name": "f", "schema": OPERATION_SCHEMAS[2]}, empty_node)
        assert isinstance(selector, SelectorParameter)
        assert isinstance(flag, BooleanParameter)

    def test_unknown_type_raises(self, empty_node):
        """Test unknown parameter types are rejected."""
        with pytest.raises(UnknownParameterTypeError, match="codeSnippet"):
            create_parameter({"name": "code", "schema": {"type": "codeSnippet"}}, empty_node)
        with pytest.raises(ValueError):
            create_parameter({"name": "code", "schema": {}}, empty_node)


class TestCreateParameters:
    """Tests for create_parameters()."""

    def test_new_node(self, empty_node):
        """Test a node without stored values serializes to nothing."""
        parameters = create_parameters(OPERATION_SCHEMAS, None, empty_node)
        assert len(parameters) == 4
        assert [p.name for p in parameters] == ["columns", "target", "drop nulls", "threshold"]
        assert parameters.serialize() == {}
        assert parameters.validate() is True

    def test_stored_values_round_trip(self, empty_node):
        """Test stored values serialize back unchanged."""
        values = {
            "columns": {"excluding": True, "selections": [{"type": "typeList", "values": ["string"]}]},
            "target": {"type": "column", "value": "price"},
            "drop nulls": True,
            "threshold": 0.25,
        }
        parameters = create_parameters(OPERATION_SCHEMAS, values, empty_node)
        assert parameters.get("columns").excluding is True
        assert parameters.serialize() == values

    def test_invalid_parameters(self, sales_node):
        """Test invalid parameter names are reported."""
        values = {"target": {"type": "column", "value": "cost"}, "threshold": 2}
        parameters = create_parameters(OPERATION_SCHEMAS, values, sales_node)
        assert parameters.validate() is False
        assert parameters.invalid_parameters() == ["target", "threshold"]

    def test_refresh_all(self, make_node, sales_schema):
        """Test refresh reaches every selector."""
        node = make_node()
        parameters = create_parameters(OPERATION_SCHEMAS, None, node)
        node.set_schema(0, sales_schema)
        parameters.refresh(node)
        assert parameters.get("columns").data_frame_schema == sales_schema
        assert parameters.get("target").data_frame_schema == sales_schema


class TestParameterList:
    """Tests for ParameterList."""

    def test_lookup(self):
        """Test lookup by name."""
        flag = BooleanParameter({"name": "flag", "schema": {"type": "boolean"}})
        parameters = ParameterList("node", [flag])
        assert "flag" in parameters
        assert parameters.get("flag") is flag
        with pytest.raises(KeyError):
            parameters.get("missing")

    def test_duplicate_names_raise(self):
        """Test parameter names must be unique."""
        a = BooleanParameter({"name": "flag", "schema": {"type": "boolean"}})
        b = NumericParameter({"name": "flag", "schema": {"type": "numeric"}})
        with pytest.raises(ValueError, match="Duplicate parameter name"):
            ParameterList("node", [a, b])

    def test_save_and_load(self, empty_node):
        """Test values saved to a file load into an equivalent parameter list."""
        values = {
            "columns": {"excluding": False, "selections": [{"type": "indexRange", "values": [0, 2]}]},
            "threshold": 0.75,
        }
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = os.path.join(tmpdir, "nested", "params.json")

            parameters = create_parameters(OPERATION_SCHEMAS, values, empty_node)
            assert parameters.save_to_file(config_path) is True
            with open(config_path) as f:
                assert json.load(f) == values

            loaded = ParameterList.load_values(config_path)
            assert create_parameters(OPERATION_SCHEMAS, loaded, empty_node).serialize() == values

    def test_load_missing_file(self):
        """Test loading a missing file returns None."""
        assert ParameterList.load_values("/nonexistent/params.json") is None

    def test_load_invalid_file(self):
        """Test unreadable files return None instead of raising."""
        with tempfile.TemporaryDirectory() as tmpdir:
            bad_json = os.path.join(tmpdir, "bad.json")
            with open(bad_json, "w") as f:
                f.write("{not json")
            not_object = os.path.join(tmpdir, "list.json")
            with open(not_object, "w") as f:
                f.write("[1, 2]")

            assert ParameterList.load_values(bad_json) is None
            assert ParameterList.load_values(not_object) is None
