# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Node configuration loader.

Builds parameter objects from the parameter schemas of an operation and the
values stored in a workflow node.
"""

from typing import Any, Dict, List, Mapping, Optional, Type

from ..interface.generic_parameter import GenericParameter, ParameterNode
from ..parameter_list import ParameterList
from ..selector.selector_parameter import SelectorParameter
from .scalar_parameters import BooleanParameter, NumericParameter, StringParameter


class UnknownParameterTypeError(ValueError):
    """Raised when a schema declares a parameter type with no implementation."""


PARAMETER_TYPES: Dict[str, Type] = {
    "selector": SelectorParameter,
    "boolean": BooleanParameter,
    "numeric": NumericParameter,
    "string": StringParameter,
}


def create_parameter(options: Mapping[str, Any], node: ParameterNode) -> GenericParameter:
    """
    Create the parameter described by ``options["schema"]["type"]``.

    Args:
        options: ``{"name", "value"?, "schema", ...}``
        node: Owning graph node

    Returns:
        The constructed parameter

    Raises:
        UnknownParameterTypeError: If the schema type has no implementation
    """
    parameter_type = options["schema"].get("type")
    parameter_cls = PARAMETER_TYPES.get(parameter_type) if isinstance(parameter_type, str) else None
    if parameter_cls is None:
        raise UnknownParameterTypeError(
            f"Unknown type {parameter_type!r} for parameter '{options['name']}'"
        )
    return parameter_cls(options, node)


def create_parameters(
    schemas: List[Mapping[str, Any]],
    values: Optional[Mapping[str, Any]],
    node: ParameterNode,
    name: str = "node",
) -> ParameterList:
    """
    Create all parameters of a node.

    Args:
        schemas: Parameter schemas of the node's operation, each with ``name`` and ``type``
        values: Stored ``{name: wire value}`` mapping (None for a new node)
        node: Owning graph node
        name: Node name for logging

    Returns:
        ParameterList in schema order
    """
    values = values or {}
    parameters = []
    for schema in schemas:
        options: Dict[str, Any] = {"name": schema["name"], "schema": schema}
        if schema["name"] in values:
            value = values[schema["name"]]
            options["value"] = value
        parameters.append(create_parameter(options, node))
    return ParameterList(name, parameters)
