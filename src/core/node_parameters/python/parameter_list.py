# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Parameter list of a single pipeline node.

Holds the node's parameters in schema order and serializes them to the
``{name: value}`` mapping stored in the workflow. Values can be persisted to
and loaded from a JSON file.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from loguru import logger

from .interface.generic_parameter import GenericParameter, ParameterNode


class ParameterList:
    """
    Ordered collection of a node's parameters.

    Example:
        parameters = create_parameters(schema_list, stored_values, node)

        if parameters.validate():
            workflow_node["parameters"] = parameters.serialize()

        # Upstream knowledge changed
        parameters.refresh(node)
    """

    def __init__(self, name: str, parameters: List[GenericParameter]):
        """
        Initialize the parameter list.

        Args:
            name: Name of the owning node (for logging)
            parameters: Parameters in display order

        Raises:
            ValueError: If two parameters share a name
        """
        self._name = name
        self._parameters: Dict[str, GenericParameter] = {}
        for parameter in parameters:
            if parameter.name in self._parameters:
                raise ValueError(f"Duplicate parameter name '{parameter.name}'")
            self._parameters[parameter.name] = parameter

    @property
    def name(self) -> str:
        return self._name

    def get(self, name: str) -> GenericParameter:
        """
        Get a parameter by name.

        Raises:
            KeyError: If no parameter has that name
        """
        if name not in self._parameters:
            raise KeyError(f"Parameter '{name}' not found")
        return self._parameters[name]

    def __iter__(self) -> Iterator[GenericParameter]:
        return iter(self._parameters.values())

    def __len__(self) -> int:
        return len(self._parameters)

    def __contains__(self, name: object) -> bool:
        return name in self._parameters

    def serialize(self) -> Dict[str, Any]:
        """Serialize every set parameter to ``{name: wire value}``; unset values are omitted."""
        result = {}
        for name, parameter in self._parameters.items():
            value = parameter.serialize()
            if value is not None:
                result[name] = value
        return result

    def invalid_parameters(self) -> List[str]:
        """Names of parameters whose current value does not validate."""
        return [name for name, parameter in self._parameters.items() if not parameter.validate()]

    def validate(self) -> bool:
        return not self.invalid_parameters()

    def refresh(self, node: ParameterNode) -> None:
        """Refresh every parameter after the node's upstream knowledge changed."""
        for parameter in self._parameters.values():
            parameter.refresh(node)

    def save_to_file(self, file_path: Union[str, Path]) -> bool:
        """Save the serialized values to a JSON file."""
        path = Path(file_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w") as f:
                json.dump(self.serialize(), f, indent=2)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"[ParameterList:{self._name}] Failed to save: {e}")
            return False

        logger.info(f"[ParameterList:{self._name}] Saved to {path}")
        return True

    @staticmethod
    def load_values(file_path: Union[str, Path]) -> Optional[Dict[str, Any]]:
        """
        Load serialized values saved by save_to_file().

        Returns:
            The ``{name: wire value}`` mapping, or None if the file is missing or unreadable
        """
        path = Path(file_path)
        if not path.exists():
            return None
        try:
            with open(path, "r") as f:
                values = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load parameter values from {path}: {e}")
            return None

        if not isinstance(values, dict):
            logger.error(f"Parameter values in {path} are not a JSON object")
            return None
        return values

    def __repr__(self) -> str:
        return f"ParameterList(name='{self._name}', parameters={list(self._parameters)})"
