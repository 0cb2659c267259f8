# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Column selector parameter.

A selector lets the user pick columns of the data frame arriving at one of
the node's input ports. In single mode it holds at most one item. In multi
mode it holds an ordered list of items plus an ``excluding`` flag telling
whether the items are the columns to keep or the columns to drop.

Wire values::

    single:  None | {"type": "column", "value": "price"}
    multi:   None | {"excluding": False, "selections": [{"type": "columnList", ...}, ...]}

Schema options (camelCase, as sent by the backend)::

    {"isSingle": False, "portIndex": 0, "default": {"excluding": True, "selections": []}}
"""

from typing import Any, Dict, List, Mapping, Optional

import numpy as np
from loguru import logger

from ..interface.generic_parameter import ParameterNode
from ..interface.knowledge import DataFrameSchema
from ..interface.value_state import is_populated
from .selector_item import SelectorItem
from .selector_item_factory import create_item


class SelectorParameter:
    """
    Selector parameter of a pipeline node.

    Implements the GenericParameter protocol. The owning node is only used to
    look up knowledge during construction and refresh; it is never stored.

    Example:
        param = SelectorParameter(
            {
                "name": "columns",
                "value": [{"type": "columnList", "values": ["a", "b"]}],
                "schema": {"isSingle": False, "portIndex": 0},
            },
            node,
        )
        param.serialize()
        # {"excluding": False, "selections": [{"type": "columnList", "values": ["a", "b"]}]}
    """

    def __init__(self, options: Mapping[str, Any], node: ParameterNode):
        """
        Initialize the parameter from its options.

        Args:
            options: ``{"name", "value"?, "schema", "excluding"?}``
            node: Owning graph node, used to read incoming knowledge

        Raises:
            KeyError: If ``name`` or ``schema`` is missing from options
        """
        self.name: str = options["name"]
        self.schema: Mapping[str, Any] = options["schema"]

        value = options.get("value")
        default_value = self.schema.get("default")

        self.items: List[SelectorItem] = []
        self.default_items: Optional[List[SelectorItem]] = None
        self.init_items(value, default_value, self.schema)

        # Not applicable in single mode; None reads as False there
        self.excluding: Optional[bool] = None
        self.default_excluding: Optional[bool] = None
        if not self.is_single:
            if "excluding" in options:
                self.excluding = bool(options["excluding"])
            elif isinstance(value, Mapping) and "excluding" in value:
                # Saved wire value carries its own flag
                self.excluding = bool(value["excluding"])
            else:
                self.excluding = False
            if isinstance(default_value, Mapping) and "excluding" in default_value:
                self.default_excluding = bool(default_value["excluding"])
            else:
                self.default_excluding = False

        self.data_frame_schema: Optional[DataFrameSchema] = None
        self.set_data_frame_schema(node)

    @property
    def is_single(self) -> bool:
        """Whether at most one column may be selected."""
        return bool(self.schema.get("isSingle", False))

    @property
    def port_index(self) -> int:
        """Input port whose inferred schema backs this selector."""
        if "portIndex" not in self.schema:
            logger.warning(f"[SelectorParameter:{self.name}] Schema has no portIndex, using port 0")
            return 0
        return self.schema["portIndex"]

    def init_items(self, value: Any, default_value: Any, schema: Mapping[str, Any]) -> None:
        """
        Rebuild ``items`` and ``default_items`` from raw values.

        Args:
            value: Raw single value or list of raw selections (None if unset)
            default_value: Raw default; in multi mode its list is under ``selections``
            schema: Parameter schema deciding single or multi mode
        """
        is_single = bool(schema.get("isSingle", False))

        if is_populated(value):
            self.items = self._create_single_items(value) if is_single else self._create_multi_items(value)
        else:
            self.items = []

        if is_populated(default_value):
            if is_single:
                self.default_items = self._create_single_items(default_value)
            else:
                selections = default_value.get("selections") if isinstance(default_value, Mapping) else default_value
                self.default_items = self._create_multi_items(selections)

    def _create_single_items(self, value: Any) -> List[SelectorItem]:
        item = create_item(value)
        return [item] if item is not None else []

    def _create_multi_items(self, value: Any) -> List[SelectorItem]:
        if isinstance(value, Mapping):
            # Saved wire value: {"excluding": ..., "selections": [...]}
            value = value.get("selections")
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            logger.warning(f"[SelectorParameter:{self.name}] Ignoring non-list selection value: {value!r}")
            return []

        result = []
        for raw in value:
            item = create_item(raw)
            if item is not None:
                result.append(item)
        return result

    def serialize(self) -> Any:
        """
        Serialize the current selection to its wire value.

        Returns:
            Single mode: None or the item's wire shape.
            Multi mode: None for an empty inclusion, otherwise
            ``{"excluding": bool, "selections": [...]}``.
        """
        return self._serialize_items(self.items, self.excluding)

    def _serialize_items(self, items: List[SelectorItem], excluding: Optional[bool]) -> Any:
        if self.is_single:
            return items[0].serialize() if items else None

        excluding = bool(excluding)
        if not excluding and not items:
            return None
        return {
            "excluding": excluding,
            "selections": [item.serialize() for item in items],
        }

    def validate(self) -> bool:
        """Check the selection shape and every item against the current data frame schema."""
        if self.is_single and len(self.items) > 1:
            return False
        return all(item.validate(self.data_frame_schema) for item in self.items)

    def set_data_frame_schema(self, node: ParameterNode) -> None:
        """Derive ``data_frame_schema`` from the node's knowledge at ``port_index``."""
        self.data_frame_schema = None
        knowledge = node.get_incoming_knowledge(self.port_index)
        if knowledge is None:
            logger.debug(f"[SelectorParameter:{self.name}] No knowledge for port {self.port_index}")
            return
        if knowledge.result is not None:
            # A selector is only declared on ports whose result carries a schema
            self.data_frame_schema = knowledge.result.schema

    def refresh(self, node: ParameterNode) -> None:
        """Re-read upstream knowledge; the selection itself is left untouched."""
        self.set_data_frame_schema(node)

    def reset_to_default(self) -> None:
        """Replace the selection with the schema default (or nothing if there is none)."""
        self.items = list(self.default_items) if self.default_items is not None else []
        if not self.is_single:
            self.excluding = self.default_excluding

    def is_default(self) -> bool:
        """Whether the current selection serializes the same as the default."""
        default_items = self.default_items if self.default_items is not None else []
        return self.serialize() == self._serialize_items(default_items, self.default_excluding)

    def selected_columns(self) -> Optional[List[str]]:
        """
        Resolve the selection to column names.

        Returns:
            Selected column names in schema order, or None if no schema is known yet
        """
        if self.data_frame_schema is None:
            return None

        mask = np.zeros(len(self.data_frame_schema), dtype=bool)
        for item in self.items:
            mask |= item.select(self.data_frame_schema)
        if self.excluding:
            mask = ~mask

        names = self.data_frame_schema.column_names
        return [names[i] for i in np.flatnonzero(mask)]

    def __repr__(self) -> str:
        mode = "single" if self.is_single else ("excluding" if self.excluding else "including")
        return f"SelectorParameter(name='{self.name}', mode={mode}, items={len(self.items)})"
