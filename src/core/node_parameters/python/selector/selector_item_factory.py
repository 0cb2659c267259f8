# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Decoder from raw selection values to selector items.

Raw values come either from user input or from a previously saved workflow.
Each recognized wire shape is registered under its ``type`` discriminator;
anything else decodes to None so that a single malformed or newer-format
entry does not abort loading the whole parameter.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

from loguru import logger

from ..interface.column_type import ColumnType
from .selector_item import (
    ColumnItem,
    ColumnListItem,
    IndexItem,
    IndexRangeItem,
    SelectorItem,
    TypeListItem,
    is_column_index,
)

ItemDecoder = Callable[[Mapping[str, Any]], Optional[SelectorItem]]


def _decode_column(raw: Mapping[str, Any]) -> Optional[SelectorItem]:
    value = raw.get("value")
    if not isinstance(value, str):
        return None
    return ColumnItem(name=value)


def _decode_index(raw: Mapping[str, Any]) -> Optional[SelectorItem]:
    value = raw.get("value")
    if not is_column_index(value):
        return None
    return IndexItem(index=value)


def _decode_column_list(raw: Mapping[str, Any]) -> Optional[SelectorItem]:
    values = raw.get("values")
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        return None
    return ColumnListItem(names=tuple(values))


def _decode_index_range(raw: Mapping[str, Any]) -> Optional[SelectorItem]:
    values = raw.get("values")
    if not isinstance(values, list) or len(values) != 2:
        return None
    start, end = values
    if not (is_column_index(start) and is_column_index(end)) or start > end:
        return None
    return IndexRangeItem(start=start, end=end)


def _decode_type_list(raw: Mapping[str, Any]) -> Optional[SelectorItem]:
    values = raw.get("values")
    if not isinstance(values, list):
        return None
    types = [ColumnType.parse(v) for v in values]
    if any(t is None for t in types):
        return None
    return TypeListItem(types=tuple(types))


_DECODERS: Dict[str, ItemDecoder] = {
    ColumnItem.TYPE: _decode_column,
    IndexItem.TYPE: _decode_index,
    ColumnListItem.TYPE: _decode_column_list,
    IndexRangeItem.TYPE: _decode_index_range,
    TypeListItem.TYPE: _decode_type_list,
}


def create_item(raw: Any) -> Optional[SelectorItem]:
    """
    Build the selector item described by a raw wire value.

    Args:
        raw: Raw selection value, e.g. ``{"type": "column", "value": "price"}``

    Returns:
        The matching SelectorItem, or None if the shape is not recognized
    """
    if not isinstance(raw, Mapping):
        logger.debug(f"Dropping selection entry that is not an object: {raw!r}")
        return None

    item_type = raw.get("type")
    decoder = _DECODERS.get(item_type) if isinstance(item_type, str) else None
    if decoder is None:
        logger.debug(f"Dropping selection entry of unknown type: {raw!r}")
        return None

    item = decoder(raw)
    if item is None:
        logger.debug(f"Dropping malformed '{item_type}' selection entry: {raw!r}")
    return item


def registered_types() -> List[str]:
    """Wire discriminators the factory can decode."""
    return list(_DECODERS)
