# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Column selector parameter and its items."""

from .selector_item import (
    SelectorItem,
    ColumnItem,
    IndexItem,
    ColumnListItem,
    IndexRangeItem,
    TypeListItem,
)
from .selector_item_factory import create_item
from .selector_parameter import SelectorParameter

__all__ = [
    "SelectorItem",
    "ColumnItem",
    "IndexItem",
    "ColumnListItem",
    "IndexRangeItem",
    "TypeListItem",
    "create_item",
    "SelectorParameter",
]
