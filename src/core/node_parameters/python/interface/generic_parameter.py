# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Capability contracts shared by every node parameter.

Parameter kinds do not inherit from a common base. Each one implements the
GenericParameter protocol on its own, and reads upstream knowledge through a
ParameterNode without keeping a reference to it.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .knowledge import Knowledge


@runtime_checkable
class ParameterNode(Protocol):
    """The graph node owning a parameter, as seen by the parameter."""

    def get_incoming_knowledge(self, port_index: int) -> Optional[Knowledge]:
        """Return the knowledge inferred for an input port, or None if not inferred yet."""
        ...


@runtime_checkable
class GenericParameter(Protocol):
    """
    Contract every parameter kind satisfies.

    - serialize(): JSON-compatible wire value, None when nothing is set
    - validate(): False when the current value cannot be sent to the backend
    - refresh(node): re-derive anything computed from the node's knowledge
    """

    name: str

    def serialize(self) -> Any:
        ...

    def validate(self) -> bool:
        ...

    def refresh(self, node: ParameterNode) -> None:
        ...
