# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Resolution tier enumeration for consumer bindings."""

from enum import Enum, unique


@unique
class EnumResolutionTier(str, Enum):
    """Strategy that produced a binding, in precedence order.

    Values:
        EXPLICIT: Consumer-level channel marker used verbatim
        STRUCTURAL: Matched a member of an event group
        INFERRED: Channel name derived from the message type name
    """

    EXPLICIT = "explicit"
    STRUCTURAL = "structural"
    INFERRED = "inferred"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__ = ["EnumResolutionTier"]
