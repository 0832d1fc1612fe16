# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Declaration kind enumeration for declared types."""

from enum import Enum, unique


@unique
class EnumDeclarationKind(str, Enum):
    """Kind of a type in the declaration graph.

    Interfaces usually act as grouping constructs; classes, records and
    structs carry markers and consumer capabilities.
    """

    CLASS = "class"
    RECORD = "record"
    STRUCT = "struct"
    INTERFACE = "interface"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__ = ["EnumDeclarationKind"]
