# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""
Diagnostic Code Enumeration.

Stable codes for the diagnostics produced while collecting declarations and
resolving bindings. Codes are part of the output contract: tooling may
filter or count on them, so values must not be renamed.

Thread Safety:
    All enums in this module are immutable and thread-safe.
"""

from enum import Enum, unique


@unique
class EnumDiagnosticCode(str, Enum):
    """
    Diagnostic codes emitted by the collector and resolver.

    Values:
        MALFORMED_METADATA: Marker present but argument count or value invalid
        DUPLICATE_DECLARATION: Type identity declared more than once
        CONSUMER_WITHOUT_MESSAGE: Consumer marker on a type consuming nothing
        UNRESOLVABLE_CONSUMER: No tier produced a usable channel name
        AMBIGUOUS_STRUCTURAL_MATCH: Message type matched several group members
        EMPTY_INPUT: No messages and no consumers were found
    """

    MALFORMED_METADATA = "BW001"
    DUPLICATE_DECLARATION = "BW002"
    CONSUMER_WITHOUT_MESSAGE = "BW003"
    UNRESOLVABLE_CONSUMER = "BW101"
    AMBIGUOUS_STRUCTURAL_MATCH = "BW102"
    EMPTY_INPUT = "BW201"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__ = ["EnumDiagnosticCode"]
