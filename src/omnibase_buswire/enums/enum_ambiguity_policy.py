# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""
Ambiguity Policy Enumeration.

Controls what the binding resolver does when a consumed message type matches
more than one event group member with equal strength.

Thread Safety:
    All enums in this module are immutable and thread-safe.
"""

from enum import Enum, unique


@unique
class EnumAmbiguityPolicy(str, Enum):
    """
    Tie-break policy for ambiguous structural matches.

    Values:
        FIRST_MATCH: Use the first candidate in declaration order and report
            a warning diagnostic.
        STRICT: Leave the consumer unresolved and report an error diagnostic.

    Example:
        >>> EnumAmbiguityPolicy("strict")
        <EnumAmbiguityPolicy.STRICT: 'strict'>
    """

    FIRST_MATCH = "first_match"
    """Deterministic first-match-wins, always reported."""

    STRICT = "strict"
    """Ambiguity is a resolution failure for the affected consumer."""

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__ = ["EnumAmbiguityPolicy"]
