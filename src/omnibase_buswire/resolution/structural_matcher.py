# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Structural matching of consumed message types against event groups.

Match Ranking:
    QUALIFIED: the consumed identity equals the member identity, or ends
        with ``"." + member identity`` (tolerates partial-namespace
        references).
    SIMPLE: the simple names are equal.

Only candidates of the best rank present are returned. A qualified match
therefore settles cases like two groups that both nest a ``V1`` record:
the consumer naming ``IAccountSignedUpIntegrationEvent.V1`` is not
ambiguous even though another group's ``V1`` has the same simple name.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

from omnibase_buswire.models import ModelEventGroup, ModelMessageDeclaration
from omnibase_buswire.utils import simple_type_name


class _MatchRank(IntEnum):
    QUALIFIED = 0
    SIMPLE = 1


def _rank(message_type: str, member: ModelMessageDeclaration) -> _MatchRank | None:
    if message_type == member.identity or message_type.endswith("." + member.identity):
        return _MatchRank.QUALIFIED
    if simple_type_name(message_type) == member.simple_name:
        return _MatchRank.SIMPLE
    return None


class StructuralMatcher:
    """Finds event group members matching a consumed message type.

    Args:
        groups: Event groups in first-seen order. Candidate order follows
            group order, then member order, so ties are deterministic.
    """

    def __init__(self, groups: Iterable[ModelEventGroup]) -> None:
        self._groups = tuple(groups)

    def candidates(self, message_type: str) -> tuple[ModelMessageDeclaration, ...]:
        """Return the best-ranked matching members in declaration order.

        Returns:
            An empty tuple when nothing matches, a single member for an
            unambiguous match, several members for an ambiguous one.
        """
        best_rank: _MatchRank | None = None
        best: list[ModelMessageDeclaration] = []
        for group in self._groups:
            for member in group.members:
                rank = _rank(message_type, member)
                if rank is None:
                    continue
                if best_rank is None or rank < best_rank:
                    best_rank = rank
                    best = [member]
                elif rank == best_rank and member not in best:
                    best.append(member)
        return tuple(best)


__all__: list[str] = ["StructuralMatcher"]
