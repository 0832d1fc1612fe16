# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Event group model used by structural matching."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from omnibase_buswire.models.model_message_declaration import (
    ModelMessageDeclaration,
)


class ModelEventGroup(BaseModel):
    """Message declarations nested under one grouping construct.

    Membership is by structural containment only, never by name pattern.
    Members keep declaration order.

    Attributes:
        identity: Identity of the grouping construct.
        members: Nested message declarations in declaration order.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    identity: str = Field(
        ...,
        description="Identity of the grouping construct.",
        min_length=1,
    )
    members: tuple[ModelMessageDeclaration, ...] = Field(
        default_factory=tuple,
        description="Nested message declarations in declaration order.",
    )

    @classmethod
    def build_groups(
        cls, messages: Iterable[ModelMessageDeclaration]
    ) -> tuple[ModelEventGroup, ...]:
        """Group nested message declarations by their enclosing construct.

        Groups are returned in the order their first member appears;
        ungrouped messages are not part of any group.

        Example:
            >>> groups = ModelEventGroup.build_groups(messages)
            >>> [group.identity for group in groups]
            ['Sample.Events.IAccountSignedUpIntegrationEvent']
        """
        members_by_group: dict[str, list[ModelMessageDeclaration]] = {}
        for message in messages:
            if message.group is None:
                continue
            members_by_group.setdefault(message.group, []).append(message)
        return tuple(
            cls(identity=identity, members=tuple(members))
            for identity, members in members_by_group.items()
        )


__all__ = ["ModelEventGroup"]
