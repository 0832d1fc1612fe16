# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Consumer declaration collected from the declaration graph."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelConsumerDeclaration(BaseModel):
    """A consumer type bound to exactly one consumed message type.

    A type consuming several message types is collected as several
    independent declarations, one per message type.

    Attributes:
        identity: Fully qualified consumer type identity.
        message_type: Identity of the one message type consumed.
        channel_name: Explicit channel from a ``Consumer`` marker.
        endpoint_name: Explicit endpoint from a ``Consumer`` marker.
        subscription_name: Explicit endpoint from a ``ConsumerSubscription``
            or ``QueueName`` marker.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    identity: str = Field(
        ...,
        description="Fully qualified consumer type identity.",
        min_length=1,
    )
    message_type: str = Field(
        ...,
        description="Identity of the consumed message type.",
        min_length=1,
    )
    channel_name: str | None = Field(
        default=None,
        description="Explicit channel name from a Consumer marker.",
    )
    endpoint_name: str | None = Field(
        default=None,
        description="Explicit endpoint name from a Consumer marker.",
    )
    subscription_name: str | None = Field(
        default=None,
        description="Explicit endpoint override from a subscription marker.",
    )

    @property
    def has_explicit_channel(self) -> bool:
        """True when a well-formed ``Consumer`` marker supplied a channel."""
        return bool(self.channel_name)


__all__ = ["ModelConsumerDeclaration"]
