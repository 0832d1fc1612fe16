# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Binding model: the contract between the resolver and the emitter.

Each binding states which consumer listens on which logical channel under
which endpoint name, and which resolution tier decided it. Emitters render
bindings as they are and never re-derive names.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_buswire.enums import EnumResolutionTier


class ModelBinding(BaseModel):
    """Resolved consumer-to-channel binding.

    Attributes:
        consumer_identity: Consumer type identity.
        message_type_identity: Consumed message type identity.
        channel_name: Logical channel (topic/exchange) name; never empty.
        endpoint_name: Endpoint (subscription/queue) name; never empty.
        resolution_tier: Tier that produced the binding.

    Example:
        >>> ModelBinding(
        ...     consumer_identity="Sample.Consumers.AccountCreatedConsumer",
        ...     message_type_identity="Sample.Events.IAccountSignedUpIntegrationEvent.V1",
        ...     channel_name="account-signed-up-v1",
        ...     endpoint_name="account-service-subscription",
        ...     resolution_tier=EnumResolutionTier.STRUCTURAL,
        ... )
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    consumer_identity: str = Field(
        ...,
        description="Consumer type identity.",
        min_length=1,
    )
    message_type_identity: str = Field(
        ...,
        description="Consumed message type identity.",
        min_length=1,
    )
    channel_name: str = Field(
        ...,
        description="Logical channel (topic/exchange) name.",
        min_length=1,
    )
    endpoint_name: str = Field(
        ...,
        description="Endpoint (subscription/queue) name.",
        min_length=1,
    )
    resolution_tier: EnumResolutionTier = Field(
        ...,
        description="Resolution tier that produced the binding.",
    )

    @property
    def sort_key(self) -> tuple[str, str]:
        """Key giving bindings a canonical order."""
        return (self.consumer_identity, self.message_type_identity)


__all__ = ["ModelBinding"]
