# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Message declaration collected from the declaration graph."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from omnibase_buswire.utils import simple_type_name


class ModelMessageDeclaration(BaseModel):
    """A message type carrying an entity-name or channel marker.

    Attributes:
        identity: Fully qualified message type identity.
        entity_name: Logical channel name from an ``EntityName`` marker.
        channel_name: Channel name from a ``Channel``/``ExchangeName`` marker.
        group: Identity of the enclosing grouping construct, if nested.

    At least one of ``entity_name`` and ``channel_name`` is always set.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    identity: str = Field(
        ...,
        description="Fully qualified message type identity.",
        min_length=1,
    )
    entity_name: str | None = Field(
        default=None,
        description="Logical channel name from an EntityName marker.",
    )
    channel_name: str | None = Field(
        default=None,
        description="Channel name from a Channel or ExchangeName marker.",
    )
    group: str | None = Field(
        default=None,
        description="Identity of the enclosing grouping construct.",
    )

    @model_validator(mode="after")
    def _require_a_name(self) -> ModelMessageDeclaration:
        if not self.entity_name and not self.channel_name:
            raise ValueError(
                f"message declaration '{self.identity}' needs an entity or channel name"
            )
        return self

    @property
    def simple_name(self) -> str:
        """Last segment of the message identity."""
        return simple_type_name(self.identity)

    @property
    def logical_channel(self) -> str:
        """Entity name, falling back to the channel marker."""
        return self.entity_name or self.channel_name or ""


__all__ = ["ModelMessageDeclaration"]
