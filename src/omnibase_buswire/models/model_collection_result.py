# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Output of the declaration collector."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_buswire.models.model_consumer_declaration import (
    ModelConsumerDeclaration,
)
from omnibase_buswire.models.model_diagnostic import ModelDiagnostic
from omnibase_buswire.models.model_message_declaration import (
    ModelMessageDeclaration,
)


class ModelCollectionResult(BaseModel):
    """Messages and consumers extracted from one declaration graph.

    Attributes:
        messages: Message declarations in graph order.
        consumers: Consumer declarations in graph order, one per consumed
            message type.
        diagnostics: Diagnostics raised while collecting.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    messages: tuple[ModelMessageDeclaration, ...] = Field(default_factory=tuple)
    consumers: tuple[ModelConsumerDeclaration, ...] = Field(default_factory=tuple)
    diagnostics: tuple[ModelDiagnostic, ...] = Field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """True when neither messages nor consumers were collected."""
        return not self.messages and not self.consumers


__all__ = ["ModelCollectionResult"]
