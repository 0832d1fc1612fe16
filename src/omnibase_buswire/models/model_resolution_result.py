# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Output of the binding resolver."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_buswire.enums import EnumResolutionTier
from omnibase_buswire.models.model_binding import ModelBinding
from omnibase_buswire.models.model_consumer_declaration import (
    ModelConsumerDeclaration,
)
from omnibase_buswire.models.model_diagnostic import ModelDiagnostic


class ModelResolutionResult(BaseModel):
    """Bindings, unresolved consumers and diagnostics of one resolution pass.

    Attributes:
        bindings: One binding per resolvable consumer declaration, sorted by
            consumer identity then message type identity.
        unresolved: Consumer declarations no tier could bind.
        diagnostics: Diagnostics raised while resolving.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    bindings: tuple[ModelBinding, ...] = Field(default_factory=tuple)
    unresolved: tuple[ModelConsumerDeclaration, ...] = Field(default_factory=tuple)
    diagnostics: tuple[ModelDiagnostic, ...] = Field(default_factory=tuple)

    def bindings_for_tier(self, tier: EnumResolutionTier) -> tuple[ModelBinding, ...]:
        """Bindings produced by one resolution tier."""
        return tuple(binding for binding in self.bindings if binding.resolution_tier is tier)


__all__ = ["ModelResolutionResult"]
