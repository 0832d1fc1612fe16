# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Output of one generation pipeline run."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from omnibase_buswire.enums import EnumBackendKind, EnumDiagnosticSeverity
from omnibase_buswire.models.model_binding import ModelBinding
from omnibase_buswire.models.model_consumer_declaration import (
    ModelConsumerDeclaration,
)
from omnibase_buswire.models.model_diagnostic import ModelDiagnostic
from omnibase_buswire.models.model_generated_artifact import ModelGeneratedArtifact


class ModelGenerationResult(BaseModel):
    """Artifacts plus the resolution data they were rendered from.

    Attributes:
        service_name: Service name used for default endpoint names.
        correlation_id: Correlation ID of the generation run.
        artifacts: Generated artifacts in a fixed order.
        bindings: Resolved bindings.
        unresolved: Consumers that could not be bound.
        diagnostics: Collector and resolver diagnostics, in that order.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    service_name: str = Field(..., min_length=1)
    correlation_id: UUID
    artifacts: tuple[ModelGeneratedArtifact, ...] = Field(default_factory=tuple)
    bindings: tuple[ModelBinding, ...] = Field(default_factory=tuple)
    unresolved: tuple[ModelConsumerDeclaration, ...] = Field(default_factory=tuple)
    diagnostics: tuple[ModelDiagnostic, ...] = Field(default_factory=tuple)

    def artifact_for(self, backend_kind: EnumBackendKind) -> ModelGeneratedArtifact | None:
        """Endpoint artifact for a backend, if that backend was generated."""
        for artifact in self.artifacts:
            if artifact.backend_kind is backend_kind:
                return artifact
        return None

    @property
    def has_errors(self) -> bool:
        """True when any diagnostic has ERROR severity."""
        return any(
            diagnostic.severity is EnumDiagnosticSeverity.ERROR
            for diagnostic in self.diagnostics
        )


__all__ = ["ModelGenerationResult"]
