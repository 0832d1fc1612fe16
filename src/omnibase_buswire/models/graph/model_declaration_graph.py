# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Declaration graph model.

The declaration graph is the pre-extracted input of a generation pass: every
declared type with its markers, containment edges and capability edges, plus
graph-level (assembly) markers. It is built once per invocation and never
mutated; a changed program yields a new graph and a full recomputation.

Document Format:
    ```yaml
    assembly_markers:
      - name: ServiceName
        arguments: ["account-service"]
    types:
      - name: Sample.Events.IAccountSignedUpIntegrationEvent
        kind: interface
      - name: Sample.Events.IAccountSignedUpIntegrationEvent.V1
        kind: record
        container: Sample.Events.IAccountSignedUpIntegrationEvent
        markers:
          - name: EntityName
            arguments: ["account-signed-up-v1"]
      - name: Sample.Consumers.AccountCreatedConsumer
        consumes: ["Sample.Events.IAccountSignedUpIntegrationEvent.V1"]
    ```
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_buswire.enums import EnumMarkerKind
from omnibase_buswire.models.graph.model_declared_type import ModelDeclaredType
from omnibase_buswire.models.graph.model_marker import ModelMarker


class ModelDeclarationGraph(BaseModel):
    """Typed declaration graph consumed by the declaration collector.

    Attributes:
        types: Declared types in declaration order.
        assembly_markers: Graph-level markers (e.g. ``ServiceName``).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    types: tuple[ModelDeclaredType, ...] = Field(
        default_factory=tuple,
        description="Declared types in declaration order.",
    )
    assembly_markers: tuple[ModelMarker, ...] = Field(
        default_factory=tuple,
        description="Graph-level markers.",
    )

    @property
    def service_name(self) -> str | None:
        """Service name from the first well-formed ``ServiceName`` marker."""
        for marker in self.assembly_markers:
            if marker.kind is not EnumMarkerKind.SERVICE_NAME:
                continue
            if len(marker.arguments) == 1 and marker.arguments[0]:
                return marker.arguments[0].strip() or None
        return None

    @property
    def is_empty(self) -> bool:
        """True when the graph declares no types at all."""
        return not self.types


__all__ = ["ModelDeclarationGraph"]
