# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Declared type node of the declaration graph.

A ``ModelDeclaredType`` carries everything the collector needs to know about
one type: its identity, its markers, the containment edge to its enclosing
type and the capability edges to the message types it consumes.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from omnibase_buswire.enums import EnumDeclarationKind, EnumMarkerKind
from omnibase_buswire.models.graph.model_marker import ModelMarker
from omnibase_buswire.utils import normalize_type_identity, simple_type_name


class ModelDeclaredType(BaseModel):
    """One type in the host's declaration graph.

    Attributes:
        name: Fully qualified type identity.
        kind: Declaration kind (class, record, struct, interface).
        markers: Metadata markers on the type, in declaration order.
        container: Identity of the enclosing type when the type is nested.
        consumes: Identities of the message types this type implements the
            single-message-consumption capability for.

    Example:
        >>> ModelDeclaredType(
        ...     name="Sample.Consumers.AccountCreatedConsumer",
        ...     consumes=("Sample.Events.IAccountSignedUpIntegrationEvent.V1",),
        ... )
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    name: str = Field(
        ...,
        description="Fully qualified type identity.",
        min_length=1,
    )
    kind: EnumDeclarationKind = Field(
        default=EnumDeclarationKind.CLASS,
        description="Declaration kind.",
    )
    markers: tuple[ModelMarker, ...] = Field(
        default_factory=tuple,
        description="Metadata markers on the type.",
    )
    container: str | None = Field(
        default=None,
        description="Identity of the enclosing type (containment edge).",
    )
    consumes: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Consumed message type identities (capability edges).",
    )

    @field_validator("name")
    @classmethod
    def _normalize_name(cls, value: str) -> str:
        normalized = normalize_type_identity(value)
        if not normalized:
            raise ValueError("type name cannot be blank")
        return normalized

    @field_validator("container")
    @classmethod
    def _normalize_container(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return normalize_type_identity(value) or None

    @field_validator("consumes")
    @classmethod
    def _normalize_consumes(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(normalize_type_identity(item) for item in value)

    @property
    def simple_name(self) -> str:
        """Last segment of the type identity."""
        return simple_type_name(self.name)

    def markers_of(self, *kinds: EnumMarkerKind) -> tuple[ModelMarker, ...]:
        """Return the markers of the given kinds, in declaration order."""
        return tuple(marker for marker in self.markers if marker.kind in kinds)

    def has_marker(self, kind: EnumMarkerKind) -> bool:
        """True when at least one marker of ``kind`` is present."""
        return any(marker.kind is kind for marker in self.markers)


__all__ = ["ModelDeclaredType"]
