# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Metadata marker attached to a declared type."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_buswire.enums import EnumMarkerKind


class ModelMarker(BaseModel):
    """A named marker with positional constructor-style arguments.

    Arguments are kept exactly as the host reported them, including ``None``
    and empty strings; validating them is the collector's job so that
    malformed markers become diagnostics instead of load failures.

    Attributes:
        name: Marker name as declared (``EntityName``, ``ChannelAttribute``,
            ``Messaging.EntityNameAttribute`` ...).
        arguments: Positional arguments in declaration order.

    Example:
        >>> marker = ModelMarker(name="Consumer", arguments=("orders", "billing"))
        >>> marker.kind
        <EnumMarkerKind.CONSUMER: 'Consumer'>
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    name: str = Field(
        ...,
        description="Marker name as declared on the type.",
        min_length=1,
    )
    arguments: tuple[str | None, ...] = Field(
        default_factory=tuple,
        description="Positional marker arguments in declaration order.",
    )

    @property
    def kind(self) -> EnumMarkerKind | None:
        """Recognized marker kind, or None for unrelated markers."""
        return EnumMarkerKind.from_marker_name(self.name)


__all__ = ["ModelMarker"]
