# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Generated source artifact."""

from __future__ import annotations

import hashlib

from pydantic import BaseModel, ConfigDict, Field

from omnibase_buswire.enums import EnumBackendKind


class ModelGeneratedArtifact(BaseModel):
    """In-memory generated source file.

    Attributes:
        file_name: Fixed logical file name; regeneration replaces the file
            of the same name.
        backend_kind: Backend the artifact targets, or None for
            backend-agnostic artifacts.
        source: Generated source text.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    file_name: str = Field(..., description="Fixed logical file name.", min_length=1)
    backend_kind: EnumBackendKind | None = Field(
        default=None,
        description="Targeted backend, None for backend-agnostic artifacts.",
    )
    source: str = Field(..., description="Generated source text.", min_length=1)

    @property
    def content_hash(self) -> str:
        """SHA-256 of the source text."""
        return hashlib.sha256(self.source.encode("utf-8")).hexdigest()


__all__ = ["ModelGeneratedArtifact"]
