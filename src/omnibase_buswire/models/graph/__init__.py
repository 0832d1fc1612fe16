# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Declaration graph input models."""

from omnibase_buswire.models.graph.model_declaration_graph import (
    ModelDeclarationGraph,
)
from omnibase_buswire.models.graph.model_declared_type import ModelDeclaredType
from omnibase_buswire.models.graph.model_marker import ModelMarker

__all__: list[str] = [
    "ModelDeclarationGraph",
    "ModelDeclaredType",
    "ModelMarker",
]
