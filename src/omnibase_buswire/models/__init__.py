# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Bus Wiring Models.

This module exports the Pydantic models of the generation pipeline: the
declaration graph input, the collected declarations, the binding model and
the result/configuration models.
"""

from omnibase_buswire.models.graph import (
    ModelDeclarationGraph,
    ModelDeclaredType,
    ModelMarker,
)
from omnibase_buswire.models.model_binding import ModelBinding
from omnibase_buswire.models.model_collection_result import ModelCollectionResult
from omnibase_buswire.models.model_consumer_declaration import (
    ModelConsumerDeclaration,
)
from omnibase_buswire.models.model_diagnostic import ModelDiagnostic
from omnibase_buswire.models.model_event_group import ModelEventGroup
from omnibase_buswire.models.model_generated_artifact import ModelGeneratedArtifact
from omnibase_buswire.models.model_generation_result import ModelGenerationResult
from omnibase_buswire.models.model_generator_config import (
    DEFAULT_SERVICE_NAME,
    ModelGeneratorConfig,
)
from omnibase_buswire.models.model_message_declaration import (
    ModelMessageDeclaration,
)
from omnibase_buswire.models.model_resolution_result import ModelResolutionResult

__all__: list[str] = [
    "DEFAULT_SERVICE_NAME",
    "ModelBinding",
    "ModelCollectionResult",
    "ModelConsumerDeclaration",
    "ModelDeclarationGraph",
    "ModelDeclaredType",
    "ModelDiagnostic",
    "ModelEventGroup",
    "ModelGeneratedArtifact",
    "ModelGenerationResult",
    "ModelGeneratorConfig",
    "ModelMarker",
    "ModelMessageDeclaration",
    "ModelResolutionResult",
]
