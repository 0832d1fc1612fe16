# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Bus wiring generation pipeline.

This is the main entry point: one ``generate`` call runs collection,
resolution and emission over a declaration graph and returns every artifact
in memory. Writing files is left to ``ArtifactWriter``.

Pipeline:
    ModelDeclarationGraph
        -> DeclarationCollector.collect()  messages, consumers
        -> BindingResolver.resolve()       bindings
        -> BindingEmitter                  one artifact per backend, plus
                                           channel and consumer registration

Each invocation recomputes everything from the graph; no state carries over
between calls. Every run gets one correlation ID, carried by the result and
by any error raised while rendering.
"""

from __future__ import annotations

import logging
from uuid import UUID, uuid4

from omnibase_buswire.collection import DeclarationCollector
from omnibase_buswire.emission import BindingEmitter
from omnibase_buswire.models import (
    ModelDeclarationGraph,
    ModelGeneratedArtifact,
    ModelGenerationResult,
    ModelGeneratorConfig,
)
from omnibase_buswire.resolution import BindingResolver

logger = logging.getLogger(__name__)


class BindingGenerator:
    """Generate bus wiring modules from a declaration graph.

    Usage:
        generator = BindingGenerator(ModelGeneratorConfig(service_name="billing"))
        result = generator.generate(graph)
        ArtifactWriter(Path("generated")).write_all(result.artifacts)
    """

    def __init__(
        self,
        config: ModelGeneratorConfig | None = None,
        emitter: BindingEmitter | None = None,
    ) -> None:
        self.config = config or ModelGeneratorConfig()
        self.collector = DeclarationCollector()
        self.emitter = emitter or BindingEmitter()

    def generate(
        self,
        graph: ModelDeclarationGraph,
        correlation_id: UUID | None = None,
    ) -> ModelGenerationResult:
        """Run the full pipeline over one graph.

        Args:
            graph: Declaration graph of the current program.
            correlation_id: Correlation ID of the run. Generated when omitted.

        Returns:
            Artifacts, bindings, unresolved consumers and diagnostics.

        Raises:
            GeneratorConfigurationError: If templates cannot be rendered.
        """
        service_name = self.config.effective_service_name(graph.service_name)
        run_id = correlation_id or uuid4()
        collected = self.collector.collect(graph)
        resolver = BindingResolver(service_name, self.config.ambiguity_policy)
        resolved = resolver.resolve(collected.messages, collected.consumers)

        artifacts: list[ModelGeneratedArtifact] = [
            self.emitter.endpoint_artifact(
                resolved.bindings, backend_kind, correlation_id=run_id
            )
            for backend_kind in self.config.backends
        ]
        if self.config.emit_channel_registration:
            artifacts.append(
                self.emitter.channel_registration_artifact(
                    collected.messages, correlation_id=run_id
                )
            )
        if self.config.emit_consumer_registration:
            artifacts.append(
                self.emitter.consumer_registration_artifact(
                    resolved.bindings, correlation_id=run_id
                )
            )

        logger.info(
            "Generated %d artifact(s) for service %s: %d binding(s), %d unresolved",
            len(artifacts),
            service_name,
            len(resolved.bindings),
            len(resolved.unresolved),
            extra={"correlation_id": str(run_id)},
        )

        return ModelGenerationResult(
            service_name=service_name,
            correlation_id=run_id,
            artifacts=tuple(artifacts),
            bindings=resolved.bindings,
            unresolved=resolved.unresolved,
            diagnostics=collected.diagnostics + resolved.diagnostics,
        )


def generate(
    graph: ModelDeclarationGraph, config: ModelGeneratorConfig | None = None
) -> ModelGenerationResult:
    """Run the pipeline with a one-off generator."""
    return BindingGenerator(config).generate(graph)


__all__: list[str] = ["BindingGenerator", "generate"]
