# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Tests for the generation pipeline, artifact writer and diagnostic reporter."""

from __future__ import annotations

import ast
import logging
from pathlib import Path
from uuid import uuid4

import pytest

from omnibase_buswire.emission import BindingEmitter
from omnibase_buswire.enums import (
    EnumAmbiguityPolicy,
    EnumBackendKind,
    EnumDiagnosticCode,
    EnumDiagnosticSeverity,
)
from omnibase_buswire.errors import GeneratorConfigurationError
from omnibase_buswire.generation import (
    ArtifactWriter,
    BindingGenerator,
    generate,
    report_diagnostics,
)
from omnibase_buswire.models import (
    ModelDeclarationGraph,
    ModelDiagnostic,
    ModelGeneratedArtifact,
    ModelGeneratorConfig,
)
from tests.helpers.graph_builders import consumer_type, graph_of, marker

# =============================================================================
# Pipeline Tests
# =============================================================================


@pytest.mark.unit
class TestBindingGenerator:
    """Tests for BindingGenerator.generate()."""

    def test_generates_all_artifacts(self, sample_graph: ModelDeclarationGraph) -> None:
        """Test the default artifact set and order."""
        result = BindingGenerator().generate(sample_graph)

        assert [artifact.file_name for artifact in result.artifacts] == [
            "generated_subscription_endpoints.py",
            "generated_queue_endpoints.py",
            "generated_channel_registration.py",
            "generated_consumer_registration.py",
        ]
        for artifact in result.artifacts:
            ast.parse(artifact.source)
        assert len(result.bindings) == 5
        assert not result.has_errors

    def test_service_name_from_graph_marker(
        self, sample_graph: ModelDeclarationGraph
    ) -> None:
        """Test that the graph's ServiceName marker is used by default."""
        result = generate(sample_graph)

        assert result.service_name == "account-service"
        source = result.artifact_for(EnumBackendKind.TOPIC_SUBSCRIPTION).source
        assert "'account-service-subscription'" in source

    def test_configured_service_name_wins(
        self, sample_graph: ModelDeclarationGraph
    ) -> None:
        """Test that the configured service name overrides the graph marker."""
        config = ModelGeneratorConfig(service_name="billing")

        result = BindingGenerator(config).generate(sample_graph)

        assert result.service_name == "billing"
        assert "'billing-subscription'" in result.artifacts[0].source

    def test_default_service_name(self, empty_graph: ModelDeclarationGraph) -> None:
        """Test the fallback service name when nothing is configured."""
        assert generate(empty_graph).service_name == "service"

    def test_selected_backends_only(self, sample_graph: ModelDeclarationGraph) -> None:
        """Test that only configured backends and registrations are emitted."""
        config = ModelGeneratorConfig(
            backends=(EnumBackendKind.EXCHANGE_QUEUE,),
            emit_channel_registration=False,
            emit_consumer_registration=False,
        )

        result = BindingGenerator(config).generate(sample_graph)

        assert [a.file_name for a in result.artifacts] == ["generated_queue_endpoints.py"]
        assert result.artifact_for(EnumBackendKind.TOPIC_SUBSCRIPTION) is None

    def test_empty_graph_yields_noop_artifacts(
        self, empty_graph: ModelDeclarationGraph
    ) -> None:
        """Test that an empty graph still emits valid artifacts and an info diagnostic."""
        result = generate(empty_graph)

        assert len(result.artifacts) == 4
        for artifact in result.artifacts:
            ast.parse(artifact.source)
        assert [d.code for d in result.diagnostics] == [EnumDiagnosticCode.EMPTY_INPUT]
        assert not result.has_errors

    def test_strict_ambiguity_is_an_error(
        self, ambiguous_graph: ModelDeclarationGraph
    ) -> None:
        """Test that strict resolution surfaces as result errors."""
        config = ModelGeneratorConfig(ambiguity_policy=EnumAmbiguityPolicy.STRICT)

        result = BindingGenerator(config).generate(ambiguous_graph)

        assert result.has_errors
        assert len(result.unresolved) == 1

    def test_generation_is_repeatable(self, sample_graph: ModelDeclarationGraph) -> None:
        """Test that regenerating an unchanged graph gives identical artifacts."""
        generator = BindingGenerator()

        first = generator.generate(sample_graph)
        second = generator.generate(sample_graph)

        assert [a.content_hash for a in first.artifacts] == [
            a.content_hash for a in second.artifacts
        ]

    def test_collector_diagnostics_come_first(self) -> None:
        """Test that collector diagnostics precede resolver diagnostics."""
        graph = graph_of(
            consumer_type(
                "Sample.Consumers.EventConsumer",
                "Sample.Events.Event",
                markers=(marker("Consumer", ""),),
            )
        )

        result = generate(graph)

        assert [d.code for d in result.diagnostics] == [
            EnumDiagnosticCode.MALFORMED_METADATA,
            EnumDiagnosticCode.UNRESOLVABLE_CONSUMER,
        ]

    def test_each_run_has_a_correlation_id(
        self, sample_graph: ModelDeclarationGraph
    ) -> None:
        """Test that a run keeps a given correlation ID and generates one otherwise."""
        correlation_id = uuid4()
        generator = BindingGenerator()

        first = generator.generate(sample_graph, correlation_id=correlation_id)
        second = generator.generate(sample_graph)

        assert first.correlation_id == correlation_id
        assert second.correlation_id not in (None, correlation_id)

    def test_render_errors_carry_run_correlation_id(
        self, sample_graph: ModelDeclarationGraph, tmp_path: Path
    ) -> None:
        """Test that a rendering failure is tied to its generation run."""
        correlation_id = uuid4()
        generator = BindingGenerator(emitter=BindingEmitter(templates_dir=tmp_path))

        with pytest.raises(GeneratorConfigurationError) as exc_info:
            generator.generate(sample_graph, correlation_id=correlation_id)

        assert exc_info.value.correlation_id == correlation_id
        assert exc_info.value.details["operation"] == "emit"


# =============================================================================
# Writer Tests
# =============================================================================


@pytest.mark.unit
class TestArtifactWriter:
    """Tests for ArtifactWriter."""

    @pytest.fixture
    def artifact(self) -> ModelGeneratedArtifact:
        """A small generated artifact."""
        return ModelGeneratedArtifact(file_name="generated_x.py", source="X = 1\n")

    def test_writes_into_new_directory(
        self, tmp_path: Path, artifact: ModelGeneratedArtifact
    ) -> None:
        """Test that the output directory is created on first write."""
        output_dir = tmp_path / "out" / "nested"

        written = ArtifactWriter(output_dir).write(artifact)

        assert written == output_dir / "generated_x.py"
        assert written.read_text(encoding="utf-8") == "X = 1\n"

    def test_unchanged_content_is_not_rewritten(
        self, tmp_path: Path, artifact: ModelGeneratedArtifact
    ) -> None:
        """Test that identical content leaves the file untouched."""
        writer = ArtifactWriter(tmp_path)
        writer.write(artifact)

        assert writer.write_all([artifact]) == []

    def test_changed_content_replaces_file(
        self, tmp_path: Path, artifact: ModelGeneratedArtifact
    ) -> None:
        """Test that regeneration replaces the file of the same name."""
        writer = ArtifactWriter(tmp_path)
        writer.write(artifact)

        changed = ModelGeneratedArtifact(file_name="generated_x.py", source="X = 2\n")
        assert writer.write_all([changed]) == [tmp_path / "generated_x.py"]
        assert (tmp_path / "generated_x.py").read_text(encoding="utf-8") == "X = 2\n"

    def test_dry_run_writes_nothing(
        self, tmp_path: Path, artifact: ModelGeneratedArtifact
    ) -> None:
        """Test that a dry run does not touch the disk."""
        output_dir = tmp_path / "out"

        assert ArtifactWriter(output_dir, dry_run=True).write(artifact) is None
        assert not output_dir.exists()


# =============================================================================
# Reporter Tests
# =============================================================================


@pytest.mark.unit
class TestReportDiagnostics:
    """Tests for report_diagnostics()."""

    def test_logs_at_severity_level(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that each diagnostic is logged at its severity's level."""
        diagnostics = [
            ModelDiagnostic(
                code=EnumDiagnosticCode.EMPTY_INPUT,
                severity=EnumDiagnosticSeverity.INFO,
                message="nothing to do",
            ),
            ModelDiagnostic(
                code=EnumDiagnosticCode.UNRESOLVABLE_CONSUMER,
                severity=EnumDiagnosticSeverity.ERROR,
                message="no channel",
                subject="Sample.Consumers.C",
            ),
        ]

        with caplog.at_level(logging.DEBUG, logger="omnibase_buswire"):
            count = report_diagnostics(diagnostics)

        assert count == 2
        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.INFO, "[BW201] nothing to do"),
            (logging.ERROR, "[BW101] Sample.Consumers.C: no channel"),
        ]
        assert caplog.records[1].diagnostic_code == "BW101"

    def test_logger_override(self) -> None:
        """Test that a custom logger receives the diagnostics."""
        records: list[logging.LogRecord] = []

        class _Collect(logging.Handler):
            def emit(self, record: logging.LogRecord) -> None:
                records.append(record)

        custom = logging.getLogger("tests.buswire.custom")
        custom.setLevel(logging.DEBUG)
        custom.addHandler(_Collect())
        diagnostic = ModelDiagnostic(
            code=EnumDiagnosticCode.DUPLICATE_DECLARATION,
            severity=EnumDiagnosticSeverity.WARNING,
            message="twice",
        )

        report_diagnostics([diagnostic], logger_override=custom)

        assert [r.levelno for r in records] == [logging.WARNING]
