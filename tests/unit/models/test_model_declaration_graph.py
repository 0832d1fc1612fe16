# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Unit tests for the declaration graph and pipeline models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from omnibase_buswire.enums import (
    EnumAmbiguityPolicy,
    EnumBackendKind,
    EnumMarkerKind,
    EnumResolutionTier,
)
from omnibase_buswire.models import (
    DEFAULT_SERVICE_NAME,
    ModelBinding,
    ModelDeclarationGraph,
    ModelDeclaredType,
    ModelEventGroup,
    ModelGeneratedArtifact,
    ModelGeneratorConfig,
    ModelMessageDeclaration,
)
from tests.helpers.graph_builders import graph_of, marker


@pytest.mark.unit
class TestModelDeclaredType:
    """Tests for declared type normalization."""

    def test_normalizes_nested_and_global_spellings(self) -> None:
        """Test that global:: prefixes and + separators are folded."""
        declared = ModelDeclaredType(
            name="global::Sample.Events.IGroup+V1",
            container="global::Sample.Events.IGroup",
            consumes=("Sample.Events.IGroup+V2",),
        )

        assert declared.name == "Sample.Events.IGroup.V1"
        assert declared.container == "Sample.Events.IGroup"
        assert declared.consumes == ("Sample.Events.IGroup.V2",)
        assert declared.simple_name == "V1"

    def test_rejects_blank_name(self) -> None:
        """Test that a blank type name fails validation."""
        with pytest.raises(ValidationError):
            ModelDeclaredType(name="   ")

    def test_markers_of_keeps_declaration_order(self) -> None:
        """Test marker lookup by kind."""
        declared = ModelDeclaredType(
            name="Sample.Events.OrderPlaced",
            markers=(
                marker("Channel", "first"),
                marker("Obsolete"),
                marker("ExchangeName", "second"),
            ),
        )

        found = declared.markers_of(EnumMarkerKind.CHANNEL, EnumMarkerKind.EXCHANGE_NAME)
        assert [m.arguments[0] for m in found] == ["first", "second"]
        assert not declared.has_marker(EnumMarkerKind.CONSUMER)


@pytest.mark.unit
class TestModelDeclarationGraph:
    """Tests for graph-level properties."""

    def test_service_name_from_marker(self) -> None:
        """Test that the ServiceName marker provides the service name."""
        graph = graph_of(service_name="billing")

        assert graph.service_name == "billing"
        assert graph.is_empty

    def test_malformed_service_name_marker_is_ignored(self) -> None:
        """Test that a ServiceName marker without a usable argument is ignored."""
        graph = ModelDeclarationGraph(assembly_markers=(marker("ServiceName", "  "),))

        assert graph.service_name is None

    def test_graph_is_immutable(self) -> None:
        """Test that the graph cannot be mutated after construction."""
        graph = ModelDeclarationGraph()
        with pytest.raises(ValidationError):
            graph.types = ()  # type: ignore[misc]


@pytest.mark.unit
class TestModelMessageDeclaration:
    """Tests for message declarations and event groups."""

    def test_requires_a_name(self) -> None:
        """Test that a message needs an entity or channel name."""
        with pytest.raises(ValidationError):
            ModelMessageDeclaration(identity="Sample.Events.OrderPlaced")

    def test_logical_channel_prefers_entity_name(self) -> None:
        """Test that the entity name wins over the channel name."""
        message = ModelMessageDeclaration(
            identity="Sample.Events.OrderPlaced",
            entity_name="order-placed",
            channel_name="orders",
        )

        assert message.logical_channel == "order-placed"

    def test_build_groups_skips_ungrouped(self) -> None:
        """Test grouping by container in first-seen order."""
        messages = [
            ModelMessageDeclaration(identity="G2.A", entity_name="a", group="G2"),
            ModelMessageDeclaration(identity="Loose", entity_name="loose"),
            ModelMessageDeclaration(identity="G1.B", entity_name="b", group="G1"),
            ModelMessageDeclaration(identity="G2.C", entity_name="c", group="G2"),
        ]

        groups = ModelEventGroup.build_groups(messages)

        assert [group.identity for group in groups] == ["G2", "G1"]
        assert [member.identity for member in groups[0].members] == ["G2.A", "G2.C"]


@pytest.mark.unit
class TestModelBinding:
    """Tests for the binding model."""

    def test_rejects_empty_names(self) -> None:
        """Test that a binding never carries an empty channel or endpoint."""
        with pytest.raises(ValidationError):
            ModelBinding(
                consumer_identity="C",
                message_type_identity="M",
                channel_name="",
                endpoint_name="svc-subscription",
                resolution_tier=EnumResolutionTier.INFERRED,
            )

    def test_artifact_hash_tracks_source(self) -> None:
        """Test that the content hash changes with the source."""
        first = ModelGeneratedArtifact(file_name="a.py", source="x = 1\n")
        second = ModelGeneratedArtifact(file_name="a.py", source="x = 2\n")

        assert first.content_hash != second.content_hash
        assert first.content_hash == ModelGeneratedArtifact(
            file_name="b.py", source="x = 1\n"
        ).content_hash


@pytest.mark.unit
class TestModelGeneratorConfig:
    """Tests for generator configuration parsing."""

    def test_defaults(self) -> None:
        """Test the default configuration."""
        config = ModelGeneratorConfig()

        assert config.service_name is None
        assert config.backends == (
            EnumBackendKind.TOPIC_SUBSCRIPTION,
            EnumBackendKind.EXCHANGE_QUEUE,
        )
        assert config.ambiguity_policy is EnumAmbiguityPolicy.FIRST_MATCH

    def test_backends_from_comma_separated_string(self) -> None:
        """Test that backends parse from a comma-separated string and dedupe."""
        config = ModelGeneratorConfig(backends="exchange-queue, exchange_queue")  # type: ignore[arg-type]

        assert config.backends == (EnumBackendKind.EXCHANGE_QUEUE,)

    def test_rejects_unknown_backend(self) -> None:
        """Test that unknown backends fail validation."""
        with pytest.raises(ValidationError):
            ModelGeneratorConfig(backends=["kafka"])  # type: ignore[list-item]

    def test_rejects_blank_service_name(self) -> None:
        """Test that a blank service name fails validation."""
        with pytest.raises(ValidationError):
            ModelGeneratorConfig(service_name="  ")

    def test_effective_service_name_fallback_chain(self) -> None:
        """Test config value, then graph marker, then the default."""
        assert ModelGeneratorConfig(service_name="cfg").effective_service_name("graph") == "cfg"
        assert ModelGeneratorConfig().effective_service_name("graph") == "graph"
        assert ModelGeneratorConfig().effective_service_name(None) == DEFAULT_SERVICE_NAME
