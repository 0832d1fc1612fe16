# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Unit tests for bus wiring error classes."""

from uuid import uuid4

import pytest

from omnibase_buswire.errors import (
    AmbiguousStructuralMatchError,
    BuswireError,
    DeclarationGraphLoadError,
    GeneratorConfigurationError,
    MalformedMetadataError,
    ModelBuswireErrorContext,
    UnresolvableConsumerError,
)


@pytest.mark.unit
class TestBuswireError:
    """Test BuswireError base class."""

    def test_basic_initialization(self) -> None:
        """Test basic error initialization."""
        error = BuswireError("Generation failed")

        assert str(error) == "Generation failed"
        assert error.message == "Generation failed"
        assert error.context is None
        assert error.correlation_id is None
        assert error.details == {}

    def test_with_context(self) -> None:
        """Test error with bundled context."""
        correlation_id = uuid4()
        context = ModelBuswireErrorContext(
            operation="resolve",
            target_name="Sample.Consumers.OrderConsumer",
            correlation_id=correlation_id,
        )

        error = BuswireError("Resolution failed", context=context)

        assert error.correlation_id == correlation_id
        assert error.details["operation"] == "resolve"
        assert error.details["target_name"] == "Sample.Consumers.OrderConsumer"
        assert "operation=resolve" in str(error)

    def test_extra_context(self) -> None:
        """Test that extra keyword context lands in details."""
        error = BuswireError("Failed", marker="Consumer")

        assert error.details == {"marker": "Consumer"}
        assert str(error) == "Failed (marker=Consumer)"

    def test_with_correlation_generates_id(self) -> None:
        """Test that with_correlation fills in a correlation ID."""
        context = ModelBuswireErrorContext.with_correlation(operation="collect")

        assert context.correlation_id is not None
        assert context.operation == "collect"


@pytest.mark.unit
class TestErrorSubclasses:
    """Test the specific error classes."""

    @pytest.mark.parametrize(
        "error_class",
        [
            MalformedMetadataError,
            UnresolvableConsumerError,
            DeclarationGraphLoadError,
            GeneratorConfigurationError,
        ],
    )
    def test_inherit_from_base(self, error_class: type[BuswireError]) -> None:
        """Test that every error can be caught as BuswireError."""
        with pytest.raises(BuswireError):
            raise error_class("boom")

    def test_malformed_metadata_records_marker(self) -> None:
        """Test that the marker name is kept as attribute and detail."""
        error = MalformedMetadataError("Expected 1 argument", marker_name="EntityName")

        assert error.marker_name == "EntityName"
        assert error.details["marker"] == "EntityName"

    def test_unresolvable_consumer_records_identities(self) -> None:
        """Test that consumer and message type are kept."""
        error = UnresolvableConsumerError(
            "No channel",
            consumer_identity="Sample.Consumers.EventConsumer",
            message_type_identity="Sample.Events.Event",
        )

        assert error.consumer_identity == "Sample.Consumers.EventConsumer"
        assert error.details["message_type"] == "Sample.Events.Event"

    def test_ambiguous_match_lists_candidates(self) -> None:
        """Test that candidates are kept in order and rendered."""
        error = AmbiguousStructuralMatchError(
            "Ambiguous",
            message_type_identity="V1",
            candidates=("A.V1", "B.V1"),
        )

        assert error.candidates == ("A.V1", "B.V1")
        assert "candidates=A.V1, B.V1" in str(error)
