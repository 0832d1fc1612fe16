# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Declaration graph builders for tests.

Usage:
    graph = graph_of(
        message_type("Sample.Events.OrderPlaced", marker("EntityName", "orders")),
        consumer_type("Sample.Consumers.OrderConsumer", "Sample.Events.OrderPlaced"),
    )
"""

from __future__ import annotations

from pathlib import Path

from omnibase_buswire.enums import EnumDeclarationKind
from omnibase_buswire.models import (
    ModelDeclarationGraph,
    ModelDeclaredType,
    ModelMarker,
)

FIXTURES_DIR: Path = Path(__file__).parent.parent / "fixtures"
SAMPLE_GRAPH_PATH: Path = FIXTURES_DIR / "sample_declarations.yaml"
SAMPLE_SERVICE_NAME: str = "account-service"

ACCOUNT_GROUP: str = "Sample.Events.IAccountSignedUpIntegrationEvent"
TEST_GROUP: str = "Sample.Events.ITestEventInterface"


def marker(name: str, *arguments: str | None) -> ModelMarker:
    """Build a marker with positional arguments."""
    return ModelMarker(name=name, arguments=arguments)


def message_type(
    name: str,
    *markers: ModelMarker,
    container: str | None = None,
    kind: EnumDeclarationKind = EnumDeclarationKind.RECORD,
) -> ModelDeclaredType:
    """Build a declared message type."""
    return ModelDeclaredType(name=name, kind=kind, markers=markers, container=container)


def consumer_type(
    name: str, *consumes: str, markers: tuple[ModelMarker, ...] = ()
) -> ModelDeclaredType:
    """Build a declared consumer type."""
    return ModelDeclaredType(name=name, consumes=consumes, markers=markers)


def group_type(name: str) -> ModelDeclaredType:
    """Build an interface used only to group nested message types."""
    return ModelDeclaredType(
        name=name,
        kind=EnumDeclarationKind.INTERFACE,
        markers=(marker("ExcludeFromTopology"),),
    )


def graph_of(
    *types: ModelDeclaredType, service_name: str | None = None
) -> ModelDeclarationGraph:
    """Build a declaration graph, optionally with a ServiceName marker."""
    assembly_markers = (marker("ServiceName", service_name),) if service_name else ()
    return ModelDeclarationGraph(types=types, assembly_markers=assembly_markers)


def build_sample_graph() -> ModelDeclarationGraph:
    """Sample program covering all three resolution tiers.

    Same content as ``fixtures/sample_declarations.yaml``.
    """
    return graph_of(
        group_type(ACCOUNT_GROUP),
        message_type(
            f"{ACCOUNT_GROUP}.V1",
            marker("EntityName", "account-signed-up-v1"),
            container=ACCOUNT_GROUP,
        ),
        message_type(
            f"{ACCOUNT_GROUP}.V2",
            marker("EntityName", "account-signed-up-v2"),
            container=ACCOUNT_GROUP,
        ),
        message_type(
            "Sample.Events.TestEventOne",
            marker("Channel", "test-topic-one"),
            marker("EntityName", "test-event-one"),
            kind=EnumDeclarationKind.CLASS,
        ),
        group_type(TEST_GROUP),
        message_type(
            f"{TEST_GROUP}.TestEventTwo",
            marker("ChannelAttribute", "test-event-two-topic"),
            container=TEST_GROUP,
        ),
        consumer_type("Sample.Consumers.AccountCreatedConsumer", f"{ACCOUNT_GROUP}.V1"),
        consumer_type(
            "Sample.Consumers.AccountCreatedV2Consumer",
            f"{ACCOUNT_GROUP}.V2",
            markers=(marker("Consumer", "accounts", "accounts-v2-endpoint"),),
        ),
        consumer_type("Sample.Consumers.TestConsumer", "Sample.Events.TestEventOne"),
        consumer_type("Sample.Consumers.TestEventTwoConsumer", "TestEventTwo"),
        consumer_type(
            "Sample.Consumers.OrderPlacedConsumer",
            "Sample.Orders.OrderPlacedMessage",
            markers=(marker("ConsumerSubscription", "orders-sub"),),
        ),
        service_name=SAMPLE_SERVICE_NAME,
    )


def build_ambiguous_graph() -> ModelDeclarationGraph:
    """Two event groups that both nest a ``V1`` record.

    ``SimpleV1Consumer`` names only ``V1`` and matches both members;
    ``PaymentConsumer`` names the qualified payment member.
    """
    return graph_of(
        group_type("Sample.Events.IOrderEvent"),
        message_type(
            "Sample.Events.IOrderEvent.V1",
            marker("EntityName", "order-v1"),
            container="Sample.Events.IOrderEvent",
        ),
        group_type("Sample.Events.IPaymentEvent"),
        message_type(
            "Sample.Events.IPaymentEvent.V1",
            marker("EntityName", "payment-v1"),
            container="Sample.Events.IPaymentEvent",
        ),
        consumer_type("Sample.Consumers.SimpleV1Consumer", "V1"),
        consumer_type(
            "Sample.Consumers.PaymentConsumer", "Sample.Events.IPaymentEvent.V1"
        ),
    )


__all__: list[str] = [
    "ACCOUNT_GROUP",
    "FIXTURES_DIR",
    "SAMPLE_GRAPH_PATH",
    "SAMPLE_SERVICE_NAME",
    "TEST_GROUP",
    "build_ambiguous_graph",
    "build_sample_graph",
    "consumer_type",
    "graph_of",
    "group_type",
    "marker",
    "message_type",
]
