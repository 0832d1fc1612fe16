# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Declaration collector.

Walks a declaration graph and extracts the facts the binding resolver needs:

- message types carrying an ``EntityName`` or ``Channel`` marker, tagged with
  the grouping construct they are nested in;
- consumer types, one declaration per consumed message type, with the
  explicit channel/endpoint pair of their ``Consumer`` marker.

Error Handling:
    Malformed markers never abort collection. Each one is converted into a
    MALFORMED_METADATA diagnostic and the marker is skipped; the rest of the
    declaration (and of the graph) is still collected. Blank consumed
    message type identities are reported the same way and skipped.

Thread Safety:
    The collector holds no state between calls; ``collect`` is a pure
    function of its input graph.
"""

from __future__ import annotations

from omnibase_buswire.enums import (
    EnumDeclarationKind,
    EnumDiagnosticCode,
    EnumDiagnosticSeverity,
    EnumMarkerKind,
)
from omnibase_buswire.errors import MalformedMetadataError, ModelBuswireErrorContext
from omnibase_buswire.models import (
    ModelCollectionResult,
    ModelConsumerDeclaration,
    ModelDeclarationGraph,
    ModelDeclaredType,
    ModelDiagnostic,
    ModelMarker,
    ModelMessageDeclaration,
)

_CHANNEL_MARKERS = (EnumMarkerKind.CHANNEL, EnumMarkerKind.EXCHANGE_NAME)
_SUBSCRIPTION_MARKERS = (
    EnumMarkerKind.CONSUMER_SUBSCRIPTION,
    EnumMarkerKind.QUEUE_NAME,
)


def _context(declared: ModelDeclaredType) -> ModelBuswireErrorContext:
    return ModelBuswireErrorContext(operation="collect", target_name=declared.name)


def parse_name_marker(marker: ModelMarker, declared: ModelDeclaredType) -> str:
    """Return the single non-empty name argument of a marker.

    Raises:
        MalformedMetadataError: If the marker does not have exactly one
            argument or the argument is null or blank.
    """
    if len(marker.arguments) != 1:
        raise MalformedMetadataError(
            f"Expected 1 argument, got {len(marker.arguments)}",
            marker_name=marker.name,
            context=_context(declared),
        )
    value = marker.arguments[0]
    if value is None or not value.strip():
        raise MalformedMetadataError(
            "Name argument is empty",
            marker_name=marker.name,
            context=_context(declared),
        )
    return value.strip()


def parse_consumer_marker(
    marker: ModelMarker, declared: ModelDeclaredType
) -> tuple[str, str | None]:
    """Return the ``(channel, endpoint)`` pair of a ``Consumer`` marker.

    The endpoint argument is optional: absent or null means "use the default
    endpoint". A blank endpoint string is malformed.

    Raises:
        MalformedMetadataError: On a wrong argument count, a missing channel
            or a blank endpoint.
    """
    if not 1 <= len(marker.arguments) <= 2:
        raise MalformedMetadataError(
            f"Expected 1 or 2 arguments, got {len(marker.arguments)}",
            marker_name=marker.name,
            context=_context(declared),
        )
    channel = marker.arguments[0]
    if channel is None or not channel.strip():
        raise MalformedMetadataError(
            "Channel argument is empty",
            marker_name=marker.name,
            context=_context(declared),
        )
    endpoint = marker.arguments[1] if len(marker.arguments) == 2 else None
    if endpoint is not None and not endpoint.strip():
        raise MalformedMetadataError(
            "Endpoint argument is empty",
            marker_name=marker.name,
            context=_context(declared),
        )
    return channel.strip(), endpoint.strip() if endpoint is not None else None


def parse_subscription_marker(
    marker: ModelMarker, declared: ModelDeclaredType
) -> str | None:
    """Return the optional subscription name of a subscription marker.

    ``ConsumerSubscription`` may be declared without a name, meaning "no
    override"; ``QueueName`` always needs one.

    Raises:
        MalformedMetadataError: On a wrong argument count or a blank name.
    """
    if marker.kind is EnumMarkerKind.CONSUMER_SUBSCRIPTION and (
        not marker.arguments or marker.arguments == (None,)
    ):
        return None
    return parse_name_marker(marker, declared)


class DeclarationCollector:
    """Extracts message and consumer declarations from a declaration graph.

    Example:
        >>> collector = DeclarationCollector()
        >>> result = collector.collect(graph)
        >>> [message.identity for message in result.messages]
        ['Sample.Events.TestEventOne']
    """

    def collect(self, graph: ModelDeclarationGraph) -> ModelCollectionResult:
        """Collect message and consumer declarations.

        Args:
            graph: The declaration graph of the current program.

        Returns:
            Messages and consumers in graph order, plus diagnostics for every
            skipped marker or declaration.
        """
        diagnostics: list[ModelDiagnostic] = []
        messages: list[ModelMessageDeclaration] = []
        consumers: list[ModelConsumerDeclaration] = []
        seen: set[str] = set()

        for declared in graph.types:
            if declared.name in seen:
                diagnostics.append(
                    ModelDiagnostic(
                        code=EnumDiagnosticCode.DUPLICATE_DECLARATION,
                        severity=EnumDiagnosticSeverity.WARNING,
                        message="Type declared more than once; keeping the first declaration",
                        subject=declared.name,
                    )
                )
                continue
            seen.add(declared.name)

            message = self._collect_message(declared, diagnostics)
            if message is not None:
                messages.append(message)
            consumers.extend(self._collect_consumers(declared, diagnostics))

        return ModelCollectionResult(
            messages=tuple(messages),
            consumers=tuple(consumers),
            diagnostics=tuple(diagnostics),
        )

    def _collect_message(
        self,
        declared: ModelDeclaredType,
        diagnostics: list[ModelDiagnostic],
    ) -> ModelMessageDeclaration | None:
        if declared.has_marker(EnumMarkerKind.EXCLUDE_FROM_TOPOLOGY):
            return None

        entity_name = self._first_name(
            declared.markers_of(EnumMarkerKind.ENTITY_NAME), declared, diagnostics
        )
        channel_name = self._first_name(
            declared.markers_of(*_CHANNEL_MARKERS), declared, diagnostics
        )
        if entity_name is None and channel_name is None:
            return None

        # Only nested classes, records and structs are event group members.
        group = declared.container
        if declared.kind is EnumDeclarationKind.INTERFACE:
            group = None
        return ModelMessageDeclaration(
            identity=declared.name,
            entity_name=entity_name,
            channel_name=channel_name,
            group=group,
        )

    def _collect_consumers(
        self,
        declared: ModelDeclaredType,
        diagnostics: list[ModelDiagnostic],
    ) -> list[ModelConsumerDeclaration]:
        consumer_markers = declared.markers_of(EnumMarkerKind.CONSUMER)
        if not declared.consumes:
            if consumer_markers:
                diagnostics.append(
                    ModelDiagnostic(
                        code=EnumDiagnosticCode.CONSUMER_WITHOUT_MESSAGE,
                        severity=EnumDiagnosticSeverity.WARNING,
                        message="Consumer marker on a type that consumes no message type",
                        subject=declared.name,
                    )
                )
            return []

        channel_name: str | None = None
        endpoint_name: str | None = None
        for marker in consumer_markers:
            try:
                channel_name, endpoint_name = parse_consumer_marker(marker, declared)
            except MalformedMetadataError as e:
                diagnostics.append(_malformed(e, declared))
                continue
            break

        subscription_name: str | None = None
        for marker in declared.markers_of(*_SUBSCRIPTION_MARKERS):
            try:
                subscription_name = parse_subscription_marker(marker, declared)
            except MalformedMetadataError as e:
                diagnostics.append(_malformed(e, declared))
                continue
            if subscription_name is not None:
                break

        # A type consuming the same message type twice still binds once.
        message_types: list[str] = []
        for message_type in declared.consumes:
            if not message_type:
                diagnostics.append(
                    ModelDiagnostic(
                        code=EnumDiagnosticCode.MALFORMED_METADATA,
                        severity=EnumDiagnosticSeverity.WARNING,
                        message="Consumed message type identity is blank; edge skipped",
                        subject=declared.name,
                    )
                )
            elif message_type not in message_types:
                message_types.append(message_type)

        return [
            ModelConsumerDeclaration(
                identity=declared.name,
                message_type=message_type,
                channel_name=channel_name,
                endpoint_name=endpoint_name,
                subscription_name=subscription_name,
            )
            for message_type in message_types
        ]

    def _first_name(
        self,
        markers: tuple[ModelMarker, ...],
        declared: ModelDeclaredType,
        diagnostics: list[ModelDiagnostic],
    ) -> str | None:
        for marker in markers:
            try:
                return parse_name_marker(marker, declared)
            except MalformedMetadataError as e:
                diagnostics.append(_malformed(e, declared))
        return None


def _malformed(error: MalformedMetadataError, declared: ModelDeclaredType) -> ModelDiagnostic:
    return ModelDiagnostic.from_error(
        EnumDiagnosticCode.MALFORMED_METADATA,
        EnumDiagnosticSeverity.WARNING,
        error,
        subject=declared.name,
    )


def collect(graph: ModelDeclarationGraph) -> ModelCollectionResult:
    """Collect declarations with a default collector."""
    return DeclarationCollector().collect(graph)


__all__: list[str] = [
    "DeclarationCollector",
    "collect",
    "parse_consumer_marker",
    "parse_name_marker",
    "parse_subscription_marker",
]
