# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""
Marker Kind Enumeration.

Recognized metadata markers on declared types. The host graph reports
markers by their declared name, which may be namespace qualified and may
carry an ``Attribute`` suffix; ``from_marker_name`` normalizes both.

Thread Safety:
    All enums in this module are immutable and thread-safe.
"""

from enum import Enum, unique

_ATTRIBUTE_SUFFIX = "Attribute"


@unique
class EnumMarkerKind(str, Enum):
    """
    Metadata markers understood by the declaration collector.

    Values:
        ENTITY_NAME: Logical channel name of a message type
        CHANNEL: Channel name of a message type (legacy/alternate marker)
        EXCHANGE_NAME: Exchange/queue-backend alias of CHANNEL
        CONSUMER: Explicit (channel, endpoint) pair on a consumer type
        CONSUMER_SUBSCRIPTION: Explicit endpoint override on a consumer type
        QUEUE_NAME: Exchange/queue-backend alias of CONSUMER_SUBSCRIPTION
        SERVICE_NAME: Graph-level service name
        EXCLUDE_FROM_TOPOLOGY: Type never becomes a message declaration

    Example:
        >>> EnumMarkerKind.from_marker_name("Messaging.EntityNameAttribute")
        <EnumMarkerKind.ENTITY_NAME: 'EntityName'>
        >>> EnumMarkerKind.from_marker_name("Obsolete") is None
        True
    """

    ENTITY_NAME = "EntityName"
    CHANNEL = "Channel"
    EXCHANGE_NAME = "ExchangeName"
    CONSUMER = "Consumer"
    CONSUMER_SUBSCRIPTION = "ConsumerSubscription"
    QUEUE_NAME = "QueueName"
    SERVICE_NAME = "ServiceName"
    EXCLUDE_FROM_TOPOLOGY = "ExcludeFromTopology"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value

    @classmethod
    def from_marker_name(cls, name: str) -> "EnumMarkerKind | None":
        """Map a declared marker name to a known marker kind.

        Args:
            name: Marker name as reported by the host graph.

        Returns:
            The marker kind, or None for markers this package ignores.
        """
        simple = name.strip().rsplit(".", 1)[-1]
        if simple.endswith(_ATTRIBUTE_SUFFIX) and simple != _ATTRIBUTE_SUFFIX:
            simple = simple[: -len(_ATTRIBUTE_SUFFIX)]
        for kind in cls:
            if kind.value == simple:
                return kind
        return None


__all__ = ["EnumMarkerKind"]
