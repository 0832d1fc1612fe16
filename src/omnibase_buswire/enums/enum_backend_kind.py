# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""
Backend Kind Enumeration.

Defines the messaging backends that generated endpoint wiring can target:
- TOPIC_SUBSCRIPTION: Topic/subscription brokers (e.g. Azure Service Bus)
- EXCHANGE_QUEUE: Exchange/queue brokers (e.g. RabbitMQ)

Both backends render the same binding model; only the wording differs.

Thread Safety:
    All enums in this module are immutable and thread-safe.
"""

from enum import Enum, unique


@unique
class EnumBackendKind(str, Enum):
    """
    Messaging backend kind used to select the emission vocabulary.

    Values:
        TOPIC_SUBSCRIPTION: One binding becomes a subscription on a topic
        EXCHANGE_QUEUE: One binding becomes a queue bound to an exchange

    Example:
        >>> EnumBackendKind.from_cli_name("exchange-queue")
        <EnumBackendKind.EXCHANGE_QUEUE: 'exchange_queue'>
    """

    TOPIC_SUBSCRIPTION = "topic_subscription"
    """Topic/subscription backend (subscription endpoint bound to a topic)."""

    EXCHANGE_QUEUE = "exchange_queue"
    """Exchange/queue backend (queue bound to an exchange)."""

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value

    @property
    def cli_name(self) -> str:
        """Dash-separated name used on the command line."""
        return self.value.replace("_", "-")

    @classmethod
    def from_cli_name(cls, name: str) -> "EnumBackendKind":
        """Look up a backend kind by CLI name or value.

        Args:
            name: ``"topic-subscription"``, ``"exchange_queue"`` and so on.
                Matching is case-insensitive.

        Returns:
            The matching backend kind.

        Raises:
            ValueError: If no backend kind matches.
        """
        normalized = name.strip().lower().replace("-", "_")
        for kind in cls:
            if kind.value == normalized:
                return kind
        valid = ", ".join(kind.cli_name for kind in cls)
        raise ValueError(f"Unknown backend kind '{name}'. Must be one of: {valid}")


__all__ = ["EnumBackendKind"]
