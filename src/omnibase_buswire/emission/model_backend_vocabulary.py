# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Per-backend wording of the generated endpoint wiring.

The two backends render the same binding model. Everything that differs
between them (file name, terms, configurator method) lives in one
``ModelBackendVocabulary`` per backend kind, so the template stays shared.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from omnibase_buswire.enums import EnumBackendKind

CHANNEL_REGISTRATION_FILE_NAME: str = "generated_channel_registration.py"
CONSUMER_REGISTRATION_FILE_NAME: str = "generated_consumer_registration.py"


@dataclass(frozen=True)
class ModelBackendVocabulary:
    """Backend-specific labels for one backend kind.

    Attributes:
        backend_kind: Backend these labels belong to.
        file_name: Fixed logical file name of the endpoint artifact.
        display_name: Human-readable backend description.
        channel_term: Word for a channel (``topic``/``exchange``).
        endpoint_term: Word for an endpoint (``subscription``/``queue``).
        configurator_method: Bus configurator method the wiring calls.
    """

    backend_kind: EnumBackendKind
    file_name: str
    display_name: str
    channel_term: str
    endpoint_term: str
    configurator_method: str


BACKEND_VOCABULARIES: Mapping[EnumBackendKind, ModelBackendVocabulary] = MappingProxyType(
    {
        EnumBackendKind.TOPIC_SUBSCRIPTION: ModelBackendVocabulary(
            backend_kind=EnumBackendKind.TOPIC_SUBSCRIPTION,
            file_name="generated_subscription_endpoints.py",
            display_name="topic/subscription",
            channel_term="topic",
            endpoint_term="subscription",
            configurator_method="subscription_endpoint",
        ),
        EnumBackendKind.EXCHANGE_QUEUE: ModelBackendVocabulary(
            backend_kind=EnumBackendKind.EXCHANGE_QUEUE,
            file_name="generated_queue_endpoints.py",
            display_name="exchange/queue",
            channel_term="exchange",
            endpoint_term="queue",
            configurator_method="receive_endpoint",
        ),
    }
)


def vocabulary_for(backend_kind: EnumBackendKind) -> ModelBackendVocabulary:
    """Return the vocabulary of a backend kind."""
    return BACKEND_VOCABULARIES[backend_kind]


__all__: list[str] = [
    "BACKEND_VOCABULARIES",
    "CHANNEL_REGISTRATION_FILE_NAME",
    "CONSUMER_REGISTRATION_FILE_NAME",
    "ModelBackendVocabulary",
    "vocabulary_for",
]
