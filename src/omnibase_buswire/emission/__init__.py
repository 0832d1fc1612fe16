# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Source emission for resolved bindings.

Exports:
    BindingEmitter: jinja2 renderer for endpoint and registration modules
    ModelBackendVocabulary: Backend-specific wording of the endpoint module
    emit: Functional shortcut for BindingEmitter.emit
"""

from omnibase_buswire.emission.binding_emitter import (
    DEFAULT_TEMPLATES_DIR,
    BindingEmitter,
    emit,
)
from omnibase_buswire.emission.model_backend_vocabulary import (
    BACKEND_VOCABULARIES,
    CHANNEL_REGISTRATION_FILE_NAME,
    CONSUMER_REGISTRATION_FILE_NAME,
    ModelBackendVocabulary,
    vocabulary_for,
)

__all__: list[str] = [
    "BACKEND_VOCABULARIES",
    "CHANNEL_REGISTRATION_FILE_NAME",
    "CONSUMER_REGISTRATION_FILE_NAME",
    "DEFAULT_TEMPLATES_DIR",
    "BindingEmitter",
    "ModelBackendVocabulary",
    "emit",
    "vocabulary_for",
]
