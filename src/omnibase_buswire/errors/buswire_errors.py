# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Bus Wiring Error Classes.

Error Hierarchy:
    BuswireError (base error)
    ├── MalformedMetadataError
    ├── UnresolvableConsumerError
    ├── AmbiguousStructuralMatchError
    ├── DeclarationGraphLoadError
    └── GeneratorConfigurationError

The first three are raised inside the collector and resolver and are always
converted into diagnostics there; nothing in the engine is fatal. The last
two are raised at the host boundary (graph and configuration loading) and
are reported by the CLI.

All errors:
    - Support proper error chaining with ``raise ... from e``
    - Include structured context for debugging
    - Accept ModelBuswireErrorContext for bundled context parameters
"""

from __future__ import annotations

from uuid import UUID

from omnibase_buswire.errors.model_buswire_error_context import (
    ModelBuswireErrorContext,
)


class BuswireError(Exception):
    """Base error class for bus wiring generation errors.

    Structured Fields (via ModelBuswireErrorContext):
        operation: Operation being performed
        target_name: Declaration identity or file involved
        correlation_id: Generation run correlation ID

    Example:
        >>> context = ModelBuswireErrorContext(operation="collect")
        >>> raise BuswireError("Collection failed", context=context, marker="Consumer")
    """

    def __init__(
        self,
        message: str,
        context: ModelBuswireErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize BuswireError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled error context (operation, target_name, correlation_id)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context

        structured_context: dict[str, object] = dict(extra_context)
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
        self.details = structured_context

    @property
    def correlation_id(self) -> UUID | None:
        """Correlation ID from the bundled context, if any."""
        return self.context.correlation_id if self.context is not None else None

    def __str__(self) -> str:
        if not self.details:
            return self.message
        rendered = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({rendered})"


class MalformedMetadataError(BuswireError):
    """Raised when a marker is present but its arguments are unusable.

    Used for wrong argument counts and empty or null name arguments.
    The collector turns this into a MALFORMED_METADATA diagnostic and skips
    the marker.
    """

    def __init__(
        self,
        message: str,
        marker_name: str | None = None,
        context: ModelBuswireErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        self.marker_name = marker_name
        extra: dict[str, object] = dict(extra_context)
        if marker_name is not None:
            extra["marker"] = marker_name
        super().__init__(message, context=context, **extra)


class UnresolvableConsumerError(BuswireError):
    """Raised when no resolution tier yields a non-empty channel name."""

    def __init__(
        self,
        message: str,
        consumer_identity: str | None = None,
        message_type_identity: str | None = None,
        context: ModelBuswireErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        self.consumer_identity = consumer_identity
        self.message_type_identity = message_type_identity
        extra: dict[str, object] = dict(extra_context)
        if consumer_identity is not None:
            extra["consumer"] = consumer_identity
        if message_type_identity is not None:
            extra["message_type"] = message_type_identity
        super().__init__(message, context=context, **extra)


class AmbiguousStructuralMatchError(BuswireError):
    """Raised when a message type matches several event group members.

    Attributes:
        message_type_identity: The consumed message type.
        candidates: Identities of the equally ranked group members, in
            declaration order.
    """

    def __init__(
        self,
        message: str,
        message_type_identity: str,
        candidates: tuple[str, ...],
        context: ModelBuswireErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        self.message_type_identity = message_type_identity
        self.candidates = candidates
        super().__init__(
            message,
            context=context,
            message_type=message_type_identity,
            candidates=", ".join(candidates),
            **extra_context,
        )


class DeclarationGraphLoadError(BuswireError):
    """Raised when a declaration graph document cannot be read or validated."""


class GeneratorConfigurationError(BuswireError):
    """Raised when generator configuration is invalid.

    Example:
        >>> raise GeneratorConfigurationError(
        ...     "Unknown backend kind 'kafka'",
        ...     context=ModelBuswireErrorContext(operation="load_config"),
        ... )
    """


__all__ = [
    "AmbiguousStructuralMatchError",
    "BuswireError",
    "DeclarationGraphLoadError",
    "GeneratorConfigurationError",
    "MalformedMetadataError",
    "UnresolvableConsumerError",
]
