# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Bus Wiring Error Context Configuration Model.

This module defines the configuration model for bus wiring error context,
bundling the common structured fields so error constructors stay small
while remaining strongly typed.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelBuswireErrorContext(BaseModel):
    """Configuration model for bus wiring error context.

    Attributes:
        operation: Operation being performed (collect, resolve, load_graph, ...)
        target_name: Declaration identity or file the error is about
        correlation_id: Correlation ID tying an error to one generation run

    Example:
        >>> context = ModelBuswireErrorContext(
        ...     operation="resolve",
        ...     target_name="Sample.Consumers.OrderConsumer",
        ... )
        >>> raise UnresolvableConsumerError("No channel name", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Operation being performed (collect, resolve, load_graph, ...)",
    )
    target_name: str | None = Field(
        default=None,
        description="Declaration identity or file the error is about",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID tying an error to one generation run",
    )

    @classmethod
    def with_correlation(
        cls,
        *,
        correlation_id: UUID | None = None,
        operation: str | None = None,
        target_name: str | None = None,
    ) -> ModelBuswireErrorContext:
        """Build a context, generating a correlation ID when none is given."""
        return cls(
            operation=operation,
            target_name=target_name,
            correlation_id=correlation_id or uuid4(),
        )


__all__ = ["ModelBuswireErrorContext"]
