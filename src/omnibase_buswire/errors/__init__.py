# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Bus Wiring Errors Module.

Exports:
    ModelBuswireErrorContext: Configuration model for bundled error context
    BuswireError: Base error class
    MalformedMetadataError: Marker present with unusable arguments
    UnresolvableConsumerError: No tier produced a channel name
    AmbiguousStructuralMatchError: Message type matched several group members
    DeclarationGraphLoadError: Declaration graph document unreadable or invalid
    GeneratorConfigurationError: Generator configuration invalid

Engine errors (malformed metadata, unresolvable consumer, ambiguous match)
never escape the collector or resolver: they are converted to diagnostics.
Loader errors propagate to the caller.

Example::

    from omnibase_buswire.errors import (
        DeclarationGraphLoadError,
        ModelBuswireErrorContext,
    )

    context = ModelBuswireErrorContext.with_correlation(
        operation="load_graph",
        target_name=str(path),
    )
    raise DeclarationGraphLoadError("Graph file not found", context=context)
"""

from omnibase_buswire.errors.buswire_errors import (
    AmbiguousStructuralMatchError,
    BuswireError,
    DeclarationGraphLoadError,
    GeneratorConfigurationError,
    MalformedMetadataError,
    UnresolvableConsumerError,
)
from omnibase_buswire.errors.model_buswire_error_context import (
    ModelBuswireErrorContext,
)

__all__: list[str] = [
    "AmbiguousStructuralMatchError",
    "BuswireError",
    "DeclarationGraphLoadError",
    "GeneratorConfigurationError",
    "MalformedMetadataError",
    "ModelBuswireErrorContext",
    "UnresolvableConsumerError",
]
