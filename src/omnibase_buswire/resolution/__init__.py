# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Binding resolution.

Exports:
    BindingResolver: Three-tier consumer-to-channel resolver
    StructuralMatcher: Event group member lookup used by the structural tier
    resolve: Functional shortcut for BindingResolver
    default_endpoint_name: ``"{service_name}-subscription"``
    infer_channel_name: Name-inference fallback
"""

from omnibase_buswire.resolution.binding_resolver import BindingResolver, resolve
from omnibase_buswire.resolution.structural_matcher import StructuralMatcher
from omnibase_buswire.resolution.util_channel_naming import (
    default_endpoint_name,
    infer_channel_name,
)

__all__: list[str] = [
    "BindingResolver",
    "StructuralMatcher",
    "default_endpoint_name",
    "infer_channel_name",
    "resolve",
]
