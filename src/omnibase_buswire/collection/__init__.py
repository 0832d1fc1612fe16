# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Declaration collection from the declaration graph."""

from omnibase_buswire.collection.declaration_collector import (
    DeclarationCollector,
    collect,
    parse_consumer_marker,
    parse_name_marker,
    parse_subscription_marker,
)

__all__: list[str] = [
    "DeclarationCollector",
    "collect",
    "parse_consumer_marker",
    "parse_name_marker",
    "parse_subscription_marker",
]
