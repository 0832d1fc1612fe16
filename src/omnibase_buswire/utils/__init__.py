# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Shared utilities for bus wiring generation."""

from omnibase_buswire.utils.util_type_names import (
    normalize_type_identity,
    simple_type_name,
)

__all__: list[str] = ["normalize_type_identity", "simple_type_name"]
