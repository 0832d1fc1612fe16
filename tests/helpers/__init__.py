# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Shared test helpers."""
