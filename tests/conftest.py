# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_buswire tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from omnibase_buswire.generation.config_loader import (
    ENV_AMBIGUITY_POLICY,
    ENV_BACKENDS,
    ENV_SERVICE_NAME,
)
from omnibase_buswire.models import ModelDeclarationGraph
from tests.helpers.graph_builders import (
    SAMPLE_GRAPH_PATH,
    build_ambiguous_graph,
    build_sample_graph,
)


@pytest.fixture(autouse=True)
def _clear_buswire_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment overrides out of every test."""
    for name in (ENV_SERVICE_NAME, ENV_BACKENDS, ENV_AMBIGUITY_POLICY):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_graph() -> ModelDeclarationGraph:
    """Sample declaration graph with explicit, structural and inferred consumers."""
    return build_sample_graph()


@pytest.fixture
def sample_graph_path() -> Path:
    """Path of the YAML rendition of the sample graph."""
    return SAMPLE_GRAPH_PATH


@pytest.fixture
def ambiguous_graph() -> ModelDeclarationGraph:
    """Graph whose simple-name consumer matches two event group members."""
    return build_ambiguous_graph()


@pytest.fixture
def empty_graph() -> ModelDeclarationGraph:
    """Graph without any declarations."""
    return ModelDeclarationGraph()
