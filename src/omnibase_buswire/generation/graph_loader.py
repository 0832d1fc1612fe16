# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Declaration graph loader.

Reads a declaration graph document (YAML, or JSON which is a YAML subset)
and validates it into a ``ModelDeclarationGraph``.

Architecture:
    graph.yaml -> load_declaration_graph() -> ModelDeclarationGraph
                                                     |
                                                     v
                                              BindingGenerator.generate()

An empty document is a valid empty graph. Everything else that cannot be
turned into a graph raises ``DeclarationGraphLoadError``; the loader never
returns a partial graph.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from omnibase_buswire.errors import DeclarationGraphLoadError, ModelBuswireErrorContext
from omnibase_buswire.models import ModelDeclarationGraph

logger = logging.getLogger(__name__)


def load_declaration_graph(
    graph_path: Path,
    logger_override: logging.Logger | None = None,
) -> ModelDeclarationGraph:
    """Load a declaration graph from a YAML file.

    Args:
        graph_path: Path to the graph document.
        logger_override: Optional logger. If not provided, uses the
            module-level logger.

    Returns:
        The validated declaration graph.

    Raises:
        DeclarationGraphLoadError: If the file is missing, unreadable, not
            valid YAML or does not match the graph schema.

    Example:
        >>> graph = load_declaration_graph(Path("declarations.yaml"))
        >>> graph.service_name
        'account-service'
    """
    _logger = logger_override or logger
    graph_path = Path(graph_path)
    context = ModelBuswireErrorContext.with_correlation(
        operation="load_declaration_graph", target_name=str(graph_path)
    )

    if not graph_path.exists():
        raise DeclarationGraphLoadError(
            f"Declaration graph not found: {graph_path}", context=context
        )

    try:
        with graph_path.open(encoding="utf-8") as f:
            graph_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DeclarationGraphLoadError(
            f"Failed to parse YAML in declaration graph {graph_path}: {e}",
            context=context,
        ) from e
    except OSError as e:
        raise DeclarationGraphLoadError(
            f"Failed to read declaration graph {graph_path}: {e}", context=context
        ) from e

    if graph_data is None:
        _logger.warning("Empty declaration graph: %s", graph_path)
        return ModelDeclarationGraph()

    if not isinstance(graph_data, dict):
        raise DeclarationGraphLoadError(
            f"Declaration graph must be a mapping, got {type(graph_data).__name__}",
            context=context,
        )

    try:
        graph = ModelDeclarationGraph.model_validate(graph_data)
    except ValidationError as e:
        raise DeclarationGraphLoadError(
            f"Invalid declaration graph {graph_path}: {e.error_count()} validation error(s)",
            context=context,
            errors=str(e),
        ) from e

    _logger.debug(
        "Loaded declaration graph with %d type(s) from %s",
        len(graph.types),
        graph_path,
    )
    return graph


__all__: list[str] = ["load_declaration_graph"]
