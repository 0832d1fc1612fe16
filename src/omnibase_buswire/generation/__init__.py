# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Generation pipeline, loaders and output helpers.

Exports:
    BindingGenerator: collect -> resolve -> emit pipeline
    ArtifactWriter: Writes generated artifacts to disk
    load_declaration_graph: YAML declaration graph loader
    load_generator_config: YAML + environment config loader
    report_diagnostics: Logs diagnostics at their severity level
"""

from omnibase_buswire.generation.binding_generator import BindingGenerator, generate
from omnibase_buswire.generation.config_loader import (
    ENV_AMBIGUITY_POLICY,
    ENV_BACKENDS,
    ENV_SERVICE_NAME,
    load_generator_config,
)
from omnibase_buswire.generation.graph_loader import load_declaration_graph
from omnibase_buswire.generation.util_artifact_writer import ArtifactWriter
from omnibase_buswire.generation.util_diagnostic_reporter import report_diagnostics

__all__: list[str] = [
    "ENV_AMBIGUITY_POLICY",
    "ENV_BACKENDS",
    "ENV_SERVICE_NAME",
    "ArtifactWriter",
    "BindingGenerator",
    "generate",
    "load_declaration_graph",
    "load_generator_config",
    "report_diagnostics",
]
