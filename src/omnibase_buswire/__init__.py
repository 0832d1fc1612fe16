# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""ONEX Bus Wiring - Message bus endpoint wiring generator.

This package turns a declaration graph (message types and consumers with
their routing markers) into the configuration modules that wire every
consumer to a channel and endpoint of a message bus:

- Collection of message and consumer declarations, tolerant of malformed markers
- Three-tier binding resolution: explicit, structural, inferred
- Emission for the topic/subscription and exchange/queue backends
- YAML graph and config loading, diagnostics reporting, ``buswire`` CLI

Key Components:
    - BindingGenerator: collect -> resolve -> emit pipeline
    - BindingResolver: SINGLE SOURCE OF TRUTH for channel and endpoint names
    - BindingEmitter: jinja2 rendering of the generated modules
"""

from omnibase_buswire.collection import DeclarationCollector
from omnibase_buswire.emission import BindingEmitter
from omnibase_buswire.generation import BindingGenerator
from omnibase_buswire.resolution import BindingResolver

__version__: str = "0.1.0"

__all__: list[str] = [
    "BindingEmitter",
    "BindingGenerator",
    "BindingResolver",
    "DeclarationCollector",
    "__version__",
]
