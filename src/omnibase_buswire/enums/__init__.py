# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Bus Wiring Enumerations Module.

Exports:
    EnumAmbiguityPolicy: Tie-break policy for ambiguous structural matches
    EnumBackendKind: Messaging backend kind (TOPIC_SUBSCRIPTION, EXCHANGE_QUEUE)
    EnumDeclarationKind: Kind of a declared type (CLASS, RECORD, STRUCT, INTERFACE)
    EnumDiagnosticCode: Stable diagnostic codes
    EnumDiagnosticSeverity: Diagnostic severity (INFO, WARNING, ERROR)
    EnumMarkerKind: Recognized metadata markers
    EnumResolutionTier: Binding resolution tier (EXPLICIT, STRUCTURAL, INFERRED)
"""

from omnibase_buswire.enums.enum_ambiguity_policy import EnumAmbiguityPolicy
from omnibase_buswire.enums.enum_backend_kind import EnumBackendKind
from omnibase_buswire.enums.enum_declaration_kind import EnumDeclarationKind
from omnibase_buswire.enums.enum_diagnostic_code import EnumDiagnosticCode
from omnibase_buswire.enums.enum_diagnostic_severity import EnumDiagnosticSeverity
from omnibase_buswire.enums.enum_marker_kind import EnumMarkerKind
from omnibase_buswire.enums.enum_resolution_tier import EnumResolutionTier

__all__: list[str] = [
    "EnumAmbiguityPolicy",
    "EnumBackendKind",
    "EnumDeclarationKind",
    "EnumDiagnosticCode",
    "EnumDiagnosticSeverity",
    "EnumMarkerKind",
    "EnumResolutionTier",
]
