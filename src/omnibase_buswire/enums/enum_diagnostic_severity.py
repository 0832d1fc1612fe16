# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Diagnostic severity enumeration."""

import logging
from enum import Enum, unique


@unique
class EnumDiagnosticSeverity(str, Enum):
    """Severity of a generation diagnostic.

    Values:
        INFO: Informational, nothing is wrong
        WARNING: A declaration was skipped or a tie was broken
        ERROR: A consumer could not be bound
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value

    @property
    def log_level(self) -> int:
        """Standard library logging level for this severity."""
        return _LOG_LEVELS[self]


_LOG_LEVELS: dict[EnumDiagnosticSeverity, int] = {
    EnumDiagnosticSeverity.INFO: logging.INFO,
    EnumDiagnosticSeverity.WARNING: logging.WARNING,
    EnumDiagnosticSeverity.ERROR: logging.ERROR,
}


__all__ = ["EnumDiagnosticSeverity"]
