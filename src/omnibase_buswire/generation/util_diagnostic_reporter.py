# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Diagnostic reporting through standard logging."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from omnibase_buswire.models import ModelDiagnostic

logger = logging.getLogger(__name__)


def report_diagnostics(
    diagnostics: Iterable[ModelDiagnostic],
    logger_override: logging.Logger | None = None,
) -> int:
    """Log each diagnostic at the level matching its severity.

    Returns:
        Number of diagnostics reported.
    """
    _logger = logger_override or logger
    count = 0
    for diagnostic in diagnostics:
        _logger.log(
            diagnostic.severity.log_level,
            "%s",
            diagnostic.render(),
            extra={
                "diagnostic_code": diagnostic.code.value,
                "diagnostic_subject": diagnostic.subject,
            },
        )
        count += 1
    return count


__all__: list[str] = ["report_diagnostics"]
