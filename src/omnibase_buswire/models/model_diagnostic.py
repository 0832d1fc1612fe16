# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Structured diagnostic produced by the collector and resolver."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_buswire.enums import EnumDiagnosticCode, EnumDiagnosticSeverity
from omnibase_buswire.errors import BuswireError


class ModelDiagnostic(BaseModel):
    """One diagnostic entry.

    The engine returns diagnostics instead of logging them; reporting is
    left to ``report_diagnostics``.

    Attributes:
        code: Stable diagnostic code.
        severity: Diagnostic severity.
        message: Human-readable description.
        subject: Identity of the declaration the diagnostic is about.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    code: EnumDiagnosticCode = Field(..., description="Stable diagnostic code.")
    severity: EnumDiagnosticSeverity = Field(..., description="Diagnostic severity.")
    message: str = Field(..., description="Human-readable description.", min_length=1)
    subject: str | None = Field(
        default=None,
        description="Identity of the declaration the diagnostic is about.",
    )

    @classmethod
    def from_error(
        cls,
        code: EnumDiagnosticCode,
        severity: EnumDiagnosticSeverity,
        error: BuswireError,
        subject: str | None = None,
    ) -> ModelDiagnostic:
        """Build a diagnostic from an engine error."""
        return cls(code=code, severity=severity, message=str(error), subject=subject)

    def render(self) -> str:
        """Single-line rendering used in logs and CLI output."""
        if self.subject:
            return f"[{self.code.value}] {self.subject}: {self.message}"
        return f"[{self.code.value}] {self.message}"


__all__ = ["ModelDiagnostic"]
