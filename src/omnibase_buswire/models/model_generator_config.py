# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Generator configuration model.

Configuration Format:
    ```yaml
    service_name: account-service
    backends:
      - topic-subscription
      - exchange-queue
    ambiguity_policy: first_match
    emit_channel_registration: true
    emit_consumer_registration: true
    ```

All keys are optional. See ``generation.config_loader`` for file loading and
environment overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from omnibase_buswire.enums import EnumAmbiguityPolicy, EnumBackendKind

DEFAULT_SERVICE_NAME: str = "service"


class ModelGeneratorConfig(BaseModel):
    """Configuration of one generation run.

    Attributes:
        service_name: Service name used to build default endpoint names.
            None defers to the graph's ``ServiceName`` marker, then to
            ``DEFAULT_SERVICE_NAME``.
        backends: Backends to emit endpoint wiring for, in output order.
        ambiguity_policy: Tie-break policy for ambiguous structural matches.
        emit_channel_registration: Also emit the channel registration module.
        emit_consumer_registration: Also emit the consumer registration module.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    service_name: str | None = Field(
        default=None,
        description="Service name for default endpoint names.",
    )
    backends: tuple[EnumBackendKind, ...] = Field(
        default=(EnumBackendKind.TOPIC_SUBSCRIPTION, EnumBackendKind.EXCHANGE_QUEUE),
        description="Backends to emit endpoint wiring for.",
    )
    ambiguity_policy: EnumAmbiguityPolicy = Field(
        default=EnumAmbiguityPolicy.FIRST_MATCH,
        description="Tie-break policy for ambiguous structural matches.",
    )
    emit_channel_registration: bool = Field(default=True)
    emit_consumer_registration: bool = Field(default=True)

    @field_validator("service_name")
    @classmethod
    def _strip_service_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped = value.strip()
        if not stripped:
            raise ValueError("service_name cannot be blank")
        return stripped

    @field_validator("backends", mode="before")
    @classmethod
    def _parse_backends(cls, value: object) -> object:
        if isinstance(value, str):
            value = [item for item in value.split(",") if item.strip()]
        if isinstance(value, (list, tuple)):
            parsed: list[EnumBackendKind] = []
            for item in value:
                kind = (
                    item
                    if isinstance(item, EnumBackendKind)
                    else EnumBackendKind.from_cli_name(str(item))
                )
                if kind not in parsed:
                    parsed.append(kind)
            if not parsed:
                raise ValueError("at least one backend is required")
            return tuple(parsed)
        return value

    def effective_service_name(self, graph_service_name: str | None = None) -> str:
        """Service name after applying the fallback chain."""
        return self.service_name or graph_service_name or DEFAULT_SERVICE_NAME


__all__ = ["DEFAULT_SERVICE_NAME", "ModelGeneratorConfig"]
