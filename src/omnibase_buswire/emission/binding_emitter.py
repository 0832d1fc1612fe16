# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Binding emitter.

Renders resolved bindings into importable Python modules with jinja2
templates. Emission is a pure function of its input: bindings and messages
are sorted before rendering and the output carries no timestamps, so the
same bindings always produce byte-identical source.

Both backends share ``endpoints.py.j2`` and differ only in the
``ModelBackendVocabulary`` passed to it. An empty binding list renders a
module whose configuration function does nothing.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from uuid import UUID

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from omnibase_buswire.emission.model_backend_vocabulary import (
    CHANNEL_REGISTRATION_FILE_NAME,
    CONSUMER_REGISTRATION_FILE_NAME,
    vocabulary_for,
)
from omnibase_buswire.enums import EnumBackendKind
from omnibase_buswire.errors import GeneratorConfigurationError, ModelBuswireErrorContext
from omnibase_buswire.models import (
    ModelBinding,
    ModelGeneratedArtifact,
    ModelMessageDeclaration,
)

DEFAULT_TEMPLATES_DIR: Path = Path(__file__).parent / "templates"

_ENDPOINTS_TEMPLATE = "endpoints.py.j2"
_CHANNEL_REGISTRATION_TEMPLATE = "channel_registration.py.j2"
_CONSUMER_REGISTRATION_TEMPLATE = "consumer_registration.py.j2"


def _create_environment(templates_dir: Path) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    # Python string literals for generated source
    env.filters["repr"] = lambda value: repr(str(value))
    return env


class BindingEmitter:
    """Renders bindings into generated Python source.

    Args:
        templates_dir: Template directory. Defaults to the packaged templates.

    Example:
        >>> emitter = BindingEmitter()
        >>> source = emitter.emit(result.bindings, EnumBackendKind.EXCHANGE_QUEUE)
        >>> "cfg.receive_endpoint(" in source
        True
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        self._templates_dir = Path(templates_dir) if templates_dir else DEFAULT_TEMPLATES_DIR
        self._env = _create_environment(self._templates_dir)

    def emit(
        self,
        bindings: Iterable[ModelBinding],
        backend_kind: EnumBackendKind,
        *,
        correlation_id: UUID | None = None,
    ) -> str:
        """Render the endpoint wiring module of one backend.

        Args:
            bindings: Resolved bindings.
            backend_kind: Backend to render for.
            correlation_id: Generation run carried by rendering errors.

        Returns:
            Python source text.
        """
        ordered = sorted(bindings, key=lambda binding: binding.sort_key)
        return self._render(
            _ENDPOINTS_TEMPLATE,
            correlation_id,
            vocabulary=vocabulary_for(backend_kind),
            bindings=ordered,
        )

    def emit_channel_registration(
        self,
        messages: Iterable[ModelMessageDeclaration],
        *,
        correlation_id: UUID | None = None,
    ) -> str:
        """Render the module assigning each message type its channel name."""
        ordered = sorted(messages, key=lambda message: message.identity)
        return self._render(
            _CHANNEL_REGISTRATION_TEMPLATE, correlation_id, messages=ordered
        )

    def emit_consumer_registration(
        self,
        bindings: Iterable[ModelBinding],
        *,
        correlation_id: UUID | None = None,
    ) -> str:
        """Render the module registering each distinct bound consumer once."""
        consumers = sorted({binding.consumer_identity for binding in bindings})
        return self._render(
            _CONSUMER_REGISTRATION_TEMPLATE, correlation_id, consumers=consumers
        )

    def endpoint_artifact(
        self,
        bindings: Iterable[ModelBinding],
        backend_kind: EnumBackendKind,
        *,
        correlation_id: UUID | None = None,
    ) -> ModelGeneratedArtifact:
        return ModelGeneratedArtifact(
            file_name=vocabulary_for(backend_kind).file_name,
            backend_kind=backend_kind,
            source=self.emit(bindings, backend_kind, correlation_id=correlation_id),
        )

    def channel_registration_artifact(
        self,
        messages: Iterable[ModelMessageDeclaration],
        *,
        correlation_id: UUID | None = None,
    ) -> ModelGeneratedArtifact:
        return ModelGeneratedArtifact(
            file_name=CHANNEL_REGISTRATION_FILE_NAME,
            source=self.emit_channel_registration(
                messages, correlation_id=correlation_id
            ),
        )

    def consumer_registration_artifact(
        self,
        bindings: Iterable[ModelBinding],
        *,
        correlation_id: UUID | None = None,
    ) -> ModelGeneratedArtifact:
        return ModelGeneratedArtifact(
            file_name=CONSUMER_REGISTRATION_FILE_NAME,
            source=self.emit_consumer_registration(
                bindings, correlation_id=correlation_id
            ),
        )

    def _render(
        self,
        template_name: str,
        correlation_id: UUID | None,
        **variables: object,
    ) -> str:
        try:
            template = self._env.get_template(template_name)
            return template.render(**variables)
        except TemplateError as e:
            raise GeneratorConfigurationError(
                f"Failed to render template {template_name}: {e}",
                context=ModelBuswireErrorContext(
                    operation="emit",
                    target_name=template_name,
                    correlation_id=correlation_id,
                ),
                templates_dir=str(self._templates_dir),
            ) from e


def emit(bindings: Iterable[ModelBinding], backend_kind: EnumBackendKind) -> str:
    """Render endpoint wiring with the packaged templates."""
    return BindingEmitter().emit(bindings, backend_kind)


__all__: list[str] = ["DEFAULT_TEMPLATES_DIR", "BindingEmitter", "emit"]
