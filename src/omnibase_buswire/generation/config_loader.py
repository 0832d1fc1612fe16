# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Generator configuration loader.

Builds a ``ModelGeneratorConfig`` from an optional YAML file, then applies
environment overrides on top.

Environment Variables:
    BUSWIRE_SERVICE_NAME: Service name for default endpoint names.
    BUSWIRE_BACKENDS: Comma-separated backend names
        (``topic-subscription``, ``exchange-queue``).
    BUSWIRE_AMBIGUITY_POLICY: ``first_match`` or ``strict``.

Precedence (highest first): explicit CLI options (applied by the caller),
environment variables, config file, model defaults.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from omnibase_buswire.errors import GeneratorConfigurationError, ModelBuswireErrorContext
from omnibase_buswire.models import ModelGeneratorConfig

logger = logging.getLogger(__name__)

ENV_SERVICE_NAME: str = "BUSWIRE_SERVICE_NAME"
ENV_BACKENDS: str = "BUSWIRE_BACKENDS"
ENV_AMBIGUITY_POLICY: str = "BUSWIRE_AMBIGUITY_POLICY"

_ENV_FIELDS: dict[str, str] = {
    ENV_SERVICE_NAME: "service_name",
    ENV_BACKENDS: "backends",
    ENV_AMBIGUITY_POLICY: "ambiguity_policy",
}


def _read_config_file(config_path: Path, context: ModelBuswireErrorContext) -> dict[str, object]:
    if not config_path.exists():
        raise GeneratorConfigurationError(
            f"Config file not found: {config_path}", context=context
        )
    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise GeneratorConfigurationError(
            f"Failed to parse YAML in config {config_path}: {e}", context=context
        ) from e
    except OSError as e:
        raise GeneratorConfigurationError(
            f"Failed to read config file {config_path}: {e}", context=context
        ) from e

    if data is None:
        logger.debug("Empty config file: %s", config_path)
        return {}
    if not isinstance(data, dict):
        raise GeneratorConfigurationError(
            f"Config must be a mapping, got {type(data).__name__}", context=context
        )
    return data


def load_generator_config(
    config_path: Path | None = None,
    overrides: dict[str, object] | None = None,
) -> ModelGeneratorConfig:
    """Load the generator configuration.

    Args:
        config_path: Optional YAML config file.
        overrides: Values that win over file and environment, e.g. CLI
            options. ``None`` values are ignored.

    Returns:
        The validated configuration.

    Raises:
        GeneratorConfigurationError: If the file cannot be read or the
            merged values are invalid.
    """
    context = ModelBuswireErrorContext.with_correlation(
        operation="load_generator_config",
        target_name=str(config_path) if config_path else None,
    )
    values: dict[str, object] = {}
    if config_path is not None:
        values.update(_read_config_file(Path(config_path), context))

    for env_name, field_name in _ENV_FIELDS.items():
        env_value = os.environ.get(env_name)
        if env_value:
            logger.debug("Config %s overridden by %s", field_name, env_name)
            values[field_name] = env_value

    if overrides:
        values.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return ModelGeneratorConfig.model_validate(values)
    except ValidationError as e:
        raise GeneratorConfigurationError(
            f"Invalid generator configuration: {e.error_count()} validation error(s)",
            context=context,
            errors=str(e),
        ) from e


__all__: list[str] = [
    "ENV_AMBIGUITY_POLICY",
    "ENV_BACKENDS",
    "ENV_SERVICE_NAME",
    "load_generator_config",
]
