# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Writes generated artifacts to an output directory.

Each artifact has a fixed file name, so regeneration replaces the previous
file in place. A file whose content is already identical is left untouched
to keep modification times stable for build tools.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from omnibase_buswire.errors import GeneratorConfigurationError, ModelBuswireErrorContext
from omnibase_buswire.models import ModelGeneratedArtifact

logger = logging.getLogger(__name__)


class ArtifactWriter:
    """Writes artifacts below one output directory.

    Args:
        output_dir: Target directory, created on first write.
        dry_run: If True, log what would be written without touching disk.
    """

    def __init__(self, output_dir: Path, dry_run: bool = False) -> None:
        self.output_dir = Path(output_dir)
        self.dry_run = dry_run

    def write(self, artifact: ModelGeneratedArtifact) -> Path | None:
        """Write one artifact.

        Returns:
            Path of the written file, or None when nothing was written
            (dry run, or unchanged content).

        Raises:
            GeneratorConfigurationError: If the file cannot be written.
        """
        target = self.output_dir / artifact.file_name

        if self.dry_run:
            logger.info("[DRY RUN] Would write: %s", target)
            return None

        try:
            if target.exists() and target.read_text(encoding="utf-8") == artifact.source:
                logger.debug("Unchanged: %s", target)
                return None
            self.output_dir.mkdir(parents=True, exist_ok=True)
            target.write_text(artifact.source, encoding="utf-8")
        except OSError as e:
            raise GeneratorConfigurationError(
                f"Failed to write artifact {target}: {e}",
                context=ModelBuswireErrorContext(
                    operation="write_artifact", target_name=str(target)
                ),
            ) from e

        logger.info("Wrote: %s", target)
        return target

    def write_all(self, artifacts: Iterable[ModelGeneratedArtifact]) -> list[Path]:
        """Write every artifact, returning the paths actually written."""
        written: list[Path] = []
        for artifact in artifacts:
            path = self.write(artifact)
            if path is not None:
                written.append(path)
        return written


__all__: list[str] = ["ArtifactWriter"]
