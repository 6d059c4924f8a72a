from __future__ import annotations

import logging
from typing import Sequence

from .codegen import render_manifest, write_atomic
from .config import BuildConfig
from .errors import ManifestWriteError
from .stages import MANIFEST_FILENAME

logger = logging.getLogger(__name__)


def write_manifest(config: BuildConfig, all_sources: Sequence[str]) -> None:
    """Overwrite ``shaders.gen.py`` with one entry per current source."""
    path = config.directory / MANIFEST_FILENAME
    try:
        write_atomic(path, render_manifest(config.package, all_sources))
    except OSError as exc:
        raise ManifestWriteError(f"Cannot write manifest {path}: {exc}") from exc
    logger.info("wrote %s (%d shaders)", MANIFEST_FILENAME, len(all_sources))
