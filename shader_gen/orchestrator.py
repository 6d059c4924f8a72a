"""
Incremental build driver.

``run`` scans the directory, compiles every stale source on its own thread,
and only after all of them succeed removes orphaned wrappers and refreshes
the manifest. A single failing source leaves the manifest and orphans alone.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
import logging
import os
from pathlib import Path
import shutil
import tempfile
from typing import List, Sequence, Tuple
import warnings

from .config import BuildConfig
from .errors import DependencyMissing, OrphanDeletionError, ShaderGenError
from .manifest import write_manifest
from .scanner import ScanResult, scan
from .worker import WorkerResult, compile_source

logger = logging.getLogger(__name__)

TEMP_PREFIX = "shader-gen-"


@dataclass
class RunOutcome:
    scan: ScanResult
    results: Tuple[WorkerResult, ...] = ()
    deleted: Tuple[str, ...] = ()
    deletion_errors: Tuple[OrphanDeletionError, ...] = ()
    manifest_written: bool = False
    skipped: bool = False

    @property
    def failures(self) -> Tuple[WorkerResult, ...]:
        return tuple(r for r in self.results if not r.ok)

    @property
    def changed(self) -> bool:
        return any(r.changed for r in self.results)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def exit_status(self) -> int:
        return 0 if self.ok else 1


def compile_all(config: BuildConfig, filenames: Sequence[str], temp_dir: Path) -> Tuple[WorkerResult, ...]:
    """One thread per source; results come back in submission order."""
    if not filenames:
        return ()
    with ThreadPoolExecutor(max_workers=len(filenames), thread_name_prefix="shader-gen") as pool:
        futures = [pool.submit(compile_source, config, name, temp_dir) for name in filenames]
        return tuple(f.result() for f in futures)


def delete_orphans(config: BuildConfig, filenames: Sequence[str]) -> Tuple[Tuple[str, ...], Tuple[OrphanDeletionError, ...]]:
    deleted: List[str] = []
    errors: List[OrphanDeletionError] = []
    for name in filenames:
        try:
            os.remove(config.directory / name)
        except FileNotFoundError:
            deleted.append(name)
        except OSError as exc:
            err = OrphanDeletionError(name, exc)
            logger.warning("%s", err)
            warnings.warn(str(err), RuntimeWarning, stacklevel=2)
            errors.append(err)
        else:
            logger.info("removed orphan %s", name)
            deleted.append(name)
    return tuple(deleted), tuple(errors)


def run(config: BuildConfig) -> RunOutcome:
    config.validate()
    result = scan(config)

    if result.up_to_date:
        logger.info("No changes")
        return RunOutcome(scan=result, skipped=True)

    if shutil.which(config.compiler) is None:
        raise DependencyMissing(f"Cannot find GLSL compiler {config.compiler}")
    with tempfile.TemporaryDirectory(prefix=TEMP_PREFIX) as temp_dir:
        results = compile_all(config, result.to_generate, Path(temp_dir))

    outcome = RunOutcome(scan=result, results=results)
    if outcome.failures:
        for failed in outcome.failures:
            logger.error("error in file %s", failed.error)
        logger.error("errors in %d files", len(outcome.failures))
        return outcome

    outcome.deleted, outcome.deletion_errors = delete_orphans(config, result.to_delete)

    if needs_manifest(result, outcome.changed, outcome.deleted):
        write_manifest(config, result.all_sources)
        outcome.manifest_written = True
    return outcome


def needs_manifest(result: ScanResult, changed: bool, deleted: Sequence[str] = ()) -> bool:
    # An empty directory that never had shaders gets no manifest at all.
    if not result.all_sources and not result.manifest_present and not deleted:
        return False
    return changed or not result.manifest_present or bool(deleted)


def build(config: BuildConfig) -> int:
    """Run a build and map its outcome to a process exit status."""
    try:
        return run(config).exit_status
    except ShaderGenError as exc:
        logger.error("%s", exc)
        return 1
