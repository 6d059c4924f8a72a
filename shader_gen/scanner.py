"""
Staleness detection for a shader directory.

Only the top level of the directory is inspected. Each run works out which
sources must be (re)compiled, which generated wrappers lost their source, and
the sorted list of every current source for the manifest.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Dict, Iterable, Optional, Tuple

from .config import BuildConfig
from .errors import ScanError
from .stages import MANIFEST_FILENAME, generated_name_for, is_generated, is_source, source_name_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileEntry:
    """One directory entry; ``mtime_ns`` is None when stat failed."""

    name: str
    mtime_ns: Optional[int]
    is_dir: bool = False


@dataclass(frozen=True)
class ScanResult:
    to_generate: Tuple[str, ...]
    to_delete: Tuple[str, ...]
    all_sources: Tuple[str, ...]
    manifest_present: bool

    @property
    def up_to_date(self) -> bool:
        return not self.to_generate and not self.to_delete and self.manifest_present


def _mtime(files: Dict[str, FileEntry], name: str) -> int:
    mtime = files[name].mtime_ns
    if mtime is None:
        raise ScanError(f"Cannot read modification time of {name}")
    return mtime


def scan_entries(entries: Iterable[FileEntry], force: bool = False) -> ScanResult:
    sources: Dict[str, FileEntry] = {}
    generated: Dict[str, FileEntry] = {}
    manifest_present = False

    for entry in entries:
        if entry.is_dir:
            continue
        if entry.name == MANIFEST_FILENAME:
            manifest_present = True
        elif is_source(entry.name):
            sources[entry.name] = entry
        elif is_generated(entry.name):
            generated[entry.name] = entry

    to_generate = []
    for src in sources:
        gen = generated_name_for(src)
        if force or gen not in generated:
            to_generate.append(src)
        elif _mtime(sources, src) > _mtime(generated, gen):
            to_generate.append(src)

    to_delete = [gen for gen in generated if source_name_for(gen) not in sources]

    return ScanResult(
        to_generate=tuple(sorted(to_generate)),
        to_delete=tuple(sorted(to_delete)),
        all_sources=tuple(sorted(sources)),
        manifest_present=manifest_present,
    )


def _entry_info(entry: os.DirEntry) -> FileEntry:
    try:
        is_dir = entry.is_dir()
    except OSError:
        is_dir = False
    try:
        mtime: Optional[int] = entry.stat().st_mtime_ns
    except OSError as exc:
        logger.debug("stat failed for %s: %s", entry.name, exc)
        mtime = None
    return FileEntry(name=entry.name, mtime_ns=mtime, is_dir=is_dir)


def scan(config: BuildConfig) -> ScanResult:
    directory = config.directory
    try:
        with os.scandir(directory) as it:
            entries = [_entry_info(entry) for entry in it]
    except OSError as exc:
        raise ScanError(f"Cannot read directory contents of {directory}: {exc}") from exc

    result = scan_entries(entries, force=config.force)
    logger.debug(
        "scanned %s: %d sources, %d stale, %d orphaned, manifest %s",
        directory,
        len(result.all_sources),
        len(result.to_generate),
        len(result.to_delete),
        "present" if result.manifest_present else "absent",
    )
    return result
