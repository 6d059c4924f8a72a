"""
Per-source compilation.

A worker compiles one shader into the run's temp directory, loads the SPIR-V
words and (re)writes ``<source>.gen.py`` next to the source. Failures are
returned in the result rather than raised so sibling workers keep going.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
import subprocess
from typing import List, Optional

from .codegen import read_existing, render_wrapper, write_atomic
from .compiled import CompiledModule
from .config import BuildConfig
from .errors import CompilerFailure
from .identifiers import derive_identifier
from .stages import generated_name_for, stage_for_filename

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkerResult:
    filename: str
    changed: bool = False
    error: Optional[CompilerFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def compiler_command(config: BuildConfig, source: Path, artifact: Path) -> List[str]:
    return [config.compiler, *config.compiler_args, str(source), "-o", str(artifact)]


def _diagnostics(proc: subprocess.CompletedProcess) -> str:
    # Compilers may echo source text in any encoding.
    texts = [raw.decode("utf-8", errors="replace").strip() for raw in (proc.stderr, proc.stdout) if raw]
    parts = [text for text in texts if text]
    return "\n".join(parts)


def run_compiler(config: BuildConfig, filename: str, temp_dir: Path) -> Path:
    """Invoke the external compiler; return the artifact path or raise CompilerFailure."""
    source = config.directory / filename
    artifact = Path(temp_dir) / f"{filename}.spv"
    cmd = compiler_command(config, source, artifact)
    logger.debug("running %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, capture_output=True, timeout=config.timeout, check=False)
    except subprocess.TimeoutExpired:
        raise CompilerFailure(filename, f"compiler timed out after {config.timeout}s") from None
    except OSError as exc:
        raise CompilerFailure(filename, f"cannot run {config.compiler}: {exc}") from exc
    if proc.returncode != 0:
        raise CompilerFailure(filename, _diagnostics(proc), returncode=proc.returncode)
    if not artifact.is_file():
        raise CompilerFailure(filename, f"compiler reported success but wrote no output to {artifact}")
    return artifact


def load_module(artifact: Path, filename: str) -> CompiledModule:
    stage = stage_for_filename(filename)
    if stage is None:
        raise CompilerFailure(filename, "not a recognised shader source")
    try:
        return CompiledModule.from_file(artifact, filename, derive_identifier(filename), stage)
    except (OSError, ValueError) as exc:
        raise CompilerFailure(filename, f"unusable compiler output: {exc}") from exc


def emit_wrapper(config: BuildConfig, module: CompiledModule) -> bool:
    """Write the wrapper unless identical content is already on disk. Returns True if written."""
    target = config.directory / generated_name_for(module.filename)
    text = render_wrapper(module, config.package)
    if read_existing(target) == text:
        # Bump mtime so the source no longer looks newer on the next scan.
        os.utime(target)
        return False
    write_atomic(target, text)
    return True


def compile_source(config: BuildConfig, filename: str, temp_dir: Path) -> WorkerResult:
    try:
        artifact = run_compiler(config, filename, temp_dir)
        module = load_module(artifact, filename)
        try:
            changed = emit_wrapper(config, module)
        except OSError as exc:
            raise CompilerFailure(filename, f"cannot write {generated_name_for(filename)}: {exc}") from exc
    except CompilerFailure as failure:
        return WorkerResult(filename=filename, error=failure)

    if changed:
        logger.info("generated %s (%d words)", generated_name_for(filename), module.word_count)
    else:
        logger.info("%s unchanged", generated_name_for(filename))
    return WorkerResult(filename=filename, changed=changed)
