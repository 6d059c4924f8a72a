from .config import BuildConfig, default_compiler
from .errors import (
    CompilerFailure,
    ConfigurationError,
    DependencyMissing,
    ManifestWriteError,
    OrphanDeletionError,
    ScanError,
    ShaderGenError,
)
from .identifiers import derive_identifier
from .manifest import write_manifest
from .orchestrator import RunOutcome, build, run
from .scanner import ScanResult, scan
from .stages import (
    GENERATED_SUFFIX,
    MANIFEST_FILENAME,
    Stage,
    generated_name_for,
    is_generated,
    is_source,
    source_name_for,
    stage_of,
)
from .worker import WorkerResult, compile_source

__all__ = [
    "BuildConfig",
    "build",
    "compile_source",
    "CompilerFailure",
    "ConfigurationError",
    "default_compiler",
    "DependencyMissing",
    "derive_identifier",
    "GENERATED_SUFFIX",
    "generated_name_for",
    "is_generated",
    "is_source",
    "MANIFEST_FILENAME",
    "ManifestWriteError",
    "OrphanDeletionError",
    "run",
    "RunOutcome",
    "scan",
    "ScanError",
    "ScanResult",
    "ShaderGenError",
    "source_name_for",
    "Stage",
    "stage_of",
    "WorkerResult",
    "write_manifest",
]
