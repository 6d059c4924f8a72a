from __future__ import annotations

from typing import Optional


class ShaderGenError(Exception):
    """Base class for every error raised by shader_gen."""


class ConfigurationError(ShaderGenError):
    pass


class DependencyMissing(ShaderGenError):
    pass


class ScanError(ShaderGenError):
    pass


class CompilerFailure(ShaderGenError):
    """A single source failed to compile; siblings are unaffected."""

    def __init__(self, filename: str, diagnostics: str, returncode: Optional[int] = None):
        self.filename = filename
        self.diagnostics = diagnostics
        self.returncode = returncode
        detail = diagnostics.strip() or "no diagnostics"
        if returncode is None:
            super().__init__(f"{filename}: {detail}")
        else:
            super().__init__(f"{filename}: compiler exited with status {returncode}: {detail}")


class OrphanDeletionError(ShaderGenError):
    def __init__(self, filename: str, cause: OSError):
        self.filename = filename
        self.cause = cause
        super().__init__(f"cannot delete {filename}: {cause}")


class ManifestWriteError(ShaderGenError):
    pass
