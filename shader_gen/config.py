from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import sys
from typing import Optional, Tuple

from .errors import ConfigurationError


def default_compiler() -> str:
    if sys.platform.startswith("win"):
        return "glslangValidator.exe"
    return "glslangValidator"


@dataclass(frozen=True)
class BuildConfig:
    """Everything one build needs; passed explicitly to the scanner and orchestrator."""

    directory: Path = Path(".")
    package: str = ""
    compiler: str = field(default_factory=default_compiler)
    compiler_args: Tuple[str, ...] = ("-V",)
    force: bool = False
    verbose: bool = False
    timeout: Optional[float] = None  # seconds per compiler call, None = wait forever

    def __post_init__(self) -> None:
        object.__setattr__(self, "directory", Path(self.directory))
        object.__setattr__(self, "compiler_args", tuple(self.compiler_args))

    def validate(self) -> None:
        if not self.package:
            raise ConfigurationError("No package name specified")
        if not self.package.isidentifier():
            raise ConfigurationError(f"Package name {self.package!r} is not a valid identifier")
        if not self.directory.exists():
            raise ConfigurationError(f"Directory {self.directory} does not exist")
        if not self.directory.is_dir():
            raise ConfigurationError(f"{self.directory} is not a directory")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")
