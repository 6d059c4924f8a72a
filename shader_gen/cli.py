from __future__ import annotations

import argparse
import logging
from pathlib import Path
import shlex
import sys
from typing import Optional, Sequence

from .config import BuildConfig, default_compiler
from .orchestrator import build

LOG_FORMAT = "[shader-gen] %(levelname)s: %(message)s"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="shader-gen",
        description="Compile GLSL shaders in a directory to SPIR-V and emit Python wrapper modules.",
    )
    ap.add_argument("--dir", default=".", help="Path to the directory with the source files")
    ap.add_argument("--pkg", default="", help="Package name for the output files")
    ap.add_argument("--cc", default=default_compiler(), help="GLSL compiler")
    ap.add_argument("--args", default="-V", help="GLSL compiler arguments (shell-style string)")
    ap.add_argument("--force", action="store_true", help="Force compilation for every file regardless of date modified")
    ap.add_argument("--verbose", action="store_true", help="Enable for informative messages")
    ap.add_argument("--timeout", type=float, default=None, help="Seconds to wait for each compiler call")
    return ap.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> BuildConfig:
    return BuildConfig(
        directory=Path(args.dir),
        package=args.pkg,
        compiler=args.cc,
        compiler_args=tuple(shlex.split(args.args)),
        force=args.force,
        verbose=args.verbose,
        timeout=args.timeout,
    )


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("shader_gen").setLevel(logging.INFO if verbose else logging.WARNING)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    return build(config_from_args(args))


if __name__ == "__main__":
    raise SystemExit(main())
