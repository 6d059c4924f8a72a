#!/usr/bin/env python3
"""
Regenerate SPIR-V wrapper modules for a shader directory without installing the package.

Same flags as the ``shader-gen`` console script.
"""

from __future__ import annotations

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from shader_gen.cli import main  # noqa: E402


if __name__ == "__main__":
    raise SystemExit(main())
