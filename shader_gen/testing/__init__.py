from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

FAKE_COMPILER = Path(__file__).resolve().parent / "fake_compiler.py"

BASIC_VERT = "#version 450\nvoid main() { gl_Position = vec4(0.0); }\n"
BROKEN_FRAG = "#version 450\n#error deliberately broken\nvoid main() {}\n"


def set_mtime(path, mtime_ns: int) -> None:
    os.utime(path, ns=(mtime_ns, mtime_ns))


def write_source(directory, name: str, text: str = BASIC_VERT, mtime_ns: Optional[int] = None) -> Path:
    path = Path(directory) / name
    path.write_text(text)
    if mtime_ns is not None:
        set_mtime(path, mtime_ns)
    return path
