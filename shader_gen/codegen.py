"""Text emission for generated wrapper modules and the manifest."""

from __future__ import annotations

import os
from pathlib import Path
import tempfile
from typing import Iterable, Optional

from .compiled import CompiledModule
from .identifiers import derive_identifier
from .stages import generated_name_for, stage_for_filename

HEADER = "# Code generated by shader-gen. DO NOT EDIT.\n"
WORDS_PER_LINE = 8


def _format_words(module: CompiledModule) -> str:
    lines = []
    words = [f"0x{int(w):08x}" for w in module.words]
    for start in range(0, len(words), WORDS_PER_LINE):
        lines.append("    " + ", ".join(words[start : start + WORDS_PER_LINE]) + ",")
    return "\n".join(lines)


def render_wrapper(module: CompiledModule, package: str) -> str:
    ident = module.identifier
    return (
        f"{HEADER}"
        f"# source: {module.filename!r}\n"
        f"# package: {package}\n"
        "\n"
        "import numpy as np\n"
        "\n"
        f"{ident} = np.array(\n"
        "    [\n"
        f"{_format_words(module)}\n"
        "    ],\n"
        "    dtype=np.uint32,\n"
        ")\n"
        f"{ident}Stage = {module.stage.value!r}\n"
        f"{ident}Size = {module.word_count}\n"
        f"{ident}ByteSize = {ident}Size * 4\n"
    )


def render_manifest(package: str, all_sources: Iterable[str]) -> str:
    rows = []
    for src in sorted(all_sources):
        stage = stage_for_filename(src)
        stage_name = stage.value if stage is not None else ""
        row = (derive_identifier(src), stage_name, generated_name_for(src))
        rows.append(f"    {row!r},\n")
    body = "".join(rows)
    return (
        f"{HEADER}"
        f"# package: {package}\n"
        "\n"
        f"PACKAGE = {package!r}\n"
        "\n"
        "# (identifier, stage, generated file), sorted by source filename\n"
        f"SHADERS = (\n{body})\n"
    )


def read_existing(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def write_atomic(path: Path, text: str) -> None:
    """Write via a sibling temp file and ``os.replace`` so readers never see a partial file."""
    path = Path(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(text)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
