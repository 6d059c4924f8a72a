from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .stages import Stage

WORD_BYTES = 4


@dataclass(frozen=True)
class CompiledModule:
    """SPIR-V payload of one source, ready to be embedded in a wrapper."""

    filename: str
    identifier: str
    stage: Stage
    words: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "words", np.asarray(self.words, dtype=np.uint32))
        if self.words.ndim != 1:
            raise ValueError("words must be one-dimensional")

    @property
    def word_count(self) -> int:
        return int(self.words.size)

    @property
    def byte_size(self) -> int:
        return self.word_count * WORD_BYTES

    @classmethod
    def from_file(cls, path, filename: str, identifier: str, stage: Stage) -> "CompiledModule":
        """Load a compiler artifact as little-endian 32-bit words."""
        raw = np.fromfile(path, dtype=np.uint8)
        if raw.size == 0:
            raise ValueError("compiler produced an empty artifact")
        if raw.size % WORD_BYTES:
            raise ValueError(f"artifact size {raw.size} is not a multiple of {WORD_BYTES} bytes")
        words = raw.view("<u4").astype(np.uint32)
        return cls(filename=filename, identifier=identifier, stage=stage, words=words)
