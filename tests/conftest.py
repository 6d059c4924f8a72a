"""
Test configuration to ensure the repository root is importable as a module path.

This makes `import shader_gen` work when running `pytest` from the repo root
without installing the package. It also provides a build config wired to the
fake compiler in ``shader_gen.testing``.
"""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from shader_gen.config import BuildConfig  # noqa: E402
from shader_gen.testing import FAKE_COMPILER  # noqa: E402


@pytest.fixture
def shader_dir(tmp_path):
    d = tmp_path / "shaders"
    d.mkdir()
    return d


@pytest.fixture
def make_config(shader_dir):
    def _make(**overrides):
        params = dict(
            directory=shader_dir,
            package="shaders",
            compiler=sys.executable,
            compiler_args=(str(FAKE_COMPILER), "-V"),
        )
        params.update(overrides)
        return BuildConfig(**params)

    return _make

