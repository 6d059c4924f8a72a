from __future__ import annotations

from enum import Enum
import os
from typing import Optional

GENERATED_SUFFIX = ".gen.py"
MANIFEST_FILENAME = "shaders" + GENERATED_SUFFIX
NEUTRAL_SUFFIX = ".glsl"


class Stage(str, Enum):
    """Shader stages recognised by file extension."""

    VERTEX = "vertex"
    TESS_CONTROL = "tessellation-control"
    TESS_EVALUATION = "tessellation-evaluation"
    GEOMETRY = "geometry"
    FRAGMENT = "fragment"
    COMPUTE = "compute"
    MESH = "mesh"
    TASK = "task"
    RAY_GENERATION = "ray-generation"
    RAY_INTERSECTION = "ray-intersection"
    RAY_ANY_HIT = "ray-any-hit"
    RAY_CLOSEST_HIT = "ray-closest-hit"
    RAY_MISS = "ray-miss"
    RAY_CALLABLE = "ray-callable"


_EXTENSIONS = {
    ".vert": Stage.VERTEX,
    ".tesc": Stage.TESS_CONTROL,
    ".tese": Stage.TESS_EVALUATION,
    ".geom": Stage.GEOMETRY,
    ".frag": Stage.FRAGMENT,
    ".comp": Stage.COMPUTE,
    ".mesh": Stage.MESH,
    ".task": Stage.TASK,
    ".rgen": Stage.RAY_GENERATION,
    ".rint": Stage.RAY_INTERSECTION,
    ".rahit": Stage.RAY_ANY_HIT,
    ".rchit": Stage.RAY_CLOSEST_HIT,
    ".rmiss": Stage.RAY_MISS,
    ".rcall": Stage.RAY_CALLABLE,
}


def stage_of(extension: str) -> Optional[Stage]:
    return _EXTENSIONS.get(extension)


def stage_for_filename(filename: str) -> Optional[Stage]:
    """
    Stage of a source filename, or None.

    One trailing ``.glsl`` is stripped first, so ``sky.frag.glsl`` is a fragment shader.
    """
    if filename.endswith(NEUTRAL_SUFFIX):
        filename = filename[: -len(NEUTRAL_SUFFIX)]
    return stage_of(os.path.splitext(filename)[1])


def is_source(filename: str) -> bool:
    return stage_for_filename(filename) is not None


def is_generated(filename: str) -> bool:
    original = source_name_for(filename)
    return original is not None and is_source(original)


def generated_name_for(source: str) -> str:
    return source + GENERATED_SUFFIX


def source_name_for(generated: str) -> Optional[str]:
    if not generated.endswith(GENERATED_SUFFIX):
        return None
    return generated[: -len(GENERATED_SUFFIX)]
