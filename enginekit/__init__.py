"""Vector, matrix, quaternion, animation, skinning, particle, scene and WAVE utilities for a small 3D engine."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "descriptors",
    "matrix",
    "particles",
    "quaternion",
    "scene",
    "skeleton",
    "sound",
    "transform",
    "vector",
]