"""Scale/rotate/translate transforms, bounding boxes and point transforms."""

from __future__ import annotations

from dataclasses import dataclass, field

from enginekit.matrix import (
    Matrix,
    make_affine,
    rotation_roll_pitch_yaw,
    scaling,
    translation,
)
from enginekit.quaternion import Quaternion
from enginekit.vector import Float3


def _unit_scale() -> Float3:
    return Float3(1.0, 1.0, 1.0)


@dataclass
class Transform:
    """Scale, Euler rotation (radians about x, y, z) and translation."""

    scale: Float3 = field(default_factory=_unit_scale)
    rotate: Float3 = field(default_factory=Float3)
    translate: Float3 = field(default_factory=Float3)

    def make_affine_matrix(self) -> Matrix:
        """Scale, then rotate (roll, pitch, yaw), then translate."""
        return (
            scaling(self.scale)
            * rotation_roll_pitch_yaw(self.rotate.z, self.rotate.x, self.rotate.y)
            * translation(self.translate)
        )


@dataclass
class QuaternionTransform:
    """Scale, quaternion rotation and translation."""

    scale: Float3 = field(default_factory=_unit_scale)
    rotate: Quaternion = field(default_factory=Quaternion)
    translate: Float3 = field(default_factory=Float3)

    def make_affine_matrix(self) -> Matrix:
        """Scale, then rotate, then translate."""
        return make_affine(self.scale, self.rotate, self.translate)


@dataclass(frozen=True)
class AABB:
    """Axis-aligned bounding box given by its two corners."""

    min: Float3
    max: Float3


def is_collision(aabb: AABB, point: Float3) -> bool:
    """Whether ``point`` lies inside ``aabb``, boundaries included."""
    return (
        aabb.min.x <= point.x <= aabb.max.x
        and aabb.min.y <= point.y <= aabb.max.y
        and aabb.min.z <= point.z <= aabb.max.z
    )


def transform_point(vector: Float3, matrix: Matrix) -> Float3:
    """Transform a point as a row vector with w=1, then divide by the resulting w."""
    components = (vector.x, vector.y, vector.z, 1.0)
    x, y, z, w = (
        sum(c * row[column] for c, row in zip(components, matrix)) for column in range(4)
    )
    if w == 0.0:
        raise ValueError("transformed point has w == 0")
    return Float3(x / w, y / w, z / w)