"""Small fixed-size vectors and spline helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Float2:
    """A two-component vector, used for texture coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Float2) -> Float2:
        if not isinstance(other, Float2):
            return NotImplemented
        return Float2(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Float3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Float3) -> Float3:
        if not isinstance(other, Float3):
            return NotImplemented
        return Float3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Float3) -> Float3:
        if not isinstance(other, Float3):
            return NotImplemented
        return Float3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Float3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Float3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Float3:
        return self.__mul__(scalar)

    def length(self) -> float:
        """Euclidean norm of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Float3:
        """The vector scaled to unit length; a zero vector raises ZeroDivisionError."""
        length = self.length()
        return Float3(self.x / length, self.y / length, self.z / length)


@dataclass(frozen=True)
class Float4:
    """A four-component vector, used for positions and colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


def lerp(a: Float3, b: Float3, t: float) -> Float3:
    """Linear interpolation between ``a`` (t=0) and ``b`` (t=1)."""
    return Float3(
        a.x * (1.0 - t) + b.x * t,
        a.y * (1.0 - t) + b.y * t,
        a.z * (1.0 - t) + b.z * t,
    )


def catmull_rom_interpolation(
    p0: Float3, p1: Float3, p2: Float3, p3: Float3, t: float
) -> Float3:
    """Catmull-Rom interpolation between ``p1`` and ``p2``."""
    s = 0.5
    t2 = t * t
    t3 = t2 * t

    e3 = (p0 * -1.0) + (p1 * 3.0) - (p2 * 3.0) + p3
    e2 = (p0 * 2.0) - (p1 * 5.0) + (p2 * 4.0) - p3
    e1 = (p0 * -1.0) + p2
    e0 = p1 * 2.0

    return (e3 * t3 + e2 * t2 + e1 * t + e0) * s


def catmull_rom_position(points: Sequence[Float3], t: float) -> Float3:
    """Point on a Catmull-Rom spline through ``points``, with ``t`` spanning 0..1."""
    if len(points) < 4:
        raise ValueError("a Catmull-Rom spline needs at least 4 control points")

    division = len(points) - 1
    area_width = 1.0 / division

    local_t = math.fmod(t, area_width) * division
    local_t = min(max(local_t, 0.0), 1.0)

    index = max(int(t / area_width), 0)
    index = min(index, division - 1)

    index1 = index
    index0 = index1 if index == 0 else index - 1
    index2 = index + 1
    index3 = index + 2
    if index3 >= len(points):
        index3 = index2

    return catmull_rom_interpolation(
        points[index0], points[index1], points[index2], points[index3], local_t
    )