"""Quaternions for rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from enginekit.vector import Float3

_DOT_THRESHOLD = 0.9995


@dataclass(frozen=True)
class Quaternion:
    """A rotation quaternion; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, scalar: float) -> Quaternion:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Quaternion(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> Quaternion:
        return self.__mul__(scalar)

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def dot(self, other: Quaternion) -> float:
        """Four-component dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def norm(self) -> float:
        """Length of the quaternion as a four-component vector."""
        return math.sqrt(self.dot(self))


def from_axis_angle(axis: Float3, angle: float) -> Quaternion:
    """Rotation of ``angle`` radians about ``axis`` (normalised first)."""
    n = axis.normalized()
    half = angle * 0.5
    s = math.sin(half)
    return Quaternion(n.x * s, n.y * s, n.z * s, math.cos(half))


def slerp(a: Quaternion, b: Quaternion, t: float) -> Quaternion:
    """Spherical linear interpolation from ``a`` (t=0) to ``b`` (t=1) along the short arc."""
    dot = a.dot(b)

    if dot > _DOT_THRESHOLD:
        # Nearly identical: normalised linear interpolation is stable here.
        result = a + t * (b - a)
        return result * (1.0 / result.norm())

    if dot < 0.0:
        return slerp(a, -b, t)

    theta = math.acos(dot) * t
    c = b - a * dot
    c = c * (1.0 / c.norm())
    return a * math.cos(theta) + c * math.sin(theta)