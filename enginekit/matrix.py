"""Row-major 4x4 matrices for row-vector transforms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

from enginekit.quaternion import Quaternion
from enginekit.vector import Float3

_IDENTITY_ROWS = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


class Matrix:
    """An immutable 4x4 matrix; with no rows it is the identity."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[float]] | None = None) -> None:
        source = _IDENTITY_ROWS if rows is None else rows
        converted = tuple(tuple(float(v) for v in row) for row in source)
        if len(converted) != 4 or any(len(row) != 4 for row in converted):
            raise ValueError("a matrix needs 4 rows of 4 values")
        self._rows = converted

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        """The rows as nested tuples."""
        return self._rows

    def __getitem__(self, index):
        """``m[i]`` is row ``i``; ``m[i, j]`` is the element at row ``i``, column ``j``."""
        if isinstance(index, tuple):
            i, j = index
            return self._rows[i][j]
        return self._rows[index]

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._rows]!r})"

    def __neg__(self) -> Matrix:
        """The inverse, by Gauss-Jordan elimination without pivoting."""
        temp = [
            list(row) + [1.0 if i == j else 0.0 for j in range(4)]
            for i, row in enumerate(self._rows)
        ]
        for k, pivot_row in enumerate(temp):
            scale = 1.0 / pivot_row[k]
            pivot_row[:] = [v * scale for v in pivot_row]
            for i, row in enumerate(temp):
                if i == k:
                    continue
                factor = -row[k]
                row[:] = [v + p * factor for v, p in zip(row, pivot_row)]
        return Matrix(row[4:] for row in temp)

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(
            (a + b for a, b in zip(ra, rb)) for ra, rb in zip(self._rows, other._rows)
        )

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(
            (a - b for a, b in zip(ra, rb)) for ra, rb in zip(self._rows, other._rows)
        )

    def __mul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        columns = tuple(zip(*other._rows))
        return Matrix(
            (sum(a * b for a, b in zip(row, column)) for column in columns)
            for row in self._rows
        )

    def inverse(self) -> Matrix:
        """The inverse matrix; a zero pivot raises ZeroDivisionError."""
        return -self

    def transpose(self) -> Matrix:
        """The transposed matrix."""
        return Matrix(zip(*self._rows))


def _from_identity(entries: dict[tuple[int, int], float]) -> Matrix:
    rows = [list(row) for row in _IDENTITY_ROWS]
    for (i, j), value in entries.items():
        rows[i][j] = value
    return Matrix(rows)


def identity() -> Matrix:
    """The identity matrix."""
    return Matrix()


def perspective_fov_lh(fov: float, aspect_ratio: float, near_z: float, far_z: float) -> Matrix:
    """Left-handed perspective projection with vertical field of view ``fov``."""
    y_scale = 1.0 / math.tan(fov / 2.0)
    return _from_identity(
        {
            (1, 1): y_scale,
            (0, 0): y_scale / aspect_ratio,
            (2, 2): far_z / (far_z - near_z),
            (3, 2): (far_z * -near_z) / (far_z - near_z),
            (2, 3): 1.0,
            (3, 3): 0.0,
        }
    )


def orthographic(width: float, height: float, near_clip: float, far_clip: float) -> Matrix:
    """Orthographic projection with the origin at the top-left corner."""
    return Matrix(
        (
            (2.0 / width, 0.0, 0.0, 0.0),
            (0.0, 2.0 / -height, 0.0, 0.0),
            (0.0, 0.0, 1.0 / (far_clip - near_clip), 0.0),
            (-1.0, 1.0, near_clip / (near_clip - far_clip), 1.0),
        )
    )


def scaling(scale: Float3) -> Matrix:
    """Scale along each axis."""
    return _from_identity({(0, 0): scale.x, (1, 1): scale.y, (2, 2): scale.z})


def translation(offset: Float3) -> Matrix:
    """Translation by ``offset`` (in the bottom row)."""
    return _from_identity({(3, 0): offset.x, (3, 1): offset.y, (3, 2): offset.z})


def pitch(rad: float) -> Matrix:
    """Rotation about the X axis."""
    c, s = math.cos(rad), math.sin(rad)
    return _from_identity({(1, 1): c, (2, 1): -s, (1, 2): s, (2, 2): c})


def yaw(rad: float) -> Matrix:
    """Rotation about the Y axis."""
    c, s = math.cos(rad), math.sin(rad)
    return _from_identity({(0, 0): c, (0, 2): -s, (2, 0): s, (2, 2): c})


def roll(rad: float) -> Matrix:
    """Rotation about the Z axis."""
    c, s = math.cos(rad), math.sin(rad)
    return _from_identity({(0, 0): c, (1, 0): -s, (0, 1): s, (1, 1): c})


def rotation_x(rad: float) -> Matrix:
    """Rotation about the X axis."""
    return pitch(rad)


def rotation_y(rad: float) -> Matrix:
    """Rotation about the Y axis."""
    return yaw(rad)


def rotation_z(rad: float) -> Matrix:
    """Rotation about the Z axis."""
    return roll(rad)


def rotation_roll_pitch_yaw(roll_rad: float, pitch_rad: float, yaw_rad: float) -> Matrix:
    """Roll, then pitch, then yaw."""
    return identity() * roll(roll_rad) * pitch(pitch_rad) * yaw(yaw_rad)


def quaternion_to_rotation(q: Quaternion) -> Matrix:
    """Rotation matrix of a unit quaternion."""
    x, y, z, w = q.x, q.y, q.z, q.w
    return Matrix(
        (
            (w * w + x * x - y * y - z * z, 2.0 * (x * y + w * z), 2.0 * (x * z - w * y), 0.0),
            (2.0 * (x * y - w * z), w * w - x * x + y * y - z * z, 2.0 * (y * z + w * x), 0.0),
            (2.0 * (x * z + w * y), 2.0 * (y * z - w * x), w * w - x * x - y * y + z * z, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def make_affine(scale: Float3, rotate: Quaternion, translate: Float3) -> Matrix:
    """Scale, then rotate, then translate."""
    return identity() * scaling(scale) * quaternion_to_rotation(rotate) * translation(translate)