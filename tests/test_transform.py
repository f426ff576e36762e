import math

import pytest

from enginekit.matrix import identity, perspective_fov_lh, translation
from enginekit.quaternion import from_axis_angle
from enginekit.transform import (
    AABB,
    QuaternionTransform,
    Transform,
    is_collision,
    transform_point,
)
from enginekit.vector import Float3


def assert_close(a, b):
    for row_a, row_b in zip(a, b):
        assert row_a == pytest.approx(row_b, abs=1e-9)


def as_tuple(v):
    return (v.x, v.y, v.z)


BOX = AABB(Float3(-1.0, -1.0, -1.0), Float3(1.0, 1.0, 1.0))


@pytest.mark.parametrize(
    "point, inside",
    [
        (Float3(0.0, 0.0, 0.0), True),
        (Float3(1.0, -1.0, 1.0), True),
        (Float3(1.5, 0.0, 0.0), False),
        (Float3(0.0, 0.0, -1.01), False),
    ],
)
def test_is_collision(point, inside):
    assert is_collision(BOX, point) is inside


def test_transform_point_by_translation():
    v = Float3(1.0, 2.0, 3.0)
    offset = Float3(-4.0, 0.5, 10.0)
    assert as_tuple(transform_point(v, translation(offset))) == pytest.approx(
        as_tuple(v + offset)
    )


def test_transform_point_with_zero_w_raises():
    m = perspective_fov_lh(math.pi / 2, 1.0, 0.1, 100.0)
    with pytest.raises(ValueError):
        transform_point(Float3(0.0, 0.0, 0.0), m)


def test_default_transform_is_identity():
    assert Transform().make_affine_matrix() == identity()
    assert QuaternionTransform().make_affine_matrix() == identity()


def test_transform_moves_origin_to_translation():
    t = Transform(
        scale=Float3(2.0, 3.0, 4.0),
        rotate=Float3(0.3, 0.2, 0.1),
        translate=Float3(5.0, -6.0, 7.0),
    )
    result = transform_point(Float3(), t.make_affine_matrix())
    assert as_tuple(result) == pytest.approx(as_tuple(t.translate))


def test_transform_scales_before_translating():
    t = Transform(scale=Float3(2.0, 2.0, 2.0), translate=Float3(1.0, 1.0, 1.0))
    p = Float3(1.0, 0.0, 0.0)
    result = transform_point(p, t.make_affine_matrix())
    assert as_tuple(result) == pytest.approx(as_tuple(p * 2.0 + t.translate))


@pytest.mark.parametrize(
    "euler, axis",
    [
        (Float3(0.7, 0.0, 0.0), Float3(1.0, 0.0, 0.0)),
        (Float3(0.0, 0.7, 0.0), Float3(0.0, 1.0, 0.0)),
        (Float3(0.0, 0.0, 0.7), Float3(0.0, 0.0, 1.0)),
    ],
)
def test_euler_and_quaternion_transforms_agree_on_single_axis(euler, axis):
    scale = Float3(1.5, 2.0, 0.5)
    offset = Float3(3.0, -1.0, 2.0)
    euler_t = Transform(scale=scale, rotate=euler, translate=offset)
    quat_t = QuaternionTransform(
        scale=scale, rotate=from_axis_angle(axis, 0.7), translate=offset
    )
    assert_close(euler_t.make_affine_matrix(), quat_t.make_affine_matrix())