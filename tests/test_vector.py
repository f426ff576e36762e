import pytest

from enginekit.vector import (
    Float2,
    Float3,
    Float4,
    catmull_rom_interpolation,
    catmull_rom_position,
    lerp,
)


def approx3(v):
    return pytest.approx((v.x, v.y, v.z), abs=1e-9)


def as_tuple(v):
    return (v.x, v.y, v.z)


def test_float2_addition():
    assert Float2(1.0, 2.0) + Float2(3.0, 4.0) == Float2(4.0, 6.0)


def test_float3_add_then_subtract_round_trip():
    a = Float3(1.5, -2.0, 3.25)
    b = Float3(-4.0, 0.5, 8.0)
    assert (a + b) - b == a
    assert a + b == b + a


def test_scalar_multiplication_is_commutative_and_matches_addition():
    v = Float3(1.0, -2.0, 3.0)
    assert 2 * v == v * 2
    assert v * 2 == v + v


def test_multiplying_by_non_number_is_rejected():
    with pytest.raises(TypeError):
        Float3(1.0, 2.0, 3.0) * "x"


def test_length_scales_linearly():
    v = Float3(1.0, 2.0, 2.0)
    assert (v * 3.0).length() == pytest.approx(3.0 * v.length())


def test_normalized_has_unit_length_and_same_direction():
    v = Float3(3.0, -7.0, 2.0)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert as_tuple(n * v.length()) == approx3(v)


def test_normalizing_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Float3().normalized()


def test_float4_keeps_components():
    c = Float4(0.1, 0.2, 0.3, 0.4)
    assert (c.x, c.y, c.z, c.w) == (0.1, 0.2, 0.3, 0.4)


def test_lerp_endpoints_and_midpoint():
    a = Float3(1.0, 2.0, 3.0)
    b = Float3(-5.0, 4.0, 9.0)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b
    assert as_tuple(lerp(a, b, 0.5)) == approx3((a + b) * 0.5)


def test_catmull_rom_interpolation_passes_through_inner_points():
    p0, p1, p2, p3 = Float3(0, 0, 0), Float3(1, 2, 0), Float3(3, 1, 1), Float3(4, 4, 2)
    assert as_tuple(catmull_rom_interpolation(p0, p1, p2, p3, 0.0)) == approx3(p1)
    assert as_tuple(catmull_rom_interpolation(p0, p1, p2, p3, 1.0)) == approx3(p2)


def test_catmull_rom_position_requires_four_points():
    with pytest.raises(ValueError):
        catmull_rom_position([Float3(), Float3(1, 0, 0), Float3(2, 0, 0)], 0.5)


def test_catmull_rom_position_starts_at_first_point():
    points = [Float3(0, 0, 0), Float3(1, 3, 0), Float3(2, 1, 5), Float3(4, 4, 4)]
    assert as_tuple(catmull_rom_position(points, 0.0)) == approx3(points[0])


def test_catmull_rom_position_hits_control_point_on_segment_boundary():
    points = [Float3(i, i * i, -i) for i in range(5)]
    assert as_tuple(catmull_rom_position(points, 0.5)) == approx3(points[2])


def test_catmull_rom_on_evenly_spaced_line_is_linear():
    points = [Float3(float(i), 0.0, 0.0) for i in range(4)]
    result = catmull_rom_position(points, 0.5)
    assert as_tuple(result) == approx3(lerp(points[1], points[2], 0.5))