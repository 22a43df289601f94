import numpy as np
import pytest

from raykernel import Ray, Triangle, Vector3, intersect
from raykernel.kernels.jit_geometry import cross_inplace, dot, intersect_arrays, ray_triangle_intersect

V0 = np.array([-1, -1, 0], dtype=np.float32)
V1 = np.array([1, -1, 0], dtype=np.float32)
V2 = np.array([0, 1, 0], dtype=np.float32)

SCENARIOS = [
    ((0, -0.3333333, -1), (0, 0, 1)),
    ((0, -0.3333333, -1), (1, 0, 0)),
    ((5, 5, -1), (0, 0, 1)),
    ((0, -0.333, 1), (0, 0, 1)),
    ((0.2, -0.5, -2), (0, 0, 1)),
    ((0, 0, -3), (0, 0, 2)),
    # Either side of the parallel threshold
    ((-0.5, -0.5, -1e-8), (1, 0, 1e-8)),
    ((-0.5, -0.5, -5e-8), (1, 0, 5e-8)),
    # Either side of the minimum distance
    ((0, 0, -5e-8), (0, 0, 1)),
    ((0, 0, -2.5e-7), (0, 0, 1)),
    # Vertices and edge midpoints
    ((-1, -1, -1), (0, 0, 1)),
    ((1, -1, -1), (0, 0, 1)),
    ((0, 1, -1), (0, 0, 1)),
    ((0, -1, -1), (0, 0, 1)),
    ((0.5, 0, -1), (0, 0, 1)),
    ((-0.5, 0, -1), (0, 0, 1)),
]


def _cast(origin, direction):
    uv = np.full(2, -3.0, dtype=np.float32)
    t = ray_triangle_intersect(np.array(origin, dtype=np.float32),
                               np.array(direction, dtype=np.float32), V0, V1, V2, uv)
    return t, uv


def test_dot_and_cross():
    a = np.array([1, 2, 3], dtype=np.float32)
    b = np.array([4, 5, 6], dtype=np.float32)
    out = np.empty(3, dtype=np.float32)

    assert dot(a, b) == 32
    cross_inplace(out, a, b)
    np.testing.assert_array_equal(out, [-3, 6, -3])

    # Output may alias an input.
    cross_inplace(a, a, b)
    np.testing.assert_array_equal(a, [-3, 6, -3])


def test_kernel_reports_t_and_barycentrics():
    origin = np.array([0, -0.3333333, -1], dtype=np.float32)
    direction = np.array([0, 0, 1], dtype=np.float32)
    uv = np.zeros(2, dtype=np.float32)

    t = ray_triangle_intersect(origin, direction, V0, V1, V2, uv)
    assert t == pytest.approx(1.0, abs=1e-6)
    np.testing.assert_allclose(uv, [1 / 3, 1 / 3], atol=1e-6)


def test_kernel_miss_returns_negative_and_leaves_uv():
    origin = np.array([5, 5, -1], dtype=np.float32)
    direction = np.array([0, 0, 1], dtype=np.float32)
    uv = np.full(2, 7.0, dtype=np.float32)

    assert ray_triangle_intersect(origin, direction, V0, V1, V2, uv) == -1.0
    np.testing.assert_array_equal(uv, [7.0, 7.0])


@pytest.mark.parametrize("origin, direction", SCENARIOS)
def test_kernel_agrees_with_vector_path(origin, direction):
    triangle = Triangle(Vector3.from_array(V0), Vector3.from_array(V1), Vector3.from_array(V2))
    expected = intersect(Ray(Vector3(*origin), Vector3(*direction)), triangle)
    got = intersect_arrays(origin, direction, V0, V1, V2)

    if expected is None:
        assert got is None
    else:
        assert got is not None
        assert got.dtype == np.float32
        np.testing.assert_allclose(got, expected.to_array(), atol=1e-6)


def test_kernel_epsilon_thresholds():
    # a = -4e-8 is below EPSILON, a = -2e-7 is above it
    assert _cast((-0.5, -0.5, -1e-8), (1, 0, 1e-8))[0] == -1.0
    t, uv = _cast((-0.5, -0.5, -5e-8), (1, 0, 5e-8))
    assert t == pytest.approx(1.0, rel=1e-4)
    np.testing.assert_allclose(uv, [0.625, 0.25], rtol=1e-4)

    # t = 5e-8 is too close to the origin, t = 2.5e-7 is not
    assert _cast((0, 0, -5e-8), (0, 0, 1))[0] == -1.0
    t, _ = _cast((0, 0, -2.5e-7), (0, 0, 1))
    assert np.float32(t) == np.float32(2.5e-7)


@pytest.mark.parametrize("x, y, u, v", [
    (-1, -1, 0.0, 0.0),
    (0, 1, 0.0, 1.0),
    (0.5, 0, 0.5, 0.5),
])
def test_kernel_includes_triangle_boundary(x, y, u, v):
    t, uv = _cast((x, y, -1), (0, 0, 1))
    assert t == 1.0
    np.testing.assert_array_equal(uv, [u, v])
