# kernels/jit_geometry.py

from typing import Optional

import numpy as np
from numba import njit

from raykernel.core.utils import EPSILON as _EPSILON_F32

EPSILON = float(_EPSILON_F32)
MISS = -1.0


@njit(cache=True)
def dot(v1, v2):
    """Sum of the pairwise products of two length-3 arrays."""
    return v1[0]*v2[0] + v1[1]*v2[1] + v1[2]*v2[2]


@njit(cache=True)
def cross_inplace(out, v1, v2):
    """Writes v1 x v2 into out. out may be v1 or v2."""
    x = v1[1] * v2[2] - v1[2] * v2[1]
    y = v1[2] * v2[0] - v1[0] * v2[2]
    z = v1[0] * v2[1] - v1[1] * v2[0]
    out[0] = x
    out[1] = y
    out[2] = z


@njit(cache=True)
def ray_triangle_intersect(ray_origin, ray_dir, v0, v1, v2, out_uv):
    """
    Compiled twin of geometry.triangle.hit over float32 arrays.

    Returns the ray parameter t of the hit and writes the barycentric pair
    (u, v) to out_uv. On a miss returns MISS and leaves out_uv untouched.
    """
    # Rows: edge1, edge2, h, s, q
    work = np.empty((5, 3), dtype=np.float32)
    edge1 = work[0]
    edge2 = work[1]
    h = work[2]
    s = work[3]
    q = work[4]

    for i in range(3):
        edge1[i] = v1[i] - v0[i]
        edge2[i] = v2[i] - v0[i]
        s[i] = ray_origin[i] - v0[i]

    cross_inplace(h, ray_dir, edge2)
    a = dot(edge1, h)
    if abs(a) < EPSILON:
        return MISS

    f = np.float32(1.0) / a
    u = f * dot(s, h)
    if u < 0.0 or u > 1.0:
        return MISS

    cross_inplace(q, s, edge1)
    v = f * dot(ray_dir, q)
    if v < 0.0 or u + v > 1.0:
        return MISS

    t = f * dot(edge2, q)
    # Also rejects NaN
    if not t > EPSILON:
        return MISS

    out_uv[0] = u
    out_uv[1] = v
    return t


def _as_f32(arr) -> np.ndarray:
    return np.ascontiguousarray(arr, dtype=np.float32).reshape(3)


def intersect_arrays(ray_origin, ray_dir, v0, v1, v2) -> Optional[np.ndarray]:
    """
    Array form of geometry.triangle.intersect. Inputs are anything
    convertible to three float32 values; returns the hit point as a float32
    array, or None on a miss.
    """
    origin = _as_f32(ray_origin)
    direction = _as_f32(ray_dir)
    uv = np.zeros(2, dtype=np.float32)
    t = ray_triangle_intersect(origin, direction, _as_f32(v0), _as_f32(v1), _as_f32(v2), uv)
    if t == MISS:
        return None
    return origin + direction * np.float32(t)
