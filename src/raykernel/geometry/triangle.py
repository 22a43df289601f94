# geometry/triangle.py
from typing import Optional, Tuple

from raykernel.core.utils import EPSILON, FLOAT, near_zero
from raykernel.core.vector import Vector3
from raykernel.core.ray import Ray
from raykernel.geometry.hittable import HitRecord


class Triangle:
    """Represents a single triangle in 3D space. Vertex order defines the winding."""
    def __init__(self,
                 v0: Optional[Vector3] = None,
                 v1: Optional[Vector3] = None,
                 v2: Optional[Vector3] = None):
        self.v0 = v0.copy() if v0 is not None else Vector3()
        self.v1 = v1.copy() if v1 is not None else Vector3()
        self.v2 = v2.copy() if v2 is not None else Vector3()

    @property
    def vertices(self) -> Tuple[Vector3, Vector3, Vector3]:
        return self.v0, self.v1, self.v2

    def copy(self) -> "Triangle":
        return Triangle(self.v0, self.v1, self.v2)

    def initialize(self) -> "Triangle":
        for vertex in self.vertices:
            vertex.initialize()
        return self

    def translate(self, translation: Vector3) -> "Triangle":
        for vertex in self.vertices:
            vertex.translate(translation)
        return self

    def translated(self, translation: Vector3) -> "Triangle":
        return self.copy().translate(translation)

    def normal(self) -> Vector3:
        """Un-normalized face normal (v1 - v0) x (v2 - v0)."""
        return (self.v1 - self.v0).cross(self.v2 - self.v0)

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        return hit(ray, self)

    def intersect(self, ray: Ray) -> Optional[Vector3]:
        return intersect(ray, self)

    def __repr__(self) -> str:
        return f"Triangle({self.v0!r}, {self.v1!r}, {self.v2!r})"


def hit(ray: Ray, triangle: Triangle) -> Optional[HitRecord]:
    """
    Möller–Trumbore ray-triangle intersection.

    Triangles are two-sided. Returns None when the ray is parallel to the
    triangle's plane, passes outside the triangle, or meets the plane at or
    behind its origin (t <= EPSILON).
    """
    edge1 = triangle.v1 - triangle.v0
    edge2 = triangle.v2 - triangle.v0
    h = ray.direction.cross(edge2)
    a = edge1.dot(h)

    # Ray is parallel to the triangle (or the triangle is degenerate)
    if near_zero(a):
        return None

    f = FLOAT(1.0) / a
    s = ray.origin - triangle.v0
    u = FLOAT(f * s.dot(h))
    if u < 0.0 or u > 1.0:
        return None

    q = s.cross(edge1)
    v = FLOAT(f * ray.direction.dot(q))
    if v < 0.0 or u + v > 1.0:
        return None

    t = FLOAT(f * edge2.dot(q))
    # Line intersection, but not a ray intersection
    if not t > EPSILON:
        return None

    rec = HitRecord(p=ray.at(t), t=t, u=u, v=v)
    rec.set_face_normal(ray, edge1.cross(edge2))
    return rec


def intersect(ray: Ray, triangle: Triangle) -> Optional[Vector3]:
    """Returns the world-space hit point, or None if the ray misses."""
    rec = hit(ray, triangle)
    if rec is None:
        return None
    return rec.p
