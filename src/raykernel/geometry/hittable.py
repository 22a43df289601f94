# geometry/hittable.py
from typing import Optional

import numpy as np

from raykernel.core.vector import Vector3
from raykernel.core.ray import Ray


class HitRecord:
    """
    Records details of a ray-triangle intersection.
    """
    def __init__(self, p: Optional[Vector3] = None, normal: Optional[Vector3] = None,
                 t: float = 0.0, u: float = 0.0, v: float = 0.0, front_face: bool = True):
        self.p = p              # Intersection point
        self.normal = normal    # Geometric normal, facing the ray
        self.t = np.float32(t)  # Ray parameter at intersection
        self.u = np.float32(u)  # Barycentric weight of v1
        self.v = np.float32(v)  # Barycentric weight of v2
        self.front_face = front_face

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = bool(ray.direction.dot(outward_normal) < 0)
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return f"HitRecord(p={self.p!r}, t={self.t}, u={self.u}, v={self.v})"
