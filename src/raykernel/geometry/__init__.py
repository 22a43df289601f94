from raykernel.geometry.hittable import HitRecord
from raykernel.geometry.sphere import Sphere
from raykernel.geometry.triangle import Triangle, hit, intersect

__all__ = ["HitRecord", "Sphere", "Triangle", "hit", "intersect"]
