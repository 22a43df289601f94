"""Single-precision 3D vector algebra and Möller–Trumbore ray-triangle intersection."""

from raykernel.core import EPSILON, Ray, Vector3, cross, dot
from raykernel.geometry import HitRecord, Sphere, Triangle, hit, intersect

__version__ = "0.1.0"

__all__ = [
    "EPSILON",
    "HitRecord",
    "Ray",
    "Sphere",
    "Triangle",
    "Vector3",
    "cross",
    "dot",
    "hit",
    "intersect",
]
