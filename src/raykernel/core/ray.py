# core/ray.py
from typing import Optional

from raykernel.core.vector import Scalar, Vector3


class Ray:
    """
    Represents a ray in 3D space with an origin and direction.

    The direction is not required to be unit length; t is measured in
    multiples of it.
    """
    def __init__(self, origin: Optional[Vector3] = None, direction: Optional[Vector3] = None):
        self.origin = origin.copy() if origin is not None else Vector3()
        self.direction = direction.copy() if direction is not None else Vector3()

    def initialize(self) -> "Ray":
        self.origin.initialize()
        self.direction.initialize()
        return self

    def at(self, t: Scalar) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.direction.scaled(t).translated(self.origin)

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
