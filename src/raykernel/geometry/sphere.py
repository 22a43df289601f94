# geometry/sphere.py
from typing import Optional

from raykernel.core.utils import FLOAT
from raykernel.core.vector import Scalar, Vector3


class Sphere:
    """
    Represents a sphere defined by its center and radius.
    The radius is not validated; zero or negative values are kept as given.
    """
    def __init__(self, center: Optional[Vector3] = None, radius: Scalar = 0.0):
        self.center = center.copy() if center is not None else Vector3()
        self.radius = FLOAT(radius)

    def initialize(self) -> "Sphere":
        self.center.initialize()
        self.radius = FLOAT(0.0)
        return self

    def translate(self, translation: Vector3) -> "Sphere":
        self.center.translate(translation)
        return self

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
