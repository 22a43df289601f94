# core/vector.py
from typing import Iterator, Union

import numpy as np

from raykernel.core.utils import FLOAT

Scalar = Union[int, float, np.floating]


class Vector3:
    """
    A 3D single-precision vector supporting componentwise arithmetic, dot and
    cross products, and max-component normalization.

    Methods named with a verb (translate, scale, divide, normalize) modify
    the vector in place and return it; the past-tense forms return a new one.
    """
    # numpy scalars on the left defer to __rmul__ instead of broadcasting.
    __array_ufunc__ = None

    def __init__(self, x: Scalar = 0.0, y: Scalar = 0.0, z: Scalar = 0.0):
        self.x = FLOAT(x)
        self.y = FLOAT(y)
        self.z = FLOAT(z)

    @classmethod
    def from_array(cls, arr) -> "Vector3":
        return cls(arr[0], arr[1], arr[2])

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=FLOAT)

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return self.scaled(other)

    def __rmul__(self, other: Scalar) -> "Vector3":
        return self.scaled(other)

    def __truediv__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        return self.divided(other)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y and self.z == other.z)

    # Mutable, so not hashable.
    __hash__ = None

    def __iter__(self) -> Iterator[np.float32]:
        yield self.x
        yield self.y
        yield self.z

    def initialize(self) -> "Vector3":
        self.x = FLOAT(0.0)
        self.y = FLOAT(0.0)
        self.z = FLOAT(0.0)
        return self

    def translate(self, other: "Vector3") -> "Vector3":
        self.x = FLOAT(self.x + other.x)
        self.y = FLOAT(self.y + other.y)
        self.z = FLOAT(self.z + other.z)
        return self

    def translated(self, other: "Vector3") -> "Vector3":
        return self + other

    def scale(self, value: Scalar) -> "Vector3":
        value = FLOAT(value)
        self.x = FLOAT(self.x * value)
        self.y = FLOAT(self.y * value)
        self.z = FLOAT(self.z * value)
        return self

    def scaled(self, value: Scalar) -> "Vector3":
        value = FLOAT(value)
        return Vector3(self.x * value, self.y * value, self.z * value)

    def divide(self, value: Scalar) -> "Vector3":
        value = FLOAT(value)
        self.x = FLOAT(self.x / value)
        self.y = FLOAT(self.y / value)
        self.z = FLOAT(self.z / value)
        return self

    def divided(self, value: Scalar) -> "Vector3":
        value = FLOAT(value)
        return Vector3(self.x / value, self.y / value, self.z / value)

    def normalize(self) -> "Vector3":
        """
        Rescales the vector in place by its largest signed component.

        This is not a unit-length normalization: (2, 4, 1) becomes
        (0.5, 1, 0.25). When the largest component is not positive the
        vector is left unchanged.
        """
        maximum = max(self.x, self.y, self.z)
        if maximum > 0.0:
            self.divide(maximum)
        return self

    def dot(self, other: "Vector3") -> np.float32:
        return FLOAT(self.x * other.x + self.y * other.y + self.z * other.z)

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Right-handed cross product a x b."""
    return a.cross(b)


def dot(a: Vector3, b: Vector3) -> np.float32:
    return a.dot(b)
