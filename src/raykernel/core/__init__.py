from raykernel.core.utils import EPSILON, FLOAT, near_zero
from raykernel.core.vector import Vector3, cross, dot
from raykernel.core.ray import Ray

__all__ = ["EPSILON", "FLOAT", "near_zero", "Vector3", "cross", "dot", "Ray"]
