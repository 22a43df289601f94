# core/utils.py
import numpy as np

# All components and scalars in the kernel are single precision.
FLOAT = np.float32

# Machine epsilon for float32 (~1.1920929e-7).
EPSILON = np.finfo(FLOAT).eps


def near_zero(value) -> bool:
    """
    Returns True if |value| is below the float32 epsilon.
    """
    return bool(-EPSILON < value < EPSILON)
