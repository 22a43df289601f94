from raykernel.kernels.jit_geometry import cross_inplace, dot, intersect_arrays, ray_triangle_intersect

__all__ = ["cross_inplace", "dot", "intersect_arrays", "ray_triangle_intersect"]
