# main.py
from raykernel.core.vector import Vector3
from raykernel.core.ray import Ray
from raykernel.geometry.triangle import Triangle, hit
from raykernel.kernels.jit_geometry import intersect_arrays

# Reference triangle in the z=0 plane and the rays cast at it.
TRIANGLE = Triangle(Vector3(-1, -1, 0), Vector3(1, -1, 0), Vector3(0, 1, 0))
SCENARIOS = {
    "centroid hit": Ray(Vector3(0, -0.3333333, -1), Vector3(0, 0, 1)),
    "parallel": Ray(Vector3(0, -0.3333333, 0), Vector3(1, 0, 0)),
    "outside": Ray(Vector3(5, 5, -1), Vector3(0, 0, 1)),
    "behind origin": Ray(Vector3(0, -0.333, 1), Vector3(0, 0, 1)),
}


def main():
    print(f"Triangle: {TRIANGLE}")
    for name, ray in SCENARIOS.items():
        rec = hit(ray, TRIANGLE)
        compiled = intersect_arrays(ray.origin.to_array(), ray.direction.to_array(),
                                    *(vertex.to_array() for vertex in TRIANGLE.vertices))
        if rec is None:
            print(f"{name}: {ray} -> no intersection")
        else:
            print(f"{name}: {ray} -> {rec.p} (t={rec.t}, u={rec.u}, v={rec.v}, front_face={rec.front_face})")
        if (rec is None) != (compiled is None):
            print(f"Warning: compiled kernel disagrees for {name}: {compiled}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
