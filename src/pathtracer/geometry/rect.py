# geometry/rect.py
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

# Half thickness given to thin axes so the box never has zero volume.
RECT_PAD = 1e-4


def _unit_offset(x: float, lo: float, hi: float) -> float:
    # Degenerate (zero-width) extents map to 0.
    if hi == lo:
        return 0.0
    return (x - lo) / (hi - lo)


class AxisAlignedRect(Hittable):
    """
    Rectangle lying in the plane ``axis == k`` and spanning [a0, a1] x [b0, b1]
    on the two remaining axes (in x, y, z order).
    """
    axis = 2

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material
        self._a_axis, self._b_axis = [i for i in range(3) if i != self.axis]
        normal = [0.0, 0.0, 0.0]
        normal[self.axis] = 1.0
        self._normal = Vector3(*normal)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        d = ray.direction[self.axis]
        if d == 0.0:
            # Parallel to the plane.
            return None
        t = (self.k - ray.origin[self.axis]) / d
        if t < t_min or t > t_max:
            return None
        a = ray.origin[self._a_axis] + t * ray.direction[self._a_axis]
        b = ray.origin[self._b_axis] + t * ray.direction[self._b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None
        u = _unit_offset(a, self.a0, self.a1)
        v = _unit_offset(b, self.b0, self.b1)
        return HitRecord.face_forward(ray, ray.at(t), t, self._normal, self.material, u, v)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[self._a_axis], hi[self._a_axis] = self.a0, self.a1
        lo[self._b_axis], hi[self._b_axis] = self.b0, self.b1
        lo[self.axis] = hi[self.axis] = self.k
        return AABB(Vector3(*lo), Vector3(*hi)).pad(RECT_PAD)


class XYRect(AxisAlignedRect):
    """Rectangle in the plane z = k."""
    axis = 2


class XZRect(AxisAlignedRect):
    """Rectangle in the plane y = k."""
    axis = 1


class YZRect(AxisAlignedRect):
    """Rectangle in the plane x = k."""
    axis = 0
