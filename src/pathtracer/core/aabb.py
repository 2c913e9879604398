# core/aabb.py
import math
from pathtracer.core.vector import Vector3


def _reciprocal(d: float) -> float:
    # Python raises on x / 0.0 where IEEE hardware yields a signed infinity.
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d


class AABB:
    """
    Axis-aligned bounding box given by its two extreme corners. Zero-thickness
    boxes are valid; planar primitives pad them before handing them to the BVH.
    """
    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        # A nan slab bound (0 * inf) fails both comparisons and leaves the interval alone.
        for a in range(3):
            invD = _reciprocal(ray.direction[a])
            origin = ray.origin[a]
            t0 = (self.minimum[a] - origin) * invD
            t1 = (self.maximum[a] - origin) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def pad(self, delta: float = 1e-4) -> "AABB":
        """
        Returns a copy widened by delta on every axis thinner than delta.
        """
        lo = list(self.minimum)
        hi = list(self.maximum)
        for a in range(3):
            if hi[a] - lo[a] < delta:
                lo[a] -= delta
                hi[a] += delta
        return AABB(Vector3(*lo), Vector3(*hi))

    def corners(self):
        for x in (self.minimum.x, self.maximum.x):
            for y in (self.minimum.y, self.maximum.y):
                for z in (self.minimum.z, self.maximum.z):
                    yield Vector3(x, y, z)

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
