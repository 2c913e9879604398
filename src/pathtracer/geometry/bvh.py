# src/geometry/bvh.py
from typing import List, Optional, Sequence
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.utils import resolve_rng
from pathtracer.geometry.hittable import Hittable, HitRecord


def _box_of(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise ValueError(f"No bounding box in BVH node constructor for {obj!r}.")
    return box


class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy node.

    Each level splits along an axis picked at random: the span is sorted by the
    minimum corner of the child boxes on that axis and halved. A single object
    is stored in both children so traversal never needs a leaf special case.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int,
                 time0: float, time1: float, rng):
        axis = rng.randint(0, 2)
        object_span = end - start

        if object_span <= 0:
            raise ValueError("Cannot build a BVH node over an empty span.")
        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            a, b = objects[start], objects[start + 1]
            if _box_of(a, time0, time1).minimum[axis] < _box_of(b, time0, time1).minimum[axis]:
                self.left, self.right = a, b
            else:
                self.left, self.right = b, a
        else:
            objects[start:end] = sorted(objects[start:end],
                                        key=lambda obj: _box_of(obj, time0, time1).minimum[axis])
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1, rng)
            self.right = BVHNode(objects, mid, end, time0, time1, rng)

        self.box = AABB.surrounding_box(_box_of(self.left, time0, time1),
                                        _box_of(self.right, time0, time1))

    @classmethod
    def build(cls, objects: Sequence[Hittable], time0: float = 0.0, time1: float = 1.0,
              rng=None) -> "BVHNode":
        """
        Builds a tree over a copy of objects; the caller's collection is left untouched.
        """
        items = list(objects)
        if not items:
            raise ValueError("Cannot build a BVH over an empty object list.")
        return cls(items, 0, len(items), time0, time1, resolve_rng(rng))

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max, rng)
        if hit_left is None:
            return self.right.hit(ray, t_min, t_max, rng)

        # Only a strictly closer hit on the right can replace the left one.
        hit_right = self.right.hit(ray, t_min, hit_left.t, rng)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return self.box

    def depth(self) -> int:
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)
