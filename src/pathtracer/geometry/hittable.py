# geometry/hittable.py
import math
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray


class HitRecord:
    """
    Records details of a ray-object intersection. Built once per hit and never
    modified afterwards; transforms produce a new record.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material", "u", "v")

    def __init__(self, p: Vector3, normal: Vector3, t: float, front_face: bool,
                 material=None, u: float = 0.0, v: float = 0.0):
        self.p = p              # Intersection point
        self.normal = normal    # Unit normal, facing against the incoming ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the ray arrived from the outside
        self.material = material
        self.u = u
        self.v = v

    @classmethod
    def face_forward(cls, ray: Ray, p: Vector3, t: float, outward_normal: Vector3,
                     material, u: float = 0.0, v: float = 0.0) -> "HitRecord":
        """
        Ensures that the normal always points against the ray.
        """
        front_face = ray.direction.dot(outward_normal) < 0
        normal = outward_normal if front_face else -outward_normal
        return cls(p, normal, t, front_face, material, u, v)

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")


class Translate(Hittable):
    """
    Moves a child surface by a fixed offset without touching the child itself.
    """
    def __init__(self, child: Hittable, offset: Vector3):
        self.child = child
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.child.hit(moved, t_min, t_max, rng)
        if rec is None:
            return None
        return HitRecord(rec.p + self.offset, rec.normal, rec.t, rec.front_face,
                         rec.material, rec.u, rec.v)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        box = self.child.bounding_box(time0, time1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)


class RotateY(Hittable):
    """
    Rotates a child surface about the y axis by an angle given in degrees.

    The bounding box is computed once, from the eight rotated corners of the
    child's box over [time0, time1], and is therefore axis-aligned and loose.
    """
    def __init__(self, child: Hittable, angle: float, time0: float = 0.0, time1: float = 1.0):
        self.child = child
        self.angle = angle
        radians = math.radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.box = self._rotated_box(child.bounding_box(time0, time1))

    def _to_world(self, p: Vector3) -> Vector3:
        return Vector3(self.cos_theta * p.x + self.sin_theta * p.z,
                       p.y,
                       -self.sin_theta * p.x + self.cos_theta * p.z)

    def _to_object(self, p: Vector3) -> Vector3:
        return Vector3(self.cos_theta * p.x - self.sin_theta * p.z,
                       p.y,
                       self.sin_theta * p.x + self.cos_theta * p.z)

    def _rotated_box(self, box: Optional[AABB]) -> Optional[AABB]:
        if box is None:
            return None
        lo = [math.inf] * 3
        hi = [-math.inf] * 3
        for corner in box.corners():
            rotated = self._to_world(corner)
            for a in range(3):
                lo[a] = min(lo[a], rotated[a])
                hi[a] = max(hi[a], rotated[a])
        return AABB(Vector3(*lo), Vector3(*hi))

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.child.hit(rotated, t_min, t_max, rng)
        if rec is None:
            return None
        # Rotation preserves dot products, so the orientation carries over.
        return HitRecord(self._to_world(rec.p), self._to_world(rec.normal), rec.t,
                         rec.front_face, rec.material, rec.u, rec.v)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.box
