# geometry/medium.py
import math
from typing import Optional, Union
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.utils import resolve_rng
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.materials.isotropic import Isotropic
from pathtracer.materials.textures import Texture

# Gap between the entry crossing and the search for the exit crossing.
BOUNDARY_EPSILON = 1e-4


class ConstantMedium(Hittable):
    """
    Homogeneous participating medium (smoke, fog) filling a closed boundary.

    A ray travelling through the interior scatters after an exponentially
    distributed free-flight distance. If that distance exceeds the path length
    inside the boundary the ray leaves untouched; surfacing the far side of the
    boundary, if it should be visible at all, is left to the enclosing list.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Vector3, Texture]):
        if density <= 0:
            raise ValueError(f"ConstantMedium density must be positive, got {density}")
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rec1 = self.boundary.hit(ray, -math.inf, math.inf, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + BOUNDARY_EPSILON, math.inf, rng)
        if rec2 is None:
            return None

        enter = max(t_min, rec1.t)
        leave = min(t_max, rec2.t)
        if enter >= leave:
            return None
        enter = max(enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (leave - enter) * ray_length
        # 1 - random() lies in (0, 1], keeping the logarithm finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - resolve_rng(rng).random())
        if hit_distance > distance_inside_boundary:
            return None

        t = enter + hit_distance / ray_length
        # The normal is arbitrary; isotropic scattering ignores it.
        return HitRecord(ray.at(t), Vector3(1.0, 0.0, 0.0), t, True, self.phase_function)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)
