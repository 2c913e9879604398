# materials/material.py
from typing import Optional, Tuple
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3

BLACK = Vector3(0.0, 0.0, 0.0)


class Material:
    """
    Abstract material class. Subclasses must implement scatter(); emitters
    also override emitted().
    """
    def scatter(self, ray_in: Ray, rec, rng) -> Optional[Tuple[Vector3, Ray]]:
        """
        Computes the attenuation and the scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        return BLACK
