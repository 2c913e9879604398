# src/materials/dielectric.py
import math
from typing import Tuple
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, refract, schlick
from pathtracer.materials.material import Material

WHITE = Vector3(1.0, 1.0, 1.0)


class Dielectric(Material):
    """
    Clear dielectric (glass, water) with index of refraction ir. Chooses
    between reflection and refraction stochastically by Schlick reflectance.
    """
    def __init__(self, ir: float):
        self.ir = ir

    def scatter(self, ray_in: Ray, rec, rng) -> Tuple[Vector3, Ray]:
        attenuation = WHITE  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.ir if rec.front_face else self.ir

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, self.ir) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return attenuation, Ray(rec.p, direction, ray_in.time)
