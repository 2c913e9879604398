# renderer/integrator.py
import math
from pathtracer.config import T_MIN
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.renderer.background import as_background

BLACK = Vector3(0.0, 0.0, 0.0)


def estimate_radiance(ray: Ray, background, world, depth: int, rng) -> Vector3:
    """
    Monte-Carlo estimate of the radiance carried back along ray.

    Each call probes the scene once; on a hit the material's emission is added
    to its attenuation times the radiance of the scattered ray, recursing at
    most depth times. Rays that run out of depth contribute nothing; rays that
    escape pick up the background.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, math.inf, rng)
    if rec is None:
        return as_background(background).value(ray)

    emitted = rec.material.emitted(rec.u, rec.v, rec.p)
    scattered = rec.material.scatter(ray, rec, rng)
    if scattered is None:
        return emitted

    attenuation, scattered_ray = scattered
    return emitted + attenuation * estimate_radiance(scattered_ray, background, world, depth - 1, rng)
