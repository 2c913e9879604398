# core/utils.py
import math
import random
import threading
from typing import Optional
from pathtracer.core.vector import Vector3

_thread_state = threading.local()


def default_rng() -> random.Random:
    """
    Returns the generator owned by the calling thread, creating it on first use.
    Only used when a caller did not hand a generator down explicitly.
    """
    rng = getattr(_thread_state, "rng", None)
    if rng is None:
        rng = random.Random()
        _thread_state.rng = rng
    return rng


def random_vector(rng: random.Random, lo: float = 0.0, hi: float = 1.0) -> Vector3:
    return Vector3(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))


def random_in_unit_sphere(rng: random.Random) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if 0.0 < p.dot(p) <= 1.0:
            return p


def random_unit_vector(rng: random.Random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()


def random_in_unit_disk(rng: random.Random) -> Vector3:
    """Random point in the unit disk on the z = 0 plane, used for lens sampling."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0.0)
        if p.dot(p) <= 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Snell refraction of the unit vector uv through a surface with unit normal n.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of the Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)


def resolve_rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else default_rng()
