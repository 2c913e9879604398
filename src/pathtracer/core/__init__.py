from .aabb import AABB
from .ray import Ray
from .utils import (
    default_rng,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    random_vector,
    reflect,
    refract,
    schlick,
)
from .vector import Vector3

__all__ = [
    "AABB",
    "Ray",
    "Vector3",
    "default_rng",
    "random_in_unit_disk",
    "random_in_unit_sphere",
    "random_unit_vector",
    "random_vector",
    "reflect",
    "refract",
    "schlick",
]
