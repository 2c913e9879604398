"""Demo scene catalogue.

Each builder takes an explicit ``random.Random`` (plus optional keyword
settings such as ``texture_path``) and returns a SceneDescription.
Builders run single-threaded before rendering starts; image textures are
decoded here, never during rendering.
"""
import logging
import random
from typing import Optional

from pathtracer.camera.camera import Camera

from .catalogue import (
    SceneDescription,
    cornell_box,
    cornell_smoke,
    earth,
    final_scene,
    random_spheres,
    simple_light,
    two_perlin_spheres,
    two_spheres,
)

logger = logging.getLogger(__name__)

SCENES = {
    "random_spheres": random_spheres,
    "two_spheres": two_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
    "cornell_smoke": cornell_smoke,
    "final_scene": final_scene,
}


def build_scene(name: str, seed: int = 42, **settings) -> SceneDescription:
    """
    Build a catalogue scene by name and index it with a BVH.

    Raises:
        KeyError: If the name is not in the catalogue
    """
    if name not in SCENES:
        raise KeyError(f"Unknown scene {name!r}; choose from {', '.join(SCENES)}")
    rng = random.Random(seed)
    description = SCENES[name](rng, **settings)
    description.world.build_bvh(description.time0, description.time1, rng)
    logger.info("Scene %s: %d top-level objects", name, len(description.world))
    return description


def build_camera(description: SceneDescription, aspect_ratio: Optional[float] = None) -> Camera:
    return Camera(description.lookfrom, description.lookat, description.vup, description.vfov,
                  aspect_ratio or description.aspect_ratio, description.aperture,
                  description.focus_dist, description.time0, description.time1)


__all__ = [
    "SCENES",
    "SceneDescription",
    "build_camera",
    "build_scene",
]
