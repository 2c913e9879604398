# scenes/catalogue.py
import random
from typing import Optional
import numpy as np
from pathtracer.config import DEFAULT_EARTH_TEXTURE
from pathtracer.core.utils import random_vector
from pathtracer.core.vector import Vector3
from pathtracer.geometry.box import Box
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import RotateY, Translate
from pathtracer.geometry.medium import ConstantMedium
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.perlin import Perlin
from pathtracer.materials.texture_loader import load_texture
from pathtracer.materials.textures import CheckerTexture, NoiseTexture
from pathtracer.renderer.background import SolidBackground

SKY_BLUE = Vector3(0.70, 0.80, 1.00)
BLACK = Vector3(0.0, 0.0, 0.0)


class SceneDescription:
    """
    Everything the pixel driver needs besides image settings: the world, the
    camera placement and the background. Image settings are suggestions.
    """
    def __init__(self, world: HittableList, lookfrom: Vector3, lookat: Vector3,
                 vfov: float, background, aperture: float = 0.0,
                 focus_dist: float = 10.0, vup: Vector3 = Vector3(0.0, 1.0, 0.0),
                 time0: float = 0.0, time1: float = 1.0, aspect_ratio: float = 16.0 / 9.0,
                 samples_per_pixel: Optional[int] = None):
        self.world = world
        self.lookfrom = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.vfov = vfov
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.time0 = time0
        self.time1 = time1
        self.background = background
        self.aspect_ratio = aspect_ratio
        self.samples_per_pixel = samples_per_pixel


def _perlin(rng: random.Random) -> Perlin:
    return Perlin(np.random.default_rng(rng.getrandbits(64)))


def random_spheres(rng: random.Random, **_) -> SceneDescription:
    world = HittableList()

    checker = CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9))
    world.add(Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, Lambertian(checker)))
    material_glass = Dielectric(1.5)

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vector3(4.0, 0.2, 0.0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                # diffuse, bouncing during the shutter interval
                albedo = random_vector(rng) * random_vector(rng)
                center2 = center + Vector3(0.0, rng.uniform(0.0, 0.5), 0.0)
                world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = random_vector(rng, 0.5, 1.0)
                world.add(Sphere(center, 0.2, Metal(albedo, rng.uniform(0.0, 0.5))))
            else:
                world.add(Sphere(center, 0.2, material_glass))

    world.add(Sphere(Vector3(0.0, 1.0, 0.0), 1.0, material_glass))
    world.add(Sphere(Vector3(-4.0, 1.0, 0.0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4.0, 1.0, 0.0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))

    return SceneDescription(world, Vector3(13.0, 2.0, 3.0), Vector3(0.0, 0.0, 0.0), 20.0,
                            SolidBackground(SKY_BLUE), aperture=0.1)


def two_spheres(rng: random.Random, **_) -> SceneDescription:
    checker = CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9))
    world = HittableList([
        Sphere(Vector3(0.0, -10.0, 0.0), 10.0, Lambertian(checker)),
        Sphere(Vector3(0.0, 10.0, 0.0), 10.0, Lambertian(checker)),
    ])
    return SceneDescription(world, Vector3(13.0, 2.0, 3.0), Vector3(0.0, 0.0, 0.0), 20.0,
                            SolidBackground(SKY_BLUE))


def two_perlin_spheres(rng: random.Random, **_) -> SceneDescription:
    pertext = Lambertian(NoiseTexture(4.0, _perlin(rng)))
    world = HittableList([
        Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, pertext),
        Sphere(Vector3(0.0, 2.0, 0.0), 2.0, pertext),
    ])
    return SceneDescription(world, Vector3(13.0, 2.0, 3.0), Vector3(0.0, 0.0, 0.0), 20.0,
                            SolidBackground(SKY_BLUE))


def earth(rng: random.Random, texture_path: Optional[str] = None,
          **_) -> SceneDescription:
    earth_surface = Lambertian(load_texture(texture_path or DEFAULT_EARTH_TEXTURE))
    world = HittableList([Sphere(Vector3(0.0, 0.0, 0.0), 2.0, earth_surface)])
    return SceneDescription(world, Vector3(13.0, 2.0, 3.0), Vector3(0.0, 0.0, 0.0), 20.0,
                            SolidBackground(SKY_BLUE))


def simple_light(rng: random.Random, **_) -> SceneDescription:
    pertext = Lambertian(NoiseTexture(4.0, _perlin(rng)))
    world = HittableList([
        Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, pertext),
        Sphere(Vector3(0.0, 2.0, 0.0), 2.0, pertext),
        XYRect(3.0, 5.0, 1.0, 3.0, -2.0, DiffuseLight(Vector3(4.0, 4.0, 4.0))),
    ])
    return SceneDescription(world, Vector3(26.0, 3.0, 6.0), Vector3(0.0, 2.0, 0.0), 20.0,
                            SolidBackground(BLACK), samples_per_pixel=400)


def _cornell_walls(light_strength: float, light_rect):
    red = Lambertian(Vector3(0.65, 0.05, 0.05))
    white = Lambertian(Vector3(0.73, 0.73, 0.73))
    green = Lambertian(Vector3(0.12, 0.45, 0.15))
    light = DiffuseLight(Vector3(light_strength, light_strength, light_strength))

    world = HittableList([
        YZRect(0.0, 555.0, 0.0, 555.0, 555.0, green),
        YZRect(0.0, 555.0, 0.0, 555.0, 0.0, red),
        XZRect(*light_rect, 554.0, light),
        XZRect(0.0, 555.0, 0.0, 555.0, 0.0, white),
        XZRect(0.0, 555.0, 0.0, 555.0, 555.0, white),
        XYRect(0.0, 555.0, 0.0, 555.0, 555.0, white),
    ])
    return world, white


def _cornell_blocks(white):
    box1 = Box(Vector3(0.0, 0.0, 0.0), Vector3(165.0, 330.0, 165.0), white)
    box1 = Translate(RotateY(box1, 15.0), Vector3(265.0, 0.0, 295.0))
    box2 = Box(Vector3(0.0, 0.0, 0.0), Vector3(165.0, 165.0, 165.0), white)
    box2 = Translate(RotateY(box2, -18.0), Vector3(130.0, 0.0, 65.0))
    return box1, box2


def _cornell_description(world: HittableList) -> SceneDescription:
    return SceneDescription(world, Vector3(278.0, 278.0, -800.0), Vector3(278.0, 278.0, 0.0),
                            40.0, SolidBackground(BLACK), aspect_ratio=1.0,
                            samples_per_pixel=200)


def cornell_box(rng: random.Random, **_) -> SceneDescription:
    world, white = _cornell_walls(15.0, (213.0, 343.0, 227.0, 332.0))
    for block in _cornell_blocks(white):
        world.add(block)
    return _cornell_description(world)


def cornell_smoke(rng: random.Random, **_) -> SceneDescription:
    world, white = _cornell_walls(7.0, (113.0, 443.0, 127.0, 432.0))
    box1, box2 = _cornell_blocks(white)
    world.add(ConstantMedium(box1, 0.01, Vector3(0.0, 0.0, 0.0)))
    world.add(ConstantMedium(box2, 0.01, Vector3(1.0, 1.0, 1.0)))
    return _cornell_description(world)


def final_scene(rng: random.Random, texture_path: Optional[str] = None,
                **_) -> SceneDescription:
    ground = Lambertian(Vector3(0.48, 0.83, 0.54))
    boxes1 = HittableList()
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = rng.uniform(1.0, 101.0)
            boxes1.add(Box(Vector3(x0, 0.0, z0), Vector3(x0 + w, y1, z0 + w), ground))

    objects = HittableList()
    objects.add(BVHNode.build(boxes1.objects, 0.0, 1.0, rng))

    light = DiffuseLight(Vector3(7.0, 7.0, 7.0))
    objects.add(XZRect(123.0, 423.0, 147.0, 412.0, 554.0, light))

    center1 = Vector3(400.0, 400.0, 200.0)
    center2 = center1 + Vector3(30.0, 0.0, 0.0)
    objects.add(MovingSphere(center1, center2, 0.0, 1.0, 50.0, Lambertian(Vector3(0.7, 0.3, 0.1))))

    objects.add(Sphere(Vector3(260.0, 150.0, 45.0), 50.0, Dielectric(1.5)))
    objects.add(Sphere(Vector3(0.0, 150.0, 145.0), 50.0, Metal(Vector3(0.8, 0.8, 0.9), 1.0)))

    # Glass shell filled with blue subsurface-like fog.
    boundary = Sphere(Vector3(360.0, 150.0, 145.0), 70.0, Dielectric(1.5))
    objects.add(boundary)
    objects.add(ConstantMedium(boundary, 0.2, Vector3(0.2, 0.4, 0.9)))
    # Thin mist over the whole scene.
    boundary = Sphere(Vector3(0.0, 0.0, 0.0), 5000.0, Dielectric(1.5))
    objects.add(ConstantMedium(boundary, 0.0001, Vector3(1.0, 1.0, 1.0)))

    emat = Lambertian(load_texture(texture_path or DEFAULT_EARTH_TEXTURE))
    objects.add(Sphere(Vector3(400.0, 200.0, 400.0), 100.0, emat))
    objects.add(Sphere(Vector3(220.0, 280.0, 300.0), 80.0,
                       Lambertian(NoiseTexture(0.1, _perlin(rng)))))

    white = Lambertian(Vector3(0.73, 0.73, 0.73))
    boxes2 = [Sphere(random_vector(rng, 0.0, 165.0), 10.0, white) for _ in range(1000)]
    objects.add(Translate(RotateY(BVHNode.build(boxes2, 0.0, 1.0, rng), 15.0),
                          Vector3(-100.0, 270.0, 395.0)))

    return SceneDescription(objects, Vector3(478.0, 278.0, -600.0), Vector3(278.0, 278.0, 0.0),
                            40.0, SolidBackground(BLACK), aspect_ratio=1.0,
                            samples_per_pixel=10000)
