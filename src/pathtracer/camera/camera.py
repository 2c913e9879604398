# camera/camera.py
import math
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk


class Camera:
    """
    Thin-lens camera looking from lookfrom towards lookat.

    vfov is the vertical field of view in degrees. A non-zero aperture gives
    depth of field around focus_dist; [time0, time1] is the shutter interval
    sampled for motion blur.
    """
    def __init__(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0, time0: float = 0.0, time1: float = 0.0):
        self.lookfrom = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        look = self.lookfrom - self.lookat
        if look.near_zero(1e-12):
            raise ValueError("Camera lookfrom and lookat coincide; view direction is undefined.")
        self.w = look.normalize()

        side = self.vup.cross(self.w)
        if side.near_zero(1e-12):
            raise ValueError("Camera up vector is parallel to the view direction.")
        self.u = side.normalize()
        self.v = self.w.cross(self.u)

        # Compute viewport dimensions based on fov
        h = math.tan(math.radians(self.vfov) / 2)
        viewport_height = 2.0 * h
        viewport_width = self.aspect_ratio * viewport_height

        # Scale by focus distance
        self.origin = self.lookfrom
        self.horizontal = self.u * viewport_width * self.focus_dist
        self.vertical = self.v * viewport_height * self.focus_dist
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """
        Generates a ray through image-plane position (s, t); s runs left to
        right and t bottom to top, both in [0, 1].
        """
        offset = Vector3(0.0, 0.0, 0.0)
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        time = self.time0 if self.time1 == self.time0 else rng.uniform(self.time0, self.time1)
        return Ray(ray_origin, ray_direction, time)
