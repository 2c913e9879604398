"""Unit tests for the thin-lens camera.

Tests cover:
- Primary ray directions across the image plane
- Shutter time sampling
- Lens sampling for depth of field
- Degenerate camera placements
"""

import pytest

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3

ORIGIN = Vector3(0.0, 0.0, 0.0)
FORWARD = Vector3(0.0, 0.0, -1.0)
UP = Vector3(0.0, 1.0, 0.0)


class TestCameraRays:
    """Tests for Camera.get_ray()."""

    def test_center_ray_looks_at_target(self, rng):
        camera = Camera(ORIGIN, FORWARD, UP, 90.0, 1.0)
        ray = camera.get_ray(0.5, 0.5, rng)
        assert ray.origin == ORIGIN
        assert list(ray.direction.normalize()) == pytest.approx([0.0, 0.0, -1.0])

    def test_corners(self, rng):
        """s runs left to right, t bottom to top; 90 degrees spans 45 each way."""
        camera = Camera(ORIGIN, FORWARD, UP, 90.0, 1.0)
        lower_left = camera.get_ray(0.0, 0.0, rng).direction.normalize()
        upper_right = camera.get_ray(1.0, 1.0, rng).direction.normalize()
        k = 1.0 / 3 ** 0.5
        assert list(lower_left) == pytest.approx([-k, -k, -k])
        assert list(upper_right) == pytest.approx([k, k, -k])

    def test_aspect_ratio_widens_view(self, rng):
        camera = Camera(ORIGIN, FORWARD, UP, 90.0, 2.0, focus_dist=1.0)
        right = camera.get_ray(1.0, 0.5, rng).direction
        top = camera.get_ray(0.5, 1.0, rng).direction
        assert right.x == pytest.approx(2.0)
        assert top.y == pytest.approx(1.0)

    def test_fixed_shutter(self, rng):
        camera = Camera(ORIGIN, FORWARD, UP, 40.0, 1.0, time0=0.3, time1=0.3)
        assert camera.get_ray(0.5, 0.5, rng).time == 0.3

    def test_open_shutter(self, rng):
        camera = Camera(ORIGIN, FORWARD, UP, 40.0, 1.0, time0=0.0, time1=1.0)
        times = {camera.get_ray(0.5, 0.5, rng).time for _ in range(20)}
        assert all(0.0 <= t <= 1.0 for t in times)
        assert len(times) > 1

    def test_lens_offsets_origin_within_aperture(self, rng):
        camera = Camera(ORIGIN, FORWARD, UP, 40.0, 1.0, aperture=0.5, focus_dist=4.0)
        for _ in range(50):
            ray = camera.get_ray(0.5, 0.5, rng)
            assert ray.origin.z == pytest.approx(0.0)
            assert ray.origin.length() <= 0.25 + 1e-12
            # Every lens sample converges on the focus plane.
            focus_point = ray.at(1.0)
            assert list(focus_point) == pytest.approx([0.0, 0.0, -4.0])


class TestCameraValidation:
    """Tests for degenerate camera placements."""

    def test_lookfrom_equals_lookat(self):
        with pytest.raises(ValueError):
            Camera(ORIGIN, ORIGIN, UP, 40.0, 1.0)

    def test_up_parallel_to_view(self):
        with pytest.raises(ValueError):
            Camera(ORIGIN, Vector3(0.0, 5.0, 0.0), UP, 40.0, 1.0)
