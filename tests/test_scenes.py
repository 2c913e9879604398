"""Tests for the scene catalogue and the command-line entry point.

Tests cover:
- Every catalogue scene builds and is indexed by a BVH
- Scene construction is reproducible from the seed
- Texture-backed scenes and their missing-file errors
- Argument parsing and a tiny end-to-end render
"""

import math
import random

import numpy as np
import pytest
from PIL import Image

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.medium import ConstantMedium
from pathtracer.main import main, parse_args
from pathtracer.scenes import SCENES, build_camera, build_scene

TEXTURE_FREE = ["random_spheres", "two_spheres", "two_perlin_spheres",
                "simple_light", "cornell_box", "cornell_smoke"]


@pytest.fixture
def earth_png(tmp_path):
    path = tmp_path / "earth.png"
    pixels = np.zeros((8, 16, 3), dtype=np.uint8)
    pixels[:, :8] = (20, 60, 200)
    pixels[:, 8:] = (40, 160, 40)
    Image.fromarray(pixels).save(path)
    return str(path)


class TestCatalogue:
    """Tests for build_scene() and build_camera()."""

    def test_catalogue_names(self):
        assert set(SCENES) == set(TEXTURE_FREE) | {"earth", "final_scene"}

    @pytest.mark.parametrize("name", TEXTURE_FREE)
    def test_scene_builds(self, name):
        description = build_scene(name, seed=1)
        assert len(description.world) > 0
        assert description.world.bvh_root is not None
        camera = build_camera(description)
        ray = camera.get_ray(0.5, 0.5, random.Random(0))
        assert math.isfinite(ray.direction.length())

    def test_unknown_scene(self):
        with pytest.raises(KeyError):
            build_scene("teapot")

    def test_reproducible_from_seed(self):
        a = build_scene("random_spheres", seed=5)
        b = build_scene("random_spheres", seed=5)
        c = build_scene("random_spheres", seed=6)
        def centers(description):
            return [getattr(o, "center0", getattr(o, "center", None)) for o in description.world]

        assert centers(a) == centers(b)
        assert centers(a) != centers(c)

    def test_cornell_box_layout(self):
        description = build_scene("cornell_box")
        assert len(description.world) == 8
        assert description.aspect_ratio == 1.0
        assert description.background.color == Vector3(0.0, 0.0, 0.0)
        # A ray down the middle of the box stops at or before the back wall.
        ray = Ray(Vector3(278.0, 278.0, -800.0), Vector3(0.0, 0.0, 1.0))
        rec = description.world.hit(ray, 0.001, math.inf)
        assert rec is not None
        assert rec.p.z <= 555.0 + 1e-6

    def test_cornell_smoke_has_media(self):
        description = build_scene("cornell_smoke")
        media = [o for o in description.world if isinstance(o, ConstantMedium)]
        assert len(media) == 2

    def test_camera_aspect_override(self):
        description = build_scene("two_spheres")
        assert build_camera(description, aspect_ratio=2.0).aspect_ratio == 2.0

    def test_earth_with_texture(self, earth_png):
        description = build_scene("earth", texture_path=earth_png)
        assert len(description.world) == 1

    def test_final_scene_with_texture(self, earth_png):
        description = build_scene("final_scene", seed=3, texture_path=earth_png)
        assert description.samples_per_pixel == 10000
        assert description.world.bounding_box(0.0, 1.0) is not None

    def test_missing_texture(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            build_scene("earth", texture_path=str(tmp_path / "missing.jpg"))


class TestCommandLine:
    """Tests for parse_args() and main()."""

    def test_defaults(self):
        args = parse_args([])
        assert args.scene == "cornell_box"
        assert args.output == "output.png"
        assert args.width == 400
        assert args.quality is None
        assert args.background == "scene"
        assert args.workers == 0

    def test_overrides(self):
        args = parse_args(["two_spheres", "out.png", "--width", "64", "--samples", "3",
                           "--background", "sky", "--seed", "9", "--no-progress"])
        assert (args.scene, args.output, args.width, args.samples) == ("two_spheres", "out.png", 64, 3)
        assert args.background == "sky"
        assert args.seed == 9
        assert args.no_progress

    def test_unknown_scene_is_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["teapot"])

    def test_end_to_end_render(self, tmp_path):
        out = tmp_path / "render.png"
        code = main(["two_spheres", str(out), "--width", "8", "--samples", "1",
                     "--max-depth", "2", "--workers", "1", "--no-progress"])
        assert code == 0
        with Image.open(out) as img:
            assert img.size == (8, 4)

    def test_zero_max_depth_is_honoured(self, tmp_path):
        out = tmp_path / "black.png"
        code = main(["two_spheres", str(out), "--width", "8", "--samples", "1",
                     "--max-depth", "0", "--workers", "1", "--no-progress"])
        assert code == 0
        with Image.open(out) as img:
            assert np.asarray(img).max() == 0

    def test_missing_texture_fails_cleanly(self, tmp_path):
        code = main(["earth", str(tmp_path / "x.png"), "--texture", str(tmp_path / "nope.jpg"),
                     "--no-progress"])
        assert code == 1

    def test_bad_sample_count_fails_cleanly(self, tmp_path):
        code = main(["two_spheres", str(tmp_path / "x.png"), "--width", "8", "--samples", "0",
                     "--no-progress"])
        assert code == 1
