"""Unit tests for textures, Perlin noise and image loading.

Tests cover:
- Solid and checker textures
- Perlin noise determinism and lattice zeros
- Marble noise texture range
- Image texture lookup, clamping and the missing-data colour
- Texture loading from files and its error cases
"""

import numpy as np
import pytest
from PIL import Image

from pathtracer.core.vector import Vector3
from pathtracer.materials.perlin import Perlin
from pathtracer.materials.texture_loader import decode_image, load_texture
from pathtracer.materials.textures import (
    CheckerTexture,
    ImageTexture,
    NoiseTexture,
    SolidColor,
    as_texture,
)

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)


@pytest.fixture
def quad_pixels():
    """2x2 raster: red, green on the top row; blue, white on the bottom row."""
    return np.array([[RED, GREEN], [BLUE, WHITE]], dtype=np.uint8)


class TestSolidAndChecker:
    """Tests for SolidColor and CheckerTexture."""

    def test_solid_color(self):
        tex = SolidColor(Vector3(0.1, 0.2, 0.3))
        assert tex.value(0.7, 0.2, Vector3(5, 5, 5)) == Vector3(0.1, 0.2, 0.3)

    def test_as_texture(self):
        tex = SolidColor(Vector3(1, 1, 1))
        assert as_texture(tex) is tex
        assert isinstance(as_texture(Vector3(1, 0, 0)), SolidColor)

    def test_checker_picks_by_sign(self):
        checker = CheckerTexture(Vector3(1, 1, 1), Vector3(0, 0, 0))
        assert checker.value(0, 0, Vector3(0.1, 0.1, 0.1)) == Vector3(1, 1, 1)
        assert checker.value(0, 0, Vector3(-0.1, 0.1, 0.1)) == Vector3(0, 0, 0)

    def test_checker_nests_textures(self):
        inner = CheckerTexture(Vector3(0.5, 0.5, 0.5), Vector3(0.2, 0.2, 0.2))
        outer = CheckerTexture(inner, Vector3(0, 0, 0))
        assert outer.value(0, 0, Vector3(0.1, 0.1, 0.1)) == Vector3(0.5, 0.5, 0.5)


class TestPerlin:
    """Tests for Perlin noise."""

    def test_same_seed_same_noise(self):
        a = Perlin(np.random.default_rng(3))
        b = Perlin(np.random.default_rng(3))
        for p in (Vector3(0.3, 1.7, -2.2), Vector3(10.5, 0.25, 3.75)):
            assert a.noise(p) == b.noise(p)
            assert a.turb(p) == b.turb(p)

    def test_zero_on_lattice_points(self):
        perlin = Perlin(np.random.default_rng(5))
        assert perlin.noise(Vector3(3.0, -2.0, 7.0)) == pytest.approx(0.0)

    def test_noise_is_bounded(self):
        perlin = Perlin(np.random.default_rng(5))
        rng = np.random.default_rng(9)
        for x, y, z in rng.uniform(-20, 20, size=(200, 3)):
            assert abs(perlin.noise(Vector3(x, y, z))) <= 2.0
            assert perlin.turb(Vector3(x, y, z)) >= 0.0

    def test_gradient_table_is_normalised(self):
        perlin = Perlin(np.random.default_rng(5))
        assert np.allclose(np.linalg.norm(perlin.ranvec, axis=1), 1.0)
        assert sorted(perlin.perm_x) == list(range(256))


class TestNoiseTexture:
    """Tests for NoiseTexture."""

    def test_grey_in_unit_range(self):
        tex = NoiseTexture(4.0, Perlin(np.random.default_rng(1)))
        rng = np.random.default_rng(2)
        for x, y, z in rng.uniform(-5, 5, size=(100, 3)):
            c = tex.value(0, 0, Vector3(x, y, z))
            assert c.x == c.y == c.z
            assert 0.0 <= c.x <= 1.0


class TestImageTexture:
    """Tests for ImageTexture."""

    def test_corners(self, quad_pixels):
        tex = ImageTexture(quad_pixels)
        assert tex.value(0.0, 1.0, Vector3(0, 0, 0)) == Vector3(1.0, 0.0, 0.0)
        assert tex.value(0.99, 0.99, Vector3(0, 0, 0)) == Vector3(0.0, 1.0, 0.0)
        assert tex.value(0.0, 0.0, Vector3(0, 0, 0)) == Vector3(0.0, 0.0, 1.0)
        assert tex.value(0.99, 0.01, Vector3(0, 0, 0)) == Vector3(1.0, 1.0, 1.0)

    def test_coordinates_are_clamped(self, quad_pixels):
        tex = ImageTexture(quad_pixels)
        assert tex.value(5.0, -3.0, Vector3(0, 0, 0)) == Vector3(1.0, 1.0, 1.0)
        assert tex.value(-1.0, 2.0, Vector3(0, 0, 0)) == Vector3(1.0, 0.0, 0.0)

    def test_missing_data_is_cyan(self):
        assert ImageTexture(None).value(0.5, 0.5, Vector3(0, 0, 0)) == Vector3(0.0, 1.0, 1.0)

    def test_rejects_flat_raster(self):
        with pytest.raises(ValueError):
            ImageTexture(np.zeros((4, 4), dtype=np.uint8))


class TestTextureLoader:
    """Tests for loading textures from image files."""

    def test_load_png(self, tmp_path, quad_pixels):
        path = tmp_path / "quad.png"
        Image.fromarray(quad_pixels).save(path)
        tex = load_texture(str(path))
        assert (tex.width, tex.height) == (2, 2)
        assert tex.value(0.0, 1.0, Vector3(0, 0, 0)) == Vector3(1.0, 0.0, 0.0)

    def test_greyscale_is_converted_to_rgb(self, tmp_path):
        path = tmp_path / "grey.png"
        Image.fromarray(np.full((3, 5), 128, dtype=np.uint8)).save(path)
        pixels = decode_image(str(path))
        assert pixels.shape == (3, 5, 3)
        assert (pixels == 128).all()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_texture(str(tmp_path / "nope.png"))

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "junk.png"
        path.write_bytes(b"definitely not an image")
        with pytest.raises(ValueError):
            load_texture(str(path))

