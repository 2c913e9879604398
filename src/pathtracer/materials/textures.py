# materials/textures.py
import math
from typing import Optional, Union
import numpy as np
from pathtracer.core.vector import Vector3
from pathtracer.materials.perlin import Perlin


class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Sample the texture at surface coordinates (u, v) and world point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


def as_texture(color: Union[Vector3, Texture]) -> Texture:
    """Wraps a bare colour in a SolidColor; textures pass through."""
    if isinstance(color, Texture):
        return color
    return SolidColor(color)


class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color


class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(scale*x) * sin(scale*y) * sin(scale*z)
    picks the odd or the even texture.
    """
    def __init__(self, even: Union[Vector3, Texture], odd: Union[Vector3, Texture],
                 scale: float = 10.0):
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        sines = (math.sin(self.scale * p.x)
                 * math.sin(self.scale * p.y)
                 * math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)


class NoiseTexture(Texture):
    """Marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, perlin: Optional[Perlin] = None):
        self.scale = scale
        self.noise = perlin if perlin is not None else Perlin()

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        # Turbulence shifts the phase of sine bands running along z.
        shade = 0.5 * (1.0 + math.sin(self.scale * p.z + 10.0 * self.noise.turb(p)))
        return Vector3(shade, shade, shade)


class ImageTexture(Texture):
    """
    Nearest-pixel lookup into a decoded RGB raster of shape (height, width, 3).
    Use materials.texture_loader.load_texture() to build one from a file.
    """
    def __init__(self, data: Optional[np.ndarray]):
        if data is None:
            self.data = None
            self.width = self.height = 0
            return
        data = np.asarray(data)
        if data.ndim != 3 or data.shape[2] < 3:
            raise ValueError(f"Image texture needs an (height, width, 3) raster, got {data.shape}")
        # Normalize to [0,1]
        self.data = data[:, :, :3].astype(np.float64) / 255.0
        self.height, self.width = self.data.shape[:2]

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        # Solid cyan makes a missing texture obvious in the render.
        if self.data is None or self.width == 0 or self.height == 0:
            return Vector3(0.0, 1.0, 1.0)

        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)  # Flip V to image coordinates

        # Convert to pixel coordinates
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))
