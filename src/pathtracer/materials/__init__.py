from .dielectric import Dielectric
from .diffuse_light import DiffuseLight
from .isotropic import Isotropic
from .lambertian import Lambertian
from .material import Material
from .metal import Metal
from .perlin import Perlin
from .texture_loader import load_texture
from .textures import CheckerTexture, ImageTexture, NoiseTexture, SolidColor, Texture

__all__ = [
    "CheckerTexture",
    "Dielectric",
    "DiffuseLight",
    "ImageTexture",
    "Isotropic",
    "Lambertian",
    "Material",
    "Metal",
    "NoiseTexture",
    "Perlin",
    "SolidColor",
    "Texture",
    "load_texture",
]
