from .background import Background, SkyBackground, SolidBackground, as_background
from .integrator import estimate_radiance
from .raytracer import Renderer, render_row, save_image
from .tone_mapping import gamma_encode

__all__ = [
    "Background",
    "Renderer",
    "SkyBackground",
    "SolidBackground",
    "as_background",
    "estimate_radiance",
    "gamma_encode",
    "render_row",
    "save_image",
]
