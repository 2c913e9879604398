# renderer/background.py
from typing import Union
from pathtracer.config import SKY_SETTINGS
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3

SKY_ZENITH = Vector3(*SKY_SETTINGS["zenith"])
SKY_HORIZON = Vector3(*SKY_SETTINGS["horizon"])


class Background:
    """Radiance returned for rays that escape the scene."""
    def value(self, ray: Ray) -> Vector3:
        raise NotImplementedError("value() must be implemented by subclasses.")


class SolidBackground(Background):
    """The same colour in every direction."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, ray: Ray) -> Vector3:
        return self.color

    def __repr__(self) -> str:
        return f"SolidBackground({self.color!r})"


class SkyBackground(Background):
    """
    Vertical gradient between a horizon and a zenith colour, interpolated on
    the y component of the unit ray direction.
    """
    def __init__(self, zenith: Vector3 = SKY_ZENITH, horizon: Vector3 = SKY_HORIZON):
        self.zenith = zenith
        self.horizon = horizon

    def value(self, ray: Ray) -> Vector3:
        t = 0.5 * (ray.direction.normalize().y + 1.0)
        return self.horizon * (1.0 - t) + self.zenith * t

    def __repr__(self) -> str:
        return f"SkyBackground(zenith={self.zenith!r}, horizon={self.horizon!r})"


def as_background(background: Union[Background, Vector3]) -> Background:
    """Accepts a background policy or a bare colour."""
    if isinstance(background, Background):
        return background
    return SolidBackground(background)
