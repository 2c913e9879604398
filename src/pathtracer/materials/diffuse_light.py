# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture


class DiffuseLight(Material):
    """
    Area light: emits the texture's colour from every point of the surface
    and absorbs everything that arrives. Emission is not limited to [0, 1].
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        self.emit = as_texture(emit)

    def scatter(self, ray_in: Ray, rec, rng) -> Optional[Tuple[Vector3, Ray]]:
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        """
        Args:
            u (float): Horizontal surface coordinate of the hit.
            v (float): Vertical surface coordinate of the hit.
            p (Vector3): The hit point, for solid textures.

        Returns:
            Vector3: Emitted radiance at the hit.
        """
        return self.emit.value(u, v, p)
