# materials/perlin.py
from typing import Optional
import numpy as np
from numba import njit
from pathtracer.core.vector import Vector3

POINT_COUNT = 256


@njit(cache=True)
def _perlin_noise(ranvec, perm_x, perm_y, perm_z, x, y, z):
    fx = np.floor(x)
    fy = np.floor(y)
    fz = np.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = int(fx)
    j = int(fy)
    k = int(fz)

    # Hermite smoothing of the interpolation weights
    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = perm_x[(i + di) & 255] ^ perm_y[(j + dj) & 255] ^ perm_z[(k + dk) & 255]
                g = ranvec[idx]
                dot = g[0] * (u - di) + g[1] * (v - dj) + g[2] * (w - dk)
                accum += ((di * uu + (1 - di) * (1.0 - uu))
                          * (dj * vv + (1 - dj) * (1.0 - vv))
                          * (dk * ww + (1 - dk) * (1.0 - ww))
                          * dot)
    return accum


@njit(cache=True)
def _perlin_turbulence(ranvec, perm_x, perm_y, perm_z, x, y, z, depth):
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * _perlin_noise(ranvec, perm_x, perm_y, perm_z, x, y, z)
        weight *= 0.5
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)


class Perlin:
    """
    Gradient noise over 256 random unit vectors hashed through three
    permutation tables. Tables are generated once and never modified.
    """
    def __init__(self, rng: Optional[np.random.Generator] = None):
        if rng is None:
            rng = np.random.default_rng()
        ranvec = rng.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        lengths = np.linalg.norm(ranvec, axis=1)
        lengths[lengths == 0.0] = 1.0
        self.ranvec = ranvec / lengths[:, None]
        self.perm_x = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_y = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_z = rng.permutation(POINT_COUNT).astype(np.int64)

    def noise(self, p: Vector3) -> float:
        """Smoothly interpolated noise in roughly [-1, 1]."""
        return _perlin_noise(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                             float(p.x), float(p.y), float(p.z))

    def turb(self, p: Vector3, depth: int = 7) -> float:
        """Absolute sum of depth octaves with halving weight and doubling frequency."""
        return _perlin_turbulence(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                                  float(p.x), float(p.y), float(p.z), depth)
