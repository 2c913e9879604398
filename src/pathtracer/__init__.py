"""Offline Monte-Carlo path tracer.

Subpackages:
    core: vectors, rays, bounding boxes and sampling helpers
    geometry: surfaces, composites, the BVH and participating media
    materials: materials, textures and Perlin noise
    camera: thin-lens camera with a shutter interval
    renderer: radiance integrator, backgrounds, tone mapping and pixel driver
    scenes: demo scene catalogue
"""

__version__ = "0.1.0"
