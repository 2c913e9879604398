# renderer/raytracer.py
import logging
import os
import random
import time
from multiprocessing import Pool
from typing import Optional, Tuple
import numpy as np
from PIL import Image
from tqdm import tqdm
from pathtracer.core.vector import Vector3
from pathtracer.renderer.background import as_background
from pathtracer.renderer.integrator import estimate_radiance
from pathtracer.renderer.tone_mapping import gamma_encode

logger = logging.getLogger(__name__)

# Scene handed to each worker process once by the pool initializer.
_worker_scene = {}


def pixel_rng(seed: int, x: int, y: int) -> random.Random:
    """Generator owned by a single pixel, so results do not depend on scheduling."""
    return random.Random(f"{seed}:{x}:{y}")


def render_row(y: int, world, camera, background, width: int, height: int,
               samples_per_pixel: int, max_depth: int, seed: int) -> np.ndarray:
    """
    Sum samples_per_pixel radiance estimates for every pixel of image row y
    (row 0 is the top of the image).
    """
    row = np.zeros((width, 3), dtype=np.float64)
    j = height - 1 - y
    s_scale = 1.0 / max(width - 1, 1)
    t_scale = 1.0 / max(height - 1, 1)
    for x in range(width):
        rng = pixel_rng(seed, x, y)
        pixel_color = Vector3(0.0, 0.0, 0.0)
        for _ in range(samples_per_pixel):
            s = (x + rng.random()) * s_scale
            t = (j + rng.random()) * t_scale
            ray = camera.get_ray(s, t, rng)
            pixel_color = pixel_color + estimate_radiance(ray, background, world, max_depth, rng)
        row[x] = (pixel_color.x, pixel_color.y, pixel_color.z)
    return row


def _init_worker(world, camera, background, settings):
    _worker_scene["world"] = world
    _worker_scene["camera"] = camera
    _worker_scene["background"] = background
    _worker_scene["settings"] = settings


def _render_row_in_worker(y: int) -> Tuple[int, np.ndarray]:
    s = _worker_scene["settings"]
    row = render_row(y, _worker_scene["world"], _worker_scene["camera"],
                     _worker_scene["background"], s["width"], s["height"],
                     s["samples_per_pixel"], s["max_depth"], s["seed"])
    return y, row


class Renderer:
    """
    Offline pixel driver. Renders rows either in-process or across a
    multiprocessing pool; the scene is read-only during rendering and is
    copied to each worker once.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 100,
                 max_depth: int = 50, workers: int = 1, seed: int = 42,
                 progress: bool = True):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers if workers > 0 else (os.cpu_count() or 1)
        self.seed = seed
        self.progress = progress

    def _settings(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "samples_per_pixel": self.samples_per_pixel,
            "max_depth": self.max_depth,
            "seed": self.seed,
        }

    def render(self, world, camera, background) -> np.ndarray:
        """
        Returns an (height, width, 3) array of summed linear radiance, row 0 at the top.
        """
        background = as_background(background)
        accumulation_buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)
        logger.info("Rendering %dx%d, %d spp, depth %d, %d worker(s)",
                    self.width, self.height, self.samples_per_pixel, self.max_depth, self.workers)
        start = time.perf_counter()
        rows = range(self.height)

        if self.workers == 1:
            for y in tqdm(rows, desc="Rendering", unit="row", disable=not self.progress):
                accumulation_buffer[y] = render_row(y, world, camera, background,
                                                    self.width, self.height,
                                                    self.samples_per_pixel, self.max_depth,
                                                    self.seed)
        else:
            init_args = (world, camera, background, self._settings())
            with Pool(processes=self.workers, initializer=_init_worker, initargs=init_args) as pool:
                results = pool.imap_unordered(_render_row_in_worker, rows)
                for y, row in tqdm(results, total=self.height, desc="Rendering",
                                   unit="row", disable=not self.progress):
                    accumulation_buffer[y] = row

        logger.info("Rendering finished in %.2f s", time.perf_counter() - start)
        return accumulation_buffer

    def render_image(self, world, camera, background) -> np.ndarray:
        """Render and gamma-encode to an (height, width, 3) uint8 image."""
        return gamma_encode(self.render(world, camera, background), self.samples_per_pixel)


def save_image(pixels: np.ndarray, path: str, image_format: Optional[str] = None) -> None:
    """Write an (height, width, 3) uint8 array with Pillow."""
    Image.fromarray(np.asarray(pixels, dtype=np.uint8)).save(path, format=image_format)
    logger.info("Saved %s", path)
