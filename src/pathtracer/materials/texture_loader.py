# materials/texture_loader.py
import logging
import os
from PIL import Image, UnidentifiedImageError
import numpy as np
from pathtracer.materials.textures import ImageTexture

logger = logging.getLogger(__name__)


def decode_image(image_path: str) -> np.ndarray:
    """
    Decode an image file into an (height, width, 3) uint8 RGB raster.

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the file cannot be decoded as an image
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            # Convert to RGB if necessary
            if img.mode != 'RGB':
                img = img.convert('RGB')
            return np.array(img, dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e


def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture. Must run during scene construction,
    before any rendering work starts.
    """
    pixels = decode_image(image_path)
    logger.info("Loaded texture %s (%dx%d)", image_path, pixels.shape[1], pixels.shape[0])
    return ImageTexture(pixels)
