# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit


@njit(cache=True)
def _gamma_encode_kernel(summed, scale, output):
    height, width, channels = summed.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = summed[y, x, c] * scale
                # Negative and nan radiance both land on 0.
                if not value > 0.0:
                    output[y, x, c] = 0
                    continue
                encoded = math.floor(math.sqrt(value) * 255.0 + 0.5)
                output[y, x, c] = 255 if encoded > 255 else encoded


def gamma_encode(summed: np.ndarray, samples: int) -> np.ndarray:
    """
    Convert summed linear radiance to 8-bit channels with gamma 2:
    channel = round(sqrt(sum / samples) * 255), clamped to [0, 255].
    """
    if samples <= 0:
        raise ValueError(f"samples must be positive, got {samples}")
    summed = np.ascontiguousarray(summed, dtype=np.float64)
    output = np.zeros(summed.shape, dtype=np.uint8)
    _gamma_encode_kernel(summed, 1.0 / samples, output)
    return output
