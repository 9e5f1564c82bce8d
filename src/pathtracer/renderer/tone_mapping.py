# renderer/tone_mapping.py
from typing import Sequence

import numpy as np
from numba import njit

from pathtracer.core.vector import Vector3

# Rec. 709 luminance weights
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float32)


def pixels_to_array(pixels: Sequence[Vector3], width: int, height: int) -> np.ndarray:
    """
    Converts a row-major pixel buffer to a (height, width, 3) float32 array.
    """
    if len(pixels) != width * height:
        raise ValueError(f"Expected {width * height} pixels, got {len(pixels)}")
    flat = np.array([p.to_tuple() for p in pixels], dtype=np.float32)
    return flat.reshape(height, width, 3)

@njit(cache=True, fastmath=True)
def _reinhard_kernel(linear_image, output_image, exposure, white_point, gamma):
    height, width, _ = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(3):
                v = max(linear_image[y, x, c], 0.0) * exposure
                v = v / (1.0 + v / white_point)
                v = v ** (1.0 / gamma)
                output_image[y, x, c] = min(255, max(0, int(v * 255)))

def reinhard_tone_mapping(accumulated: np.ndarray, exposure: float = 1.0,
                          white_point: float = 1.0, gamma: float = 2.2) -> np.ndarray:
    """
    Apply Reinhard tone mapping to a linear radiance image.
    Returns a uint8 array of the same shape.
    """
    linear = np.ascontiguousarray(accumulated, dtype=np.float32)
    output = np.zeros(linear.shape, dtype=np.uint8)
    _reinhard_kernel(linear, output, np.float32(exposure), np.float32(white_point), np.float32(gamma))
    return output

def log_average_luminance(accumulated: np.ndarray, delta: float = 1e-4) -> float:
    """Geometric mean of pixel luminance; delta keeps black pixels finite."""
    luminance = np.maximum(accumulated @ LUMINANCE_WEIGHTS, 0.0)
    return float(np.exp(np.mean(np.log(delta + luminance))))

def auto_exposure_tone_mapping(accumulated: np.ndarray, gamma: float = 2.2,
                               key: float = 0.18) -> np.ndarray:
    """
    Scales the image so its log-average luminance maps to `key`, then
    applies Reinhard tone mapping.
    """
    exposure = key / log_average_luminance(accumulated)
    return reinhard_tone_mapping(accumulated, exposure=exposure, white_point=1.0, gamma=gamma)
