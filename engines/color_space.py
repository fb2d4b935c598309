"""RGB to HSV color space conversion."""

import numpy as np

from models.pixel_matrix import PixelMatrix
from utils.constants import HUE_FULL_TURN, HUE_SECTOR, HUE_SECTORS, RGB_MAX


def rgb_to_hsv(matrix: PixelMatrix) -> PixelMatrix:
    """Convert a uint8 RGB matrix to float32 HSV.

    H is in degrees [0, 360), S and V in [0, 1]. When two channels share
    the maximum, the red branch wins over green and green over blue.
    """
    if matrix.dtype != np.uint8:
        raise TypeError(f"rgb_to_hsv expects a uint8 matrix, got {matrix.dtype}")

    rgb = matrix.array.astype(np.float32) / np.float32(RGB_MAX)
    R, G, B = rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2]

    cmax = np.maximum(np.maximum(R, G), B)
    cmin = np.minimum(np.minimum(R, G), B)
    delta = cmax - cmin

    # Placeholder divisor where delta == 0; those pixels get hue 0 below
    safe_delta = np.where(delta == 0, np.float32(1), delta)

    H_r = np.float32(HUE_SECTOR) * np.fmod((G - B) / safe_delta, np.float32(HUE_SECTORS))
    H_g = np.float32(HUE_SECTOR) * ((B - R) / safe_delta + np.float32(2))
    H_b = np.float32(HUE_SECTOR) * ((R - G) / safe_delta + np.float32(4))

    H = np.where(cmax == R, H_r, np.where(cmax == G, H_g, H_b))
    H = np.where(delta == 0, np.float32(0), H)
    H = np.where(H < 0, H + np.float32(HUE_FULL_TURN), H)

    safe_max = np.where(cmax == 0, np.float32(1), cmax)
    S = np.where(cmax == 0, np.float32(0), delta / safe_max)
    V = cmax

    hsv = np.stack([H, S, V], axis=-1).astype(np.float32)
    return PixelMatrix.from_array(hsv, dtype=np.float32)
