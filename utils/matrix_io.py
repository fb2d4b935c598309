"""Adapters between decoded image buffers and PixelMatrix.

Decoders hand back pixels either as a flat byte buffer (3 bytes per pixel,
row-major) or as something row-addressable (an (H, W, 3) array or nested
lists). Encoders take an (H, W, 3) uint8 array. These functions only
reshape; sample values pass through untouched.
"""

import logging
from typing import Optional

import numpy as np

from engines.color_space import rgb_to_hsv
from engines.window_reducer import average
from models.errors import DimensionMismatchError
from models.pixel_matrix import PixelMatrix
from models.window_params import WindowParams
from utils.constants import CHANNELS
from utils.image_io import PathLike, load_image, save_image

logger = logging.getLogger(__name__)


def matrix_from_decoded(buffer, width: int, height: int) -> PixelMatrix:
    """Wrap a decoded RGB buffer as a uint8 PixelMatrix."""
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        buffer = np.frombuffer(buffer, dtype=np.uint8)
    elif not isinstance(buffer, np.ndarray):
        buffer = list(buffer)
        # Flat sequence of channel values rather than rows of pixels
        if buffer and np.isscalar(buffer[0]):
            try:
                buffer = np.asarray(buffer)
            except ValueError as e:
                raise DimensionMismatchError("flat buffer mixes scalars and pixels") from e

    if isinstance(buffer, np.ndarray):
        if buffer.ndim == 1 and buffer.size % CHANNELS == 0:
            buffer = buffer.reshape(-1, CHANNELS)
        return PixelMatrix(width, height, buffer, dtype=np.uint8)

    rows = PixelMatrix.from_rows(buffer, dtype=np.uint8)
    return PixelMatrix(width, height, rows.data, dtype=np.uint8)


def matrix_to_encodable(matrix: PixelMatrix) -> bytes:
    """Flat row-major RGB bytes, 3 per pixel."""
    return matrix_to_array(matrix).tobytes()


def matrix_to_array(matrix: PixelMatrix) -> np.ndarray:
    """Writable (height, width, 3) uint8 copy for image encoders."""
    return np.array(matrix.array, dtype=np.uint8, order='C', copy=True)


def load_rgb_matrix(path: PathLike) -> PixelMatrix:
    """Decode an image file into an RGB matrix."""
    image = load_image(path)
    height, width = image.shape[:2]
    return matrix_from_decoded(image, width, height)


def load_rgb_matrix_averaged(path: PathLike, window: int, stride: Optional[int] = None) -> PixelMatrix:
    """Decode an image file and box-filter it. Stride defaults to window."""
    params = WindowParams(window, stride)
    rgb = load_rgb_matrix(path)
    reduced = average(rgb, params.window, params.stride)
    logger.debug(
        "Averaged %s window=%d stride=%d: %dx%d -> %dx%d",
        path, params.window, params.stride,
        rgb.width, rgb.height, reduced.width, reduced.height,
    )
    return reduced


def load_hsv_matrix(path: PathLike) -> PixelMatrix:
    """Decode an image file straight into an HSV matrix."""
    return rgb_to_hsv(load_rgb_matrix(path))


def save_rgb_matrix(matrix: PixelMatrix, path: PathLike) -> None:
    """Encode an RGB matrix to an image file."""
    save_image(matrix_to_array(matrix), path)
