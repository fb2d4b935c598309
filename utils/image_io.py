"""Image file I/O using OpenCV."""

import logging
from pathlib import Path
from typing import Union

import cv2
import numpy as np

from models.errors import DecodeError, EncodeError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_image(path: PathLike) -> np.ndarray:
    """Load image as RGB uint8 (height, width, 3). Alpha is dropped."""
    img = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if img is None:
        raise DecodeError(f"Could not load image from {path}")
    logger.debug("Decoded %s: %dx%d", path, img.shape[1], img.shape[0])
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def save_image(image: np.ndarray, path: PathLike) -> None:
    """Save RGB uint8 image; format follows the file extension."""
    if image.size == 0:
        raise EncodeError(f"Cannot encode an empty image to {path}")
    try:
        ok = cv2.imwrite(str(path), cv2.cvtColor(image, cv2.COLOR_RGB2BGR))
    except cv2.error as e:
        raise EncodeError(f"Could not save image to {path}: {e}") from e
    if not ok:
        raise EncodeError(f"Could not save image to {path}")
    logger.debug("Encoded %s: %dx%d", path, image.shape[1], image.shape[0])
