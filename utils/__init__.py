"""Shared utilities."""

from .constants import CHANNELS, RGB_MAX, DEFAULT_OUTPUT_PATH
from .image_io import load_image, save_image
from .test_images import (
    generate_solid,
    generate_colored_checkerboard,
    generate_chroma_stripes,
    generate_gradient,
)

__all__ = [
    'CHANNELS',
    'RGB_MAX',
    'DEFAULT_OUTPUT_PATH',
    'load_image',
    'save_image',
    'generate_solid',
    'generate_colored_checkerboard',
    'generate_chroma_stripes',
    'generate_gradient',
]
