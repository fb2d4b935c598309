"""Color engines - pure computation, no I/O."""

from .color_space import rgb_to_hsv
from .window_reducer import average, output_size
from .pipeline import extract_colors

__all__ = [
    'rgb_to_hsv',
    'average',
    'output_size',
    'extract_colors',
]
