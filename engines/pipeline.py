"""RGB matrix -> optional box filter -> HSV matrix."""

from typing import Optional

from models.extraction_result import ColorExtraction
from models.pixel_matrix import PixelMatrix
from models.window_params import WindowParams
from engines.color_space import rgb_to_hsv
from engines.window_reducer import average


def extract_colors(
    rgb: PixelMatrix,
    params: Optional[WindowParams] = None
) -> ColorExtraction:
    """Downsample (when params are given) and convert to HSV."""
    source_size = rgb.dimensions()

    if params is not None:
        rgb = average(rgb, params.window, params.stride)

    return ColorExtraction(
        source_size=source_size,
        rgb=rgb,
        hsv=rgb_to_hsv(rgb),
        params=params,
    )
