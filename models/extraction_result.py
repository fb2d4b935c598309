"""Color extraction result."""

from dataclasses import dataclass
from typing import Optional, Tuple

from models.pixel_matrix import PixelMatrix
from models.window_params import WindowParams


@dataclass
class ColorExtraction:
    """RGB and HSV matrices produced from one decoded image."""

    source_size: Tuple[int, int]
    rgb: PixelMatrix
    hsv: PixelMatrix
    params: Optional[WindowParams] = None

    @property
    def averaged(self) -> bool:
        return self.params is not None
