"""Windowed averaging parameters."""

import numbers
from dataclasses import dataclass
from typing import Optional

from models.errors import InvalidParameterError


def _check_positive(name: str, value) -> int:
    # bool is an Integral but never a valid size
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidParameterError(f"{name} must be > 0, got {value}")
    return int(value)


@dataclass
class WindowParams:
    """Box filter window and stride. Stride defaults to the window size."""

    window: int
    stride: Optional[int] = None

    def __post_init__(self):
        self.window = _check_positive("window", self.window)
        if self.stride is None:
            self.stride = self.window
        self.stride = _check_positive("stride", self.stride)

    @property
    def overlapping(self) -> bool:
        return self.stride < self.window
