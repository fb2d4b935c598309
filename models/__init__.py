"""Data models: pixel matrices, parameters, results and errors."""

from .errors import (
    PixelMatrixError,
    DimensionMismatchError,
    RaggedRowsError,
    IndexOutOfBoundsError,
    InvalidParameterError,
    SampleRangeError,
    DecodeError,
    EncodeError,
)
from .pixel_matrix import PixelMatrix
from .window_params import WindowParams
from .extraction_result import ColorExtraction

__all__ = [
    'PixelMatrixError',
    'DimensionMismatchError',
    'RaggedRowsError',
    'IndexOutOfBoundsError',
    'InvalidParameterError',
    'SampleRangeError',
    'DecodeError',
    'EncodeError',
    'PixelMatrix',
    'WindowParams',
    'ColorExtraction',
]
