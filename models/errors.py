"""Error types for pixel matrices and image I/O."""


class PixelMatrixError(Exception):
    """Base class for all pixel matrix errors."""


class DimensionMismatchError(PixelMatrixError, ValueError):
    """Sample count disagrees with declared width x height."""


class RaggedRowsError(PixelMatrixError, ValueError):
    """Row-based construction with rows of different length."""


class IndexOutOfBoundsError(PixelMatrixError, IndexError):
    """Pixel coordinate outside the matrix."""


class InvalidParameterError(PixelMatrixError, ValueError):
    """Window or stride is not a positive integer."""


class SampleRangeError(PixelMatrixError, ValueError):
    """Sample values outside the 8-bit channel domain."""


class DecodeError(PixelMatrixError, ValueError):
    """Image file could not be decoded."""


class EncodeError(PixelMatrixError, ValueError):
    """Image could not be encoded or written."""
