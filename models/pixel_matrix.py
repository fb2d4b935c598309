"""Dense row-major matrix of 3-channel pixel samples."""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from models.errors import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    RaggedRowsError,
    SampleRangeError,
)
from utils.constants import CHANNELS, RGB_MAX


def _check_8bit(arr: np.ndarray) -> None:
    """Reject samples that would change value when stored as uint8."""
    if arr.dtype.kind == 'f':
        if not np.all(np.isfinite(arr)) or not np.all(arr == np.floor(arr)):
            raise SampleRangeError("float samples must be whole numbers to store as 8-bit")
    elif arr.dtype.kind not in 'iu':
        raise SampleRangeError(f"unsupported sample type: {arr.dtype}")
    if arr.min() < 0 or arr.max() > RGB_MAX:
        raise SampleRangeError("samples must lie in [0, 255]")


def _as_samples(data, dtype: Optional[np.dtype]) -> np.ndarray:
    """Coerce raw samples to uint8 (integer input) or float32 (float input)."""
    try:
        arr = np.asarray(data)
    except ValueError as exc:
        raise DimensionMismatchError("pixels must all have the same channel count") from exc
    if dtype is not None:
        dtype = np.dtype(dtype)
        if arr.size == 0:
            return arr.astype(dtype)
        if dtype == np.uint8:
            _check_8bit(arr)
        elif arr.dtype.kind not in 'iuf':
            raise SampleRangeError(f"unsupported sample type: {arr.dtype}")
        return arr.astype(dtype)
    if arr.size == 0:
        if isinstance(data, np.ndarray) and arr.dtype.kind == 'f':
            return arr.astype(np.float32)
        return arr.astype(np.uint8)
    if arr.dtype == np.uint8:
        return arr
    if arr.dtype.kind in 'iu':
        _check_8bit(arr)
        return arr.astype(np.uint8)
    if arr.dtype.kind == 'f':
        return arr.astype(np.float32)
    raise SampleRangeError(f"unsupported sample type: {arr.dtype}")


class PixelMatrix:
    """Immutable width x height grid of [c0, c1, c2] samples.

    Samples are stored row-major, so pixel (x, y) lives at flat index
    ``y * width + x``. uint8 matrices hold RGB, float32 matrices hold HSV.
    The backing array is read-only; transforms build new matrices.
    """

    __slots__ = ('_pixels',)

    def __init__(self, width: int, height: int, data, dtype=None):
        if width < 0 or height < 0:
            raise DimensionMismatchError(f"negative dimensions {width}x{height}")
        samples = _as_samples(data, dtype)

        count = width * height
        if samples.size == 0 and count == 0:
            samples = samples.reshape(0, CHANNELS)
        if samples.ndim == 3:
            if samples.shape[:2] != (height, width):
                raise DimensionMismatchError(
                    f"data shaped {samples.shape[:2]} (rows, cols), expected ({height}, {width})"
                )
            samples = samples.reshape(-1, samples.shape[-1])
        if samples.ndim != 2 or samples.shape[1] != CHANNELS:
            raise DimensionMismatchError(
                f"expected {CHANNELS} channels per pixel, got shape {samples.shape}"
            )
        if samples.shape[0] != count:
            raise DimensionMismatchError(
                f"data has {samples.shape[0]} pixels, {width}x{height} needs {count}"
            )

        pixels = np.array(samples.reshape(height, width, CHANNELS), copy=True)
        pixels.setflags(write=False)
        self._pixels = pixels

    @classmethod
    def from_array(cls, arr: np.ndarray, dtype=None) -> 'PixelMatrix':
        """Build from an (height, width, 3) array."""
        arr = np.asarray(arr)
        if arr.ndim != 3:
            raise DimensionMismatchError(f"expected (height, width, 3), got {arr.shape}")
        height, width = arr.shape[:2]
        return cls(width, height, arr, dtype=dtype)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Sequence]], dtype=None) -> 'PixelMatrix':
        """Build from a nested per-row pixel structure."""
        rows = list(rows)
        height = len(rows)
        if height == 0:
            return cls.empty(np.uint8 if dtype is None else dtype)
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise RaggedRowsError(
                    f"row {y} has {len(row)} pixels, row 0 has {width}"
                )
        if width == 0:
            return cls(0, height, [], dtype=dtype)
        return cls(width, height, rows, dtype=dtype)

    @classmethod
    def empty(cls, dtype=np.uint8) -> 'PixelMatrix':
        return cls(0, 0, [], dtype=dtype)

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self._pixels.dtype

    @property
    def array(self) -> np.ndarray:
        """Read-only (height, width, 3) view."""
        return self._pixels

    @property
    def data(self) -> np.ndarray:
        """Read-only (width * height, 3) row-major view."""
        return self._pixels.reshape(-1, CHANNELS)

    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def is_empty(self) -> bool:
        return self._pixels.size == 0

    def get(self, x: int, y: int) -> Tuple:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexOutOfBoundsError(
                f"({x}, {y}) outside {self.width}x{self.height} matrix"
            )
        return tuple(self._pixels[y, x].tolist())

    def first(self) -> Optional[Tuple]:
        """First pixel in row-major order, None for an empty matrix."""
        if self.is_empty():
            return None
        return self.get(0, 0)

    def to_rows(self) -> List[List[Tuple]]:
        return [[tuple(px) for px in row] for row in self._pixels.tolist()]

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelMatrix):
            return NotImplemented
        return (
            self.dtype == other.dtype
            and self.dimensions() == other.dimensions()
            and np.array_equal(self._pixels, other._pixels)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelMatrix({self.width}x{self.height}, dtype={self.dtype})"
