"""Box-filter downsampling by windowed averaging."""

from typing import Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from models.pixel_matrix import PixelMatrix
from models.window_params import WindowParams


def output_size(width: int, height: int, window: int, stride: int) -> Tuple[int, int]:
    """Number of whole windows along each axis. Partial windows are dropped."""
    out_w = (width - window) // stride + 1 if width >= window else 0
    out_h = (height - window) // stride + 1 if height >= window else 0
    return out_w, out_h


def average(matrix: PixelMatrix, window: int, stride: int) -> PixelMatrix:
    """Replace each window x window block with its per-channel mean.

    Window origins step by ``stride`` along both axes, so windows overlap
    when stride < window and skip pixels when stride > window. Windows that
    would run past the right or bottom edge are not emitted. Means are
    truncated (integer division), not rounded.
    """
    params = WindowParams(window, stride)
    window, stride = params.window, params.stride
    if matrix.dtype != np.uint8:
        raise TypeError(f"average expects a uint8 matrix, got {matrix.dtype}")

    if matrix.is_empty():
        return PixelMatrix.empty()

    out_w, out_h = output_size(matrix.width, matrix.height, window, stride)
    if out_w == 0 or out_h == 0:
        return PixelMatrix(out_w, out_h, [], dtype=np.uint8)

    # (rows, cols, channels, window, window) view, no copy
    windows = sliding_window_view(matrix.array, (window, window), axis=(0, 1))
    windows = windows[::stride, ::stride][:out_h, :out_w]

    sums = windows.sum(axis=(-2, -1), dtype=np.uint64)
    means = sums // np.uint64(window * window)
    return PixelMatrix.from_array(means.astype(np.uint8))
