"""Tests for windowed averaging (box downsampling)."""

import numpy as np
import pytest
from scipy.signal import convolve2d
from models.pixel_matrix import PixelMatrix
from models.window_params import WindowParams
from models.errors import InvalidParameterError
from engines.window_reducer import average, output_size
from utils.test_images import generate_solid, generate_colored_checkerboard


def brute_force_average(image: np.ndarray, window: int, stride: int) -> np.ndarray:
    """Loop-by-loop reference."""
    h, w = image.shape[:2]
    out_w, out_h = output_size(w, h, window, stride)
    out = np.zeros((out_h, out_w, 3), dtype=np.uint8)
    for oy in range(out_h):
        for ox in range(out_w):
            y0, x0 = oy * stride, ox * stride
            block = image[y0:y0 + window, x0:x0 + window].astype(np.int64)
            assert block.shape[:2] == (window, window)
            out[oy, ox] = block.sum(axis=(0, 1)) // (window * window)
    return out


def test_uniform_4x4():
    matrix = PixelMatrix.from_array(generate_solid(4, 4, (10, 10, 10)))
    reduced = average(matrix, 2, 2)
    assert reduced.dimensions() == (2, 2)
    assert np.all(reduced.array == 10)


def test_truncates_not_rounds():
    """Mean of 1, 2, 2, 2 is 1.75 -> 1."""
    rows = [
        [(1, 1, 1), (2, 2, 2)],
        [(2, 2, 2), (2, 2, 2)],
    ]
    reduced = average(PixelMatrix.from_rows(rows), 2, 2)
    assert reduced.get(0, 0) == (1, 1, 1)


def test_channels_independent():
    rows = [
        [(255, 0, 10), (255, 0, 20)],
        [(255, 0, 30), (255, 0, 40)],
    ]
    reduced = average(PixelMatrix.from_rows(rows), 2, 1)
    assert reduced.get(0, 0) == (255, 0, 25)


def test_no_overflow_with_large_window():
    matrix = PixelMatrix.from_array(generate_solid(64, 64, (255, 255, 255)))
    reduced = average(matrix, 64, 1)
    assert reduced.dimensions() == (1, 1)
    assert reduced.get(0, 0) == (255, 255, 255)


@pytest.mark.parametrize("width,height,window,stride,expected", [
    (4, 4, 2, 2, (2, 2)),
    (5, 5, 2, 2, (2, 2)),
    (5, 3, 2, 1, (4, 2)),
    (10, 7, 3, 4, (2, 2)),
    (3, 3, 3, 5, (1, 1)),
    (2, 8, 3, 1, (0, 6)),
])
def test_output_size_drops_partial_windows(width, height, window, stride, expected):
    assert output_size(width, height, window, stride) == expected


@pytest.mark.parametrize("window,stride", [(1, 1), (2, 2), (3, 1), (3, 2), (2, 5), (4, 3)])
def test_matches_brute_force(window, stride):
    image = np.random.randint(0, 256, (17, 23, 3), dtype=np.uint8)
    reduced = average(PixelMatrix.from_array(image), window, stride)
    assert np.array_equal(reduced.array, brute_force_average(image, window, stride))


def test_matches_valid_convolution():
    """Window sums equal a 'valid' convolution with a ones kernel, sampled every stride."""
    image = np.random.randint(0, 256, (20, 31, 3), dtype=np.uint8)
    window, stride = 4, 3
    reduced = average(PixelMatrix.from_array(image), window, stride)

    kernel = np.ones((window, window), dtype=np.int64)
    for c in range(3):
        sums = convolve2d(image[:, :, c].astype(np.int64), kernel, mode='valid')
        expected = sums[::stride, ::stride] // (window * window)
        assert np.array_equal(reduced.array[:, :, c], expected)


def test_window_one_is_identity():
    image = np.random.randint(0, 256, (6, 9, 3), dtype=np.uint8)
    matrix = PixelMatrix.from_array(image)
    assert average(matrix, 1, 1) == matrix


def test_aligned_checkerboard_cells_stay_pure():
    board = PixelMatrix.from_array(generate_colored_checkerboard(64, cell=8))
    reduced = average(board, 8, 8)
    assert reduced.dimensions() == (8, 8)
    assert set(map(tuple, reduced.data.tolist())) == {(30, 30, 30), (220, 220, 220)}


@pytest.mark.parametrize("window,stride", [(0, 1), (1, 0), (0, 0), (-2, 1)])
def test_rejects_non_positive(window, stride):
    matrix = PixelMatrix.from_array(generate_solid(4, 4))
    with pytest.raises(InvalidParameterError):
        average(matrix, window, stride)


def test_rejects_before_empty_shortcut():
    with pytest.raises(InvalidParameterError):
        average(PixelMatrix.empty(), 0, 1)


def test_empty_input():
    reduced = average(PixelMatrix.empty(), 3, 2)
    assert reduced.dimensions() == (0, 0)
    assert reduced.is_empty()
    assert average(PixelMatrix(0, 5, []), 2, 2).dimensions() == (0, 0)


def test_window_larger_than_image():
    matrix = PixelMatrix.from_array(generate_solid(3, 8))
    reduced = average(matrix, 4, 1)
    assert reduced.dimensions() == (0, 5)
    assert reduced.is_empty()


def test_input_untouched():
    image = np.random.randint(0, 256, (8, 8, 3), dtype=np.uint8)
    matrix = PixelMatrix.from_array(image)
    average(matrix, 3, 2)
    assert np.array_equal(matrix.array, image)


def test_window_params_defaults_stride():
    params = WindowParams(4)
    assert params.stride == 4
    assert not params.overlapping
    assert WindowParams(4, 2).overlapping


@pytest.mark.parametrize("window,stride", [(0, None), (2, 0), (2.5, 1), (True, 1), ("3", 1)])
def test_window_params_validation(window, stride):
    with pytest.raises(InvalidParameterError):
        WindowParams(window, stride)
