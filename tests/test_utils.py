import logging

import numpy as np
import pytest

from windowleft import window_left, window_left_while_item
from windowleft.export import window_lengths, windows_to_array
from windowleft.utils.logging import get_logger


def test_windows_to_array_pads_partial_windows():
    arr = windows_to_array(window_left([1, 2, 3, 4], 3), fill=0, dtype=int)
    assert arr.shape == (4, 3)
    assert arr.tolist() == [[1, 2, 3], [2, 3, 4], [3, 4, 0], [4, 0, 0]]


def test_windows_to_array_default_fill_is_nan():
    arr = windows_to_array(window_left([1.0, 2.0], 2))
    assert arr[0].tolist() == [1.0, 2.0]
    assert arr[1, 0] == 2.0
    assert np.isnan(arr[1, 1])


def test_windows_to_array_width():
    arr = windows_to_array([(1,), (2, 3)], width=4, fill=-1, dtype=int)
    assert arr.tolist() == [[1, -1, -1, -1], [2, 3, -1, -1]]
    with pytest.raises(ValueError):
        windows_to_array([(1, 2, 3)], width=2)


def test_windows_to_array_empty():
    arr = windows_to_array(window_left([], 3))
    assert arr.shape == (0, 0)


def test_windows_to_array_save(tmp_path):
    path = tmp_path / "windows.npy"
    arr = windows_to_array(window_left([1, 2, 3], 2), save_npy=path)
    np.testing.assert_array_equal(np.load(path), arr)


def test_window_lengths():
    windows = window_left_while_item([1, 2, 3, 10, 4, 5], lambda x: x < 10)
    assert window_lengths(windows).tolist() == [4, 5, 4, 3, 2, 1]


def test_logging():
    logger = get_logger("test")
    logger2 = get_logger("test")
    assert logger is logger2
    assert len(logger.handlers) == 1
    logger.debug("debug message")


def test_logging_level_names():
    logger = get_logger("test.levels", level="debug")
    assert logger.level == logging.DEBUG
    with pytest.raises(ValueError):
        get_logger("test.levels", level="chatty")


def test_drain_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="windowleft.core.window_left"):
        list(window_left([1, 2, 3], 2))
    assert "draining 1 partial windows" in caplog.text
