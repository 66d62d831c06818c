"""Utilities for converting window collections into NumPy arrays."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Sequence

import numpy as np


def window_lengths(windows: Iterable[Sequence[Any]]) -> np.ndarray:
    """Return the length of every window as an integer array."""

    return np.asarray([len(w) for w in windows], dtype=int)


def windows_to_array(
    windows: Iterable[Sequence[Any]],
    *,
    width: int | None = None,
    fill: Any = np.nan,
    dtype: Any = float,
    save_npy: str | Path | None = None,
) -> np.ndarray:
    """Stack *windows* into a right-padded 2-D array.

    Parameters
    ----------
    windows:
        Windows as produced by :func:`windowleft.window_left`.  The iterable
        is consumed once.
    width:
        Number of columns.  Defaults to the length of the longest window.
        ``ValueError`` is raised if a window does not fit.
    fill:
        Value used for the cells past the end of a partial window.
    dtype:
        Element type of the resulting array.
    save_npy:
        Optional path.  When given the array is also written with
        :func:`numpy.save`.

    Returns
    -------
    numpy.ndarray
        Array of shape ``(n_windows, width)``.
    """

    rows = [tuple(w) for w in windows]
    longest = max((len(r) for r in rows), default=0)
    if width is None:
        width = longest
    elif width < 0:
        raise ValueError("width must not be negative")
    elif longest > width:
        raise ValueError(f"window of length {longest} does not fit width {width}")

    out = np.full((len(rows), width), fill, dtype=dtype)
    for i, row in enumerate(rows):
        if row:
            out[i, : len(row)] = row

    if save_npy:
        np.save(Path(save_npy), out)

    return out
