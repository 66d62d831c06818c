"""Common type helpers for windowleft.

Windows are plain tuples so they are immutable once handed to the caller.
The callable aliases below describe the predicates and result selectors
accepted by :mod:`windowleft.core.window_left`.
"""

from __future__ import annotations

from typing import Callable, Tuple, TypeVar

T = TypeVar("T")
R = TypeVar("R")

Window = Tuple[T, ...]

# ``(item, window_length_after_adding) -> keep_extending``
LengthPredicate = Callable[[T, int], bool]

# ``(item) -> keep_extending``
ItemPredicate = Callable[[T], bool]

# ``(first_item, window) -> result``
ResultSelector = Callable[[T, Tuple[T, ...]], R]
