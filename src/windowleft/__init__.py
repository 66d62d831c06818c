"""Lazy left-aligned sliding windows over iterables."""

from .core import (
    InvalidArgumentError,
    window_left,
    window_left_while,
    window_left_while_item,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "window_left",
    "window_left_while",
    "window_left_while_item",
    "__version__",
]
