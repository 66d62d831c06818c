"""Core windowing algorithms for windowleft."""

from .window_left import (
    InvalidArgumentError,
    window_left,
    window_left_while,
    window_left_while_item,
)

__all__ = [
    "InvalidArgumentError",
    "window_left",
    "window_left_while",
    "window_left_while_item",
]
