"""Export helpers for materialised windows."""

from .to_numpy import window_lengths, windows_to_array

__all__ = ["window_lengths", "windows_to_array"]
