"""Left-aligned sliding windows over arbitrary iterables.

Each window starts at a successive source item and extends forward until a
size or predicate condition closes it.  Once the source is exhausted the
remaining buffer is drained, producing partial windows that shrink by one
item at a time.  For a size of ``2``::

    >>> list(window_left([1, 2, 3, 4, 5], 2))
    [(1, 2), (2, 3), (3, 4), (4, 5), (5,)]

All public functions validate their arguments eagerly, at call time, and
return a lazy iterator.  Nothing is pulled from the source until the first
window is requested.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Iterable, Iterator, Tuple

from ..types import ItemPredicate, LengthPredicate, ResultSelector, T

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when a windowing function is called with unusable arguments."""

    def __init__(self, message: str, *, argument: str):
        self.argument = argument
        super().__init__(f"{argument}: {message}")


def _window_only(first: Any, window: Tuple[Any, ...]) -> Tuple[Any, ...]:
    return window


def _check_source(source: Any) -> Iterable[Any]:
    if source is None:
        raise InvalidArgumentError("source must not be None", argument="source")
    try:
        iter(source)
    except TypeError:
        raise InvalidArgumentError(
            f"{type(source).__name__!r} object is not iterable", argument="source"
        ) from None
    return source


def _check_callable(func: Any, argument: str) -> None:
    if func is None:
        raise InvalidArgumentError(f"{argument} must not be None", argument=argument)
    if not callable(func):
        raise InvalidArgumentError(f"{argument} must be callable", argument=argument)


def _check_size(size: Any) -> int:
    if isinstance(size, bool) or not hasattr(size, "__index__"):
        raise InvalidArgumentError(
            f"size must be an integer (got {type(size).__name__})", argument="size"
        )
    size = size.__index__()
    if size <= 0:
        raise InvalidArgumentError(f"size must be positive (got {size})", argument="size")
    return size


def window_left(
    source: Iterable[T],
    size: int,
    result_selector: ResultSelector = _window_only,
) -> Iterator[Any]:
    """Yield left-aligned windows of at most ``size`` items.

    Window ``k`` holds ``source[k : k + size]``; the last ``size - 1``
    windows are partial.  ``result_selector`` receives the first item of the
    window and the window tuple and defaults to returning the window.

    ``InvalidArgumentError`` is raised immediately if ``source`` is missing or
    not iterable, ``size`` is not a positive integer, or ``result_selector``
    is not callable.
    """

    source = _check_source(source)
    size = _check_size(size)
    return window_left_while(source, lambda _, length: length < size, result_selector)


def window_left_while_item(
    source: Iterable[T],
    predicate: ItemPredicate,
    result_selector: ResultSelector = _window_only,
) -> Iterator[Any]:
    """Yield left-aligned windows closed by an item-only predicate.

    A window keeps growing while ``predicate(item)`` is true for the item
    just added, and is closed by the first item for which it is false (that
    item is part of the closed window).
    """

    source = _check_source(source)
    _check_callable(predicate, "predicate")
    return window_left_while(source, lambda item, _: predicate(item), result_selector)


def window_left_while(
    source: Iterable[T],
    predicate: LengthPredicate,
    result_selector: ResultSelector = _window_only,
) -> Iterator[Any]:
    """Yield left-aligned windows closed by ``predicate(item, length)``.

    ``length`` is the size of the window after ``item`` has been appended.
    While the predicate returns true the window keeps extending; once it
    returns false the window is emitted and the next window starts one item
    further along, carrying over the remaining buffered items.  When the
    source is exhausted every remaining suffix of the buffer is emitted.

    Windows are passed to ``result_selector`` as tuples, so a window that
    has been handed out is never affected by later iterations.  Exceptions
    from the source, the predicate or the selector propagate unchanged.
    """

    source = _check_source(source)
    _check_callable(predicate, "predicate")
    _check_callable(result_selector, "result_selector")
    return _window_left_while(source, predicate, result_selector)


def _window_left_while(
    source: Iterable[T],
    predicate: LengthPredicate,
    result_selector: ResultSelector,
) -> Iterator[Any]:
    buffer: deque = deque()
    for item in source:
        buffer.append(item)
        if predicate(item, len(buffer)):
            continue
        window = tuple(buffer)
        yield result_selector(window[0], window)
        buffer.popleft()

    if buffer:
        logger.debug("source exhausted, draining %d partial windows", len(buffer))
    while buffer:
        window = tuple(buffer)
        yield result_selector(window[0], window)
        buffer.popleft()
