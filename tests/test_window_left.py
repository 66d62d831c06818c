import itertools

import pytest

from windowleft import (
    InvalidArgumentError,
    window_left,
    window_left_while,
    window_left_while_item,
)


def test_window_left_examples():
    assert list(window_left([1, 2, 3, 4, 5], 2)) == [(1, 2), (2, 3), (3, 4), (4, 5), (5,)]
    assert list(window_left([1, 2, 3], 5)) == [(1, 2, 3), (2, 3), (3,)]
    assert list(window_left([], 3)) == []


@pytest.mark.parametrize("n", [0, 1, 4, 9])
@pytest.mark.parametrize("size", [1, 3, 6])
def test_window_shape(n, size):
    source = list(range(n))
    windows = list(window_left(iter(source), size))
    assert len(windows) == n
    for k, w in enumerate(windows):
        assert len(w) == min(size, n - k)
        assert list(w) == source[k : k + len(w)]
    assert [w[0] for w in windows] == source


def test_size_one_yields_singletons():
    assert list(window_left("abc", 1)) == [("a",), ("b",), ("c",)]


def test_result_selector():
    result = list(window_left([1, 2, 3, 4], 3, lambda first, w: (first, sum(w))))
    assert result == [(1, 6), (2, 9), (3, 7), (4, 4)]


def test_window_left_matches_general_form():
    data = [5, 3, 8, 1, 9, 2]
    expected = list(window_left_while(data, lambda _, n: n < 3, lambda _, w: w))
    assert list(window_left(data, 3)) == expected


def test_item_predicate_closes_on_large_value():
    windows = list(window_left_while_item([1, 2, 3, 10, 4, 5], lambda x: x < 10))
    assert windows == [
        (1, 2, 3, 10),
        (2, 3, 10, 4, 5),
        (3, 10, 4, 5),
        (10, 4, 5),
        (4, 5),
        (5,),
    ]


def test_predicate_never_closing_drains_everything():
    windows = list(window_left_while([1, 2, 3], lambda item, n: True))
    assert windows == [(1, 2, 3), (2, 3), (3,)]


def test_predicate_receives_item_and_length():
    calls = []

    def predicate(item, length):
        calls.append((item, length))
        return length < 2

    list(window_left_while("abcd", predicate))
    assert calls == [("a", 1), ("b", 2), ("c", 2), ("d", 2)]


def test_windows_are_independent_snapshots():
    held = []

    def keep(first, window):
        held.append(window)
        return window

    list(window_left([1, 2, 3, 4], 2, keep))
    assert held == [(1, 2), (2, 3), (3, 4), (4,)]
    assert all(isinstance(w, tuple) for w in held)


def test_lazy_over_infinite_source():
    windows = window_left(itertools.count(), 3)
    assert list(itertools.islice(windows, 4)) == [(0, 1, 2), (1, 2, 3), (2, 3, 4), (3, 4, 5)]


def test_nothing_pulled_before_first_request():
    pulled = []

    def source():
        for i in range(3):
            pulled.append(i)
            yield i

    windows = window_left(source(), 2)
    assert pulled == []
    assert next(windows) == (0, 1)
    assert pulled == [0, 1]


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_size_raises_immediately(size):
    with pytest.raises(InvalidArgumentError) as excinfo:
        window_left([1, 2], size)
    assert excinfo.value.argument == "size"


@pytest.mark.parametrize("size", [2.0, "2", True])
def test_non_integer_size_raises(size):
    with pytest.raises(InvalidArgumentError):
        window_left([1, 2], size)


@pytest.mark.parametrize(
    "call",
    [
        lambda: window_left(None, 2),
        lambda: window_left(42, 2),
        lambda: window_left_while(None, lambda x, n: True),
        lambda: window_left_while([1], None),
        lambda: window_left_while([1], "not callable"),
        lambda: window_left_while([1], lambda x, n: True, None),
        lambda: window_left_while_item(None, lambda x: True),
        lambda: window_left_while_item([1], None),
        lambda: window_left([1], 2, None),
    ],
)
def test_invalid_arguments_raise_at_call_time(call):
    with pytest.raises(InvalidArgumentError):
        call()


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError, match="source"):
        window_left(None, 1)


def test_selector_errors_propagate():
    def boom(first, window):
        if first == 2:
            raise KeyError(first)
        return window

    windows = window_left([1, 2, 3], 2, boom)
    assert next(windows) == (1, 2)
    with pytest.raises(KeyError):
        next(windows)


def test_each_call_is_independent():
    data = [1, 2, 3]
    a = window_left(data, 2)
    b = window_left(data, 2)
    assert next(a) == (1, 2)
    assert list(b) == [(1, 2), (2, 3), (3,)]
    assert list(a) == [(2, 3), (3,)]
