"""Helpers for sequences, joining and float comparison."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

FLOAT64_EQUALITY_THRESHOLD = 1e-9


def set_diff(a: Iterable[H], b: Iterable[H]) -> list[H]:
    """Distinct items of a that are not in b, in first-seen order."""
    excluded = set(b)
    return [item for item in dict.fromkeys(a) if item not in excluded]


def remove_duplicates(items: Iterable[H]) -> list[H]:
    """Items with repeats dropped, keeping the first occurrence."""
    return list(dict.fromkeys(items))


def index_of(items: Sequence[T], target: T) -> int:
    """Position of the first item equal to target, or -1."""
    return next((position for position, item in enumerate(items) if item == target), -1)


def remove_first(items: Sequence[T], target: T) -> list[T]:
    """A copy of items without the first occurrence of target."""
    position = index_of(items, target)
    if position == -1:
        return list(items)
    return [*items[:position], *items[position + 1:]]


def chunks(items: Sequence[T], size: int) -> list[list[T]]:
    """Split items into consecutive lists of at most size elements."""
    if size <= 0:
        raise ValueError("invalid chunk size")
    if len(items) <= size:
        return [list(items)]
    return [list(items[start:start + size]) for start in range(0, len(items), size)]


def safe_slice_cut(items: Sequence[T], start: int, end: int) -> list[T]:
    """items[start:end] with the bounds clamped; empty when the range is empty or out of reach."""
    start = max(0, start)
    if end <= 0 or start > end or start > len(items):
        return []
    return list(items[start:min(end, len(items))])


def repeat(value: T, count: int) -> list[T]:
    """A list holding value count times."""
    if count < 0:
        raise ValueError("count must not be negative")
    return [value] * count


def join_values(sep: str, *values: Any) -> str:
    """Join the string forms of values with sep."""
    return sep.join(str(value) for value in values)


def almost_equal(a: float, b: float) -> bool:
    """True when a and b differ by no more than 1e-9."""
    return abs(a - b) <= FLOAT64_EQUALITY_THRESHOLD