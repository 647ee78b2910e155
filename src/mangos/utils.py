"""Shared iteration helpers."""

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

A = TypeVar("A")
B = TypeVar("B")


def apply_in_order(
    values: Iterable[A], func: Callable[[A], B]
) -> Iterator[tuple[int, B]]:
    """Apply `func` to each value, strictly left to right.

    Both `mangos.sequence.transform` and `mangos.text.transform` are built on
    this routine. Values are read lazily, so a caller may write result `i`
    back into the source before value `i + 1` is read.

    Args:
        values: The values to visit, in index order.
        func: Function applied once per value.

    Yields:
        ``(index, func(value))`` pairs in index order.
    """
    for index, value in enumerate(values):
        yield index, func(value)
