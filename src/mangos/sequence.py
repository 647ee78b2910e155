"""Operations over fixed-length sequences.

The sequences handled here are caller-owned and keep their length: `reverse`
and `transform` mutate in place, `length` and `to_vector` only read.
Callers must not mutate a sequence from another thread while one of the
in-place operations runs on it.
"""

from collections.abc import Callable, MutableSequence, Sequence
from typing import TypeVar

from .utils import apply_in_order

T = TypeVar("T")


def length(seq: Sequence[T]) -> int:
    """Return the number of elements in `seq`."""
    return len(seq)


def reverse(seq: MutableSequence[T]) -> None:
    """Reverse `seq` in place by swapping mirrored pairs.

    Element ``i`` is swapped with element ``n - 1 - i`` for ``i`` in
    ``[0, n // 2)``; the middle element of an odd-length sequence stays put.

    Args:
        seq: The sequence to reverse.
    """
    size = len(seq)
    for index in range(size // 2):
        mirror = size - index - 1
        seq[index], seq[mirror] = seq[mirror], seq[index]


def transform(seq: MutableSequence[T], func: Callable[[T], T]) -> None:
    """Replace every element of `seq` with ``func(element)``, in index order.

    `func` is called exactly once per element, left to right. It should be a
    pure function of its argument.

    Args:
        seq: The sequence to update in place.
        func: The function to apply.
    """
    for index, value in apply_in_order(seq, func):
        seq[index] = value


def to_vector(seq: Sequence[T]) -> list[T]:
    """Return a new list holding the elements of `seq` in order.

    The result is independent of `seq`: mutating one does not affect the other.
    """
    return list(seq)
