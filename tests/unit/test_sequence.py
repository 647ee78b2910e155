"""Unit tests for mangos.sequence."""

import pytest

from mangos import sequence

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize("seq, expected", [([], 0), ([7], 1), ((1, 2, 3), 3)])
def test_length(seq, expected):
    """length returns the element count of lists and tuples alike."""
    assert sequence.length(seq) == expected


@pytest.mark.parametrize(
    "seq, expected",
    [
        ([], []),
        ([1], [1]),
        ([1, 2], [2, 1]),
        ([1, 2, 3], [3, 2, 1]),
        (["a", "b", "c", "d"], ["d", "c", "b", "a"]),
    ],
)
def test_reverse_in_place(seq, expected):
    """reverse mutates the sequence and returns None."""
    assert sequence.reverse(seq) is None
    assert seq == expected


def test_reverse_keeps_identity(word_list):
    """reverse works on the caller's storage, not a copy."""
    before = id(word_list)
    sequence.reverse(word_list)
    assert id(word_list) == before
    assert word_list[0] == "epsilon"


def test_transform_in_place(word_list):
    """transform replaces each element with func(element)."""
    assert sequence.transform(word_list, len) is None
    assert word_list == [5, 4, 5, 5, 7]


def test_transform_applies_left_to_right():
    """func is called once per element, in index order."""
    calls: list[int] = []

    def double(value: int) -> int:
        calls.append(value)
        return value * 2

    values = [3, 1, 2]
    sequence.transform(values, double)
    assert calls == [3, 1, 2]
    assert values == [6, 2, 4]


def test_transform_empty():
    """transform on an empty sequence never calls func."""
    values: list[int] = []
    sequence.transform(values, lambda _: pytest.fail("func must not be called"))
    assert values == []


def test_to_vector_copies(word_list):
    """to_vector returns an equal list that does not alias the input."""
    vector = sequence.to_vector(word_list)
    assert vector == word_list
    assert vector is not word_list
    vector.append("zeta")
    assert len(word_list) == 5


def test_to_vector_from_tuple():
    """to_vector turns a fixed-size tuple into a growable list."""
    vector = sequence.to_vector((1, 2, 3))
    assert isinstance(vector, list)
    assert vector == [1, 2, 3]
