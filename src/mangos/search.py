"""Optional-index search primitives.

Every search here returns ``None`` when nothing matches instead of a sentinel
index, so callers must handle the no-match case before slicing.

This module also defines `DelimiterMode`, the tagged choice between literal
and character-set delimiter matching used by `mangos.text.tokenize`.
"""

from enum import Enum


def find(text: str, sub: str, start: int = 0) -> int | None:
    """Return the index of the first occurrence of `sub` at or after `start`."""
    index = text.find(sub, start)
    return None if index < 0 else index


def find_first_of(text: str, chars: str, start: int = 0) -> int | None:
    """Return the index of the first character in `chars` at or after `start`."""
    members = frozenset(chars)
    for index in range(start, len(text)):
        if text[index] in members:
            return index
    return None


def find_first_not_of(text: str, chars: str, start: int = 0) -> int | None:
    """Return the index of the first character not in `chars` at or after `start`."""
    members = frozenset(chars)
    for index in range(start, len(text)):
        if text[index] not in members:
            return index
    return None


def find_last_not_of(text: str, chars: str) -> int | None:
    """Return the index of the last character not in `chars`."""
    members = frozenset(chars)
    for index in range(len(text) - 1, -1, -1):
        if text[index] not in members:
            return index
    return None


class DelimiterMode(Enum):
    """How a delimiter string is matched during tokenization.

    Each mode bundles two decisions: where the next match is (`locate`) and
    how many characters the match consumes (`advance`).

    * ``LITERAL`` matches the delimiter as one contiguous substring and
      consumes ``len(delimiter)`` characters.
    * ``SET`` treats the delimiter as a set of characters, matches any one of
      them, and consumes exactly one character.
    """

    LITERAL = "literal"
    SET = "set"

    @classmethod
    def from_flag(cls, multiple: bool) -> "DelimiterMode":
        """Map the ``multiple`` flag of `mangos.text.split` to a mode."""
        return cls.SET if multiple else cls.LITERAL

    def locate(self, text: str, delimiter: str, start: int = 0) -> int | None:
        """Return the index of the next delimiter match at or after `start`."""
        if self is DelimiterMode.SET:
            return find_first_of(text, delimiter, start)
        return find(text, delimiter, start)

    def advance(self, delimiter: str) -> int:
        """Return the number of characters a single match consumes."""
        if self is DelimiterMode.SET:
            return 1
        return len(delimiter)
