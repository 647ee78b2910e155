"""Operations over text values.

All functions are pure: they return new strings and never modify their
arguments. Case conversion is ASCII-only; characters without an ASCII case
mapping pass through unchanged.

The tokenizer (`split` / `tokenize`) discards empty tokens, so leading,
trailing and consecutive delimiters never produce empty entries.
"""

import logging
import string
from collections.abc import Callable, Sequence

from .config import DEFAULT_DELIMITER, DEFAULT_SEPARATOR, WHITESPACE
from .contracts import ensures, invariant, requires
from .search import DelimiterMode, find_first_not_of, find_last_not_of
from .utils import apply_in_order

logger = logging.getLogger(__name__)

_TO_UPPER = dict(zip(string.ascii_lowercase, string.ascii_uppercase))
_TO_LOWER = dict(zip(string.ascii_uppercase, string.ascii_lowercase))


def transform(text: str, func: Callable[[str], str]) -> str:
    """Return `text` with `func` applied to every character, in index order."""
    return "".join(value for _, value in apply_in_order(text, func))


def _ascii_upper(char: str) -> str:
    return _TO_UPPER.get(char, char)


def _ascii_lower(char: str) -> str:
    return _TO_LOWER.get(char, char)


def to_upper(text: str) -> str:
    """Return `text` with ASCII letters converted to uppercase."""
    return transform(text, _ascii_upper)


def to_lower(text: str) -> str:
    """Return `text` with ASCII letters converted to lowercase."""
    return transform(text, _ascii_lower)


def reverse(text: str) -> str:
    """Return `text` with its characters in reverse order."""
    chars = list(text)
    size = len(chars)
    for index in range(size // 2):
        mirror = size - index - 1
        chars[index], chars[mirror] = chars[mirror], chars[index]
    return "".join(chars)


def tokenize(text: str, delimiter: str, mode: DelimiterMode) -> list[str]:
    """Split `text` into non-empty tokens separated by `delimiter`.

    A cursor walks the text. At each step the next match is located according
    to `mode`; the text between the cursor and the match is a candidate token
    and the cursor moves past the match by ``mode.advance(delimiter)``
    characters. When no further match exists the rest of the text is the
    final candidate. Empty candidates are dropped.

    Args:
        text: The text to split. Must be non-empty.
        delimiter: The delimiter string (or character set, in ``SET`` mode).
            Must be non-empty.
        mode: How `delimiter` is matched.

    Returns:
        The tokens in order of appearance.

    Raises:
        PreconditionError: If `text` or `delimiter` is empty.
    """
    requires(len(text) > 0, "text must not be empty")
    requires(len(delimiter) > 0, "delimiter must not be empty")

    tokens: list[str] = []
    step = mode.advance(delimiter)
    cursor = 0
    while cursor < len(text):
        found = mode.locate(text, delimiter, cursor)
        if found is None:
            token, next_cursor = text[cursor:], len(text)
        else:
            token, next_cursor = text[cursor:found], found + step
        invariant(next_cursor > cursor, "tokenizer cursor must advance")
        cursor = next_cursor

        if token:
            tokens.append(token)

    ensures(all(tokens), "tokens must not be empty")
    logger.debug(
        "Split %d characters into %d tokens (mode=%s)",
        len(text),
        len(tokens),
        mode.value,
    )
    return tokens


def split(
    text: str, delimiter: str = DEFAULT_DELIMITER, multiple: bool = False
) -> list[str]:
    """Split `text` on `delimiter`, discarding empty tokens.

    Args:
        text: The text to split. Must be non-empty.
        delimiter: The delimiter to split on. Must be non-empty.
        multiple: When False, `delimiter` is matched as a literal substring.
            When True, each character of `delimiter` is a separator on its
            own, and a match consumes exactly one character.

    Returns:
        The non-empty tokens in order of appearance.

    Raises:
        PreconditionError: If `text` or `delimiter` is empty.

    Example:
        >>> split("a,,b", ",")
        ['a', 'b']
        >>> split("a b\\tc", " \\t", multiple=True)
        ['a', 'b', 'c']
    """
    return tokenize(text, delimiter, DelimiterMode.from_flag(multiple))


def join(tokens: Sequence[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """Concatenate `tokens`, placing one `separator` between adjacent tokens.

    Works the same for lists and fixed-size tuples. An empty `tokens` yields
    an empty string.
    """
    return separator.join(tokens)


def trim(text: str) -> str:
    """Strip leading and trailing whitespace (space, tab, newline, carriage return).

    Empty or all-whitespace input yields an empty string.
    """
    first = find_first_not_of(text, WHITESPACE)
    last = find_last_not_of(text, WHITESPACE)
    if first is None or last is None:
        return ""
    trimmed = text[first : last + 1]
    ensures(
        trimmed[0] not in WHITESPACE and trimmed[-1] not in WHITESPACE,
        "trimmed text must not start or end with whitespace",
    )
    return trimmed
