"""Contract checks used throughout MANGOS.

`requires` guards caller input, `ensures` guards results and `invariant`
guards internal state. Unlike bare ``assert`` statements, these checks are
not stripped when Python runs with ``-O``.
"""

from .errors import InvariantError, PostconditionError, PreconditionError


def requires(condition: bool, description: str) -> None:
    """Check a precondition.

    Args:
        condition: The evaluated precondition.
        description: Human-readable form of the condition for the error message.

    Raises:
        PreconditionError: If `condition` is false.
    """
    if not condition:
        raise PreconditionError(description)


def ensures(condition: bool, description: str) -> None:
    """Check a postcondition.

    Raises:
        PostconditionError: If `condition` is false.
    """
    if not condition:
        raise PostconditionError(description)


def invariant(condition: bool, description: str) -> None:
    """Check an internal invariant.

    Raises:
        InvariantError: If `condition` is false.
    """
    if not condition:
        raise InvariantError(description)
