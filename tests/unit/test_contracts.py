"""Unit tests for mangos.contracts."""

import pytest

from mangos.contracts import ensures, invariant, requires
from mangos.errors import InvariantError, PostconditionError, PreconditionError


@pytest.mark.parametrize(
    "check, error_cls",
    [
        (requires, PreconditionError),
        (ensures, PostconditionError),
        (invariant, InvariantError),
    ],
)
def test_false_condition_raises(check, error_cls):
    """A false condition raises the matching error with the description."""
    with pytest.raises(error_cls, match="value must be positive"):
        check(False, "value must be positive")


@pytest.mark.parametrize("check", [requires, ensures, invariant])
def test_true_condition_passes(check):
    """A true condition returns None without raising."""
    assert check(True, "always holds") is None
