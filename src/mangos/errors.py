"""Error definitions for MANGOS."""

# ============================================================================
#                           General errors
# ============================================================================


class MangosError(Exception):
    """Base class for MANGOS errors."""


# ============================================================================
#                           Contract violations
# ============================================================================


class ContractViolationError(MangosError, AssertionError):
    """Raised when a caller or the library itself breaks a stated contract.

    These are programmer errors. They subclass `AssertionError` so they fail
    loudly and are not mistaken for recoverable runtime conditions.
    """

    kind = "Contract"

    def __init__(self, condition: str) -> None:
        super().__init__(f"{self.kind} violated: {condition}")
        self.condition = condition


class PreconditionError(ContractViolationError):
    """Raised when an operation is called with arguments it does not accept."""

    kind = "Precondition"


class PostconditionError(ContractViolationError):
    """Raised when an operation fails to deliver the result it promises."""

    kind = "Postcondition"


class InvariantError(ContractViolationError):
    """Raised when an internal invariant does not hold."""

    kind = "Invariant"
