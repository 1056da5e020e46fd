"""Exceptions: precondition failures raised by constraints and pipelines.

A violated constraint is never an exception; it is returned as data.
These errors signal programming mistakes (missing input, unknown constraint type).
"""


class ValifyError(Exception):
    """Base class for all valify errors."""


class MissingInputError(ValifyError, TypeError):
    """Raised when a required input (string or constraint list) is absent or of the wrong type."""

    def __init__(self, what: str, received: object = None):
        self.what = what
        self.received = received
        super().__init__(f"{what} is required, got {type(received).__name__}")


class UnknownConstraintError(ValifyError, KeyError):
    """Raised when a constraint definition names a type that is not registered."""

    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(kind)

    def __str__(self) -> str:
        return f"Unknown constraint type: {self.kind!r}"
