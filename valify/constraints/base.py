"""Base constraint: abstract model implementing the Strategy Pattern.

Each constraint is a standalone, independently testable predicate over a string.
New constraints are added without modifying the pipeline.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict

from valify.exceptions import MissingInputError


class InputConstraint(BaseModel, ABC):
    """Abstract base for all input constraints.

    Contract:
        - is_violated_on() is deterministic: same input → same output
        - is_violated_on() never mutates the constraint; any counting state is local to the call
        - a violation is returned as True, never raised
        - a missing (None) or non-string input raises MissingInputError
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    violation_message: str = "InputConstraint violated"

    @property
    def name(self) -> str:
        """Constraint type name for logging and reports."""
        return type(self).__name__

    def is_violated_on(self, value: str) -> bool:
        """Check the rule against a string.

        Args:
            value: The input to evaluate. The empty string is a valid input.

        Returns:
            True if the input fails the rule, False otherwise.
        """
        require_input(value)
        return self._is_violated(value)

    @abstractmethod
    def _is_violated(self, value: str) -> bool:
        """Evaluate the rule against an input already known to be a string."""
        ...

    def to_definition(self) -> dict[str, Any]:
        """JSON-safe ``{"type": ..., **params}`` dict accepted by the registry."""
        return {"type": self.name, **self.model_dump(mode="json")}


def require_input(value: Any) -> None:
    """Fail fast when the input to evaluate is absent."""
    if not isinstance(value, str):
        raise MissingInputError("input string", value)
