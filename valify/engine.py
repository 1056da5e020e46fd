"""Valifier: runs an ordered pipeline of constraints against an input.

This is the main entry point for validating a string. The constraint list is
fixed at construction; its order decides which violation is reported first.

Usage:
    valifier = Valifier([
        MinimumLengthRequiredConstraint(min_length=8),
        UpperCaseCharactersRequiredConstraint(),
        DigitsRequiredConstraint(),
    ])
    violated = valifier.first_constraint_violated_on(password)
    if violated is not None:
        show(violated.violation_message)
"""

import time
from typing import Any, Iterable, Optional, Sequence

import structlog

from valify.constraints.base import InputConstraint, require_input
from valify.constraints.registry import constraint_from_definition
from valify.exceptions import MissingInputError
from valify.models import ValidationReport, Violation

logger = structlog.get_logger()


class Valifier:
    """Evaluates a fixed, ordered sequence of constraints.

    Design principles:
        - Deterministic: same input → same output
        - Stateless: every query is an independent pass over the constraints
        - Violations are data: nothing is raised for a failing input
        - Observable: logs every full evaluation with timing (never the input itself)
    """

    def __init__(self, constraints: Sequence[InputConstraint]):
        """Initialize with an ordered list of constraints.

        Args:
            constraints: Constraints in evaluation order. May be empty, must not be None.
        """
        if constraints is None or isinstance(constraints, str):
            raise MissingInputError("constraints list", constraints)

        constraints = tuple(constraints)
        for constraint in constraints:
            if not isinstance(constraint, InputConstraint):
                raise TypeError(f"Expected InputConstraint, got {type(constraint).__name__}")

        self._constraints = constraints
        logger.debug("valifier_created", constraints=len(constraints))

    @classmethod
    def from_definitions(cls, definitions: Iterable[dict[str, Any]]) -> "Valifier":
        """Build a pipeline from declarative ``{"type": ..., **params}`` definitions."""
        return cls([constraint_from_definition(d) for d in definitions])

    @property
    def constraints(self) -> tuple[InputConstraint, ...]:
        return self._constraints

    def __len__(self) -> int:
        return len(self._constraints)

    def __repr__(self) -> str:
        return f"Valifier({[c.name for c in self._constraints]})"

    def are_all_constraints_satisfied_on(self, value: str) -> bool:
        """True if no constraint is violated. Stops at the first violation."""
        return self.first_constraint_violated_on(value) is None

    def all_constraints_violated_on(self, value: str) -> list[InputConstraint]:
        """Every violated constraint, in pipeline order. Empty if none are violated."""
        require_input(value)
        start_time = time.perf_counter()

        violated = [c for c in self._constraints if c.is_violated_on(value)]

        logger.debug(
            "constraints_evaluated",
            checked=len(self._constraints),
            violated=[c.name for c in violated],
            input_length=len(value),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )
        return violated

    def first_constraint_violated_on(self, value: str) -> Optional[InputConstraint]:
        """The first violated constraint in pipeline order, or None."""
        require_input(value)

        for position, constraint in enumerate(self._constraints):
            if constraint.is_violated_on(value):
                logger.debug("constraint_violated", constraint=constraint.name, position=position)
                return constraint

        return None

    def report(self, value: str) -> ValidationReport:
        """Evaluate every constraint and summarise the violations."""
        require_input(value)

        violations = [
            Violation(constraint=c.name, message=c.violation_message, position=i)
            for i, c in enumerate(self._constraints)
            if c.is_violated_on(value)
        ]

        logger.debug(
            "constraints_evaluated",
            checked=len(self._constraints),
            violated=[v.constraint for v in violations],
            input_length=len(value),
        )
        return ValidationReport(
            satisfied=not violations,
            checked=len(self._constraints),
            violations=violations,
        )
