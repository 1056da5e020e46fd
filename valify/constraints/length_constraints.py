"""Length constraints: maximum length, minimum length, emptiness."""

from typing import ClassVar

from pydantic import Field

from valify.constraints.base import InputConstraint


class MaximumLengthLimitingConstraint(InputConstraint):
    """Violated when the input is longer than ``max_length``."""

    DEFAULT_MAX_LENGTH: ClassVar[int] = 64

    max_length: int = Field(default=DEFAULT_MAX_LENGTH, ge=0)
    violation_message: str = "MaximumLengthLimiting constraint violated"

    def _is_violated(self, value: str) -> bool:
        return len(value) > self.max_length


class MinimumLengthRequiredConstraint(InputConstraint):
    """Violated when the input is shorter than ``min_length``."""

    DEFAULT_MIN_LENGTH: ClassVar[int] = 8

    min_length: int = Field(default=DEFAULT_MIN_LENGTH, ge=0)
    violation_message: str = "MinimumLengthRequired constraint violated"

    def _is_violated(self, value: str) -> bool:
        return len(value) < self.min_length


class AvoidEmptinessConstraint(InputConstraint):
    """Violated when the input is the empty string."""

    violation_message: str = "AvoidEmptiness constraint violated"

    def _is_violated(self, value: str) -> bool:
        return not value
