"""Character class constraints: upper case, lower case and digit requirements.

Each "required" rule counts matching characters anywhere in the input (not just
a contiguous run) and checks the count lies in ``[min, max]``; ``max`` of None
means unbounded. "All" rules require a non-empty input made only of the class;
"avoid" rules reject any occurrence of it.
"""

from typing import ClassVar, Optional

from pydantic import Field, model_validator

from valify.constraints import text
from valify.constraints.base import InputConstraint


class _CountInRangeConstraint(InputConstraint):
    """Shared min/max counting for the "required" rules."""

    @property
    def _bounds(self) -> tuple[int, Optional[int]]:
        raise NotImplementedError

    @staticmethod
    def _matches(character: str) -> bool:
        raise NotImplementedError

    @model_validator(mode="after")
    def check_max_not_below_min(self):
        minimum, maximum = self._bounds
        if maximum is not None and maximum < minimum:
            raise ValueError(f"maximum ({maximum}) must be >= minimum ({minimum})")
        return self

    def _is_violated(self, value: str) -> bool:
        minimum, maximum = self._bounds
        count = sum(1 for character in value if self._matches(character))

        if count < minimum:
            return True
        return maximum is not None and count > maximum


# ── Upper case ──


class UpperCaseCharactersRequiredConstraint(_CountInRangeConstraint):
    """Violated unless the number of [A-Z] characters is within [min, max]."""

    DEFAULT_MIN_CHARACTERS_REQUIRED: ClassVar[int] = 1

    min_characters_required: int = Field(default=DEFAULT_MIN_CHARACTERS_REQUIRED, ge=0)
    max_characters_allowed: Optional[int] = Field(default=None, ge=0)
    violation_message: str = "UpperCaseCharactersRequired constraint violated"

    @property
    def _bounds(self) -> tuple[int, Optional[int]]:
        return self.min_characters_required, self.max_characters_allowed

    _matches = staticmethod(text.is_upper_case)


class AllUpperCaseCharactersConstraint(InputConstraint):
    """Violated if any character is not [A-Z]. The empty string is a violation."""

    violation_message: str = "AllUpperCaseCharacters constraint violated"

    def _is_violated(self, value: str) -> bool:
        return not value or not all(text.is_upper_case(c) for c in value)


class AvoidUpperCaseCharactersConstraint(InputConstraint):
    """Violated if the input contains even one [A-Z] character."""

    violation_message: str = "AvoidUpperCaseCharacters constraint violated"

    def _is_violated(self, value: str) -> bool:
        return any(text.is_upper_case(c) for c in value)


# ── Lower case ──


class LowerCaseCharactersRequiredConstraint(_CountInRangeConstraint):
    """Violated unless the number of [a-z] characters is within [min, max]."""

    DEFAULT_MIN_CHARACTERS_REQUIRED: ClassVar[int] = 1

    min_characters_required: int = Field(default=DEFAULT_MIN_CHARACTERS_REQUIRED, ge=0)
    max_characters_allowed: Optional[int] = Field(default=None, ge=0)
    violation_message: str = "LowerCaseCharactersRequired constraint violated"

    @property
    def _bounds(self) -> tuple[int, Optional[int]]:
        return self.min_characters_required, self.max_characters_allowed

    _matches = staticmethod(text.is_lower_case)


class AllLowerCaseCharactersConstraint(InputConstraint):
    """Violated if any character is not [a-z]. The empty string is a violation."""

    violation_message: str = "AllLowerCaseCharacters constraint violated"

    def _is_violated(self, value: str) -> bool:
        return not value or not all(text.is_lower_case(c) for c in value)


class AvoidLowerCaseCharactersConstraint(InputConstraint):
    """Violated if the input contains even one [a-z] character."""

    violation_message: str = "AvoidLowerCaseCharacters constraint violated"

    def _is_violated(self, value: str) -> bool:
        return any(text.is_lower_case(c) for c in value)


# ── Digits ──


class DigitsRequiredConstraint(_CountInRangeConstraint):
    """Violated unless the number of [0-9] characters is within [min, max]."""

    DEFAULT_MIN_DIGITS_REQUIRED: ClassVar[int] = 1

    min_digits_required: int = Field(default=DEFAULT_MIN_DIGITS_REQUIRED, ge=0)
    max_digits_allowed: Optional[int] = Field(default=None, ge=0)
    violation_message: str = "DigitsRequired constraint violated"

    @property
    def _bounds(self) -> tuple[int, Optional[int]]:
        return self.min_digits_required, self.max_digits_allowed

    _matches = staticmethod(text.is_digit)


class AvoidDigitsConstraint(InputConstraint):
    """Violated if the input contains even one [0-9] character."""

    violation_message: str = "AvoidDigits constraint violated"

    def _is_violated(self, value: str) -> bool:
        return any(text.is_digit(c) for c in value)
