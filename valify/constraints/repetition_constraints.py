"""Repetition constraints: limit how often characters repeat.

Two families:
    - AvoidRepeating*: total occurrences of a character anywhere in the input
    - AvoidConsecutivelyRepeating*: length of a contiguous run of one character

Both are violated once a character reaches ``max_number_of_repetitions_allowed + 1``.
The Alphabets and Digits variants only consider [A-Za-z] and [0-9] respectively.
"""

from collections import Counter
from typing import ClassVar

from pydantic import Field

from valify.constraints import text
from valify.constraints.base import InputConstraint

DEFAULT_MAX_NUMBER_OF_REPETITIONS_ALLOWED = 2


class _RepetitionLimitingConstraint(InputConstraint):
    DEFAULT_MAX_NUMBER_OF_REPETITIONS_ALLOWED: ClassVar[int] = DEFAULT_MAX_NUMBER_OF_REPETITIONS_ALLOWED

    max_number_of_repetitions_allowed: int = Field(default=DEFAULT_MAX_NUMBER_OF_REPETITIONS_ALLOWED, ge=0)

    _counts = staticmethod(text.is_any_character)

    def _prepare(self, value: str) -> str:
        if getattr(self, "case_insensitive", False):
            return text.fold_case(value)
        return value


class _TotalRepetitionConstraint(_RepetitionLimitingConstraint):
    def _is_violated(self, value: str) -> bool:
        # Counter is per call; constraints hold no evaluation state.
        occurrences = Counter(c for c in self._prepare(value) if self._counts(c))
        return any(count > self.max_number_of_repetitions_allowed for count in occurrences.values())


class _ConsecutiveRepetitionConstraint(_RepetitionLimitingConstraint):
    def _is_violated(self, value: str) -> bool:
        limit = self.max_number_of_repetitions_allowed
        previous = None
        run_length = 0

        for character in self._prepare(value):
            if not self._counts(character):
                previous, run_length = None, 0
                continue

            run_length = run_length + 1 if character == previous else 1
            previous = character
            if run_length > limit:
                return True

        return False


# ── Anywhere in the input ──


class AvoidRepeatingCharactersConstraint(_TotalRepetitionConstraint):
    """Violated if any character occurs more than ``max_number_of_repetitions_allowed`` times."""

    case_insensitive: bool = False
    violation_message: str = "AvoidRepeatingCharacters constraint violated"


class AvoidRepeatingAlphabetsConstraint(_TotalRepetitionConstraint):
    """Violated if any letter occurs more than ``max_number_of_repetitions_allowed`` times."""

    case_insensitive: bool = False
    violation_message: str = "AvoidRepeatingAlphabets constraint violated"

    _counts = staticmethod(text.is_alphabet)


class AvoidRepeatingDigitsConstraint(_TotalRepetitionConstraint):
    """Violated if any digit occurs more than ``max_number_of_repetitions_allowed`` times."""

    violation_message: str = "AvoidRepeatingDigits constraint violated"

    _counts = staticmethod(text.is_digit)


# ── Contiguous runs ──


class AvoidConsecutivelyRepeatingCharactersConstraint(_ConsecutiveRepetitionConstraint):
    """Violated on a run of ``max_number_of_repetitions_allowed + 1`` identical characters."""

    case_insensitive: bool = False
    violation_message: str = "AvoidConsecutivelyRepeatingCharacters constraint violated"


class AvoidConsecutivelyRepeatingAlphabetsConstraint(_ConsecutiveRepetitionConstraint):
    """Violated on a run of ``max_number_of_repetitions_allowed + 1`` identical letters."""

    case_insensitive: bool = False
    violation_message: str = "AvoidConsecutivelyRepeatingAlphabets constraint violated"

    _counts = staticmethod(text.is_alphabet)


class AvoidConsecutivelyRepeatingDigitsConstraint(_ConsecutiveRepetitionConstraint):
    """Violated on a run of ``max_number_of_repetitions_allowed + 1`` identical digits."""

    violation_message: str = "AvoidConsecutivelyRepeatingDigits constraint violated"

    _counts = staticmethod(text.is_digit)
