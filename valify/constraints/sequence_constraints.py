"""Sequence constraints: limit runs of consecutive ascending characters.

A sequence is a contiguous run where each character's code point is exactly one
above the previous one ("abcd", "1234", "!\\"#$"). The constraint is violated once a
run reaches ``max_sequence_length + 1`` characters. Alphabets and Digits variants
require every character of the run to be [A-Za-z] or [0-9].
"""

from typing import ClassVar

from pydantic import Field

from valify.constraints import text
from valify.constraints.base import InputConstraint

DEFAULT_MAX_SEQUENCE_LENGTH = 3


class _SequenceLimitingConstraint(InputConstraint):
    DEFAULT_MAX_SEQUENCE_LENGTH: ClassVar[int] = DEFAULT_MAX_SEQUENCE_LENGTH

    max_sequence_length: int = Field(default=DEFAULT_MAX_SEQUENCE_LENGTH, gt=1)

    _counts = staticmethod(text.is_any_character)

    def _prepare(self, value: str) -> str:
        if getattr(self, "case_insensitive", False):
            return text.fold_case(value)
        return value

    def _is_violated(self, value: str) -> bool:
        previous = None
        run_length = 0

        for character in self._prepare(value):
            if not self._counts(character):
                previous, run_length = None, 0
                continue

            if previous is not None and ord(character) == ord(previous) + 1:
                run_length += 1
            else:
                run_length = 1
            previous = character

            if run_length > self.max_sequence_length:
                return True

        return False


class AvoidSequentialCharactersConstraint(_SequenceLimitingConstraint):
    """Violated on ``max_sequence_length + 1`` consecutive ascending characters of any kind."""

    case_insensitive: bool = False
    violation_message: str = "AvoidSequentialCharacters constraint violated"


class AvoidSequentialAlphabetsConstraint(_SequenceLimitingConstraint):
    """Violated on ``max_sequence_length + 1`` alphabetically consecutive letters."""

    case_insensitive: bool = False
    violation_message: str = "AvoidSequentialAlphabets constraint violated"

    _counts = staticmethod(text.is_alphabet)


class AvoidSequentialDigitsConstraint(_SequenceLimitingConstraint):
    """Violated on ``max_sequence_length + 1`` numerically consecutive digits."""

    violation_message: str = "AvoidSequentialDigits constraint violated"

    _counts = staticmethod(text.is_digit)
