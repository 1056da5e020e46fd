"""List constraints: required and black-listed characters or words.

"Special" doesn't have to mean special by universal convention: any character
or word that matters to the business rule (even the letter 'v') can be listed.
"""

from typing import Iterator

from pydantic import Field, field_validator

from valify.constraints import text
from valify.constraints.base import InputConstraint


class _TermListConstraint(InputConstraint):
    """Shared containment checks over a configured list of terms."""

    case_insensitive: bool = False

    @property
    def _terms(self) -> tuple[str, ...]:
        raise NotImplementedError

    def _present_terms(self, value: str) -> Iterator[bool]:
        if self.case_insensitive:
            haystack = text.fold_case(value)
            return (text.fold_case(term) in haystack for term in self._terms)
        return (term in value for term in self._terms)


def _single_characters(entries: tuple[str, ...]) -> tuple[str, ...]:
    for entry in entries:
        if len(entry) != 1:
            raise ValueError(f"Character entries must be exactly 1 character long, got {entry!r}")
    return entries


def _non_empty_words(entries: tuple[str, ...]) -> tuple[str, ...]:
    for entry in entries:
        if not entry:
            raise ValueError("Word entries cannot be empty")
    return entries


class SpecialCharactersRequiredConstraint(_TermListConstraint):
    """Violated unless any (or, with ``all_need_to_be_present``, every) listed character is in the input."""

    special_characters: tuple[str, ...] = Field(min_length=1)
    all_need_to_be_present: bool
    violation_message: str = "SpecialCharactersRequired constraint violated"

    @field_validator("special_characters")
    @classmethod
    def check_single_characters(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return _single_characters(value)

    @property
    def _terms(self) -> tuple[str, ...]:
        return self.special_characters

    def _is_violated(self, value: str) -> bool:
        present = self._present_terms(value)
        return not (all(present) if self.all_need_to_be_present else any(present))


class SpecialWordsRequiredConstraint(_TermListConstraint):
    """Violated unless any (or, with ``all_need_to_be_present``, every) listed word is a substring of the input."""

    special_words: tuple[str, ...] = Field(min_length=1)
    all_need_to_be_present: bool
    violation_message: str = "SpecialWordsRequired constraint violated"

    @field_validator("special_words")
    @classmethod
    def check_non_empty_words(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return _non_empty_words(value)

    @property
    def _terms(self) -> tuple[str, ...]:
        return self.special_words

    def _is_violated(self, value: str) -> bool:
        present = self._present_terms(value)
        return not (all(present) if self.all_need_to_be_present else any(present))


class BlackListedCharactersConstraint(_TermListConstraint):
    """Violated if any black-listed character is present in the input."""

    black_listed_characters: tuple[str, ...] = Field(min_length=1)
    violation_message: str = "BlackListedCharacters constraint violated"

    @field_validator("black_listed_characters")
    @classmethod
    def check_single_characters(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return _single_characters(value)

    @property
    def _terms(self) -> tuple[str, ...]:
        return self.black_listed_characters

    def _is_violated(self, value: str) -> bool:
        return any(self._present_terms(value))


class BlackListedWordsConstraint(_TermListConstraint):
    """Violated if any black-listed word is a substring of the input."""

    black_listed_words: tuple[str, ...] = Field(min_length=1)
    violation_message: str = "BlackListedWords constraint violated"

    @field_validator("black_listed_words")
    @classmethod
    def check_non_empty_words(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return _non_empty_words(value)

    @property
    def _terms(self) -> tuple[str, ...]:
        return self.black_listed_words

    def _is_violated(self, value: str) -> bool:
        return any(self._present_terms(value))
