import pytest
from pydantic import ValidationError

from valify import (
    AvoidSequentialAlphabetsConstraint,
    AvoidSequentialCharactersConstraint,
    AvoidSequentialDigitsConstraint,
)


def test_sequential_characters_default_length() -> None:
    constraint = AvoidSequentialCharactersConstraint()

    assert constraint.max_sequence_length == 3
    assert constraint.is_violated_on("abcd")
    assert constraint.is_violated_on("x1234x")
    assert not constraint.is_violated_on("abc")
    assert not constraint.is_violated_on("abc-abc")


def test_sequential_characters_cover_any_code_points() -> None:
    assert AvoidSequentialCharactersConstraint().is_violated_on('!"#$')


def test_descending_runs_are_not_sequences() -> None:
    assert not AvoidSequentialCharactersConstraint().is_violated_on("dcba")
    assert not AvoidSequentialDigitsConstraint().is_violated_on("4321")


def test_sequential_characters_case_handling() -> None:
    assert not AvoidSequentialCharactersConstraint().is_violated_on("aBcD")
    assert AvoidSequentialCharactersConstraint(case_insensitive=True).is_violated_on("aBcD")


def test_sequential_alphabets() -> None:
    constraint = AvoidSequentialAlphabetsConstraint()

    assert constraint.is_violated_on("xyz_abcd")
    assert not constraint.is_violated_on("1234")
    assert not constraint.is_violated_on("ab1cd")
    assert AvoidSequentialAlphabetsConstraint(case_insensitive=True).is_violated_on("wXyZ")


def test_sequential_digits() -> None:
    constraint = AvoidSequentialDigitsConstraint(max_sequence_length=2)

    assert constraint.is_violated_on("a012")
    assert not constraint.is_violated_on("a01b2")
    assert not constraint.is_violated_on("8901")
    assert not constraint.is_violated_on("abcd")


@pytest.mark.parametrize("length", [1, 0, -3])
def test_sequence_length_must_exceed_one(length: int) -> None:
    with pytest.raises(ValidationError):
        AvoidSequentialCharactersConstraint(max_sequence_length=length)
    with pytest.raises(ValidationError):
        AvoidSequentialDigitsConstraint(max_sequence_length=length)
