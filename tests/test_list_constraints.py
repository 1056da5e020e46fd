import pytest
from pydantic import ValidationError

from valify import (
    BlackListedCharactersConstraint,
    BlackListedWordsConstraint,
    SpecialCharactersRequiredConstraint,
    SpecialWordsRequiredConstraint,
)


# ── Special characters ──


def test_special_characters_any_presence() -> None:
    constraint = SpecialCharactersRequiredConstraint(special_characters=["@", "#"], all_need_to_be_present=False)

    assert not constraint.is_violated_on("user@host")
    assert not constraint.is_violated_on("#tag")
    assert constraint.is_violated_on("plain")
    assert constraint.is_violated_on("")


def test_special_characters_all_presence() -> None:
    constraint = SpecialCharactersRequiredConstraint(special_characters=["@", "#"], all_need_to_be_present=True)

    assert constraint.is_violated_on("user@host")
    assert not constraint.is_violated_on("user@host#1")


def test_special_characters_case_handling() -> None:
    sensitive = SpecialCharactersRequiredConstraint(special_characters=["V"], all_need_to_be_present=False)
    insensitive = SpecialCharactersRequiredConstraint(
        special_characters=["V"], all_need_to_be_present=False, case_insensitive=True
    )

    assert sensitive.is_violated_on("velvet")
    assert not insensitive.is_violated_on("velvet")


def test_special_characters_presence_mode_must_be_explicit() -> None:
    with pytest.raises(ValidationError):
        SpecialCharactersRequiredConstraint(special_characters=["@"])


@pytest.mark.parametrize("characters", [[], ["ab"], [""], ["@", "!!"], None])
def test_special_characters_list_is_validated(characters) -> None:
    with pytest.raises(ValidationError):
        SpecialCharactersRequiredConstraint(special_characters=characters, all_need_to_be_present=False)


def test_special_characters_are_stored_immutably() -> None:
    characters = ["@", "#"]
    constraint = SpecialCharactersRequiredConstraint(special_characters=characters, all_need_to_be_present=False)
    characters.append("x")

    assert constraint.special_characters == ("@", "#")
    assert constraint.is_violated_on("x")


# ── Special words ──


def test_special_words_any_and_all() -> None:
    any_word = SpecialWordsRequiredConstraint(special_words=["foo", "bar"], all_need_to_be_present=False)
    all_words = SpecialWordsRequiredConstraint(special_words=["foo", "bar"], all_need_to_be_present=True)

    assert not any_word.is_violated_on("xxfooxx")
    assert all_words.is_violated_on("xxfooxx")
    assert not all_words.is_violated_on("barfoo")
    assert any_word.is_violated_on("fo ba")


def test_special_words_case_insensitive() -> None:
    constraint = SpecialWordsRequiredConstraint(
        special_words=["Secret"], all_need_to_be_present=True, case_insensitive=True
    )

    assert not constraint.is_violated_on("TOPSECRET")
    assert constraint.is_violated_on("TOP-SECR-ET")


@pytest.mark.parametrize("words", [[], [""], None])
def test_special_words_list_is_validated(words) -> None:
    with pytest.raises(ValidationError):
        SpecialWordsRequiredConstraint(special_words=words, all_need_to_be_present=False)


# ── Black lists ──


def test_black_listed_characters() -> None:
    constraint = BlackListedCharactersConstraint(black_listed_characters=["<", ">"])

    assert constraint.is_violated_on("<script>")
    assert not constraint.is_violated_on("plain text")
    assert not constraint.is_violated_on("")


def test_black_listed_characters_case_insensitive() -> None:
    constraint = BlackListedCharactersConstraint(black_listed_characters=["q"], case_insensitive=True)

    assert constraint.is_violated_on("Quiet")
    assert not BlackListedCharactersConstraint(black_listed_characters=["q"]).is_violated_on("Quiet")


def test_black_listed_characters_require_single_characters() -> None:
    with pytest.raises(ValidationError):
        BlackListedCharactersConstraint(black_listed_characters=["<>"])
    with pytest.raises(ValidationError):
        BlackListedCharactersConstraint(black_listed_characters=[])


def test_black_listed_words() -> None:
    constraint = BlackListedWordsConstraint(black_listed_words=["password", "qwerty"])

    assert constraint.is_violated_on("mypassword1")
    assert not constraint.is_violated_on("MyPassword1")
    assert not constraint.is_violated_on("correct horse")


def test_black_listed_words_case_insensitive() -> None:
    constraint = BlackListedWordsConstraint(black_listed_words=["password"], case_insensitive=True)

    assert constraint.is_violated_on("MyPassWord1")


def test_black_listed_words_required() -> None:
    with pytest.raises(ValidationError):
        BlackListedWordsConstraint()
    with pytest.raises(ValidationError):
        BlackListedWordsConstraint(black_listed_words=[])
