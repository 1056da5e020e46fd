import json
from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

from valify import (
    CONSTRAINT_TYPES,
    AcceptedCardIssuersConstraint,
    CardIssuer,
    MinimumLengthRequiredConstraint,
    SpecialCharactersRequiredConstraint,
    UnknownConstraintError,
    ValidCardExpiryDateConstraint,
    Valifier,
    constraint_from_definition,
    get_constraint_type,
    load_constraints,
)


def test_every_constraint_type_is_registered() -> None:
    assert len(CONSTRAINT_TYPES) == 27
    assert all(name.endswith("Constraint") for name in CONSTRAINT_TYPES)


def test_lookup_with_or_without_suffix() -> None:
    assert get_constraint_type("MinimumLengthRequired") is MinimumLengthRequiredConstraint
    assert get_constraint_type("MinimumLengthRequiredConstraint") is MinimumLengthRequiredConstraint


@pytest.mark.parametrize("kind", ["NoSuchThing", "", None, 42])
def test_unknown_types_are_rejected(kind) -> None:
    with pytest.raises(UnknownConstraintError):
        get_constraint_type(kind)


def test_unknown_constraint_error_is_a_key_error() -> None:
    with pytest.raises(KeyError):
        constraint_from_definition({"type": "Nope"})


def test_definition_without_type_is_rejected() -> None:
    with pytest.raises(UnknownConstraintError):
        constraint_from_definition({"min_length": 3})


def test_definition_with_invalid_params_is_rejected() -> None:
    with pytest.raises(ValidationError):
        constraint_from_definition({"type": "MinimumLengthRequired", "min_length": -3})
    with pytest.raises(ValidationError):
        constraint_from_definition({"type": "SpecialCharactersRequired", "special_characters": ["@"]})


def test_definition_does_not_mutate_input() -> None:
    definition = {"type": "MinimumLengthRequired", "min_length": 3}
    constraint_from_definition(definition)

    assert definition == {"type": "MinimumLengthRequired", "min_length": 3}


@pytest.mark.parametrize(
    "constraint",
    [
        MinimumLengthRequiredConstraint(min_length=12, violation_message="Too short"),
        SpecialCharactersRequiredConstraint(
            special_characters=["@", "#"], all_need_to_be_present=True, case_insensitive=True
        ),
        ValidCardExpiryDateConstraint(reference_date=date(2030, 1, 1)),
        AcceptedCardIssuersConstraint(accepted_issuers=[CardIssuer.VISA]),
    ],
)
def test_definitions_survive_json(constraint) -> None:
    definition = json.loads(json.dumps(constraint.to_definition()))

    assert constraint_from_definition(definition) == constraint


def test_load_constraints_from_list(tmp_path: Path) -> None:
    path = tmp_path / "policy.json"
    path.write_text(
        json.dumps([
            {"type": "MinimumLengthRequired", "min_length": 10},
            {"type": "BlackListedWords", "black_listed_words": ["password"], "case_insensitive": True},
        ]),
        encoding="utf-8",
    )

    constraints = load_constraints(path)

    assert [c.name for c in constraints] == ["MinimumLengthRequiredConstraint", "BlackListedWordsConstraint"]
    assert Valifier(constraints).first_constraint_violated_on("MyPassword123").name == "BlackListedWordsConstraint"


def test_load_constraints_from_object(tmp_path: Path) -> None:
    path = tmp_path / "policy.json"
    path.write_text(json.dumps({"constraints": [{"type": "AvoidEmptiness"}]}), encoding="utf-8")

    assert [c.name for c in load_constraints(str(path))] == ["AvoidEmptinessConstraint"]
