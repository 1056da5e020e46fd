"""Constraint registry: builds constraints from declarative definitions.

A definition is a dict naming the constraint type plus its parameters:

    {"type": "MinimumLengthRequired", "min_length": 8, "violation_message": "Too short"}

The "Constraint" suffix on the type name is optional.
"""

import json
from pathlib import Path
from typing import Any, Union

import structlog

from valify.constraints.base import InputConstraint
from valify.constraints.card_constraints import (
    AcceptedCardIssuersConstraint,
    ValidCardExpiryDateConstraint,
    ValidCardNumberConstraint,
)
from valify.constraints.character_class_constraints import (
    AllLowerCaseCharactersConstraint,
    AllUpperCaseCharactersConstraint,
    AvoidDigitsConstraint,
    AvoidLowerCaseCharactersConstraint,
    AvoidUpperCaseCharactersConstraint,
    DigitsRequiredConstraint,
    LowerCaseCharactersRequiredConstraint,
    UpperCaseCharactersRequiredConstraint,
)
from valify.constraints.length_constraints import (
    AvoidEmptinessConstraint,
    MaximumLengthLimitingConstraint,
    MinimumLengthRequiredConstraint,
)
from valify.constraints.list_constraints import (
    BlackListedCharactersConstraint,
    BlackListedWordsConstraint,
    SpecialCharactersRequiredConstraint,
    SpecialWordsRequiredConstraint,
)
from valify.constraints.repetition_constraints import (
    AvoidConsecutivelyRepeatingAlphabetsConstraint,
    AvoidConsecutivelyRepeatingCharactersConstraint,
    AvoidConsecutivelyRepeatingDigitsConstraint,
    AvoidRepeatingAlphabetsConstraint,
    AvoidRepeatingCharactersConstraint,
    AvoidRepeatingDigitsConstraint,
)
from valify.constraints.sequence_constraints import (
    AvoidSequentialAlphabetsConstraint,
    AvoidSequentialCharactersConstraint,
    AvoidSequentialDigitsConstraint,
)
from valify.exceptions import UnknownConstraintError

logger = structlog.get_logger()

CONSTRAINT_TYPES: dict[str, type[InputConstraint]] = {
    cls.__name__: cls
    for cls in (
        MaximumLengthLimitingConstraint,
        MinimumLengthRequiredConstraint,
        AvoidEmptinessConstraint,
        UpperCaseCharactersRequiredConstraint,
        AllUpperCaseCharactersConstraint,
        AvoidUpperCaseCharactersConstraint,
        LowerCaseCharactersRequiredConstraint,
        AllLowerCaseCharactersConstraint,
        AvoidLowerCaseCharactersConstraint,
        DigitsRequiredConstraint,
        AvoidDigitsConstraint,
        SpecialCharactersRequiredConstraint,
        SpecialWordsRequiredConstraint,
        BlackListedCharactersConstraint,
        BlackListedWordsConstraint,
        AvoidRepeatingCharactersConstraint,
        AvoidRepeatingAlphabetsConstraint,
        AvoidRepeatingDigitsConstraint,
        AvoidConsecutivelyRepeatingCharactersConstraint,
        AvoidConsecutivelyRepeatingAlphabetsConstraint,
        AvoidConsecutivelyRepeatingDigitsConstraint,
        AvoidSequentialCharactersConstraint,
        AvoidSequentialAlphabetsConstraint,
        AvoidSequentialDigitsConstraint,
        ValidCardNumberConstraint,
        ValidCardExpiryDateConstraint,
        AcceptedCardIssuersConstraint,
    )
}


def get_constraint_type(kind: str) -> type[InputConstraint]:
    """Look up a constraint class by name, with or without the "Constraint" suffix."""
    if not isinstance(kind, str):
        raise UnknownConstraintError(kind)

    cls = CONSTRAINT_TYPES.get(kind) or CONSTRAINT_TYPES.get(f"{kind}Constraint")
    if cls is None:
        raise UnknownConstraintError(kind)
    return cls


def constraint_from_definition(definition: dict[str, Any]) -> InputConstraint:
    """Instantiate a constraint from a ``{"type": ..., **params}`` definition.

    Raises:
        UnknownConstraintError: if the type is missing or not registered
        pydantic.ValidationError: if the parameters are invalid
    """
    params = dict(definition)
    kind = params.pop("type", None)
    if kind is None:
        raise UnknownConstraintError(None)

    return get_constraint_type(kind)(**params)


def load_constraints(path: Union[str, Path]) -> list[InputConstraint]:
    """Load constraint definitions from a JSON file.

    The file holds either a list of definitions or an object with a
    "constraints" list.
    """
    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    definitions = data.get("constraints", []) if isinstance(data, dict) else data

    constraints = [constraint_from_definition(d) for d in definitions]
    logger.debug("constraints_loaded", path=str(path), count=len(constraints))
    return constraints
