"""Constraint library: independent, composable predicates over a string input."""

from valify.constraints.base import InputConstraint
from valify.constraints.card_constraints import (
    AcceptedCardIssuersConstraint,
    ValidCardExpiryDateConstraint,
    ValidCardNumberConstraint,
    identify_card_issuer,
    passes_luhn_check,
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
from valify.constraints.reference_data import CardIssuer
from valify.constraints.registry import (
    CONSTRAINT_TYPES,
    constraint_from_definition,
    get_constraint_type,
    load_constraints,
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

__all__ = [
    "InputConstraint",
    "MaximumLengthLimitingConstraint",
    "MinimumLengthRequiredConstraint",
    "AvoidEmptinessConstraint",
    "UpperCaseCharactersRequiredConstraint",
    "AllUpperCaseCharactersConstraint",
    "AvoidUpperCaseCharactersConstraint",
    "LowerCaseCharactersRequiredConstraint",
    "AllLowerCaseCharactersConstraint",
    "AvoidLowerCaseCharactersConstraint",
    "DigitsRequiredConstraint",
    "AvoidDigitsConstraint",
    "SpecialCharactersRequiredConstraint",
    "SpecialWordsRequiredConstraint",
    "BlackListedCharactersConstraint",
    "BlackListedWordsConstraint",
    "AvoidRepeatingCharactersConstraint",
    "AvoidRepeatingAlphabetsConstraint",
    "AvoidRepeatingDigitsConstraint",
    "AvoidConsecutivelyRepeatingCharactersConstraint",
    "AvoidConsecutivelyRepeatingAlphabetsConstraint",
    "AvoidConsecutivelyRepeatingDigitsConstraint",
    "AvoidSequentialCharactersConstraint",
    "AvoidSequentialAlphabetsConstraint",
    "AvoidSequentialDigitsConstraint",
    "ValidCardNumberConstraint",
    "ValidCardExpiryDateConstraint",
    "AcceptedCardIssuersConstraint",
    "CardIssuer",
    "identify_card_issuer",
    "passes_luhn_check",
    "CONSTRAINT_TYPES",
    "get_constraint_type",
    "constraint_from_definition",
    "load_constraints",
]
