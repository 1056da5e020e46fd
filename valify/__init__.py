"""Valify: validate a string against an ordered pipeline of composable constraints.

Usage:
    from valify import Valifier, MinimumLengthRequiredConstraint, DigitsRequiredConstraint

    valifier = Valifier([MinimumLengthRequiredConstraint(), DigitsRequiredConstraint()])
    for constraint in valifier.all_constraints_violated_on(password):
        print(constraint.violation_message)
"""

from valify.constraints import (
    InputConstraint,
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
    CardIssuer,
    identify_card_issuer,
    passes_luhn_check,
    CONSTRAINT_TYPES,
    get_constraint_type,
    constraint_from_definition,
    load_constraints,
)
from valify.engine import Valifier
from valify.exceptions import MissingInputError, UnknownConstraintError, ValifyError
from valify.models import ValidationReport, Violation

__version__ = "1.0.0"

__all__ = [
    "Valifier",
    "ValidationReport",
    "Violation",
    "ValifyError",
    "MissingInputError",
    "UnknownConstraintError",
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
