"""Pytest configuration and fixtures."""

import pytest
import structlog

from valify import (
    DigitsRequiredConstraint,
    LowerCaseCharactersRequiredConstraint,
    MaximumLengthLimitingConstraint,
    MinimumLengthRequiredConstraint,
    SpecialCharactersRequiredConstraint,
    UpperCaseCharactersRequiredConstraint,
    Valifier,
)
from valify.config import get_settings


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Each test starts with default structlog config and fresh settings."""
    get_settings.cache_clear()
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()


@pytest.fixture
def password_constraints():
    """A typical password policy, in the order violations should be reported."""
    return [
        MinimumLengthRequiredConstraint(min_length=8, violation_message="At least 8 characters"),
        UpperCaseCharactersRequiredConstraint(violation_message="At least one upper case letter"),
        LowerCaseCharactersRequiredConstraint(violation_message="At least one lower case letter"),
        SpecialCharactersRequiredConstraint(
            special_characters=list("@!#$%&*+-/=?^_~"),
            all_need_to_be_present=False,
            violation_message="At least one special character",
        ),
        MaximumLengthLimitingConstraint(max_length=64, violation_message=""),
    ]


@pytest.fixture
def password_valifier(password_constraints) -> Valifier:
    return Valifier(password_constraints)


@pytest.fixture
def signup_pipeline() -> Valifier:
    return Valifier([
        MinimumLengthRequiredConstraint(min_length=8),
        UpperCaseCharactersRequiredConstraint(),
        DigitsRequiredConstraint(),
    ])
