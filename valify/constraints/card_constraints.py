"""Card constraints: card number checksum, expiry date and accepted issuers."""

from datetime import date
from typing import Optional

import structlog
from pydantic import Field

from valify.constraints import text
from valify.constraints.base import InputConstraint
from valify.constraints.reference_data import ISSUER_PREFIX_PATTERNS, CardIssuer

logger = structlog.get_logger()

MIN_CARD_NUMBER_LENGTH = 13


def passes_luhn_check(digits: str) -> bool:
    """Luhn checksum over a string of ASCII digits.

    From the rightmost digit, every second digit is doubled (minus 9 when the
    result exceeds 9); the number is valid when the total is a multiple of 10.
    """
    total = 0
    for position, character in enumerate(reversed(digits)):
        digit = int(character)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def identify_card_issuer(card_number: str) -> CardIssuer:
    """Identify the card network from the leading digits of a card number.

    Args:
        card_number: Card number, whitespace allowed between digit groups

    Returns:
        The first matching CardIssuer, or CardIssuer.UNKNOWN
    """
    number = text.strip_whitespace(card_number)
    if not text.has_only_digits(number):
        return CardIssuer.UNKNOWN

    for issuer, pattern in ISSUER_PREFIX_PATTERNS:
        if pattern.match(number):
            return issuer
    return CardIssuer.UNKNOWN


class ValidCardNumberConstraint(InputConstraint):
    """Violated unless the input is a plausible card number passing the Luhn check.

    Whitespace anywhere in the input is ignored ("4111 1111 1111 1111" is fine).
    """

    violation_message: str = "ValidCardNumber constraint violated"

    def _is_violated(self, value: str) -> bool:
        number = text.strip_whitespace(value)

        if len(number) < MIN_CARD_NUMBER_LENGTH:
            return True
        if not text.has_only_digits(number):
            return True
        if set(number) == {"0"}:
            return True

        return not passes_luhn_check(number)


class ValidCardExpiryDateConstraint(InputConstraint):
    """Violated if the input is not an unexpired 'MM/YY' or 'MM/YYYY' date.

    Years are compared modulo 100. A card expiring in the current month is
    still valid. ``reference_date`` pins "today"; it defaults to the date at
    evaluation time.
    """

    reference_date: Optional[date] = None
    violation_message: str = "ValidCardExpiryDate constraint violated"

    def _is_violated(self, value: str) -> bool:
        parsed = _parse_month_and_year(text.strip_whitespace(value))
        if parsed is None:
            return True

        month, year = parsed
        today = self.reference_date or date.today()
        current_year = today.year % 100

        if year % 100 < current_year:
            return True
        if year % 100 == current_year and month < today.month:
            return True
        return False


def _parse_month_and_year(value: str) -> Optional[tuple[int, int]]:
    parts = value.split("/")
    if len(parts) != 2:
        return None

    month, year = parts
    if not text.has_only_digits(month) or not text.has_only_digits(year):
        return None
    if len(month) > 2 or len(year) not in (2, 4):
        return None
    if not 1 <= int(month) <= 12:
        return None

    return int(month), int(year)


class AcceptedCardIssuersConstraint(InputConstraint):
    """Violated unless the card number belongs to one of ``accepted_issuers``."""

    accepted_issuers: tuple[CardIssuer, ...] = Field(min_length=1)
    violation_message: str = "AcceptedCardIssuers constraint violated"

    def _is_violated(self, value: str) -> bool:
        issuer = identify_card_issuer(value)
        if issuer not in self.accepted_issuers:
            logger.debug("card_issuer_not_accepted", constraint=self.name, issuer=issuer.value)
            return True
        return False
