"""ASCII character classification shared by the constraint library.

Classification is ASCII-only. ``str.isupper()`` and friends are Unicode-aware
and would accept letters such as 'É' or digits such as '٣'.
"""

import string

UPPER_CASE = frozenset(string.ascii_uppercase)
LOWER_CASE = frozenset(string.ascii_lowercase)
ALPHABETS = UPPER_CASE | LOWER_CASE
DIGITS = frozenset(string.digits)

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def is_upper_case(character: str) -> bool:
    return character in UPPER_CASE


def is_lower_case(character: str) -> bool:
    return character in LOWER_CASE


def is_alphabet(character: str) -> bool:
    return character in ALPHABETS


def is_digit(character: str) -> bool:
    return character in DIGITS


def is_any_character(character: str) -> bool:
    return True


def fold_case(value: str) -> str:
    """Lower-case ASCII letters only; every other character is left untouched."""
    return value.translate(_ASCII_FOLD)


def strip_whitespace(value: str) -> str:
    """Remove every whitespace character, including internal ones."""
    return "".join(value.split())


def has_only_digits(value: str) -> bool:
    return bool(value) and all(c in DIGITS for c in value)
