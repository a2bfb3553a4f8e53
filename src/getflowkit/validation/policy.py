"""Password policies selecting the allowed character class."""

from __future__ import annotations

from enum import StrEnum


class PasswordPolicy(StrEnum):
    """Character classes a password may be drawn from."""

    ONLY_LETTERS = "only-letters"
    LETTERS_AND_DIGITS = "letters-and-digits"
    LOWERCASE_LETTERS_AND_DIGITS = "lowercase-letters-and-digits"
    UPPERCASE_LETTERS_AND_DIGITS = "uppercase-letters-and-digits"
    LETTERS_DIGITS_AND_SPECIALS = "letters-digits-and-specials"


DEFAULT_PASSWORD_POLICY = PasswordPolicy.LETTERS_AND_DIGITS
