"""Korean-locale string validators.

Every predicate is total: for any ``str`` input it returns a bool and
never raises. Digits are ASCII ``0-9`` only; all patterns are anchored to
the whole string.
"""

from __future__ import annotations

import calendar
import re
from datetime import date

from getflowkit.validation.policy import DEFAULT_PASSWORD_POLICY, PasswordPolicy

CREDIT_CARD_PATTERN = re.compile(r"\d{4}-\d{4}-\d{4}-\d{4}", re.ASCII)
DRIVER_LICENSE_PATTERN = re.compile(r"[가-힣]{2}\d{2}[가-힣]\d{6}", re.ASCII)
BUSINESS_REGISTRATION_PATTERN = re.compile(r"\d{3}-\d{2}-\d{5}", re.ASCII)
JUMIN_PATTERN = re.compile(r"\d{13}", re.ASCII)
JUMIN_BODY_PATTERN = re.compile(r"\d{12}", re.ASCII)

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 20
PASSWORD_SPECIALS = "!@#$%^&*()_+|~=`{}[]:\";<>?,./"

_PASSWORD_CLASSES: dict[PasswordPolicy, str] = {
    PasswordPolicy.ONLY_LETTERS: "a-zA-Z",
    PasswordPolicy.LETTERS_AND_DIGITS: "a-zA-Z0-9",
    PasswordPolicy.LOWERCASE_LETTERS_AND_DIGITS: "a-z0-9",
    PasswordPolicy.UPPERCASE_LETTERS_AND_DIGITS: "A-Z0-9",
    PasswordPolicy.LETTERS_DIGITS_AND_SPECIALS: "a-zA-Z0-9" + re.escape(PASSWORD_SPECIALS),
}

PASSWORD_PATTERNS: dict[PasswordPolicy, re.Pattern[str]] = {
    policy: re.compile(f"[{chars}]{{{PASSWORD_MIN_LENGTH},{PASSWORD_MAX_LENGTH}}}")
    for policy, chars in _PASSWORD_CLASSES.items()
}

# Resident-registration number checksum weights over digits 0..11.
JUMIN_WEIGHTS: tuple[int, ...] = (2, 3, 4, 5, 6, 7, 8, 9, 2, 3, 4, 5)

JUMIN_CENTURIES: dict[str, int] = {
    "1": 1900,
    "2": 1900,
    "3": 2000,
    "4": 2000,
}


def is_valid_credit_card_number(value: str) -> bool:
    """Check the ``DDDD-DDDD-DDDD-DDDD`` layout. No Luhn checksum."""
    return CREDIT_CARD_PATTERN.fullmatch(value) is not None


def is_valid_driver_license_number(value: str) -> bool:
    """Check the Korean driver-license layout, e.g. ``서울12가123456``."""
    return DRIVER_LICENSE_PATTERN.fullmatch(value) is not None


def is_valid_business_registration_number(value: str) -> bool:
    """Check the ``DDD-DD-DDDDD`` business registration layout."""
    return BUSINESS_REGISTRATION_PATTERN.fullmatch(value) is not None


def build_date(year: int, month: int, day: int) -> date | None:
    """Return the calendar date, or None if the components do not form one."""
    if not date.min.year <= year <= date.max.year or not 1 <= month <= 12:
        return None
    if not 1 <= day <= calendar.monthrange(year, month)[1]:
        return None
    return date(year, month, day)


def jumin_check_digit(digits: str) -> int:
    """Compute the check digit for the first twelve *digits*.

    Raises ValueError unless *digits* starts with twelve ASCII digits.
    """
    if JUMIN_BODY_PATTERN.match(digits) is None:
        raise ValueError("jumin_check_digit needs twelve leading ASCII digits")
    total = sum(int(d) * w for d, w in zip(digits[:12], JUMIN_WEIGHTS, strict=True))
    return (11 - total % 11) % 10


def is_valid_jumin(value: str) -> bool:
    """Validate a 13-digit resident-registration number.

    Checks the layout, the century code (1-4), that the encoded birth
    date exists, and the weighted checksum in the last digit.
    """
    if JUMIN_PATTERN.fullmatch(value) is None:
        return False

    century = JUMIN_CENTURIES.get(value[6])
    if century is None:
        return False

    year = century + int(value[0:2])
    if build_date(year, int(value[2:4]), int(value[4:6])) is None:
        return False

    return jumin_check_digit(value) == int(value[12])


def is_valid_password(value: str, policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY) -> bool:
    """Check length (8-20) and the character class selected by *policy*."""
    return PASSWORD_PATTERNS[PasswordPolicy(policy)].fullmatch(value) is not None


class Validator:
    """Validator capability for form handlers.

    Methods delegate to the module-level predicates. The instance only
    remembers which password policy to apply when none is given.
    """

    def __init__(self, password_policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY) -> None:
        self.password_policy = PasswordPolicy(password_policy)

    def is_valid_credit_card_number(self, value: str) -> bool:
        return is_valid_credit_card_number(value)

    def is_valid_driver_license_number(self, value: str) -> bool:
        return is_valid_driver_license_number(value)

    def is_valid_business_registration_number(self, value: str) -> bool:
        return is_valid_business_registration_number(value)

    def is_valid_jumin(self, value: str) -> bool:
        return is_valid_jumin(value)

    def is_valid_password(self, value: str, policy: PasswordPolicy | None = None) -> bool:
        return is_valid_password(value, policy or self.password_policy)
