"""Validation layer: boolean predicates and their Result-returning checks."""

from getflowkit.validation.checks import (
    check_business_registration_number,
    check_credit_card_number,
    check_driver_license_number,
    check_jumin,
    check_password,
    validate,
)
from getflowkit.validation.policy import DEFAULT_PASSWORD_POLICY, PasswordPolicy
from getflowkit.validation.validators import (
    Validator,
    is_valid_business_registration_number,
    is_valid_credit_card_number,
    is_valid_driver_license_number,
    is_valid_jumin,
    is_valid_password,
)

__all__ = [
    "DEFAULT_PASSWORD_POLICY",
    "PasswordPolicy",
    "Validator",
    "check_business_registration_number",
    "check_credit_card_number",
    "check_driver_license_number",
    "check_jumin",
    "check_password",
    "is_valid_business_registration_number",
    "is_valid_credit_card_number",
    "is_valid_driver_license_number",
    "is_valid_jumin",
    "is_valid_password",
    "validate",
]
