"""Result-returning wrappers around the boolean validators.

Form handlers chain these with the Result combinators::

    check_password(form.password).and_then(lambda _: check_jumin(form.jumin))
"""

from __future__ import annotations

from collections.abc import Callable

from getflowkit.core.errors import ValidationError
from getflowkit.core.result import Failure, Result, Success
from getflowkit.validation import validators
from getflowkit.validation.policy import DEFAULT_PASSWORD_POLICY, PasswordPolicy


def validate(
    value: str,
    predicate: Callable[[str], bool],
    *,
    field: str,
    message: str,
) -> Result[str, ValidationError]:
    """Return ``Success(value)`` if *predicate* accepts it, else a ValidationError."""
    if predicate(value):
        return Success(value)
    return Failure(ValidationError(message, field=field))


def check_credit_card_number(
    value: str, *, field: str = "credit_card_number"
) -> Result[str, ValidationError]:
    return validate(
        value,
        validators.is_valid_credit_card_number,
        field=field,
        message="Credit card number must look like 1234-5678-9012-3456.",
    )


def check_driver_license_number(
    value: str, *, field: str = "driver_license_number"
) -> Result[str, ValidationError]:
    return validate(
        value,
        validators.is_valid_driver_license_number,
        field=field,
        message="Driver license number is not in the expected format.",
    )


def check_business_registration_number(
    value: str, *, field: str = "business_registration_number"
) -> Result[str, ValidationError]:
    return validate(
        value,
        validators.is_valid_business_registration_number,
        field=field,
        message="Business registration number must look like 123-45-67890.",
    )


def check_jumin(value: str, *, field: str = "jumin") -> Result[str, ValidationError]:
    return validate(
        value,
        validators.is_valid_jumin,
        field=field,
        message="Resident registration number is invalid.",
    )


def check_password(
    value: str,
    policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY,
    *,
    field: str = "password",
) -> Result[str, ValidationError]:
    policy = PasswordPolicy(policy)
    return validate(
        value,
        lambda v: validators.is_valid_password(v, policy),
        field=field,
        message=f"Password must be 8-20 characters ({policy.value}).",
    )
