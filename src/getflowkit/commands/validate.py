"""Command group: validate Korean-locale identifiers and passwords."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from getflowkit.validation import checks
from getflowkit.validation.policy import PasswordPolicy

if TYPE_CHECKING:
    from getflowkit.commands._context import AppContext


def _examples(*invocations: str) -> str:
    """Build a --help epilog listing *invocations* verbatim."""
    lines = "\n".join(f"  getflowkit {line}" for line in invocations)
    return f"\b\nExamples:\n{lines}"


@click.group(
    epilog=_examples(
        "validate card 1234-5678-9012-3456",
        "validate jumin 9001011234568",
        "validate password s3cretpass --policy letters-and-digits",
        "--json validate business 123-45-67890",
    ),
)
def validate() -> None:
    """Validate identifiers and passwords. Exits 1 when the value is invalid."""


@validate.command(epilog=_examples("validate card 1234-5678-9012-3456"))
@click.argument("value")
@click.pass_obj
def card(app: AppContext, value: str) -> None:
    """Check a DDDD-DDDD-DDDD-DDDD credit card number."""
    app.emit("validate_card", checks.check_credit_card_number(value))


@validate.command("license", epilog=_examples("validate license 서울12가123456"))
@click.argument("value")
@click.pass_obj
def license_cmd(app: AppContext, value: str) -> None:
    """Check a Korean driver license number."""
    app.emit("validate_license", checks.check_driver_license_number(value))


@validate.command(epilog=_examples("validate business 123-45-67890"))
@click.argument("value")
@click.pass_obj
def business(app: AppContext, value: str) -> None:
    """Check a DDD-DD-DDDDD business registration number."""
    app.emit("validate_business", checks.check_business_registration_number(value))


@validate.command(epilog=_examples("validate jumin 9001011234568"))
@click.argument("value")
@click.pass_obj
def jumin(app: AppContext, value: str) -> None:
    """Check a 13-digit resident registration number."""
    app.emit("validate_jumin", checks.check_jumin(value))


@validate.command(
    epilog=_examples(
        "validate password abcd1234",
        "validate password 'Pa$$w0rd!' --policy letters-digits-and-specials",
    ),
)
@click.argument("value")
@click.option(
    "--policy",
    type=click.Choice([p.value for p in PasswordPolicy]),
    default=None,
    help="Allowed character class (default: from config).",
)
@click.pass_obj
def password(app: AppContext, value: str, policy: str | None) -> None:
    """Check password length (8-20) and character class."""
    resolved = PasswordPolicy(policy) if policy else app.settings.validation.password_policy
    app.emit(
        "validate_password",
        checks.check_password(value, resolved),
        data={"policy": resolved.value},
    )
