"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, the config table only holds
overrides. An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

from getflowkit.validation.policy import DEFAULT_PASSWORD_POLICY, PasswordPolicy


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    password_policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY
