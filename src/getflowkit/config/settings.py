"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``GETFLOWKIT_*`` prefix
  3. TOML: ``getflowkit.toml`` or ``[tool.getflowkit]`` in ``pyproject.toml``
  4. Code defaults: baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` fed by
:mod:`getflowkit.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from getflowkit.config.discovery import PYPROJECT_FILENAME, find_config, read_config
from getflowkit.config.models import ValidationConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Serve an already-parsed getflowkit TOML table to Pydantic."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._data = data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for the TOML table during construction.
_tls = threading.local()


class GetFlowKitSettings(BaseSettings):
    """Unified settings for the getflowkit CLI and embedding applications.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GETFLOWKIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    validation: ValidationConfig = Field(default_factory=ValidationConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_data", {})),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> GetFlowKitSettings:
        """Construct settings from a CLI invocation.

        Discovers the config file via walk-up from *start* (or uses the
        explicit *config_path*) and merges CLI flags as highest-priority
        overrides. Malformed TOML raises :class:`click.ClickException`.
        """
        toml_path: Path | None = None
        try:
            if config_path:
                p = Path(config_path)
                toml_path = p if p.is_file() else None
            else:
                toml_path = find_config(start)
            data = read_config(toml_path) if toml_path else {}
        except tomllib.TOMLDecodeError as exc:
            # Walk-up only parses pyproject.toml before a path is chosen.
            where = toml_path or PYPROJECT_FILENAME
            msg = f"Invalid TOML in {where}: {exc}"
            raise click.ClickException(msg) from exc

        _tls.toml_data = data
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_data = {}
