"""CLI settings: flags, ``SHAPECAST_*`` env vars, and shapecast.toml.

Priority chain (highest to lowest): CLI flags, env vars (nested with
``__``, e.g. ``SHAPECAST_OUTPUT__INDENT``), the TOML file picked by
:func:`shapecast.config.discovery.resolve_config`, code defaults.

Any problem with the config surfaces as :class:`ConfigError`, which Click
reports as a one-line error with exit status 1.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

from shapecast.config.discovery import ConfigNotFoundError, resolve_config
from shapecast.config.models import OutputConfig

# The TOML file for the settings object under construction.
_toml_file: ContextVar[Path | None] = ContextVar("shapecast_toml_file", default=None)


class ConfigError(click.ClickException):
    """Settings could not be assembled from the config file or environment."""


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )


class ShapecastSettings(BaseSettings):
    """Settings for the shapecast CLI.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        verbose: Emit debug logs for schema assembly and loading.
        log_json: Render logs as JSON lines.
        output: JSON rendering options.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SHAPECAST_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    verbose: bool = False
    log_json: bool = False
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read init kwargs, then env vars, then the TOML file if one was picked."""
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        toml_file = _toml_file.get()
        if toml_file is not None:
            sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_file))
        return tuple(sources)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> ShapecastSettings:
        """Build settings for one CLI invocation.

        Raises:
            ConfigError: If an explicit config file is missing, the TOML does
                not parse, or a value fails validation.
        """
        try:
            toml_file = resolve_config(config_path, start)
        except ConfigNotFoundError as exc:
            raise ConfigError(str(exc)) from exc

        token = _toml_file.set(toml_file)
        try:
            return cls(config_path=toml_file, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {toml_file}: {exc}") from exc
        except ValidationError as exc:
            where = f" in {toml_file}" if toml_file else ""
            raise ConfigError(f"Invalid settings{where}: {_describe(exc)}") from exc
        finally:
            _toml_file.reset(token)
