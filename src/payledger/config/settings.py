"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PAYLEDGER_*`` prefix, ``__`` for nested keys
  3. TOML file    — see :func:`~payledger.config.discovery.find_config`
  4. Code defaults — baked into the section models

The TOML file is chosen per invocation, so :meth:`PayledgerSettings.from_cli`
publishes it through a context variable that ``settings_customise_sources``
reads while pydantic-settings assembles the sources.
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

from payledger.config.discovery import find_config
from payledger.config.models import ReportConfig

_active_toml: ContextVar[Path | None] = ContextVar("payledger_active_toml", default=None)


def _describe_errors(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


class PayledgerSettings(BaseSettings):
    """Unified settings for the payledger CLI.

    Merges CLI flags, environment variables, the TOML ``[report]`` section,
    and code-baked defaults into a single frozen object held by the
    application context.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PAYLEDGER_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    report: ReportConfig = Field(default_factory=ReportConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """CLI flags, then env vars, then the active TOML file if any."""
        toml_path = _active_toml.get()
        if toml_path is None:
            return (init_settings, env_settings)
        try:
            toml_source = TomlConfigSettingsSource(settings_cls, toml_file=toml_path)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        return (init_settings, env_settings, toml_source)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> PayledgerSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when it names an existing file, otherwise
        discovers one starting from *start* (default: cwd).  Bad values
        in the file or the environment become a ``ClickException`` so the
        user sees a one-line message instead of a traceback.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            source = toml_path or "environment"
            raise click.ClickException(
                f"Invalid configuration in {source}: {_describe_errors(exc)}"
            ) from exc
        finally:
            _active_toml.reset(token)
