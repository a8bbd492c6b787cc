"""SymtaxSettings — CLI flags, environment and config file in one object.

Precedence, strongest first: keyword arguments (the CLI flags), then
``SYMTAX_*`` environment variables (``__`` separates nested keys, e.g.
``SYMTAX_PLUGINS__ENABLED=false``), then the configuration table, then
the defaults baked into :mod:`symtax.config.models`.
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from symtax.config.discovery import ConfigFileError, find_config, read_config_table
from symtax.config.models import PluginsConfig, TaxonomyConfig

# Parsed configuration table for the settings object under construction.
_config_table: ContextVar[dict[str, Any] | None] = ContextVar("symtax_config_table", default=None)


class ConfigTableSource(PydanticBaseSettingsSource):
    """Settings source serving an already-parsed configuration table."""

    def __init__(self, settings_cls: type[BaseSettings], table: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._table = table

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._table.get(field_name), field_name, field_name in self._table

    def __call__(self) -> dict[str, Any]:
        return dict(self._table)


class SymtaxSettings(BaseSettings):
    """Resolved settings for one CLI invocation.

    Attributes:
        project_root: Directory holding the configuration file, or the
            working directory when there is none.
        config_path: The configuration file in use, if any.
        taxonomies: Taxonomy definitions from the ``[[taxonomies]]`` tables.
        plugins: The ``[plugins]`` table.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SYMTAX_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    taxonomies: list[TaxonomyConfig] = Field(default_factory=list)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return init_settings, env_settings, ConfigTableSource(settings_cls, _config_table.get() or {})

    @property
    def plugin_dir(self) -> Path:
        """``plugins.local_dir`` resolved against :attr:`project_root`."""
        path = Path(self.plugins.local_dir)
        return path if path.is_absolute() else self.project_root / path

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> SymtaxSettings:
        """Resolve the configuration file and build the settings.

        An explicit *config_path* must exist. Otherwise the configuration
        is searched for from *project_root* (default: cwd) upwards.

        Raises:
            click.ClickException: On a missing explicit file, invalid TOML
                or a configuration that fails validation.
        """
        path: Path | None
        if config_path:
            path = Path(config_path)
            if not path.is_file():
                raise click.ClickException(f"Config file not found: {config_path}")
        else:
            path = find_config(project_root)

        try:
            table = read_config_table(path) if path else {}
        except ConfigFileError as exc:
            raise click.ClickException(str(exc)) from exc

        if project_root is None:
            project_root = path.parent if path else Path.cwd()

        token = _config_table.set(table)
        try:
            return cls(project_root=project_root, config_path=path, **cli_flags)
        except ValidationError as exc:
            where = path or "environment"
            raise click.ClickException(f"Invalid configuration in {where}:\n{exc}") from exc
        finally:
            _config_table.reset(token)
