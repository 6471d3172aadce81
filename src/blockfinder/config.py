"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (BLOCKFINDER__SERVER__TRANSPORT=http)
  2. blockfinder.yaml       (searched in cwd, then the platform config dir)
  3. Hardcoded defaults

The config file is optional — all fields have sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_DEFAULT_CONFIG_DIR = platformdirs.user_config_dir("blockfinder")


def _find_config_file() -> str | None:
    """Return the path of the first blockfinder.yaml found, or None."""
    candidates = [
        Path("blockfinder.yaml"),
        Path(_DEFAULT_CONFIG_DIR) / "blockfinder.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class _Section(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ServerSettings(_Section):
    transport: Literal["stdio", "http"] = "stdio"
    host: str = "0.0.0.0"
    port: int = 8080


class RegistrySettings(_Section):
    path: str = "registry.json"
    # Component file paths in the registry are resolved against this directory
    source_root: str = "."


class LinkSettings(_Section):
    host: str = "blocks.mvp-subha.me"


class MatcherSettings(_Section):
    max_results: int = Field(default=5, ge=1)


class CodeSettings(_Section):
    dependency_max_length: int = Field(default=2500, ge=1)
    generate_max_length: int = Field(default=99999, ge=1)


class LoggingSettings(_Section):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: BLOCKFINDER__SERVER__PORT=9090
        env_prefix="BLOCKFINDER__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
        extra="forbid",
    )

    server: ServerSettings = ServerSettings()
    registry: RegistrySettings = RegistrySettings()
    links: LinkSettings = LinkSettings()
    matcher: MatcherSettings = MatcherSettings()
    code: CodeSettings = CodeSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
