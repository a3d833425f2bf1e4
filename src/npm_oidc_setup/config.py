"""Configuration handling for the placeholder publisher."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict

import yaml

from npm_oidc_setup.workspace import DEFAULT_PREFIX

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when configuration files are invalid or incomplete."""


@dataclass
class RegistrySettings:
    """Registry configuration section."""

    web_url: str = "https://www.npmjs.com"
    executable: str = "npm"

    def package_url(self, package_name: str) -> str:
        return f"{self.web_url.rstrip('/')}/package/{package_name}"

    def access_url(self, package_name: str) -> str:
        return f"{self.package_url(package_name)}/access"


@dataclass
class WorkspaceSettings:
    """Temp directory configuration section."""

    temp_root: str | None = None
    prefix: str = DEFAULT_PREFIX


@dataclass
class LogSettings:
    """Logging configuration section."""

    level: str = "WARNING"


@dataclass
class Settings:
    """Container for all runtime settings."""

    registry: RegistrySettings = field(default_factory=RegistrySettings)
    workspace: WorkspaceSettings = field(default_factory=WorkspaceSettings)
    log: LogSettings = field(default_factory=LogSettings)


def default_settings() -> Settings:
    return Settings()


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = raw.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"{name} section must be a mapping.")
    return section


def _require_text(value: Any, context: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{context} must be a non-empty string.")
    return value


def load_settings(path: str) -> Settings:
    """Load application settings from a YAML file."""
    try:
        raw = yaml.safe_load(_read_file(path)) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in configuration file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Settings YAML must be a mapping/object.")

    registry_section = _section(raw, "registry")
    workspace_section = _section(raw, "workspace")
    log_section = _section(raw, "log")

    registry_settings = RegistrySettings(
        web_url=_require_text(registry_section.get("web_url", RegistrySettings().web_url), "registry.web_url"),
        executable=_require_text(
            registry_section.get("executable", RegistrySettings().executable), "registry.executable"
        ),
    )
    temp_root = workspace_section.get("temp_root")
    workspace_settings = WorkspaceSettings(
        temp_root=os.path.expanduser(str(temp_root)) if temp_root is not None else None,
        prefix=_require_text(workspace_section.get("prefix", WorkspaceSettings().prefix), "workspace.prefix"),
    )
    log_settings = LogSettings(
        level=_require_text(log_section.get("level", LogSettings().level), "log.level").upper(),
    )

    logger.debug("Loaded settings from %s", path)
    return Settings(registry=registry_settings, workspace=workspace_settings, log=log_settings)


def _read_file(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            return handle.read()
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"Could not read configuration file: {path}") from exc
