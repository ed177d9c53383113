"""YAML configuration loader with env var resolution and Pydantic validation.

Loads config from (priority order):
1. --config <path> CLI flag (or NOVA_POSHTA_CONFIG)
2. ./novaposhta.yaml (working directory)
3. Built-in defaults

Environment variables override YAML: NOVA_POSHTA_API_KEY,
NOVA_POSHTA_BASE_URL, NOVA_POSHTA_LOG_LEVEL, NOVA_POSHTA_TIMEOUT.
${VAR} references in YAML values resolve from environment at load time.
"""

import logging
import os
import re
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from novaposhta.client.core import DEFAULT_BASE_URL
from novaposhta.client.transport import DEFAULT_TIMEOUT
from novaposhta.errors import NovaPoshtaError

logger = logging.getLogger(__name__)

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

ENV_PREFIX = "NOVA_POSHTA_"
CONFIG_PATH_ENV = "NOVA_POSHTA_CONFIG"
DEFAULT_CONFIG_FILES = ("novaposhta.yaml", "novaposhta.yml")

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class ConfigError(NovaPoshtaError):
    """Configuration could not be loaded or failed validation."""


def resolve_env_vars(value: str) -> str:
    """Resolve ${VAR} references in a string from environment variables.

    Missing env vars resolve to empty string.
    """

    def _replace(match: re.Match) -> str:
        return os.environ.get(match.group(1), "")

    return _ENV_VAR_PATTERN.sub(_replace, value)


def _resolve_env_vars_recursive(data: Any) -> Any:
    if isinstance(data, str):
        return resolve_env_vars(data)
    elif isinstance(data, dict):
        return {k: _resolve_env_vars_recursive(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_resolve_env_vars_recursive(item) for item in data]
    return data


class ServerConfig(BaseModel):
    """Settings for the client and the MCP server."""

    api_key: str | None = Field(None, description="Nova Poshta API key; optional for public lookups")
    base_url: str = DEFAULT_BASE_URL
    log_level: str = "info"
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Per-request timeout in seconds")

    @field_validator("api_key", mode="before")
    @classmethod
    def empty_key_is_none(cls, value: Any) -> Any:
        # An unset ${NOVA_POSHTA_API_KEY} resolves to ""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        value = value.lower()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value


def _find_config_file() -> Path | None:
    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)
    for name in DEFAULT_CONFIG_FILES:
        candidate = Path.cwd() / name
        if candidate.exists():
            return candidate
    return None


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Apply NOVA_POSHTA_<FIELD> env var overrides to config data."""
    for field_name in ServerConfig.model_fields:
        value = os.environ.get(ENV_PREFIX + field_name.upper())
        if value is not None:
            data[field_name] = value
    return data


def load_config(config_path: str | None = None) -> ServerConfig:
    """Load configuration from YAML file with env var resolution.

    Args:
        config_path: Explicit path to config file. If None, checks
            NOVA_POSHTA_CONFIG, then ./novaposhta.yaml.

    Returns:
        Validated ServerConfig. Defaults plus env overrides when no file
        is found.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    path = Path(config_path) if config_path else _find_config_file()

    raw_data: Any = {}
    if path is not None:
        if not path.exists():
            raise ConfigError.from_code("E-4004", reason=f"config file not found: {path}")
        logger.info(f"Loading config from {path}")
        try:
            with open(path) as f:
                raw_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError.from_code("E-4004", reason=f"{path} is not valid YAML: {e}") from e
        if not isinstance(raw_data, dict):
            raise ConfigError.from_code("E-4004", reason=f"{path} must contain a mapping")

    data = _resolve_env_vars_recursive(raw_data)
    data = _apply_env_overrides(data)

    try:
        return ServerConfig(**data)
    except ValidationError as e:
        raise ConfigError.from_code("E-4004", reason=str(e)) from e


def configure_logging(level: str = "info") -> None:
    """Send package logs to stderr; stdout is reserved for the MCP stdio channel."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))

    package_logger = logging.getLogger("novaposhta")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level.upper())
