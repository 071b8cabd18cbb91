"""YAML config loader and API key resolution."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from weathercli.config.schema import AppConfig
from weathercli.errors import ConfigError, CredentialMissingError

logger = logging.getLogger(__name__)

API_KEY_ENV = "WEATHER_API_KEY"
CONFIG_PATH_ENV = "WEATHER_CONFIG"
MIN_API_KEY_LENGTH = 20


def load_config(path: str | Path) -> AppConfig:
    """Load and validate config from a YAML file. An empty file means defaults."""
    path = Path(path)
    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    try:
        return AppConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e


def load_app_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """Load the file named by WEATHER_CONFIG, or fall back to defaults."""
    if environ is None:
        environ = os.environ
    path = environ.get(CONFIG_PATH_ENV, "").strip()
    if not path:
        return AppConfig()
    logger.debug("Loading config from %s", path)
    return load_config(path)


def resolve_api_key(
    fallback: str = "",
    env_var: str = API_KEY_ENV,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the first non-empty key from the environment, then the fallback.

    Raises CredentialMissingError when both are empty.
    """
    if environ is None:
        environ = os.environ

    from_env = environ.get(env_var, "")
    if from_env.strip():
        return from_env

    from_fallback = fallback or ""
    if from_fallback.strip():
        if len(from_fallback) < MIN_API_KEY_LENGTH:
            logger.warning(
                "Fallback API key is %d characters; WeatherAPI keys are usually %d+",
                len(from_fallback), MIN_API_KEY_LENGTH,
            )
        return from_fallback

    raise CredentialMissingError(env_var)
