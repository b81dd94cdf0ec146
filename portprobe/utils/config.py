"""Configuration utilities."""
import os
import re
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models import ConfigError

_ENV_REF = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


class ScannerSettings(BaseSettings):
    """Scanner defaults, read from PORTPROBE_* environment variables."""
    timeout_ms: int = Field(default=500, gt=0)
    workers: int = Field(default=0, ge=0)
    banner: bool = False
    log_level: str = "INFO"
    audit_log: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="PORTPROBE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


def load_yaml_config(config_path: str) -> Dict[str, Any]:
    """
    Load scanner settings from a YAML mapping.

    Whole-value "${VAR}" strings are replaced from the environment. An empty
    file gives an empty mapping.

    Raises:
        FileNotFoundError: the file does not exist.
        ConfigError: the top level is not a mapping.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = yaml.safe_load(path.read_text(encoding="utf-8"))
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"{config_path}: expected a mapping of settings, got {type(config).__name__}"
        )
    return _replace_env_vars(config)


def _replace_env_vars(obj: Any) -> Any:
    """Replace ${VAR} values with environment variables, keeping unset ones."""
    if isinstance(obj, dict):
        return {k: _replace_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_replace_env_vars(item) for item in obj]
    if isinstance(obj, str):
        match = _ENV_REF.fullmatch(obj)
        if match:
            return os.getenv(match.group(1), obj)
    return obj


def load_settings(config_path: Optional[str] = None, **overrides: Any) -> ScannerSettings:
    """
    Build settings from environment, an optional YAML file and overrides.

    Overrides whose value is None are ignored so unset CLI flags fall
    through to the file and environment.
    """
    values: Dict[str, Any] = {}
    if config_path:
        values.update(load_yaml_config(config_path))
    values.update({k: v for k, v in overrides.items() if v is not None})
    return ScannerSettings(**values)
