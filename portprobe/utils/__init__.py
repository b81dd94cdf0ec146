"""Utilities package initialization."""
from .config import load_yaml_config, load_settings, ScannerSettings

__all__ = ["load_yaml_config", "load_settings", "ScannerSettings"]
