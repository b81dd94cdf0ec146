"""portprobe - concurrent TCP port scanner."""
from .models import (
    ScanConfig,
    ScanOutcome,
    ScannerException,
    ParseError,
    ConfigError
)
from .scanner import ScanEngine, parse_ports, run_scan

__version__ = "0.1.0"

__all__ = [
    "ScanConfig",
    "ScanOutcome",
    "ScannerException",
    "ParseError",
    "ConfigError",
    "ScanEngine",
    "parse_ports",
    "run_scan",
]
