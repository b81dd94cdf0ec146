"""Scan data models and exceptions."""
from dataclasses import dataclass, field
from typing import Iterable, Tuple

UNKNOWN_SERVICE = "Unknown"


class ScannerException(Exception):
    """Base exception for scanner errors."""
    pass


class ParseError(ScannerException, ValueError):
    """Port specification could not be parsed."""

    def __init__(self, token: str, message: str = None):
        self.token = token
        super().__init__(message or f"invalid port number: {token}")


class ConfigError(ScannerException, ValueError):
    """Scan configuration is invalid."""
    pass


@dataclass(frozen=True)
class ScanConfig:
    """Immutable input of a single scan."""
    host: str
    ports: Tuple[int, ...]
    timeout: float
    concurrency_limit: int = 0
    collect_banner: bool = False

    def __post_init__(self):
        # Accept any iterable of ports but store a tuple
        object.__setattr__(self, "ports", tuple(self.ports))

        if not self.host:
            raise ConfigError("host is required")
        if not self.ports:
            raise ConfigError("no ports to scan")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive: {self.timeout}")
        if self.concurrency_limit < 0:
            raise ConfigError(f"concurrency limit must be >= 0: {self.concurrency_limit}")

    @classmethod
    def from_millis(
        cls,
        host: str,
        ports: Iterable[int],
        timeout_ms: int,
        concurrency_limit: int = 0,
        collect_banner: bool = False
    ) -> "ScanConfig":
        """Build a config from a timeout given in milliseconds."""
        return cls(
            host=host,
            ports=tuple(ports),
            timeout=timeout_ms / 1000.0,
            concurrency_limit=concurrency_limit,
            collect_banner=collect_banner
        )


@dataclass
class ScanOutcome:
    """Per-port result produced by one probe task."""
    port: int
    open: bool = False
    service: str = UNKNOWN_SERVICE
    banner: str = field(default="")

    def to_dict(self) -> dict:
        return {
            "port": self.port,
            "open": self.open,
            "service": self.service,
            "banner": self.banner,
        }
