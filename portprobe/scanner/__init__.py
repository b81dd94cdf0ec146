"""Async TCP port scanning."""
from .ports import parse_ports
from .prober import Connection, probe
from .banner import BannerGrabber
from .engine import ScanEngine, run_scan
from .catalog import SERVICE_CATALOG, guess_service, match_banner

__all__ = [
    "parse_ports",
    "Connection",
    "probe",
    "BannerGrabber",
    "ScanEngine",
    "run_scan",
    "SERVICE_CATALOG",
    "guess_service",
    "match_banner",
]
