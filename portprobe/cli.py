"""Command-line entry point."""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import yaml
from pydantic import ValidationError

from .audit import AuditLogger
from .models import ConfigError, ScanConfig, ScannerException
from .report import print_report
from .scanner import ScanEngine, parse_ports
from .utils.config import load_settings


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="portprobe", description="Concurrent TCP port scanner")
    p.add_argument("--host", help="Target host or IP address (required)")
    p.add_argument("-p", "--ports", help="Port range, e.g. '80', '1-1000', '22,80,443' (required)")
    p.add_argument("-t", "--timeout", dest="timeout_ms", type=int,
                   help="Timeout in milliseconds (default: 500)")
    p.add_argument("--workers", type=int,
                   help="Limit of concurrent probes, 0 = unlimited (default: 0)")
    p.add_argument("--banner", action=argparse.BooleanOptionalAction, default=None,
                   help="Collect banners from open ports (default: off)")
    p.add_argument("--config", help="YAML file with scanner settings")
    p.add_argument("--audit-log", help="Write JSON audit events to this file")
    p.add_argument("--log-level", help="Logging level (default: INFO)")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.host or not args.ports:
        print("Error: --host and -p parameters are required", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    try:
        settings = load_settings(
            args.config,
            timeout_ms=args.timeout_ms,
            workers=args.workers,
            banner=args.banner,
            log_level=args.log_level,
            audit_log=args.audit_log
        )
    except (FileNotFoundError, yaml.YAMLError, ValidationError, ConfigError) as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    try:
        config = ScanConfig.from_millis(
            host=args.host,
            ports=parse_ports(args.ports),
            timeout_ms=settings.timeout_ms,
            concurrency_limit=settings.workers,
            collect_banner=settings.banner
        )
    except ScannerException as e:
        logger.error(f"Error parsing port range: {e}")
        return 1

    audit = AuditLogger(settings.audit_log) if settings.audit_log else None
    on_outcome = (lambda o: audit.log_port_open(config.host, o)) if audit else None

    try:
        if audit:
            audit.log_scan_start(config)
        results = asyncio.run(ScanEngine(on_outcome=on_outcome).scan(config))
        if audit:
            audit.log_scan_complete(config.host, len(results))
    except KeyboardInterrupt:
        logger.info("Scan stopped by user")
        if audit:
            audit.log_scan_failed(config.host, "interrupted")
        return 130
    finally:
        if audit:
            audit.close()

    print_report(results, show_banner=config.collect_banner)
    return 0
