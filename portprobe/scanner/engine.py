"""Concurrent scan orchestration."""
import asyncio
import logging
import time
from contextlib import nullcontext
from typing import AsyncContextManager, Callable, List, Optional

from ..models import ScanConfig, ScanOutcome
from .banner import BannerGrabber
from .catalog import guess_service
from .prober import Connection, probe

logger = logging.getLogger(__name__)

ProbeFunc = Callable[[str, int, float], AsyncContextManager[Optional[Connection]]]
OutcomeCallback = Callable[[ScanOutcome], None]


class ScanEngine:
    """Async TCP port scanner with optional service identification."""

    def __init__(
        self,
        prober: Optional[ProbeFunc] = None,
        grabber: Optional[BannerGrabber] = None,
        on_outcome: Optional[OutcomeCallback] = None
    ):
        self.prober = prober or probe
        self.grabber = grabber or BannerGrabber()
        self.on_outcome = on_outcome

    async def scan(self, config: ScanConfig) -> List[ScanOutcome]:
        """
        Probe every port in config and return the open ones.

        One task is started per port. With a positive concurrency limit a
        semaphore admits that many probes at a time, otherwise all run at
        once. Results come back in completion order, not port order.
        """
        limit = config.concurrency_limit
        gate = asyncio.Semaphore(limit) if limit > 0 else nullcontext()
        results: asyncio.Queue = asyncio.Queue(maxsize=len(config.ports))

        logger.info(
            f"Scanning {config.host}: {len(config.ports)} ports, "
            f"timeout={config.timeout}s, limit={limit or 'unbounded'}"
        )
        started = time.perf_counter()

        tasks = [
            asyncio.create_task(self._run(config, port, gate, results))
            for port in config.ports
        ]
        await asyncio.gather(*tasks)

        open_ports = []
        while not results.empty():
            outcome = results.get_nowait()
            if not outcome.open:
                continue
            open_ports.append(outcome)
            if self.on_outcome:
                self.on_outcome(outcome)

        logger.info(
            f"Scan of {config.host} finished in {time.perf_counter() - started:.2f}s, "
            f"{len(open_ports)} open"
        )
        return open_ports

    async def _run(self, config: ScanConfig, port: int, gate, results: asyncio.Queue) -> None:
        outcome = ScanOutcome(port=port)
        async with gate:
            try:
                await self._scan_port(config, outcome)
            except Exception as e:
                # Keep whatever the probe established, the scan goes on
                logger.warning(f"Probe of port {port} failed: {e}", exc_info=True)
        results.put_nowait(outcome)

    async def _scan_port(self, config: ScanConfig, outcome: ScanOutcome) -> None:
        port = outcome.port
        async with self.prober(config.host, port, config.timeout) as conn:
            if conn is None:
                return

            outcome.open = True
            if config.collect_banner:
                outcome.service, outcome.banner = await self.grabber.identify(
                    conn, port, config.timeout
                )
            else:
                outcome.service = guess_service(port)


def run_scan(config: ScanConfig, on_outcome: Optional[OutcomeCallback] = None) -> List[ScanOutcome]:
    """Run a scan to completion from synchronous code."""
    return asyncio.run(ScanEngine(on_outcome=on_outcome).scan(config))
