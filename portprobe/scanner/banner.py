"""Banner grabbing and service identification."""
import asyncio
import logging
from typing import Tuple

from ..models import UNKNOWN_SERVICE
from .catalog import WEB_PORTS, guess_service, match_banner
from .prober import Connection

logger = logging.getLogger(__name__)

HTTP_PROBE = b"GET / HTTP/1.0\r\nHost: localhost\r\n\r\n"
HTTP_MAX_LINES = 10

_READ_ERRORS = (asyncio.TimeoutError, OSError, ValueError)


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


class BannerGrabber:
    """Reads what a service says and names the service."""

    async def identify(self, conn: Connection, port: int, timeout: float) -> Tuple[str, str]:
        """
        Classify the service behind an open connection.

        The first line the service sends is the banner. Web ports are then
        sent an HTTP/1.0 request; a non-empty reply replaces the banner and
        forces HTTP or HTTPS. A service still unknown after that is matched
        by keyword against the banner. I/O errors only mean "no banner".

        Returns:
            (service, banner)
        """
        banner = await self._read_banner(conn, timeout)
        service = guess_service(port)

        if port in WEB_PORTS:
            response = await self._probe_http(conn, timeout)
            if response:
                banner = response
                service = WEB_PORTS[port]

        if service == UNKNOWN_SERVICE and banner:
            service = match_banner(banner)

        return service, banner

    async def _read_banner(self, conn: Connection, timeout: float) -> str:
        try:
            line = await asyncio.wait_for(conn.reader.readline(), timeout=timeout)
        except _READ_ERRORS as e:
            logger.debug(f"No banner from port {conn.port}: {type(e).__name__}")
            return ""
        return _decode(line).strip()

    async def _probe_http(self, conn: Connection, timeout: float) -> str:
        try:
            conn.writer.write(HTTP_PROBE)
            await asyncio.wait_for(conn.writer.drain(), timeout=timeout)
        except (asyncio.TimeoutError, OSError) as e:
            logger.debug(f"HTTP probe write failed on port {conn.port}: {e}")
            return ""

        # One deadline covers every line of the response
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        lines = []
        while len(lines) < HTTP_MAX_LINES:
            remaining = deadline - loop.time()
            if remaining <= 0:
                break
            try:
                line = await asyncio.wait_for(conn.reader.readline(), timeout=remaining)
            except _READ_ERRORS:
                break
            if not line:
                break
            lines.append(_decode(line).rstrip("\r\n"))

        return "\n".join(lines).strip()
