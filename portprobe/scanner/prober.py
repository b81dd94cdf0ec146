"""Single TCP connect probe."""
import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

logger = logging.getLogger(__name__)


@dataclass
class Connection:
    """An established probe connection."""
    host: str
    port: int
    reader: asyncio.StreamReader
    writer: asyncio.StreamWriter


async def _close(writer: asyncio.StreamWriter) -> None:
    writer.close()
    try:
        await writer.wait_closed()
    except (OSError, asyncio.TimeoutError) as e:
        logger.debug(f"Close error on probe connection: {e}")


@asynccontextmanager
async def probe(host: str, port: int, timeout: float) -> AsyncIterator[Optional[Connection]]:
    """
    Try one TCP connection to host:port within timeout.

    Yields the live Connection, or None when the port is closed. Refused,
    timed out, unreachable and unresolvable targets all count as closed.
    The connection is closed when the block exits.
    """
    conn = None
    try:
        reader, writer = await asyncio.wait_for(
            asyncio.open_connection(host, port),
            timeout=timeout
        )
        conn = Connection(host=host, port=port, reader=reader, writer=writer)
    except (asyncio.TimeoutError, OSError, UnicodeError) as e:
        logger.debug(f"{host}:{port} closed ({type(e).__name__}: {e})")

    if conn is None:
        yield None
        return

    try:
        yield conn
    finally:
        await _close(conn.writer)
