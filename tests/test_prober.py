import asyncio
import socket

from portprobe.scanner import prober as prober_module
from portprobe.scanner.prober import probe


async def test_open_port_yields_connection(banner_server):
    async with probe("127.0.0.1", banner_server, 1.0) as conn:
        assert conn is not None
        assert conn.port == banner_server
        writer = conn.writer

    assert writer.is_closing()


async def test_refused_port_yields_none(closed_port):
    async with probe("127.0.0.1", closed_port, 1.0) as conn:
        assert conn is None


async def test_dns_failure_yields_none(monkeypatch):
    async def fail(host, port):
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    monkeypatch.setattr(prober_module.asyncio, "open_connection", fail)
    async with probe("no-such-host", 22, 1.0) as conn:
        assert conn is None


async def test_connect_timeout_yields_none(monkeypatch):
    async def hang(host, port):
        await asyncio.sleep(10)

    monkeypatch.setattr(prober_module.asyncio, "open_connection", hang)
    async with probe("10.255.255.1", 22, 0.05) as conn:
        assert conn is None


async def test_connection_closed_when_block_raises(banner_server):
    writer = None
    try:
        async with probe("127.0.0.1", banner_server, 1.0) as conn:
            writer = conn.writer
            raise RuntimeError("fail inside probe")
    except RuntimeError:
        pass

    assert writer.is_closing()
