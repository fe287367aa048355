"""
Banner grabbing.

A single passive read from a freshly opened connection. Nothing is sent to
the service; many raw-protocol ports never greet, so an empty banner is a
normal outcome.
"""

import asyncio

BANNER_TIMEOUT = 2.0
BANNER_SIZE = 1024


async def read_banner(reader: asyncio.StreamReader, timeout: float = BANNER_TIMEOUT, size: int = BANNER_SIZE) -> str:
    """
    Wait for a server greeting; returns "" on timeout, EOF or read error.
    Invalid UTF-8 bytes become U+FFFD so every byte read is accounted for.
    """
    try:
        data = await asyncio.wait_for(reader.read(size), timeout=timeout)
    except (asyncio.TimeoutError, OSError):
        return ""
    return data.decode('utf-8', errors="replace")
