"""Port specification parsing."""
import re
from typing import List

from ..models import ParseError

MIN_PORT = 1
MAX_PORT = 65535

_NUMBER = re.compile(r"[+-]?[0-9]+")


def _to_int(token: str) -> int:
    token = token.strip()
    if not _NUMBER.fullmatch(token):
        raise ParseError(token)
    return int(token)


def _expand(part: str) -> List[int]:
    if "-" not in part:
        return [_to_int(part)]

    bounds = part.split("-")
    if len(bounds) != 2:
        raise ParseError(part, f"invalid port range: {part}")

    start, end = _to_int(bounds[0]), _to_int(bounds[1])
    # An inverted range is not malformed, it simply yields nothing
    return list(range(max(start, MIN_PORT), min(end, MAX_PORT) + 1))


def parse_ports(spec: str) -> List[int]:
    """
    Parse a port specification into an ordered list of ports.

    Supports "80", "1-1024", "22,80,443" and mixes such as "1-3,80,443".
    Ports outside 1-65535 are dropped and duplicates are kept.

    Raises:
        ParseError: a token is not numeric, a range does not have exactly
            two bounds, or no valid port remains.
    """
    ports: List[int] = []
    if spec.strip():
        for part in spec.split(","):
            ports.extend(p for p in _expand(part) if MIN_PORT <= p <= MAX_PORT)

    if not ports:
        raise ParseError(spec, "no valid ports specified")
    return ports
