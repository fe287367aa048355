import re
from typing import Iterator, List, Optional

from .models import ScanTask

# Plain ASCII decimal; int() alone would also take "8_0" or non-ASCII digits
_PORT_TOKEN = re.compile(r"[+-]?[0-9]+")


def resolve_targets(targets: str) -> List[str]:
    """
    Splits a comma-separated target list, trimming whitespace.
    Example: "host1, host2" -> ["host1", "host2"]
    """
    hosts = []
    for entry in targets.split(','):
        host = entry.strip()
        if host:
            hosts.append(host)
    return hosts


def resolve_ports(start_port: int, end_port: int, port_list: Optional[str] = None) -> List[int]:
    """
    Explicit list wins over the range. Unparsable list entries are dropped.
    Example: "80, abc, 443" -> [80, 443]

    The range is inclusive and not validated, so an inverted range yields
    no ports at all.
    """
    if port_list:
        ports = []
        for token in port_list.split(','):
            token = token.strip()
            if _PORT_TOKEN.fullmatch(token):
                ports.append(int(token))
        return ports

    return list(range(start_port, end_port + 1))


def enumerate_tasks(targets: List[str], ports: List[int]) -> Iterator[ScanTask]:
    """Yields one task per (target, port) pair, target-major."""
    for target in targets:
        for port in ports:
            yield ScanTask(target, port)
