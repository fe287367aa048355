from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Union


class ScanTask(NamedTuple):
    """One (host, port) pair to be probed."""
    host: str
    port: int

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class ScanResult:
    """A successful connection, with whatever greeting the service sent."""
    target: str
    port: int
    banner: str = ""

    def to_dict(self) -> Dict[str, Union[str, int]]:
        data: Dict[str, Union[str, int]] = {"target": self.target, "port": self.port}
        if self.banner:
            data["banner"] = self.banner
        return data


@dataclass
class ScanReport:
    """Aggregated outcome of one scan run."""
    results: List[ScanResult]
    total_tasks: int
    elapsed: float
    targets: List[str] = field(default_factory=list)
    ports: List[int] = field(default_factory=list)

    @property
    def open_count(self) -> int:
        return len(self.results)

    def sorted_results(self) -> List[ScanResult]:
        return sorted(self.results, key=lambda r: (r.target, r.port))
