import asyncio
import logging
import time
from typing import Awaitable, Callable, List, Optional

from .banner import BANNER_TIMEOUT, read_banner
from .config import ScanConfig
from .models import ScanReport, ScanResult, ScanTask
from .utils import enumerate_tasks, resolve_ports, resolve_targets

log = logging.getLogger(__name__)

ProgressHook = Callable[[ScanTask, int], None]


class PortScanner:
    # Feeder blocks once this many tasks are waiting
    TASK_QUEUE_SIZE = 1000

    # Out-of-range ports surface as OverflowError/ValueError from the socket layer
    CONNECT_ERRORS = (asyncio.TimeoutError, OSError, OverflowError, ValueError)

    def __init__(
        self,
        config: ScanConfig,
        progress: Optional[ProgressHook] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        banner_timeout: float = BANNER_TIMEOUT,
    ):
        self.config = config
        self.progress = progress
        self.sleep = sleep
        self.banner_timeout = banner_timeout

    def backoff_delay(self, attempt: int) -> float:
        """Delay after failed attempt `attempt` (0-indexed): base * 2^attempt."""
        return self.config.backoff_base * (2 ** attempt)

    async def attempt(self, task: ScanTask) -> Optional[ScanResult]:
        """
        Dials a single task, retrying with exponential backoff.
        Returns None once every attempt has failed; the failure is not reported.
        """
        for attempt in range(self.config.retries):
            try:
                reader, writer = await asyncio.wait_for(
                    asyncio.open_connection(task.host, task.port),
                    timeout=self.config.timeout
                )
            except self.CONNECT_ERRORS as e:
                delay = self.backoff_delay(attempt)
                log.debug("%s attempt %d/%d failed (%r), backing off %.2fs",
                          task, attempt + 1, self.config.retries, e, delay)
                await self.sleep(delay)
                continue

            try:
                banner = await read_banner(reader, timeout=self.banner_timeout)
            finally:
                writer.close()
                try:
                    await writer.wait_closed()
                except OSError:
                    pass

            log.debug("%s open (banner: %d chars)", task, len(banner))
            return ScanResult(target=task.host, port=task.port, banner=banner)

        log.debug("%s dropped after %d attempts", task, self.config.retries)
        return None

    async def _worker(self, tasks: asyncio.Queue, results: asyncio.Queue, total_ports: int):
        while True:
            task = await tasks.get()
            try:
                if task is None:
                    break
                if self.progress:
                    self.progress(task, total_ports)
                result = await self.attempt(task)
                if result is not None:
                    # Sized to the task count, so this never blocks
                    results.put_nowait(result)
            finally:
                tasks.task_done()

    async def _feed(self, tasks: asyncio.Queue, targets: List[str], ports: List[int]):
        for task in enumerate_tasks(targets, ports):
            await tasks.put(task)

        # One sentinel per worker closes the queue
        for _ in range(self.config.workers):
            await tasks.put(None)

    async def run(self) -> ScanReport:
        """
        Scans every (target, port) pair and waits for all workers to finish.
        Results come back in arrival order unless sorting was requested.
        """
        targets = resolve_targets(self.config.targets)
        ports = resolve_ports(self.config.start_port, self.config.end_port, self.config.port_list)
        total_tasks = len(targets) * len(ports)
        log.debug("Scanning %d targets x %d ports with %d workers",
                  len(targets), len(ports), self.config.workers)

        tasks: asyncio.Queue = asyncio.Queue(maxsize=self.TASK_QUEUE_SIZE)
        results: asyncio.Queue = asyncio.Queue(maxsize=total_tasks)

        start_time = time.perf_counter()

        workers = [
            asyncio.create_task(self._worker(tasks, results, len(ports)))
            for _ in range(self.config.workers)
        ]
        feeder = asyncio.create_task(self._feed(tasks, targets, ports))

        await asyncio.gather(feeder, *workers)

        elapsed = time.perf_counter() - start_time

        collected = []
        while not results.empty():
            collected.append(results.get_nowait())

        report = ScanReport(
            results=collected,
            total_tasks=total_tasks,
            elapsed=elapsed,
            targets=targets,
            ports=ports,
        )
        if self.config.sort_results:
            report.results = report.sorted_results()
        return report
