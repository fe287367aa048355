import json
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from .models import ScanReport, ScanResult, ScanTask

stdout_console = Console()
stderr_console = Console(stderr=True)


def render_json(results: List[ScanResult]) -> str:
    """Indented JSON array; empty banners are left out."""
    return json.dumps([r.to_dict() for r in results], indent=2)


class ScannerUI:
    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None):
        self.console = console or stdout_console
        self.err_console = err_console or stderr_console

    def show_progress(self, task: ScanTask, total_ports: int):
        self.err_console.print(
            f"Scanning port {task.port}/{total_ports} on {task.host}",
            markup=False, highlight=False, emoji=False
        )

    def display_json(self, report: ScanReport):
        self.console.print(render_json(report.results), markup=False, highlight=False, emoji=False, soft_wrap=True)

    def display_results(self, report: ScanReport):
        """
        One line per open port, then the summary block.
        """
        for res in report.results:
            line = Text("[+] ", style="bold green")
            line.append(f"{res.target}:{res.port} OPEN")
            if res.banner:
                # Double-quoted and escaped; printable unicode kept as-is
                line.append(f" - Banner: {json.dumps(res.banner, ensure_ascii=False)}", style="dim")
            self.console.print(line, emoji=False, soft_wrap=True)

        self.console.print()
        self.console.print("Scan Summary:", style="bold")
        self.console.print(f"  Open Ports: {report.open_count}", markup=False, highlight=False, emoji=False)
        self.console.print(f"  Total Ports Scanned: {report.total_tasks}", markup=False, highlight=False, emoji=False)
        self.console.print(f"  Time Taken: {report.elapsed:.2f}s", markup=False, highlight=False, emoji=False)

    def show_message(self, msg, style="bold red"):
        self.err_console.print(f"[{style}]{escape(str(msg))}[/{style}]", emoji=False)

    def show_saved(self, filename):
        self.err_console.print(f"[dim]Results saved to {escape(str(filename))}[/dim]", emoji=False)


def save_results(report: ScanReport, filename: str):
    with open(filename, "w", encoding="utf-8") as f:
        f.write(render_json(report.results))
        f.write("\n")
