import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError
from rich.logging import RichHandler

from .config import ScanConfig
from .scanner import PortScanner
from .ui import ScannerUI, save_results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Portsweep - concurrent TCP connect scanner")
    parser.add_argument("--targets", default="scanme.nmap.org",
                        help="Comma-separated list of IP addresses or hostnames")
    parser.add_argument("--start-port", type=int, default=1, help="Starting port (Default: 1)")
    parser.add_argument("--end-port", type=int, default=1024, help="Ending port (Default: 1024)")
    parser.add_argument("--ports", dest="port_list",
                        help="Comma-separated list of specific ports (overrides the start/end range)")
    parser.add_argument("--workers", type=int, default=100, help="Number of concurrent workers (Default: 100)")
    parser.add_argument("--timeout", type=float, default=5.0, help="Connection timeout in seconds (Default: 5)")
    parser.add_argument("--json", dest="json_output", action="store_true", help="Output results in JSON format")
    parser.add_argument("--retries", type=int, default=3, help="Connection attempts per port (Default: 3)")
    parser.add_argument("--backoff", type=float, default=1.0,
                        help="Backoff unit in seconds; attempt i waits unit * 2^i (Default: 1)")
    parser.add_argument("--sort", dest="sort_results", action="store_true",
                        help="Sort results by target and port instead of arrival order")
    parser.add_argument("--no-progress", dest="show_progress", action="store_false",
                        help="Do not print per-port progress lines")
    parser.add_argument("-o", "--output", help="Also write JSON results to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every connection attempt")
    return parser


def configure_logging(ui: ScannerUI, verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=ui.err_console, rich_tracebacks=True)],
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    ui = ScannerUI()
    configure_logging(ui, args.verbose)

    try:
        config = ScanConfig(
            targets=args.targets,
            start_port=args.start_port,
            end_port=args.end_port,
            port_list=args.port_list,
            workers=args.workers,
            timeout=args.timeout,
            retries=args.retries,
            backoff_base=args.backoff,
            json_output=args.json_output,
            output_file=args.output,
            sort_results=args.sort_results,
            show_progress=args.show_progress,
        )
    except ValidationError as e:
        ui.show_message(f"Invalid configuration:\n{e}")
        return 2

    scanner = PortScanner(config, progress=ui.show_progress if config.show_progress else None)

    try:
        report = asyncio.run(scanner.run())
    except KeyboardInterrupt:
        ui.show_message("Scan interrupted by user.", style="yellow")
        return 130

    if config.json_output:
        ui.display_json(report)
    else:
        ui.display_results(report)

    if config.output_file:
        save_results(report, config.output_file)
        ui.show_saved(config.output_file)

    return 0


if __name__ == "__main__":
    sys.exit(main())
