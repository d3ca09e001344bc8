"""Command-line entry point for the Talos Guard scanner."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from . import __version__
from .acquire import fetch_content
from .config import REPORT_FORMATS, Settings, load_settings
from .engine import scan
from .errors import TalosGuardError
from .report import format_banner, format_json_report, format_text_report, write_report
from .result import ScanResult

USAGE = "Usage: talos-guard <url_or_file>"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="talos-guard",
        description="Heuristic scanner for malicious patterns in a file or URL.",
    )
    parser.add_argument(
        "target",
        nargs="?",
        help="Local file path or http(s) URL to scan.",
    )
    parser.add_argument(
        "--format",
        choices=REPORT_FORMATS,
        default=None,
        help="Report format (defaults to text).",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output",
        default=None,
        help="Also write the report to this path.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with default settings.",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_const",
        const=False,
        default=None,
        help="Disable ANSI colors in text output.",
    )
    parser.add_argument(
        "--snippet-width",
        type=int,
        default=None,
        help="Truncate matched lines to this many characters (default 60).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds for URL targets.",
    )
    parser.add_argument(
        "--code-blocks-only",
        action="store_const",
        const=True,
        default=None,
        help="Only scan fenced Markdown code blocks instead of the whole file.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log progress at INFO level.")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[logging.StreamHandler(sys.stderr)], force=True)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def run_scan(target: str, settings: Settings, announce: bool = False) -> ScanResult:
    if announce:
        print(f"[+] Fetching: {target}...")
    content = fetch_content(target, timeout=settings.timeout)
    if announce:
        print(f"[+] Analyzing {len(content)} bytes...")
    return scan(content, target, code_blocks_only=settings.code_blocks_only)


def write_output(result: ScanResult, settings: Settings) -> None:
    if settings.format == "json":
        payload = format_json_report(result)
        if settings.output:
            write_report(payload, settings.output)
            logger.info("Report written to %s", settings.output)
        else:
            print(payload)
        return

    print()
    print(format_text_report(result, color=settings.color, snippet_width=settings.snippet_width))
    if settings.output:
        write_report(
            format_text_report(result, color=False, snippet_width=settings.snippet_width),
            settings.output,
        )
        print(f"\nReport written to {settings.output}")


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.debug)

    try:
        settings = load_settings(args.config).merge(
            format=args.format,
            output=args.output,
            color=args.color,
            snippet_width=args.snippet_width,
            timeout=args.timeout,
            code_blocks_only=args.code_blocks_only,
        )
    except TalosGuardError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    text_mode = settings.format == "text"
    if text_mode:
        print(format_banner(__version__, color=settings.color))
        print()

    if not args.target:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        result = run_scan(args.target, settings, announce=text_mode)
    except TalosGuardError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    write_output(result, settings)
    return result.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
