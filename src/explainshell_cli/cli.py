"""Command-line entry point."""

import argparse
import asyncio
import logging
import sys

from explainshell_cli import __version__
from explainshell_cli.config import DEFAULT_BASE_URL, ExplainConfig
from explainshell_cli.explainer import EmptyInputError, Explainer
from explainshell_cli.fetching.base import FetchError
from explainshell_cli.observability.base import (
    LoggingMetricsHook,
    MetricsHook,
    NoOpMetricsHook,
)

PROG = "explainshell"


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    command = " ".join(args.command)
    if not command.strip():
        _print_usage()
        return 1

    config = ExplainConfig(base_url=args.base_url, timeout=args.timeout)
    if not args.quiet:
        print(f'Fetching explanation for: "{command}"...\n')

    try:
        explainer = Explainer(config=config, metrics_hook=_metrics_hook(args.verbose))
        report = asyncio.run(explainer.explain(command))
    except EmptyInputError:
        _print_usage()
        return 1
    except FetchError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(report)
    return 0


def setup_logging(verbosity: int = 0) -> None:
    """Send log records to stderr; stdout carries only the report."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _print_usage() -> None:
    print(f"Usage: {PROG} <command_to_explain>")
    print(f'Example: {PROG} "ls -la | grep .py"')


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Explain a shell command using explainshell.com.",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command line to explain; separate words are joined with spaces.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print the 'Fetching explanation' banner.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug output).",
    )
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"Explanation service origin (default: {DEFAULT_BASE_URL}).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: transport default).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _metrics_hook(verbosity: int) -> MetricsHook:
    if verbosity >= 2:
        return LoggingMetricsHook()
    return NoOpMetricsHook()
