"""
Command-line entry point.

Usage: complexity-gate <code_file_path> <rules_file_path> <limit>
"""

import argparse
import asyncio
import sys
from typing import Optional, Sequence, Union

from dotenv import load_dotenv

from .analyzer import CompletionProvider, RuleComplexityAnalyzer
from .config import configure_logging, get_settings, logger
from .loader import read_code_file, read_complexity_rules
from .report import ConsoleReporter
from providers.groq_provider import GroqProvider


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_limit(value: str) -> Union[int, float]:
    """Parse the limit argument as an int, falling back to float."""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        limit = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"limit must be a number, got {value!r}")
    if limit != limit:
        raise argparse.ArgumentTypeError("limit must not be NaN")
    return limit


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="complexity-gate",
        description="Count rule matches in a source file with an LLM and check the total against a limit",
    )
    parser.add_argument("code_file_path", help="Source file to analyze")
    parser.add_argument("rules_file_path", help="JSON array of {\"hint\", \"description\"} rules")
    parser.add_argument("limit", type=parse_limit, help="Maximum allowed total count (inclusive)")
    return parser


async def run(
    args: argparse.Namespace,
    provider: Optional[CompletionProvider] = None,
    reporter: Optional[ConsoleReporter] = None,
) -> int:
    """Load inputs, analyze, and report. Loader errors propagate."""
    reporter = reporter or ConsoleReporter()

    code = read_code_file(args.code_file_path)
    rules = read_complexity_rules(args.rules_file_path)
    reporter.loaded()

    if provider is None:
        provider = GroqProvider.from_settings(get_settings())

    async with RuleComplexityAnalyzer(provider) as analyzer:
        summary = await analyzer.analyze(code, rules, args.limit)

    reporter.summary(summary)
    return 0


def main(
    argv: Optional[Sequence[str]] = None,
    provider: Optional[CompletionProvider] = None,
    reporter: Optional[ConsoleReporter] = None,
) -> int:
    """
    Run the CLI.

    Returns:
        0 when the run completes (even if the limit is exceeded), 1 on
        usage errors or any fatal error
    """
    # Arguments past the first three are ignored.
    args, _extra = build_parser().parse_known_args(argv)

    try:
        load_dotenv()
        configure_logging()
        return asyncio.run(run(args, provider=provider, reporter=reporter))
    except Exception as e:
        logger.debug("Fatal error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
