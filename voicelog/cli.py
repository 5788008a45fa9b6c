"""Command-line host: parse utterances and print the result.

Usage:
    voicelog "log 2 eggs and coffee for breakfast"
    voicelog --describe "drank 16 oz of water"
    echo "slept 7 hours" | voicelog --interactive

Exit codes: 0 committed intent, 1 ParseError, 2 Unknown.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from voicelog.application.parsing import parse_command
from voicelog.application.summaries import describe
from voicelog.domain.commands.results import ParseError, ParseResult, Unknown
from voicelog.infrastructure.config import load_env
from voicelog.infrastructure.logging_config import configure_logging

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_UNKNOWN = 2


def exit_code_for(result: ParseResult) -> int:
    if isinstance(result, ParseError):
        return EXIT_PARSE_ERROR
    if isinstance(result, Unknown):
        return EXIT_UNKNOWN
    return EXIT_OK


def render(result: ParseResult, *, pretty: bool = False, as_text: bool = False) -> str:
    if as_text:
        return describe(result)
    return result.model_dump_json(indent=2 if pretty else None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="voicelog",
        description="Interpret a transcribed health-logging voice command",
    )
    parser.add_argument("command", nargs="*", help="Utterance to parse (words are joined)")
    parser.add_argument("--pretty", action="store_true", help="Indent JSON output")
    parser.add_argument(
        "--describe",
        action="store_true",
        help="Print a confirmation message instead of JSON",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Read one utterance per line from stdin",
    )
    parser.add_argument("--log-level", default=None, help="Override VOICELOG_LOG_LEVEL")
    parser.add_argument("--env-file", default=None, help="Load settings from this .env file")
    return parser


def run_interactive(stdin: TextIO, stdout: TextIO, *, pretty: bool, as_text: bool) -> int:
    """Parse each non-blank line; exit code of the last line."""
    code = EXIT_OK
    for line in stdin:
        utterance = line.strip()
        if not utterance:
            continue
        result = parse_command(utterance)
        stdout.write(render(result, pretty=pretty, as_text=as_text) + "\n")
        code = exit_code_for(result)
    return code


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    load_env(args.env_file)
    configure_logging(level=args.log_level)

    if args.interactive:
        return run_interactive(sys.stdin, sys.stdout, pretty=args.pretty, as_text=args.describe)

    if not args.command:
        build_parser().print_usage(sys.stderr)
        return EXIT_UNKNOWN

    result = parse_command(" ".join(args.command))
    print(render(result, pretty=args.pretty, as_text=args.describe))
    return exit_code_for(result)


if __name__ == "__main__":
    sys.exit(main())
