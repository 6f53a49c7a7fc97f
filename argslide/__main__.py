"""
argslide Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Parse a token stream against an option table from the command line:

    python -m argslide options.yaml -l -60 -n Johnny crap.csv
"""

import logging
import sys
from argparse import REMAINDER, ArgumentParser
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from argslide.config import load_parser
from argslide.console import console
from argslide.exceptions import ArgSlideError
from argslide.normalize import separate_flags
from argslide.outcome import ParseOutcome
from argslide.parser import ArgParser
from argslide.utils import LOG_MODES, setup_logging


def get_root_parser(prog: str | None = "argslide") -> ArgumentParser:
    parser = ArgumentParser(
        prog=prog,
        description="Parse arguments against an argslide option table.",
        epilog="Everything after CONFIG is parsed against the table.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    parser.add_argument(
        "--log-mode",
        choices=LOG_MODES,
        default=None,
        help="Logging output mode (default: $ARGSLIDE_LOG_MODE or cli).",
    )
    parser.add_argument("config", type=Path, help="YAML or TOML option table.")
    parser.add_argument("tokens", nargs=REMAINDER, help="Tokens to parse.")
    return parser


def build_table(outcome: ParseOutcome) -> Table:
    table = Table(title=outcome.program or None)
    table.add_column("Option", style="bold")
    table.add_column("Value")
    table.add_column("Count", justify="right")
    for name, result in outcome.results.items():
        value = "" if result.value is None else result.value
        table.add_row(escape(name), escape(value), str(result.count))
    return table


def help_requested(parser: ArgParser, tokens: Sequence[str]) -> bool:
    """True if one of the `help` option's flags appears among `tokens`."""
    help_option = parser.get_option("help")
    if help_option is None:
        return False
    return any(help_option.matches(token) for token in separate_flags(tokens))


def main(argv: Sequence[str] | None = None) -> int:
    args = get_root_parser().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        parser = load_parser(args.config)
    except (FileNotFoundError, ValueError, ValidationError, ArgSlideError) as error:
        console.print(
            f"[bold red]❌ Could not load '{escape(str(args.config))}':[/] "
            f"{escape(str(error))}"
        )
        return 1

    try:
        outcome = parser.parse([parser.program or str(args.config), *args.tokens])
    except ArgSlideError as error:
        if help_requested(parser, args.tokens):
            parser.render_help()
            return 0
        console.print(f"[bold red]❌ {escape(str(error))}[/]")
        return 1

    if outcome.get("help", bool):
        parser.render_help()
        return 0

    console.print(build_table(outcome))
    return 0


if __name__ == "__main__":
    sys.exit(main())
