# argslide Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders usage and help text for a set of declared options.

The layout is a usage line followed by one block per option:

    Usage:	./go [--help] [--length LENGTH] [--frequencies FREQUENCIES...]
    Options:

    --length (-l)	Required: true	Type: Value
    	Length of user in centimeters

Help text is wrapped at a 60 column soft width and indented by tabs. Plain
text comes from `format_help`; `render` prints the same content through Rich
with bold headings.
"""
from __future__ import annotations

import textwrap
from typing import Iterable

from rich.console import Console
from rich.markup import escape

from argslide.console import console as default_console
from argslide.option_spec import OptionSpec

HELP_WIDTH = 60


class HelpRenderer:
    """Formats usage and per-option help for a snapshot of option specs."""

    def __init__(
        self,
        program: str,
        options: Iterable[OptionSpec],
        console: Console | None = None,
    ) -> None:
        self.program = program
        self.options: tuple[OptionSpec, ...] = tuple(options)
        self.console: Console = console or default_console

    def get_options_text(self) -> str:
        return " ".join(option.get_usage_text() for option in self.options)

    def get_usage(self) -> str:
        options_text = self.get_options_text()
        if options_text:
            return f"Usage:\t./{self.program} {options_text}"
        return f"Usage:\t./{self.program}"

    def get_option_header(self, option: OptionSpec) -> str:
        flags = option.long_flag
        if option.short_flag:
            flags = f"{flags} (-{option.short_flag})"
        required = str(option.required).lower()
        return f"{flags}\tRequired: {required}\tType: {option.kind.display_name}"

    def wrap_help(self, option: OptionSpec) -> str:
        lines = textwrap.wrap(option.help, width=HELP_WIDTH) or [""]
        return "\t" + "\n\t\t".join(lines)

    def format_help(self) -> str:
        """Return the complete help text."""
        blocks = [self.get_usage(), "Options:", ""]
        for option in self.options:
            blocks.append(self.get_option_header(option))
            blocks.append(self.wrap_help(option))
            blocks.append("")
        return "\n".join(blocks)

    def render(self) -> None:
        """Print help text using Rich output."""
        self.console.print(f"[bold]{escape(self.get_usage())}[/bold]")
        self.console.print("[bold]Options:[/bold]\n")
        for option in self.options:
            self.console.print(escape(self.get_option_header(option)))
            self.console.print(escape(self.wrap_help(option)) + "\n")
