# argslide Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgParser`, the option registry and parsing engine.

Options are declared up front, then a raw token stream (program name first, as
in `sys.argv`) is parsed into an immutable `ParseOutcome`.

Parsing runs in three phases:
- Flag resolution: every option scans the normalized stream for `-x` or
  `--name` and claims the value tokens its `OptionKind` asks for.
- Positional resolution: `POSITIONAL` options still without a value take the
  n-th token nobody claimed, not counting the program name.
- Validation: every required option must have resolved to a value.

Example Usage:
    parser = ArgParser("go")
    parser.declare("length", None, "l", True, "Length in cm", OptionKind.VALUE)
    parser.declare("frequencies", None, "f", False, "Favorites", OptionKind.MULTI_VALUE)

    outcome = parser.parse(["./go", "-l", "-60", "-f", "1", "2", "3"])
    outcome.get("length", int)                            # -60
    outcome.get_with("frequencies", list_converter(int))  # [1, 2, 3]

Design Notes:
Parsing is stateless. `parse` never touches the declared options; it works on a
snapshot and returns a fresh outcome, so one parser can parse any number of
token streams. Consumed tokens are tracked by stream index, so equal token
values are consumed independently.
"""
from __future__ import annotations

from typing import Iterable

from rich.console import Console

from argslide.console import console
from argslide.exceptions import (
    EmptyRegistryError,
    MissingRequiredError,
    MissingValueError,
    OptionDefinitionError,
    UnknownOptionError,
)
from argslide.help import HelpRenderer
from argslide.logger import logger
from argslide.normalize import is_flag, separate_flags
from argslide.option_kind import OptionKind
from argslide.option_spec import OptionSpec
from argslide.outcome import OptionResult, ParseOutcome
from argslide.slide import slide_indexed

TRUE_LITERAL = "true"


class _WorkingOption:
    """Mutable per-parse state for one option."""

    __slots__ = ("spec", "value", "count")

    def __init__(self, spec: OptionSpec) -> None:
        self.spec = spec
        self.value: str | None = spec.default
        self.count = 0

    def freeze(self) -> OptionResult:
        return OptionResult(spec=self.spec, value=self.value, count=self.count)


class ArgParser:
    """
    Declarative command-line option parser.

    Features:
    - Value, switch, multi-value, key-value list and positional options.
    - `-x` short and `--name` long flags, with `-xyz` bundling.
    - Raw textual defaults and required options.
    - Stateless parsing into an immutable `ParseOutcome`.
    - Help rendering using the Rich library.
    """

    def __init__(self, program: str = "", console: Console = console) -> None:
        """Initialize the ArgParser with the built-in `help` switch."""
        self.program: str = program
        self.console: Console = console
        self._options: dict[str, OptionSpec] = {}
        self._add_help()

    def _add_help(self) -> None:
        """Add help switch to the parser."""
        self.declare(
            "help",
            "false",
            "h",
            False,
            "Show this help message",
            OptionKind.SWITCH,
        )

    def _validate_name(self, name: str) -> str:
        if not isinstance(name, str) or not name:
            raise OptionDefinitionError("Option name must be a non-empty string")
        if name.startswith("-"):
            raise OptionDefinitionError(
                f"Option name '{name}' must not start with '-'; it is matched as --{name}"
            )
        if any(char.isspace() for char in name):
            raise OptionDefinitionError(f"Option name '{name}' must not contain spaces")
        return name

    def _validate_short_flag(self, name: str, short_flag: str | None) -> str | None:
        if short_flag is None or short_flag == "":
            return None
        if not isinstance(short_flag, str) or len(short_flag) != 1:
            raise OptionDefinitionError(
                f"Short flag for '{name}' must be a single character, got {short_flag!r}"
            )
        if not short_flag.isalpha():
            raise OptionDefinitionError(
                f"Short flag for '{name}' must be a letter, got {short_flag!r}"
            )
        for existing in self._options.values():
            if existing.name != name and existing.short_flag == short_flag:
                logger.warning(
                    "Short flag '-%s' of '%s' is also used by '%s'; both will match it",
                    short_flag,
                    name,
                    existing.name,
                )
        return short_flag

    def _validate_kind(self, kind: OptionKind | str) -> OptionKind:
        if isinstance(kind, OptionKind):
            return kind
        try:
            return OptionKind(kind)
        except ValueError as error:
            raise OptionDefinitionError(str(error)) from error

    def _validate_position(
        self, name: str, kind: OptionKind, position: int | None
    ) -> int | None:
        if kind is not OptionKind.POSITIONAL:
            if position is not None:
                raise OptionDefinitionError(
                    f"Option '{name}' is {kind.display_name}; only positional options take a position"
                )
            return None
        if position is None:
            raise OptionDefinitionError(f"Positional option '{name}' needs a position")
        if isinstance(position, bool) or not isinstance(position, int) or position < 0:
            raise OptionDefinitionError(
                f"Position of '{name}' must be a non-negative integer, got {position!r}"
            )
        return position

    def declare(
        self,
        name: str,
        default: str | None = None,
        short_flag: str | None = None,
        required: bool = False,
        help: str = "",
        kind: OptionKind | str = OptionKind.VALUE,
        position: int | None = None,
    ) -> None:
        """
        Declare an option, replacing any existing option with the same name.

        Args:
            name (str): Canonical name, matched as `--name` and used as result key.
            default (str | None): Raw default used when nothing else resolves.
            short_flag (str | None): Single character matched as `-x`.
            required (bool): Whether parsing fails if the option has no value.
            help (str): Help text for rendering.
            kind (OptionKind | str): How the option consumes tokens.
            position (int | None): Index among unclaimed tokens, POSITIONAL only.

        Raises:
            OptionDefinitionError: If the definition is malformed.
        """
        name = self._validate_name(name)
        kind = self._validate_kind(kind)
        short_flag = self._validate_short_flag(name, short_flag)
        position = self._validate_position(name, kind, position)
        if default is not None and not isinstance(default, str):
            default = str(default)
        if name in self._options:
            logger.debug("Replacing option '%s'", name)
        self._options[name] = OptionSpec(
            name=name,
            default=default,
            short_flag=short_flag,
            required=bool(required),
            help=help or "",
            kind=kind,
            position=position,
        )
        logger.debug("Declared option %s", self._options[name])

    add_opt = declare

    def remove(self, name: str) -> None:
        """
        Remove an option from parsing consideration.

        Raises:
            UnknownOptionError: If no option named `name` was declared.
        """
        if name not in self._options:
            raise UnknownOptionError(name)
        del self._options[name]
        logger.debug("Removed option '%s'", name)

    remove_opt = remove

    def get_option(self, name: str) -> OptionSpec | None:
        """Return the spec declared under `name`, if any."""
        return self._options.get(name)

    @property
    def options(self) -> tuple[OptionSpec, ...]:
        """Declared options in declaration order."""
        return tuple(self._options.values())

    def _resolve_flags(
        self, tokens: list[str], working: dict[str, _WorkingOption]
    ) -> set[int]:
        consumed: set[int] = set()
        for option in working.values():
            spec = option.spec
            for index, token, rest in slide_indexed(tokens):
                if not spec.matches(token):
                    continue
                option.count += 1
                consumed.add(index)

                if spec.kind is OptionKind.SWITCH:
                    option.value = TRUE_LITERAL
                elif spec.kind is OptionKind.VALUE:
                    if rest is None or is_flag(rest[0]):
                        raise MissingValueError(spec.name)
                    option.value = rest[0]
                    consumed.add(index + 1)
                elif spec.kind.takes_values:
                    if rest is None:
                        raise MissingValueError(spec.name)
                    values = []
                    for value in rest:
                        if is_flag(value):
                            break
                        values.append(value)
                    option.value = " ".join(values)
                    consumed.update(range(index + 1, index + 1 + len(values)))
        return consumed

    def _resolve_positionals(
        self,
        tokens: list[str],
        consumed: set[int],
        working: dict[str, _WorkingOption],
    ) -> None:
        free = [
            token
            for index, token in enumerate(tokens)
            if index > 0 and index not in consumed
        ]
        for option in working.values():
            spec = option.spec
            if not spec.positional or option.value is not None:
                continue
            assert spec.position is not None, "positional option without position"
            if spec.position < len(free):
                option.value = free[spec.position]

    def parse(self, tokens: Iterable[str]) -> ParseOutcome:
        """
        Parse a token stream into a `ParseOutcome`.

        Args:
            tokens (Iterable[str]): CLI-style tokens, program name first.

        Returns:
            ParseOutcome: Resolved raw values and match counts per option.

        Raises:
            EmptyRegistryError: If no options are declared.
            MissingValueError: If a value-taking flag has no value after it.
            MissingRequiredError: If required options did not resolve.
        """
        if not self._options:
            raise EmptyRegistryError()

        normalized = separate_flags(tokens)
        working = {
            name: _WorkingOption(spec) for name, spec in dict(self._options).items()
        }

        consumed = self._resolve_flags(normalized, working)
        self._resolve_positionals(normalized, consumed, working)

        missing = [
            name
            for name, option in working.items()
            if option.spec.required and option.value is None
        ]
        if missing:
            raise MissingRequiredError(missing)

        for name, option in working.items():
            logger.debug("%s:%r (matched %d)", name, option.value, option.count)

        return ParseOutcome(
            self.program,
            {name: option.freeze() for name, option in working.items()},
        )

    def get_usage(self) -> str:
        """Return the usage line for the declared options."""
        return HelpRenderer(self.program, self.options).get_usage()

    def format_help(self) -> str:
        """Return the full help text as plain text."""
        return HelpRenderer(self.program, self.options).format_help()

    def render_help(self) -> None:
        """Print the help text for this parser using Rich output."""
        HelpRenderer(self.program, self.options, console=self.console).render()

    help = render_help

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArgParser):
            return False
        return self.program == other.program and self._options == other._options

    def __hash__(self) -> int:
        return hash((self.program, tuple(self._options.items())))

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        positional = sum(spec.positional for spec in self._options.values())
        required = sum(spec.required for spec in self._options.values())
        return (
            f"ArgParser(program={self.program!r}, options={len(self._options)}, "
            f"positional={positional}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
