# argslide Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argslide.

Parse-time failures abort the whole parse: no partial `ParseOutcome` is ever
returned alongside an error. Conversion failures at the accessor level are not
exceptions at all; they surface as `None` from `ParseOutcome.get`.

All exceptions inherit from `ArgSlideError`, the base exception for the library.

Exception Hierarchy:
- ArgSlideError
    ├── OptionDefinitionError
    ├── UnknownOptionError
    ├── KeyValueFormatError
    └── ParseError
        ├── EmptyRegistryError
        ├── MissingValueError
        └── MissingRequiredError
"""
from __future__ import annotations

from typing import Iterable


class ArgSlideError(Exception):
    """Base exception for argslide."""


class OptionDefinitionError(ArgSlideError):
    """Exception raised when an option is declared with an invalid definition."""


class UnknownOptionError(ArgSlideError, KeyError):
    """Exception raised when removing an option that was never declared."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No such option: '{name}'")

    def __str__(self) -> str:
        return self.args[0]


class KeyValueFormatError(ArgSlideError, ValueError):
    """Exception raised when a key-value chunk has no ':' separator."""

    def __init__(self, chunk: str) -> None:
        self.chunk = chunk
        super().__init__(
            f"No separator found in key-value argument '{chunk}' (expected key:value)"
        )


class ParseError(ArgSlideError):
    """Base class for errors that abort a parse."""


class EmptyRegistryError(ParseError):
    """Exception raised when parsing against a parser with no declared options."""

    def __init__(self, message: str = "No arguments given to parse") -> None:
        super().__init__(message)


class MissingValueError(ParseError):
    """Exception raised when an option that takes a value is not followed by one."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(
            f"This option `{option}` requires a value you have not provided"
        )


class MissingRequiredError(ParseError):
    """Exception raised when required options are left without a value."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing: tuple[str, ...] = tuple(missing)
        super().__init__(
            f"Not all required arguments are found: {', '.join(self.missing)}"
        )
