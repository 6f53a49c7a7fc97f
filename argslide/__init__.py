"""
argslide Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .converters import coerce_value, dict_converter, list_converter
from .exceptions import (
    ArgSlideError,
    EmptyRegistryError,
    KeyValueFormatError,
    MissingRequiredError,
    MissingValueError,
    OptionDefinitionError,
    ParseError,
    UnknownOptionError,
)
from .logger import logger
from .normalize import is_flag, is_long_flag, is_short_flag, separate_flags
from .option_kind import OptionKind
from .option_spec import OptionSpec
from .outcome import OptionResult, ParseOutcome
from .parser import ArgParser
from .protocols import Converter
from .slide import Slide, slide

__all__ = [
    "ArgParser",
    "ArgSlideError",
    "Converter",
    "EmptyRegistryError",
    "KeyValueFormatError",
    "MissingRequiredError",
    "MissingValueError",
    "OptionDefinitionError",
    "OptionKind",
    "OptionResult",
    "OptionSpec",
    "ParseError",
    "ParseOutcome",
    "Slide",
    "UnknownOptionError",
    "coerce_value",
    "dict_converter",
    "is_flag",
    "is_long_flag",
    "is_short_flag",
    "list_converter",
    "logger",
    "separate_flags",
    "slide",
]
