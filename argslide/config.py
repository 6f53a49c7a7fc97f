# argslide Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads option tables for `ArgParser` from YAML or TOML files.

Example (YAML):
    program: go
    options:
      - name: length
        short: l
        required: true
        help: Length of user in centimeters
        kind: value
      - name: csv
        kind: positional
        position: 0
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from argslide.logger import logger
from argslide.option_kind import OptionKind
from argslide.parser import ArgParser


class RawOption(BaseModel):
    """Raw option model for a config-declared option."""

    name: str
    default: str | None = None
    short: str | None = None
    required: bool = False
    help: str = ""
    kind: OptionKind = OptionKind.VALUE
    position: int | None = None

    @field_validator("default", mode="before")
    @classmethod
    def stringify_default(cls, value: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, bool):
            return str(value).lower()
        return str(value)

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> OptionKind:
        return OptionKind(value)

    @field_validator("short")
    @classmethod
    def validate_short(cls, value: str | None) -> str | None:
        if value is not None and (len(value) != 1 or not value.isalpha()):
            raise ValueError("short must be a single letter")
        return value

    @model_validator(mode="after")
    def validate_position(self) -> RawOption:
        if self.kind is OptionKind.POSITIONAL and self.position is None:
            raise ValueError(f"Positional option '{self.name}' needs a position")
        return self


class ParserConfig(BaseModel):
    """Top-level option table model."""

    program: str = ""
    options: list[RawOption] = Field(default_factory=list)

    def to_parser(self) -> ArgParser:
        parser = ArgParser(program=self.program)
        for option in self.options:
            parser.declare(
                option.name,
                option.default,
                option.short,
                option.required,
                option.help,
                option.kind,
                option.position,
            )
        return parser


def read_config(path: Path) -> dict[str, Any]:
    """Read a YAML or TOML file into a dictionary."""
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of options.\n"
            "Example:\n"
            "program: 'go'\n"
            "options:\n"
            "  - name: 'length'\n"
            "    short: 'l'\n"
            "    kind: 'value'"
        )
    return raw_config


def load_parser(file_path: Path | str) -> ArgParser:
    """
    Load an `ArgParser` from a YAML or TOML option table.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        ArgParser: A parser with every configured option declared.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is malformed.
        pydantic.ValidationError: If an option entry is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    raw_config = read_config(path)
    config = ParserConfig.model_validate(raw_config)
    logger.debug("Loaded %d options from %s", len(config.options), path)
    return config.to_parser()
