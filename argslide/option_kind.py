# argslide Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionKind`, the enum that decides how a declared option claims tokens
from the argument stream.

Supports alias coercion for shorthand or config-friendly values, so option
tables loaded from YAML or TOML can use either spelling.

Example:
    OptionKind("multi_value") → OptionKind.MULTI_VALUE
    OptionKind("list")        → OptionKind.MULTI_VALUE (via alias)
    OptionKind("Flag")        → OptionKind.SWITCH (via alias)
"""
from __future__ import annotations

from enum import Enum


class OptionKind(Enum):
    """
    Defines how an option consumes tokens when its flag is matched.

    Members:
        VALUE: Consumes exactly one following token, as in `--pic lol.jpg`.
        SWITCH: Consumes nothing; stores the true literal, as in `--version`.
        MULTI_VALUE: Consumes following tokens up to the next flag,
            as in `--pics 1.png 2.png 3.png`.
        KEY_VALUE_LIST: Like MULTI_VALUE, with `key:value` tokens,
            as in `--pics Monday:1.jpg Tuesday:2.jpg`.
        POSITIONAL: Takes its value from stream position rather than a flag.

    Aliases:
        - "option" → "value"
        - "flag" → "switch"
        - "list" → "multi_value"
        - "dict" → "key_value_list"
    """

    VALUE = "value"
    SWITCH = "switch"
    MULTI_VALUE = "multi_value"
    KEY_VALUE_LIST = "key_value_list"
    POSITIONAL = "positional"

    @classmethod
    def choices(cls) -> list[OptionKind]:
        """Return a list of all option kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "option": "value",
            "flag": "switch",
            "list": "multi_value",
            "multivalue": "multi_value",
            "dict": "key_value_list",
            "keyvaluelist": "key_value_list",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def takes_values(self) -> bool:
        """True for kinds that consume a run of tokens after the flag."""
        return self in (OptionKind.MULTI_VALUE, OptionKind.KEY_VALUE_LIST)

    @property
    def display_name(self) -> str:
        """Name shown in help output, e.g. `MultiValue`."""
        return "".join(part.capitalize() for part in self.value.split("_"))

    def __str__(self) -> str:
        """Return the string representation of the option kind."""
        return self.value
