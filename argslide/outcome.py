# argslide Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseOutcome`, the immutable result of a successful `ArgParser.parse`.

An outcome keeps, per declared option, the spec it was parsed with, the
resolved raw value and the number of times the option's flag matched. Values
stay raw text until a caller asks for a type:

    outcome.get("length", int)                        # -60
    outcome.get_with("frequencies", list_converter(int))  # [1, 2, 3, 4, 5]

Any failure to produce a value (unknown name, nothing resolved, conversion
failure) is reported as None. Callers cannot tell "wrong type" from
"not provided"; `count` and `was_passed` tell whether the flag was given.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, TypeVar, overload

from argslide.converters import try_coerce
from argslide.option_spec import OptionSpec
from argslide.protocols import Converter

T = TypeVar("T")


@dataclass(frozen=True)
class OptionResult:
    """Resolved state of a single option after parsing."""

    spec: OptionSpec
    value: str | None = None
    count: int = 0


class ParseOutcome:
    """Immutable mapping from option name to its resolved raw value."""

    __slots__ = ("_program", "_results")

    def __init__(self, program: str, results: Mapping[str, OptionResult]) -> None:
        self._program = program
        self._results: Mapping[str, OptionResult] = MappingProxyType(dict(results))

    @property
    def program(self) -> str:
        return self._program

    @property
    def results(self) -> Mapping[str, OptionResult]:
        """Read-only view of every option's result."""
        return self._results

    @overload
    def get(self, name: str) -> str | None: ...

    @overload
    def get(self, name: str, type_: Callable[[str], T] | type[T]) -> T | None: ...

    def get(self, name, type_=str):
        """
        Return the value of `name` converted with `type_`.

        Args:
            name (str): Option name.
            type_ (type): Target type, anything `coerce_value` understands.

        Returns:
            The converted value, or None if the option is unknown, has no
            value, or the value does not convert.
        """
        raw = self.raw(name)
        if raw is None:
            return None
        return try_coerce(raw, type_)

    def get_with(self, name: str, converter: Converter[T]) -> T | None:
        """
        Return the value of `name` converted by a caller-supplied function.

        The converter receives the raw text and returns the typed value or None.
        It is the way to extract `MULTI_VALUE` and `KEY_VALUE_LIST` options, see
        `list_converter` and `dict_converter`.
        """
        raw = self.raw(name)
        if raw is None:
            return None
        return converter(raw)

    def raw(self, name: str) -> str | None:
        """Return the unconverted value of `name`, or None."""
        result = self._results.get(name)
        return result.value if result else None

    def count(self, name: str) -> int:
        """Return how many times the flag of `name` was matched."""
        result = self._results.get(name)
        return result.count if result else 0

    def was_passed(self, name: str) -> bool:
        """True if the option was given explicitly rather than via its default."""
        return self.count(name) > 0

    def spec(self, name: str) -> OptionSpec | None:
        result = self._results.get(name)
        return result.spec if result else None

    def as_dict(self) -> dict[str, str | None]:
        """Return a plain `{name: raw value}` dictionary."""
        return {name: result.value for name, result in self._results.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._results

    def __iter__(self) -> Iterator[str]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseOutcome):
            return NotImplemented
        return self._program == other._program and dict(self._results) == dict(
            other._results
        )

    def __hash__(self) -> int:
        return hash((self._program, tuple(sorted(self._results.items()))))

    def __repr__(self) -> str:
        values: dict[str, Any] = self.as_dict()
        return f"ParseOutcome(program={self._program!r}, values={values!r})"
