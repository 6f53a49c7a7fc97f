# argslide Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols for argslide extension points.

Protocols:
- Converter: Callable that turns a raw option value into a typed value,
  returning None when it cannot.
"""
from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Converter(Protocol[T_co]):
    def __call__(self, raw: str, /) -> T_co | None: ...
