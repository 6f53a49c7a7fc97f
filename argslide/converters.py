# argslide Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities used to extract typed values from a
`ParseOutcome`.

Raw option values are always text. Aggregate kinds (`MULTI_VALUE` and
`KEY_VALUE_LIST`) store their tokens joined by single spaces, which is the
format the aggregate converters below split apart again.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string or raw value to an Enum instance.
- coerce_value: General-purpose coercion to a target type (including unions,
  literals, enums and datetimes).
- list_converter: Build a converter for whitespace separated values.
- dict_converter: Build a converter for whitespace separated `key:value` pairs.

Aggregate conversion is all-or-nothing: one bad element and the whole result is
None, never a partial list or mapping.
"""
from __future__ import annotations

import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Callable, Literal, TypeVar, Union, get_args, get_origin

from dateutil import parser as date_parser

from argslide.exceptions import KeyValueFormatError

K = TypeVar("K")
V = TypeVar("V")

CONVERSION_ERRORS = (ValueError, TypeError, ArithmeticError)


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0', 'off', etc.

    Args:
        value (str): The input string or boolean.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the string is not a recognized boolean literal.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in {"true", "t", "1", "yes", "on"}:
        return True
    elif normalized in {"false", "f", "0", "no", "off"}:
        return False
    raise ValueError(f"Value '{value}' is not a valid boolean")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Convert a raw value or string to an Enum instance.

    Tries to resolve by name, value, or coerced base type.

    Raises:
        ValueError: If the value cannot be resolved to a valid Enum member.
    """
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            pass

    base_type = type(next(iter(enum_type)).value)
    try:
        coerced_value = base_type(value)
        return enum_type(coerced_value)
    except (ValueError, TypeError):
        values = [str(enum.value) for enum in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a string to the given target type.

    Handles typing constructs such as Union, Literal, Enum, and datetime.

    Args:
        value (str): The input string to convert.
        target_type (type): The desired type.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the value is invalid.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        if value not in args:
            raise ValueError(
                f"Value '{value}' is not a valid literal for type {target_type}"
            )
        return value

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            if arg is type(None):
                continue
            try:
                return coerce_value(value, arg)
            except CONVERSION_ERRORS:
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(
                f"Value '{value}' could not be parsed as a datetime"
            ) from error

    return target_type(value)


def try_coerce(value: str, target_type: Any) -> Any | None:
    """Coerce `value`, returning None instead of raising on failure."""
    try:
        return coerce_value(value, target_type)
    except CONVERSION_ERRORS:
        return None


def list_converter(element_type: Callable[[str], V] | type = str) -> Callable[[str], list | None]:
    """
    Build a converter for `MULTI_VALUE` options.

    The returned callable splits the raw value on whitespace and coerces every
    token with `element_type`. If any token fails, or there are no tokens at
    all, it returns None.

    Example:
        outcome.get_with("frequencies", list_converter(int))  # [1, 2, 3]
    """

    def convert(raw: str) -> list | None:
        values = []
        for token in raw.split():
            try:
                values.append(coerce_value(token, element_type))
            except CONVERSION_ERRORS:
                return None
        return values or None

    return convert


def dict_converter(
    key_type: Callable[[str], K] | type = str,
    value_type: Callable[[str], V] | type = str,
) -> Callable[[str], dict | None]:
    """
    Build a converter for `KEY_VALUE_LIST` options.

    The returned callable splits the raw value on whitespace, splits every
    chunk at its first `:` and coerces both halves. Any coercion failure, or an
    empty raw value, gives None.

    Raises:
        KeyValueFormatError: If a chunk contains no `:` separator. This is a
            malformed argument the caller should reject, not a conversion miss.

    Example:
        outcome.get_with("socks", dict_converter(str, bool))
        # {"Monday": True, "Friday": False}
    """

    def convert(raw: str) -> dict | None:
        pairs = []
        for chunk in raw.split():
            key, separator, value = chunk.partition(":")
            if not separator:
                raise KeyValueFormatError(chunk)
            pairs.append((key, value))

        result = {}
        for key, value in pairs:
            try:
                result[coerce_value(key, key_type)] = coerce_value(value, value_type)
            except CONVERSION_ERRORS:
                return None
        return result or None

    return convert
