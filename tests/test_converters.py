from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Literal, Union

import pytest

from argslide import Converter, KeyValueFormatError
from argslide.converters import (
    coerce_bool,
    coerce_value,
    dict_converter,
    list_converter,
    try_coerce,
)


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int, 42),
        ("-60", int, -60),
        ("-6001.45e-2", float, -6001.45e-2),
        ("3.14", float, 3.14),
        ("True", bool, True),
        ("hello", str, "hello"),
        ("", str, ""),
        ("False", bool, False),
    ],
)
def test_coerce_value_basic(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int | float, 42),
        ("3.14", int | float, 3.14),
        ("hello", str | int, "hello"),
        ("1", bool | str, True),
        ("7", int | None, 7),
    ],
)
def test_coerce_value_union_success(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


def test_coerce_value_union_failure():
    with pytest.raises(ValueError) as excinfo:
        coerce_value("abc", int | float)
    assert "could not be coerced" in str(excinfo.value)


def test_coerce_value_typing_union_equivalent():
    assert coerce_value("123", Union[int, str]) == 123
    assert coerce_value("abc", Union[int, str]) == "abc"


class Mode(Enum):
    DEV = "dev"
    PROD = "prod"


class Status(Enum):
    SUCCESS = 0
    FAILURE = 1


def test_enum_coercion():
    assert coerce_value("dev", Mode) == Mode.DEV
    assert coerce_value("DEV", Mode) == Mode.DEV
    assert coerce_value("1", Status) == Status.FAILURE
    with pytest.raises(ValueError):
        coerce_value("staging", Mode)
    with pytest.raises(ValueError):
        coerce_value("3", Status)


def test_literal_coercion():
    assert coerce_value("dev", Literal["dev", "prod"]) == "dev"
    with pytest.raises(ValueError):
        coerce_value("staging", Literal["dev", "prod"])


def test_path_coercion():
    result = coerce_value("/tmp/test.txt", Path)
    assert isinstance(result, Path)
    assert str(result) == "/tmp/test.txt"


def test_datetime_coercion():
    result = coerce_value("2023-10-01T13:00:00", datetime)
    assert isinstance(result, datetime)
    assert result.year == 2023 and result.month == 10

    with pytest.raises(ValueError):
        coerce_value("not-a-date", datetime)


def test_bool_coercion():
    assert coerce_bool("true") is True
    assert coerce_bool("False") is False
    assert coerce_bool("0") is False
    assert coerce_bool("1") is True
    assert coerce_bool(" yes ") is True
    assert coerce_bool("off") is False
    assert coerce_bool(True) is True
    with pytest.raises(ValueError):
        coerce_bool("banana")
    with pytest.raises(ValueError):
        coerce_bool("")


def test_try_coerce():
    assert try_coerce("12", int) == 12
    assert try_coerce("twelve", int) is None
    assert try_coerce("maybe", bool) is None


def test_list_converter():
    assert list_converter(int)("1 2 3 4 5") == [1, 2, 3, 4, 5]
    assert list_converter()("a b") == ["a", "b"]
    assert list_converter(float)("1 2.5") == [1.0, 2.5]


def test_list_converter_all_or_nothing():
    assert list_converter(int)("1 2 x 4") is None


def test_list_converter_empty():
    assert list_converter(int)("") is None
    assert list_converter(int)("   ") is None


def test_dict_converter():
    convert = dict_converter(str, bool)
    assert convert("Monday:true Friday:false") == {"Monday": True, "Friday": False}


def test_dict_converter_splits_at_first_colon():
    assert dict_converter()("url:http://x") == {"url": "http://x"}


def test_dict_converter_typed_keys():
    assert dict_converter(int, float)("1:0.5 2:1.5") == {1: 0.5, 2: 1.5}


def test_dict_converter_all_or_nothing():
    assert dict_converter(str, bool)("Monday:true Friday:maybe") is None
    assert dict_converter(int, str)("1:a b:c") is None


def test_dict_converter_missing_separator():
    with pytest.raises(KeyValueFormatError) as excinfo:
        dict_converter(str, bool)("Monday:true Friday")
    assert excinfo.value.chunk == "Friday"
    assert isinstance(excinfo.value, ValueError)


def test_dict_converter_empty():
    assert dict_converter()("") is None


def test_converters_satisfy_protocol():
    assert isinstance(list_converter(int), Converter)
    assert isinstance(dict_converter(), Converter)
    assert isinstance(int, Converter)
