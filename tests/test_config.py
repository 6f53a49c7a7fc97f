import pydantic
import pytest

from argslide import ArgParser, OptionKind, list_converter
from argslide.config import ParserConfig, RawOption, load_parser

YAML_CONFIG = """\
program: go
options:
  - name: length
    short: l
    required: true
    help: Length of user in centimeters
  - name: mao
    short: m
    default: false
    kind: flag
  - name: frequencies
    short: f
    kind: list
  - name: csv
    kind: positional
    position: 0
"""

TOML_CONFIG = """\
program = "go"

[[options]]
name = "length"
short = "l"
required = true

[[options]]
name = "retries"
short = "r"
default = 3
"""


def test_load_yaml(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text(YAML_CONFIG)
    parser = load_parser(path)

    assert isinstance(parser, ArgParser)
    assert parser.program == "go"
    assert parser.get_option("mao").kind is OptionKind.SWITCH
    assert parser.get_option("mao").default == "false"
    assert parser.get_option("csv").position == 0

    outcome = parser.parse(["go", "-l", "3", "-m", "-f", "1", "2", "-", "in.csv"])
    assert outcome.get("length", int) == 3
    assert outcome.get("mao", bool) is True
    assert outcome.get_with("frequencies", list_converter(int)) is None
    assert outcome.get("csv") is None


def test_load_yaml_positional(tmp_path):
    path = tmp_path / "options.yml"
    path.write_text(YAML_CONFIG)
    outcome = load_parser(str(path)).parse(["go", "in.csv", "-l", "3", "-m"])
    assert outcome.get("csv") == "in.csv"


def test_load_toml(tmp_path):
    path = tmp_path / "options.toml"
    path.write_text(TOML_CONFIG)
    parser = load_parser(path)
    assert parser.get_option("length").required is True
    assert parser.get_option("retries").default == "3"
    assert parser.parse(["go", "-l", "1"]).get("retries", int) == 3


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_parser(tmp_path / "nope.yaml")


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "options.json"
    path.write_text("{}")
    with pytest.raises(ValueError):
        load_parser(path)


def test_non_mapping_config(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_parser(path)


def test_bad_path_type():
    with pytest.raises(TypeError):
        load_parser(42)


def test_invalid_option_entries():
    with pytest.raises(pydantic.ValidationError):
        RawOption(name="x", kind="bogus")
    with pytest.raises(pydantic.ValidationError):
        RawOption(name="x", short="xy")
    with pytest.raises(pydantic.ValidationError):
        RawOption(name="x", short="1")
    with pytest.raises(pydantic.ValidationError):
        RawOption(name="x", kind="positional")


def test_config_to_parser():
    config = ParserConfig(
        program="prog",
        options=[RawOption(name="name", short="n", default=7)],
    )
    parser = config.to_parser()
    assert parser.get_option("name").default == "7"
    assert len(parser) == 2
