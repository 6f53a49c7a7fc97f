import pytest

from argslide import ArgParser, OptionKind

LONG_STR = (
    "Check your proxy settings or contact your network administrator to make sure "
    "the proxy server is working. If you don't believe you should be using a proxy "
    "server: Go to the Chromium menu > Settings > Show advanced settings... > Change "
    'proxy settings... and make sure your configuration is set to "no proxy" or "direct."'
)


@pytest.fixture
def parser() -> ArgParser:
    parser = ArgParser("ArgParsers")
    parser.declare("length", None, "l", True, LONG_STR, OptionKind.VALUE)
    parser.declare(
        "height", None, "h", True, "Height of user in centimeters", OptionKind.VALUE
    )
    parser.declare("name", None, "n", True, "Name of user", OptionKind.VALUE)
    parser.declare(
        "frequencies", None, "f", False, "User's favorite frequencies", OptionKind.MULTI_VALUE
    )
    parser.declare("mao", "false", "m", False, "Is the User Chairman Mao?", OptionKind.SWITCH)
    return parser
