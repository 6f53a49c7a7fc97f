# argslide Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Flag classification and POSIX-style short flag splitting.

A token is a long flag when its first two characters are both `-` (`--name`).
A token is a short flag when it is at least two characters long, starts with
`-` and its second character is alphabetic (`-x`, `-xyz`). Anything else,
including negative numbers such as `-60` or `-6001.45e-2`, is a plain value.

`separate_flags` explodes bundled short flags so every flag is individually
addressable by the parser:

    >>> separate_flags(["./go", "-abc", "--name", "-60"])
    ['./go', '-a', '-b', '-c', '--name', '-60']
"""
from __future__ import annotations

from typing import Iterable


def is_long_flag(token: str) -> bool:
    """Return True if `token` starts with `--`."""
    return token[:2] == "--"


def is_short_flag(token: str) -> bool:
    """Return True if `token` looks like `-x` or a `-xyz` bundle."""
    return len(token) >= 2 and token[0] == "-" and token[1].isalpha()


def is_flag(token: str) -> bool:
    """Return True for both long and short flags."""
    return is_long_flag(token) or is_short_flag(token)


def separate_flags(tokens: Iterable[str]) -> list[str]:
    """Expand POSIX-style bundled short flags into separate flags."""
    separated: list[str] = []
    for token in tokens:
        if is_long_flag(token):
            separated.append(token)
        elif is_short_flag(token) and len(token) > 2:
            # e.g. -abc -> -a -b -c
            separated.extend(f"-{char}" for char in token[1:])
        else:
            separated.append(token)
    return separated
