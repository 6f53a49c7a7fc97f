# argslide Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token windowing over a flat argument list.

`slide(tokens)` pairs every token with the tokens that follow it, which is the
view the parser needs to decide how many values a matched flag consumes:

    >>> list(slide(["-f", "1", "2"]))
    [('-f', ('1', '2')), ('1', ('2',)), ('2', None)]

The remainder is `None` for the last token, never an empty tuple. A `Slide`
holds its own tuple copy of the input and restarts on every `iter()`, so it can
be consumed any number of times with identical results.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Sequence


class Slide:
    """Restartable sequence of `(token, remainder)` pairs."""

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens: tuple[str, ...] = tuple(tokens)

    def __iter__(self) -> Iterator[tuple[str, tuple[str, ...] | None]]:
        for _, token, rest in self.indexed():
            yield token, rest

    def indexed(self) -> Iterator[tuple[int, str, tuple[str, ...] | None]]:
        """Yield `(index, token, remainder)` triples."""
        tokens = self._tokens
        for index, token in enumerate(tokens):
            rest = tokens[index + 1 :] if index + 1 < len(tokens) else None
            yield index, token, rest

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"Slide({list(self._tokens)!r})"


def slide(tokens: Iterable[str]) -> Slide:
    """Return a restartable window over `tokens`."""
    return Slide(tokens)


def slide_indexed(
    tokens: Sequence[str],
) -> Iterator[tuple[int, str, tuple[str, ...] | None]]:
    """Like `slide`, but also yields the index of each token."""
    return Slide(tokens).indexed()
