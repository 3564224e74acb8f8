"""
Integer stream sources.

The reference run pushes every integer in ``[DEFAULT_START, DEFAULT_END]`` in
ascending order into a heap that keeps ``DEFAULT_KEEP`` values. This module
provides that stream, the alternating-sign variant used in testing, and a
reader for integers supplied in a text file or on stdin.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator

# Defaults for the reference run (overridable from the CLI)
DEFAULT_KEEP = 50
DEFAULT_START = -999_999
DEFAULT_END = 1_000_000

_TOKEN_SPLIT = re.compile(r"[\s,]+")


def integer_range(start: int = DEFAULT_START, end: int = DEFAULT_END) -> Iterator[int]:
    """Yield every integer from ``start`` to ``end`` inclusive, ascending.

    Yields nothing when ``start > end``.
    """
    return iter(range(start, end + 1))


def alternating_sign(values: Iterable[int]) -> Iterator[int]:
    """Negate even values and pass odd values through unchanged."""
    for i in values:
        yield -i if i % 2 == 0 else i


def read_integers(lines: Iterable[str]) -> Iterator[int]:
    """Parse integers from text lines.

    Each line may hold several integers separated by whitespace or commas.
    Blank lines and lines starting with ``#`` are skipped.

    Raises
    ------
    ValueError
        If a token is not an integer; the message names the 1-based line.
    """
    for lineno, line in enumerate(lines, start=1):
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        for token in _TOKEN_SPLIT.split(text):
            if not token:
                continue
            try:
                yield int(token)
            except ValueError:
                raise ValueError(f"line {lineno}: not an integer: {token!r}") from None
