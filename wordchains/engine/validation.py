"""
Start/stop word validation.

This module answers the question: "Can a chain search run for this pair?"
A pair is acceptable iff:
  - both words are non-empty strings
  - both words have the same length

Anything else is rejected up front with an exception, so the search itself
never sees a malformed pair. A failed search (no chain) is NOT an error and
is reported through the search result instead.
"""

from __future__ import annotations


class EmptyWord(ValueError):
    """The start or stop word is empty."""

    def __init__(self, which: str):
        super().__init__(f"{which} word must not be empty")
        self.which = which


class LengthMismatch(ValueError):
    """Start and stop words have different lengths."""

    def __init__(self, start: str, stop: str):
        super().__init__(
            f"Start and end words must have same length "
            f"({start!r} has {len(start)}, {stop!r} has {len(stop)})")
        self.start = start
        self.stop = stop


def validate_pair(start: str, stop: str) -> None:
    """
    Raise EmptyWord or LengthMismatch if `start`/`stop` cannot be searched.

    Examples:
      validate_pair("cat", "dog")   -> None
      validate_pair("cat", "door")  -> LengthMismatch
      validate_pair("", "dog")      -> EmptyWord
    """
    if not start:
        raise EmptyWord("start")
    if not stop:
        raise EmptyWord("stop")
    if len(start) != len(stop):
        raise LengthMismatch(start, stop)
