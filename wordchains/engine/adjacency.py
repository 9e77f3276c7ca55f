"""
Adjacency check for word chains.

Two words are adjacent (one rung apart on the ladder) when they have the
same length and differ in exactly one character position.

Conventions:
  - Words arrive already normalized (lowercased) by the dictionary loader;
    comparison here is a plain case-sensitive character compare.
  - Equal length is a precondition. It is checked once, before a search
    starts, so this function does not re-check it on every call.
"""

from __future__ import annotations


def char_distance(a: str, b: str) -> int:
    """
    Count the positions where `a` and `b` hold different characters.

    Examples:
      char_distance("cat", "cot") -> 1
      char_distance("cat", "dog") -> 3
    """
    distance = 0
    for ca, cb in zip(a, b):
        if ca != cb:
            distance += 1
    return distance


def is_adjacent(candidate: str, from_word: str) -> bool:
    """
    Return True iff `candidate` differs from `from_word` in exactly one position.

    Preconditions:
      - len(candidate) == len(from_word)

    Examples:
      is_adjacent("cot", "cat") -> True
      is_adjacent("cat", "cat") -> False   (zero differences)
      is_adjacent("cog", "cat") -> False   (two differences)
    """
    return char_distance(candidate, from_word) == 1
