"""
Candidate pool: the words still eligible to extend a chain.

The pool is built once per search from the dictionary:
  1) filter_by_length(n) keeps only words as long as the start word
  2) deduplicate() drops repeats, keeping first-seen order

After that the only mutator is remove_all(), the pruning step. Nothing is
ever added back, so a pruned word is gone for the rest of the search.

Order matters: find_adjacent() returns matches in pool order, which fixes
the order tasks are enqueued in and therefore which chain is found first.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List

from .adjacency import is_adjacent


class CandidatePool:
    """Order-preserving, shrink-only collection of candidate words."""

    def __init__(self, words: Iterable[str] = ()):
        self._words: List[str] = list(words)

    @classmethod
    def for_search(cls, words: Iterable[str], length: int) -> "CandidatePool":
        """Build a pool the way a search needs it: length-filtered and unique."""
        pool = cls(words)
        pool.filter_by_length(length)
        pool.deduplicate()
        return pool

    def filter_by_length(self, n: int) -> None:
        self._words = [w for w in self._words if len(w) == n]

    def deduplicate(self) -> None:
        seen = set()
        out: List[str] = []
        for w in self._words:
            if w not in seen:
                seen.add(w)
                out.append(w)
        self._words = out

    def find_adjacent(self, from_word: str) -> List[str]:
        """
        Return the remaining words one character away from `from_word`,
        in pool order. The pool itself is not changed.
        """
        return [w for w in self._words if is_adjacent(w, from_word)]

    def remove_all(self, words: Iterable[str]) -> None:
        """Remove every given word that is still present; absent words are ignored."""
        drop = set(words)
        if drop:
            self._words = [w for w in self._words if w not in drop]

    @property
    def words(self) -> List[str]:
        """Snapshot of the remaining words (a copy; mutating it has no effect)."""
        return list(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._words))

    def __repr__(self) -> str:
        return f"CandidatePool({len(self._words)} words)"
