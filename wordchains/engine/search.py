"""
Chain search: breadth-first frontier expansion over a shrinking candidate pool.

How one search runs:
  - The queue is seeded with a single task whose path is (start,).
  - Each iteration dequeues one task and looks up the words adjacent to the
    last word of its path, against the pool AS IT IS NOW (earlier iterations
    may already have pruned it).
  - If the stop word is among them, the search succeeds with path + (stop,)
    and every other pending task is dropped.
  - Otherwise one task per next word is enqueued (in pool order), and then the
    whole path plus all the next words are removed from the pool.

The pruning is global and happens after every dequeue, not once per level:
a word discovered by one task is unavailable to all sibling tasks. This is
what makes the result depend on dictionary order, and why the first chain
found is not guaranteed to be the shortest one.

A ChainSearch owns its pool, its queue and its iteration counter; all three
are discarded with the object. Use find_chain() for one-shot calls.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from .frontier import FrontierQueue, FrontierTask, Path
from .pool import CandidatePool
from .validation import validate_pair

logger = logging.getLogger(__name__)


class SearchState(enum.Enum):
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class SearchEvent:
    """
    Progress notification for verbose callers.

    kind:
      "expanded" - `word` was looked up; `next_words` holds what was found
      "dead_end" - the lookup for `word` found nothing
      "found"    - the stop word was reached; `path` is the full chain
    """
    kind: str
    word: str
    next_words: Tuple[str, ...] = ()
    path: Path = ()


@dataclass(frozen=True)
class SearchResult:
    state: SearchState
    path: Optional[Path]
    iterations: int
    pool_size: int          # candidates available when the search started

    @property
    def success(self) -> bool:
        return self.state is SearchState.SUCCEEDED


EventCallback = Callable[[SearchEvent], None]


class ChainSearch:
    """Single-use search from `start` to `stop` over `words`."""

    def __init__(self, start: str, stop: str, words: Iterable[str], *,
                 on_event: EventCallback | None = None):
        validate_pair(start, stop)
        self.start = start
        self.stop = stop
        self.pool = CandidatePool.for_search(words, len(start))
        self.queue = FrontierQueue()
        self.iterations = 0
        self.state = SearchState.RUNNING
        self._on_event = on_event
        self._started = False

    def _emit(self, event: SearchEvent) -> None:
        if self._on_event is not None:
            self._on_event(event)

    def _find_next(self, word: str) -> List[str]:
        self.iterations += 1
        next_words = self.pool.find_adjacent(word)
        self._emit(SearchEvent("expanded", word, tuple(next_words)))
        if not next_words:
            self._emit(SearchEvent("dead_end", word))
        return next_words

    def _finish(self, state: SearchState, path: Optional[Path], pool_size: int) -> SearchResult:
        self.state = state
        logger.debug("search %s -> %s %s after %d iterations",
                     self.start, self.stop, state.value, self.iterations)
        return SearchResult(state=state, path=path, iterations=self.iterations,
                            pool_size=pool_size)

    def run(self) -> SearchResult:
        if self._started:
            raise RuntimeError("ChainSearch is single-use; create a new one per search")
        self._started = True
        pool_size = len(self.pool)
        logger.debug("search %s -> %s over %d candidates", self.start, self.stop, pool_size)

        # Zero steps apart: the one-word chain, no lookups needed.
        if self.start == self.stop:
            path = (self.start,)
            self._emit(SearchEvent("found", self.start, path=path))
            return self._finish(SearchState.SUCCEEDED, path, pool_size)

        self.queue.enqueue(FrontierTask((self.start,)))

        while self.queue:
            task = self.queue.dequeue()
            next_words = self._find_next(task.word)

            if self.stop in next_words:
                path = task.path + (self.stop,)
                self.queue.clear()
                self._emit(SearchEvent("found", task.word, tuple(next_words), path))
                return self._finish(SearchState.SUCCEEDED, path, pool_size)

            for w in next_words:
                self.queue.enqueue(task.extend(w))
            self.pool.remove_all(task.path + tuple(next_words))

        return self._finish(SearchState.EXHAUSTED, None, pool_size)


def find_chain(start: str, stop: str, words: Iterable[str], *,
               on_event: EventCallback | None = None) -> SearchResult:
    """
    Search for a word chain from `start` to `stop` using `words` as the dictionary.

    Raises:
      EmptyWord, LengthMismatch: the pair cannot be searched (nothing runs)

    Returns:
      SearchResult; `success` is False (state EXHAUSTED, path None) when no
      chain exists in the dictionary.
    """
    return ChainSearch(start, stop, words, on_event=on_event).run()
