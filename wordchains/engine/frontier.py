from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Tuple

# A chain under exploration, start word first.
Path = Tuple[str, ...]


@dataclass(frozen=True)
class FrontierTask:
    """One pending expansion: the path so far; its last word is expanded next."""
    path: Path

    @property
    def word(self) -> str:
        return self.path[-1]

    def extend(self, word: str) -> "FrontierTask":
        return FrontierTask(self.path + (word,))


class FrontierQueue:
    """Plain FIFO of frontier tasks."""

    def __init__(self):
        self._tasks: Deque[FrontierTask] = deque()

    def enqueue(self, task: FrontierTask) -> None:
        self._tasks.append(task)

    def dequeue(self) -> FrontierTask:
        # IndexError on an empty queue, same as deque.popleft
        return self._tasks.popleft()

    def clear(self) -> None:
        self._tasks.clear()

    def __len__(self) -> int:
        return len(self._tasks)

    def __bool__(self) -> bool:
        return bool(self._tasks)
