"""
Run harness core primitives.

- run_case:   run a single chain search (one start/stop pair) and time it.
- run_pair:   run_case that turns unsearchable pairs into error rows.
- run_batch:  run many pairs in sequence over one dictionary (optionally a sample prefix).
- read_pairs: parse a pairs file for batch runs.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import time
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Tuple

from wordchains.datasets.io import read_lines
from wordchains.engine import ChainSearch, LengthMismatch, EmptyWord
from wordchains.engine.search import EventCallback

Pair = Tuple[str, str]


def run_case(
        start: str,
        stop: str,
        words: Iterable[str],
        *,
        on_event: EventCallback | None = None,
) -> Dict:
    """
    Execute one chain search to success or exhaustion.

    Args:
        start:     first word of the chain
        stop:      word the chain must reach
        words:     the dictionary (normalized; may contain other lengths and repeats)
        on_event:  optional callback receiving SearchEvent progress notifications

    Raises:
        EmptyWord, LengthMismatch before anything runs

    Returns:
        dict with keys:
            start, stop, success (bool), path (list[str] | None),
            chain_length (int, words in the chain; 0 if none),
            iterations (int), pool_size (int), time_ms (float)
    """
    search = ChainSearch(start, stop, words, on_event=on_event)

    t0 = time.perf_counter_ns()
    result = search.run()
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    path = list(result.path) if result.path is not None else None
    return {
        "start": start,
        "stop": stop,
        "success": result.success,
        "path": path,
        "chain_length": len(path) if path else 0,
        "iterations": result.iterations,
        "pool_size": result.pool_size,
        "time_ms": dt,
    }


def _error_row(start: str, stop: str, err: ValueError) -> Dict:
    return {
        "start": start, "stop": stop, "success": False, "path": None,
        "chain_length": 0, "iterations": 0, "pool_size": 0, "time_ms": 0.0,
        "error": str(err),
    }


def run_pair(start: str, stop: str, words: Sequence[str]) -> Dict:
    """
    Like run_case, but a pair that cannot be searched (empty word, length
    mismatch) comes back as a failed row with an 'error' message instead of raising.
    """
    try:
        return run_case(start, stop, words)
    except (LengthMismatch, EmptyWord) as e:
        return _error_row(start, stop, e)


def run_batch(
        pairs: Sequence[Pair],
        words: Sequence[str],
        *,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many searches back-to-back against the same dictionary. If 'sample'
    is provided, only the first K pairs are used to speed up quick experiments.

    A pair that cannot be searched (empty word, length mismatch) does not stop
    the batch: it is recorded as a failed row with an 'error' message.
    """
    if sample is not None:
        pairs = pairs[:sample]
    return [run_pair(start, stop, words) for start, stop in pairs]


def read_pairs(p: Path | str) -> List[Pair]:
    """
    Read start/stop pairs, one per line: "cat dog" or "cat,dog".
    Blank lines and lines starting with '#' are skipped; words are lowercased.

    Raises ValueError naming the line number for a line without exactly two words.
    """
    pairs: List[Pair] = []
    for lineno, ln in enumerate(read_lines(p), start=1):
        s = ln.strip()
        if not s or s.startswith("#"):
            continue
        parts = s.replace(",", " ").split()
        if len(parts) != 2:
            raise ValueError(f"{p}:{lineno}: expected 'START STOP', got {s!r}")
        pairs.append((parts[0].lower(), parts[1].lower()))
    return pairs
