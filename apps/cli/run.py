# apps/cli/run.py
"""
CLI entry point for building a single word chain.

This script:
  1) Loads the dictionary (lowercased, undecodable bytes replaced).
  2) Checks that the start and stop words have the same length.
  3) Runs the chain search and prints the chain (or that none exists).
  4) With --verbose, narrates every expansion and prints timing stats.

Usage:
    python -m apps.cli.run -s cat -e dog [-v] [wordlist.txt]
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import List

from rich.console import Console
from rich.markup import escape

from wordchains.datasets import load_dictionary
from wordchains.engine import ChainSearch, SearchEvent, EmptyWord, LengthMismatch
from wordchains.logging_config import setup_logging

DEFAULT_WORDLIST = "wordlist.txt"


def _green(s: str) -> str:
    return f"[green]{escape(s)}[/green]"


def _event_printer(console: Console):
    """Render search events the way a human wants to follow them."""
    def on_event(event: SearchEvent) -> None:
        if event.kind == "expanded":
            console.print("Found next words from " + _green(event.word) + " -> "
                          + _green(", ".join(event.next_words)))
        elif event.kind == "dead_end":
            console.print("[red]No next words - abandon path[/red]")
    return on_event


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="word_chains",
        description="wordchains: build a chain of one-letter changes between two words",
        epilog=f"If no file is supplied it reads {DEFAULT_WORDLIST}",
    )
    ap.add_argument("-s", "--start", required=True, help="start word")
    ap.add_argument("-e", "--stop", required=True, help="stop word")
    ap.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    ap.add_argument("--log-level", default="WARNING",
                    help="logging level (DEBUG, INFO, WARNING, ERROR)")
    ap.add_argument("file", nargs="?", default=DEFAULT_WORDLIST,
                    help="dictionary file, one word per line")
    return ap


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, load the dictionary, run the search and report.
    Returns the process exit status (0 also when no chain exists).
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    console = Console(highlight=False, soft_wrap=True)

    start_at = time.perf_counter()

    try:
        words = load_dictionary(args.file)
    except FileNotFoundError:
        console.print(f"[red]Dictionary file not found: {escape(args.file)}[/red]")
        return 1

    # Dictionary words are lowercased on load; match them.
    start, stop = args.start.strip().lower(), args.stop.strip().lower()

    on_event = _event_printer(console) if args.verbose else None
    try:
        search = ChainSearch(start, stop, words, on_event=on_event)
    except LengthMismatch:
        console.print("[red]Start and end words must have same length[/red]")
        return 1
    except EmptyWord as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 1

    if args.verbose:
        console.print("Trying to build chain from " + _green(start) + " to " + _green(stop))
        console.print(f"Starting with {_green(str(len(words)))} words")
        console.print(f"Remaining candidates: {_green(str(len(search.pool)))}")

    result = search.run()

    if result.success:
        console.print("[green]Put down that coffee - we're done![/green]")
        console.print(_green(", ".join(result.path)))
    else:
        console.print(f"[red]No chain found from {escape(start)} to {escape(stop)}[/red]")

    if args.verbose:
        console.print("-------")
        console.print("Stats: ")
        console.print(f"Took {_green(f'{time.perf_counter() - start_at:.4f}')} seconds.")
        console.print(f"Used {_green(str(result.iterations))} search steps.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
