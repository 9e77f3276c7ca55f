"""
I/O utilities for batch runs.

Responsibilities:
- write_csv:     flatten per-pair results into a tidy CSV (one row per search).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Chains are written as a single " > "-joined column so rows stay flat no
  matter how long the chain is.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

CSV_FIELDS = ["start", "stop", "success", "chain_length", "iterations",
              "pool_size", "time_ms", "chain", "error"]

CHAIN_SEP = " > "


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of search results to CSV.

    Schema (columns):
      start, stop, success, chain_length, iterations, pool_size, time_ms, chain, error

    Args:
      results  : list of dicts returned by the harness per pair.
      path     : output CSV path.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()

        for r in results:
            path_words = r.get("path") or []
            w.writerow({
                "start": r["start"],
                "stop": r["stop"],
                "success": r["success"],
                "chain_length": r.get("chain_length", len(path_words)),
                "iterations": r.get("iterations", 0),
                "pool_size": r.get("pool_size", 0),
                "time_ms": round(float(r.get("time_ms", 0.0)), 3),
                "chain": CHAIN_SEP.join(path_words),
                "error": r.get("error", ""),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (pairs, wordlist, seed, sample, outdir)
      - wordlist: output of datasets.validate_wordlist(...) per word length
      - num_cases, num_success
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
