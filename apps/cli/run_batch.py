# apps/cli/run_batch.py
"""
Run many start/stop pairs against one dictionary with shared progress.

Writes to: <outdir>/run_<timestamp>.csv + run_<timestamp>_manifest.json

Usage:
    python -m apps.cli.run_batch --pairs pairs.txt --wordlist wordlist.txt --sample 50
"""

from __future__ import annotations
import argparse, sys, time, random
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from wordchains.datasets import validate_wordlist, pretty_summary, load_dictionary
from wordchains.harness import run_pair, read_pairs
from wordchains.harness.core import Pair
from wordchains.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordchains.logging_config import setup_logging

DEFAULT_WORDLIST = "wordlist.txt"


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _choose_cases(pairs: List[Pair], sample: int | None, seed: int) -> List[Pair]:
    """Deterministic sample without replacement; all pairs in file order otherwise."""
    if sample and sample < len(pairs):
        pool = list(pairs)
        random.Random(seed).shuffle(pool)
        return pool[:sample]
    return list(pairs)


def _run_cases(cases: List[Pair], words: List[str], progress: str) -> List[Dict]:
    results = []
    total = len(cases)
    mode = _progress_mode(progress)
    iterator = tqdm(cases, ncols=80, desc="Chains", unit="pair") if mode == "bar" else cases
    start = time.time()
    last_print = 0.0

    for idx, (a, b) in enumerate(iterator, 1):
        results.append(run_pair(a, b, words))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s")
                sys.stderr.flush()
                last_print = now
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()
    return results


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordchains: run many chain searches at once")
    ap.add_argument("--pairs", required=True, help="file with one 'START STOP' pair per line")
    ap.add_argument("--wordlist", default=DEFAULT_WORDLIST, help="dictionary file")
    ap.add_argument("--sample", type=int, help="run only a subset of pairs (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show run progress (auto=bar on a terminal, else plain text).")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)
    setup_logging(args.log_level)

    # 1) load pairs and dictionary once
    try:
        pairs = read_pairs(args.pairs)
        words = load_dictionary(args.wordlist)
    except FileNotFoundError as e:
        print(f"File not found: {e}", file=sys.stderr)
        return 1

    # 2) one validation summary per word length in play
    lengths = sorted({len(a) for a, _ in pairs if a})
    reports = {}
    for n in lengths:
        reports[str(n)] = validate_wordlist(args.wordlist, n)
        print(pretty_summary(reports[str(n)]))

    # 3) shared cases (deterministic by seed)
    cases = _choose_cases(pairs, args.sample, args.seed)
    if args.progress != "off":
        print(f"=== Running {len(cases)} pairs over {len(words)} words ===")
    results = _run_cases(cases, words, args.progress)

    # 4) write outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": reports,
        "num_cases": len(results),
        "num_success": sum(1 for r in results if r["success"]),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
