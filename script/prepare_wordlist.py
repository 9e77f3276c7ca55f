"""
Normalize a dictionary file for chain searches.

Features:
- Reads UTF-8, replacing undecodable bytes instead of failing.
- Lowercases every word and drops blank lines (same rules as the search loader).
- Removes duplicate words, preserving original order (stable dedupe).
- Optional --length filter (repeatable) to keep only some word lengths.
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.prepare_wordlist --in wordlist.txt --length 4 --sort
"""

import argparse
from pathlib import Path

from wordchains.datasets.io import load_dictionary, unique_preserve_order, write_lines


def prepare(words: list[str], lengths=None, sort: bool = False) -> list[str]:
    out = unique_preserve_order(words)
    if lengths:
        keep = set(lengths)
        out = [w for w in out if len(w) in keep]
    if sort:
        out = sorted(out)
    return out


def main():
    ap = argparse.ArgumentParser(description="Normalize and de-duplicate a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--length", type=int, action="append",
                    help="keep only words of this length (repeatable)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    words = load_dictionary(inp)
    out = prepare(words, lengths=args.length, sort=args.sort)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(words)} words) -> Output: {outp} ({len(out)} unique)")


if __name__ == "__main__":
    main()
