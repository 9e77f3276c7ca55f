"""
Word-list validator for wordchains.

What this module does:
- Inspect a dictionary file (one word per line) for a given word length N.
- Count valid words (lowercase a–z, exact length N), other-length words,
  invalid lines and duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Words of a different length are NOT invalid: a dictionary normally mixes
lengths and the search filters them out itself. They are only counted.

Typical use:
    from wordchains.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordlist.txt", 3)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    """Diagnostics and metadata for one dictionary file."""
    N: int
    path: str              # file path (as given)
    exists: bool           # did the file exist on disk?
    total_lines: int       # non-blank lines read
    count: int             # valid words of length N
    unique_count: int      # unique valid words of length N
    other_length: int      # clean words of some other length
    invalid_lines: int     # lines with characters outside a–z (after lowercasing)
    sha256: str            # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int, int, int]:
    """
    Load words from a text file and sort them into buckets.

    Rules:
      - one token per line, blank lines skipped
      - compared after lowercasing (the loader lowercases too)
      - must be alphabetic; length N is "valid", any other length is "other"

    Returns:
      (valid_words, total_lines, other_length_count, invalid_count)
    """
    valid: List[str] = []
    total = other = invalid = 0

    with path.open("r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            total += 1
            wl = w.lower()
            if not wl.isalpha():
                invalid += 1
            elif len(wl) == N:
                valid.append(wl)
            else:
                other += 1

    return valid, total, other, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, N: int) -> Dict:
    """
    Validate a dictionary file for chain searches of word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport schema). `passed`
        requires the file to exist and to hold at least one valid word of
        length N. Duplicates and invalid lines are reported in `issues` but
        do not fail validation, since the loader and the search cope with both.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(N=N, path=path, exists=False, total_lines=0, count=0,
                             unique_count=0, other_length=0, invalid_lines=0,
                             sha256="", passed=False,
                             issues=[f"wordlist file not found: {path}"])
        return asdict(rep)

    valid, total, other, invalid = _load_and_check(p, N)
    unique_count = len(set(valid))

    issues: List[str] = []
    if not valid:
        issues.append(f"wordlist contains 0 valid words of length {N}")
    if invalid:
        issues.append(f"wordlist has {invalid} invalid line(s)")
    if unique_count != len(valid):
        issues.append(f"wordlist contains {len(valid) - unique_count} duplicate word(s) of length {N}")

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        total_lines=total,
        count=len(valid),
        unique_count=unique_count,
        other_length=other,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(valid),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=3 | words=1015 (uniq=1013, sha=abc123...) | other_length=9120 | invalid=4 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| other_length={report['other_length']} | invalid={report['invalid_lines']} | {status}"
    )
