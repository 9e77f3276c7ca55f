from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Undecodable bytes are replaced with U+FFFD instead of failing the read.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    text = p.read_text(encoding="utf-8", errors="replace")
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def normalize_words(lines: Iterable[str]) -> List[str]:
    """Lowercase each line and drop blanks. Order and repeats are kept."""
    return [ln.strip().lower() for ln in lines if ln.strip()]


def load_dictionary(p: Path | str) -> List[str]:
    """
    Load a newline-separated word list for chain searches.

    Words come back lowercased and in file order. Duplicates are left in:
    the search deduplicates its own candidate pool.
    """
    return normalize_words(read_lines(p))


def unique_preserve_order(words: Iterable[str], key=None) -> List[str]:
    seen, out = set(), []
    for s in words:
        k = key(s) if key else s
        if k not in seen:
            seen.add(k)
            out.append(s)
    return out
