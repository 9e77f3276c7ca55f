"""
Download a word list and write a clean dictionary file for chain searches.

What it does:
- Downloads the URL (a plain newline-separated list, or an HTML page).
- For HTML pages, parses the visible text and keeps every alphabetic token.
- Lowercases, keeps only a–z words, de-duplicates while preserving source order.
- Optionally keeps only words of given lengths, or sorts alphabetically.

Usage:
    python -m script.fetch_wordlist --out wordlist.txt
    python -m script.fetch_wordlist --length 3 --length 4 --sort --out wordlist.txt
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from wordchains.datasets.io import unique_preserve_order, write_lines

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
WORD_RE = re.compile(r"[A-Za-z]+")


def extract_words(text: str, content_type: str = "") -> list[str]:
    """Pull lowercase a–z words out of a downloaded body, in order, without repeats."""
    if "html" in content_type.lower():
        text = BeautifulSoup(text, "html.parser").get_text("\n", strip=True)
        words = [m.group(0).lower() for m in WORD_RE.finditer(text)]
    else:
        # plain lists: one word per line, anything not purely alphabetic is dropped
        words = [ln.strip().lower() for ln in text.splitlines()]
        words = [w for w in words if w and WORD_RE.fullmatch(w)]
    return unique_preserve_order(words)


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text, r.headers.get("Content-Type", ""))


def main():
    ap = argparse.ArgumentParser(description="Download a word list for wordchains")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="wordlist.txt")
    ap.add_argument("--length", type=int, action="append",
                    help="keep only words of this length (repeatable)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.length:
        keep = set(args.length)
        words = [w for w in words if len(w) in keep]
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
