from pathlib import Path

import pytest
from wordchains.datasets import load_dictionary, read_lines, write_lines, unique_preserve_order


def test_load_dictionary_normalizes(tmp_path: Path):
    p = tmp_path / "wordlist.txt"
    p.write_bytes(b"Cat\r\nDOG\n\n  cot  \n\xffbad\ncat\n")
    words = load_dictionary(p)
    # lowercased, blanks dropped, repeats kept, bad bytes replaced
    assert words == ["cat", "dog", "cot", "\ufffdbad", "cat"]


def test_load_dictionary_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "missing.txt")


def test_write_then_read_lines(tmp_path: Path):
    out = write_lines(["cat", "dog"], tmp_path / "sub" / "w.txt")
    assert Path(out).read_text(encoding="utf-8") == "cat\ndog\n"
    assert read_lines(out) == ["cat", "dog"]


def test_unique_preserve_order():
    assert unique_preserve_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
    assert unique_preserve_order(["A", "a"], key=str.lower) == ["A"]
