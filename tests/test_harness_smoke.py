import csv
import json
from pathlib import Path

import pytest
from wordchains.engine import LengthMismatch
from wordchains.harness import run_case, run_batch, read_pairs, write_csv, write_manifest
from wordchains.harness.io import timestamp_id

WORDS = ["cat", "cot", "cog", "dog", "hat", "cold", "cord"]


def test_run_case_smoke():
    r = run_case("cat", "dog", WORDS)
    assert r["success"] is True
    assert r["path"] == ["cat", "cot", "cog", "dog"]
    assert r["chain_length"] == 4
    assert r["iterations"] >= 3
    assert r["pool_size"] == 5
    assert r["time_ms"] >= 0.0

def test_run_case_not_found():
    r = run_case("cat", "dig", WORDS)
    assert r["success"] is False
    assert r["path"] is None and r["chain_length"] == 0

def test_run_case_raises_on_length_mismatch():
    with pytest.raises(LengthMismatch):
        run_case("cat", "cold", WORDS)

def test_run_batch_records_bad_pairs():
    rows = run_batch([("cat", "dog"), ("cat", "cold"), ("cold", "cord")], WORDS)
    assert [r["success"] for r in rows] == [True, False, True]
    assert "same length" in rows[1]["error"]
    assert rows[2]["path"] == ["cold", "cord"]

def test_run_batch_sample_prefix():
    rows = run_batch([("cat", "dog"), ("cold", "cord")], WORDS, sample=1)
    assert len(rows) == 1 and rows[0]["start"] == "cat"

def test_read_pairs(tmp_path: Path):
    p = tmp_path / "pairs.txt"
    p.write_text("# warmup\ncat dog\n\nCOLD,warm\n  ruby   code \n", encoding="utf-8")
    assert read_pairs(p) == [("cat", "dog"), ("cold", "warm"), ("ruby", "code")]

def test_read_pairs_rejects_bad_line(tmp_path: Path):
    p = tmp_path / "pairs.txt"
    p.write_text("cat dog\ncat\n", encoding="utf-8")
    with pytest.raises(ValueError, match=":2:"):
        read_pairs(p)

def test_write_csv_and_manifest(tmp_path: Path):
    rows = run_batch([("cat", "dog"), ("cat", "cold")], WORDS)
    out = write_csv(rows, str(tmp_path / "out" / "run.csv"))
    with open(out, newline="", encoding="utf-8") as f:
        got = list(csv.DictReader(f))
    assert got[0]["chain"] == "cat > cot > cog > dog"
    assert got[0]["success"] == "True"
    assert got[1]["chain"] == "" and got[1]["error"]

    m = write_manifest({"run_id": timestamp_id(), "num_cases": 2}, str(tmp_path / "m.json"))
    data = json.loads(Path(m).read_text(encoding="utf-8"))
    assert data["num_cases"] == 2
    assert data["run_id"].endswith("Z")
