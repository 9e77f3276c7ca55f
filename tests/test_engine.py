import pytest
from wordchains.engine import (
    is_adjacent, char_distance, CandidatePool, FrontierQueue, FrontierTask,
    validate_pair, EmptyWord, LengthMismatch,
)

# --- adjacency golden tests ---
@pytest.mark.parametrize("a,b,expected", [
    ("cat", "cot", True),
    ("cat", "hat", True),
    ("cat", "cab", True),
    ("cat", "cat", False),
    ("cat", "cog", False),
    ("cat", "dog", False),
    ("cold", "cord", True),
    ("cold", "warm", False),
    ("a", "b", True),
])
def test_is_adjacent_golden(a, b, expected):
    assert is_adjacent(a, b) is expected
    # symmetric
    assert is_adjacent(b, a) is expected

@pytest.mark.parametrize("word", ["a", "cat", "cold", "ladder"])
def test_word_is_not_adjacent_to_itself(word):
    assert is_adjacent(word, word) is False

def test_char_distance():
    assert char_distance("cat", "cat") == 0
    assert char_distance("cat", "cot") == 1
    assert char_distance("cat", "dog") == 3

# --- candidate pool ---
def test_pool_filter_and_dedupe_keep_first_seen_order():
    pool = CandidatePool(["dog", "horse", "cat", "dog", "cot", "cat"])
    pool.filter_by_length(3)
    pool.deduplicate()
    assert pool.words == ["dog", "cat", "cot"]

def test_pool_for_search():
    pool = CandidatePool.for_search(["cold", "cat", "cord", "cold"], 4)
    assert pool.words == ["cold", "cord"]
    assert len(pool) == 2
    assert "cord" in pool and "cat" not in pool

def test_find_adjacent_is_ordered_and_read_only():
    pool = CandidatePool(["hat", "dog", "cot", "cab"])
    assert pool.find_adjacent("cat") == ["hat", "cot", "cab"]
    assert pool.words == ["hat", "dog", "cot", "cab"]

def test_remove_all_is_idempotent():
    pool = CandidatePool(["hat", "dog", "cot"])
    pool.remove_all(["hat", "zzz"])
    assert pool.words == ["dog", "cot"]
    pool.remove_all(["hat"])
    assert pool.words == ["dog", "cot"]
    pool.remove_all([])
    assert pool.words == ["dog", "cot"]

def test_pool_words_is_a_snapshot():
    pool = CandidatePool(["hat"])
    snap = pool.words
    snap.append("cat")
    assert pool.words == ["hat"]

# --- frontier ---
def test_frontier_queue_is_fifo():
    q = FrontierQueue()
    first = FrontierTask(("cat",))
    q.enqueue(first)
    q.enqueue(first.extend("cot"))
    q.enqueue(first.extend("hat"))
    assert len(q) == 3
    assert q.dequeue().path == ("cat",)
    t = q.dequeue()
    assert t.path == ("cat", "cot") and t.word == "cot"
    q.clear()
    assert not q
    with pytest.raises(IndexError):
        q.dequeue()

def test_frontier_task_extend_does_not_mutate():
    t = FrontierTask(("cat",))
    t2 = t.extend("cot")
    assert t.path == ("cat",)
    assert t2.path == ("cat", "cot")

# --- pair validation ---
def test_validate_pair():
    validate_pair("cat", "dog")
    with pytest.raises(LengthMismatch) as ei:
        validate_pair("cat", "door")
    assert ei.value.start == "cat" and ei.value.stop == "door"
    with pytest.raises(EmptyWord):
        validate_pair("", "dog")
    with pytest.raises(EmptyWord):
        validate_pair("cat", "")

def test_errors_are_value_errors():
    assert issubclass(LengthMismatch, ValueError)
    assert issubclass(EmptyWord, ValueError)
