from script.fetch_wordlist import extract_words
from script.prepare_wordlist import prepare


def test_extract_words_plain_text():
    body = "Cat\ndog\ncat\nx-ray\n\nCOLD\n"
    assert extract_words(body, "text/plain") == ["cat", "dog", "cold"]


def test_extract_words_html():
    body = "<html><body><p>Cold cord</p><p>card, cold!</p></body></html>"
    assert extract_words(body, "text/html; charset=utf-8") == ["cold", "cord", "card"]


def test_prepare_dedupes_filters_and_sorts():
    words = ["dog", "cat", "cold", "dog", "ant"]
    assert prepare(words) == ["dog", "cat", "cold", "ant"]
    assert prepare(words, lengths=[3]) == ["dog", "cat", "ant"]
    assert prepare(words, lengths=[3], sort=True) == ["ant", "cat", "dog"]
