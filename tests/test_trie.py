import pytest

from structkit.trie import Trie


def make(*words):
    trie = Trie()
    for word in words:
        trie.insert(word)
    return trie


def test_inserted_words_are_found():
    trie = make("tea", "to", "ten")
    assert "tea" in trie
    assert "to" in trie
    assert "te" not in trie
    assert "tent" not in trie


def test_words_are_listed_alphabetically():
    inputs = ["tea", "to", "ten", "a", "inn", "in"]
    trie = make(*inputs)
    assert trie.words() == sorted(inputs)


def test_empty_trie_has_no_words():
    assert Trie().words() == []


def test_words_of_length():
    trie = make("tea", "to", "ten", "a", "inn")
    assert trie.words_of_length(3) == ["inn", "tea", "ten"]
    assert trie.words_of_length(1) == ["a"]
    assert trie.words_of_length(7) == []


def test_words_with_prefix_includes_prefix_word():
    trie = make("in", "inn", "tea", "ten")
    assert trie.words_with_prefix("in") == ["in", "inn"]
    assert trie.words_with_prefix("te") == ["tea", "ten"]


def test_words_with_missing_prefix_is_empty():
    trie = make("tea")
    assert trie.words_with_prefix("x") == []


def test_delete_removes_only_that_word():
    trie = make("tea", "ten", "te")
    trie.delete("tea")
    assert "tea" not in trie
    assert trie.words() == ["te", "ten"]


def test_delete_prunes_dangling_branches():
    trie = make("abc", "b")
    trie.delete("abc")
    assert trie.words_with_prefix("a") == []
    assert trie.words() == ["b"]


def test_delete_word_that_is_a_prefix_keeps_longer_word():
    trie = make("in", "inn")
    trie.delete("in")
    assert trie.words() == ["inn"]


def test_delete_unknown_path_raises():
    trie = make("tea")
    with pytest.raises(KeyError):
        trie.delete("xyz")
    assert trie.words() == ["tea"]


def test_delete_of_unmarked_prefix_changes_nothing():
    trie = make("tea")
    trie.delete("te")
    assert trie.words() == ["tea"]


def test_invalid_letters_are_rejected():
    trie = Trie()
    with pytest.raises(ValueError):
        trie.insert("Hello")
    with pytest.raises(ValueError):
        trie.words_with_prefix("a1")