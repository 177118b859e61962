"""A trie over lower-case ASCII words."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Iterator

_ALPHABET = frozenset(string.ascii_lowercase)


@dataclass(eq=False)
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    end_of_word: bool = False


def _validate(word: str) -> str:
    bad = set(word) - _ALPHABET
    if bad:
        raise ValueError(f"word may only hold the letters a-z: {word!r}")
    return word


class Trie:
    """Prefix tree of words made of the letters ``a`` to ``z``."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for letter in _validate(word):
            node = node.children.setdefault(letter, _TrieNode())
        node.end_of_word = True

    def _find(self, word: str) -> _TrieNode | None:
        node = self._root
        for letter in _validate(word):
            node = node.children.get(letter)
            if node is None:
                return None
        return node

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._find(word)
        return node is not None and node.end_of_word

    @staticmethod
    def _walk(node: _TrieNode, prefix: str) -> Iterator[str]:
        for letter in sorted(node.children):
            child = node.children[letter]
            word = prefix + letter
            if child.end_of_word:
                yield word
            yield from Trie._walk(child, word)

    def words(self) -> list[str]:
        """All stored words in alphabetical order."""
        return list(self._walk(self._root, ""))

    def words_of_length(self, length: int) -> list[str]:
        """Stored words with exactly ``length`` letters, alphabetically."""
        return [word for word in self._walk(self._root, "") if len(word) == length]

    def words_with_prefix(self, prefix: str) -> list[str]:
        """Stored words that start with ``prefix``, the prefix itself included."""
        node = self._find(prefix)
        if node is None:
            return []
        found = [prefix] if node.end_of_word else []
        found.extend(self._walk(node, prefix))
        return found

    def delete(self, word: str) -> None:
        """Unmark ``word`` and prune the branches it no longer needs.

        Raises KeyError when the letters of ``word`` do not form a path.
        """
        path: list[tuple[_TrieNode, str]] = []
        node = self._root
        for letter in _validate(word):
            child = node.children.get(letter)
            if child is None:
                raise KeyError(word)
            path.append((node, letter))
            node = child
        node.end_of_word = False

        for parent, letter in reversed(path):
            child = parent.children[letter]
            if child.children or child.end_of_word:
                break
            del parent.children[letter]