"""Prefix trie with depth-first enumeration of words sharing a prefix."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator

from prefixtree.constants import ROOT_ID

log = logging.getLogger("prefixtree")

MatchCallback = Callable[[str, Any], None]


class TrieError(Exception):
    """Base class for trie errors."""


class TrieDestroyedError(TrieError, RuntimeError):
    """Raised when a trie is torn down a second time."""


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("id", "is_leaf", "children")

    def __init__(self, id: str = ROOT_ID):
        self.id = id
        self.is_leaf: bool = False
        self.children: dict[str, TrieNode] = {}

    def __repr__(self) -> str:
        leaf = " leaf" if self.is_leaf else ""
        return f"<TrieNode {self.id!r}{leaf} children={len(self.children)}>"


class Trie:
    """Prefix trie storing a set of words.

    ``max_depth`` tracks the length of the longest word ever inserted.
    Insertion is the only mutation; lookups never change the tree.

    ``destroy()`` is a single-use teardown. After it runs the trie
    rejects inserts and reports no matches, and a second call raises
    :class:`TrieDestroyedError`.
    """

    def __init__(self):
        self.root: TrieNode | None = TrieNode(ROOT_ID)
        self.max_depth: int = 0
        self._size: int = 0

    @property
    def destroyed(self) -> bool:
        return self.root is None

    # insertion

    def insert_word(self, word: str) -> bool:
        """Insert *word*; False only if a node could not be allocated."""
        if not isinstance(word, str):
            raise TypeError(f"word must be str, not {type(word).__name__}")
        if self.root is None:
            log.debug("insert into destroyed trie ignored: %r", word)
            return False

        if len(word) > self.max_depth:
            self.max_depth = len(word)

        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                try:
                    child = TrieNode(ch)
                except MemoryError:
                    # Nodes attached so far stay in place, none marked as leaves.
                    log.error("Failed to allocate node for %r while inserting %r", ch, word)
                    return False
                node.children[ch] = child
            node = child

        if not node.is_leaf:
            node.is_leaf = True
            self._size += 1
        return True

    def insert_words(self, words: Iterable[str]) -> int:
        """Insert each word in *words*; return the number inserted."""
        return sum(1 for w in words if self.insert_word(w))

    # lookup

    def _walk(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix:
            if node is None:
                return None
            node = node.children.get(ch)
        return node

    def iter_prefix(self, prefix: str = "", sort: bool = False) -> Iterator[str]:
        """Yield every stored word starting with *prefix*.

        Depth-first pre-order: a node is reported before any word below
        it. Siblings come in storage order unless *sort* is set.
        """
        start = self._walk(prefix)
        if start is None:
            return

        # Explicit stack of (node, depth); ``path`` is the push/pop buffer
        # holding the characters from the root down to the current node.
        path = list(prefix)
        base = len(path)
        stack: list[tuple[TrieNode, int]] = [(start, base)]
        while stack:
            node, depth = stack.pop()
            if depth > base:
                del path[depth - 1:]
                path.append(node.id)
            if node.is_leaf:
                yield "".join(path)
            children = list(node.children.values())
            if sort:
                children.sort(key=lambda n: n.id)
            # Reversed so the first sibling is popped, and visited, first.
            stack.extend((child, depth + 1) for child in reversed(children))

    def lookup(
        self,
        prefix: str | None,
        callback: MatchCallback | None,
        callback_context: Any = None,
        sort: bool = False,
    ) -> None:
        """Call ``callback(word, callback_context)`` for each match."""
        if callback is None or prefix is None or self.root is None:
            log.debug("lookup skipped: no prefix, no callback or trie destroyed")
            return
        for word in self.iter_prefix(prefix, sort=sort):
            callback(word, callback_context)

    def words_with_prefix(self, prefix: str = "", sort: bool = False) -> list[str]:
        return list(self.iter_prefix(prefix, sort=sort))

    # teardown

    def destroy(self) -> None:
        """Release every node, children before their parent."""
        if self.root is None:
            raise TrieDestroyedError("trie already destroyed")

        stack: list[tuple[TrieNode, bool]] = [(self.root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                node.children.clear()
                continue
            stack.append((node, True))
            stack.extend((child, False) for child in node.children.values())

        self.root = None
        self.max_depth = 0
        self._size = 0

    # read-only helpers

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._walk(word)
        return node is not None and node.is_leaf

    def __iter__(self) -> Iterator[str]:
        return self.iter_prefix("")

    def __repr__(self) -> str:
        state = "destroyed" if self.destroyed else f"words={self._size} max_depth={self.max_depth}"
        return f"<Trie {state}>"
