"""Handle-style entry points: create, insert_word, lookup, destroy.

Thin functions over :class:`~prefixtree.trie.Trie` for callers that
hold a trie as an opaque handle. A ``None`` handle is accepted and
treated as an empty trie by ``insert_word`` and ``lookup``.
"""

from __future__ import annotations

import logging
from typing import Any

from prefixtree.trie import MatchCallback, Trie

log = logging.getLogger("prefixtree")


def create() -> Trie | None:
    """New empty trie, or None if it could not be allocated."""
    try:
        return Trie()
    except MemoryError:
        log.error("Failed to allocate trie")
        return None


def insert_word(handle: Trie | None, word: str) -> bool:
    if handle is None:
        return False
    return handle.insert_word(word)


def lookup(
    handle: Trie | None,
    prefix: str | None,
    on_match: MatchCallback | None,
    ctx: Any = None,
) -> None:
    """Call ``on_match(word, ctx)`` once per stored word starting with *prefix*."""
    if handle is None or on_match is None or prefix is None:
        log.debug("lookup skipped: missing trie, prefix or callback")
        return
    handle.lookup(prefix, on_match, ctx)


def destroy(handle: Trie) -> None:
    """Tear down *handle*. The handle must not be used afterwards."""
    handle.destroy()
