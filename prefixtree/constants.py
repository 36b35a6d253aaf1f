"""Fixed values shared by the trie, the word-list loader and the CLI."""

from __future__ import annotations

# Sentinel id carried by the root node; never matched against input.
ROOT_ID = ""

# Words the CLI seeds before running its single lookup.
SEED_WORDS: tuple[str, ...] = ("apple", "ap", "avocado", "banana")

USAGE_MESSAGE = "must supply prefix to search for"
