"""Word list that seeds a trie from fixed words and an optional file."""

from __future__ import annotations

import logging
import os

from prefixtree.constants import SEED_WORDS
from prefixtree.trie import Trie

log = logging.getLogger("prefixtree")


class WordListError(Exception):
    """A seed word could not be inserted."""

    def __init__(self, word: str):
        super().__init__(f"Failed to insert word '{word}'")
        self.word = word


class WordFileError(Exception):
    """A word-list file exists but could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not read word list {path}: {reason}")
        self.path = path


class WordList:
    """Trie-backed word list built from the seed words plus a word file."""

    def __init__(self, trie: Trie, seed: tuple[str, ...] | list[str] = SEED_WORDS):
        self.trie = trie
        for word in seed:
            if not self.trie.insert_word(word):
                raise WordListError(word)

    def load(self, dict_path: str) -> int:
        """Add words from *dict_path*; return the number of words read.

        A path that is not a regular file is skipped with a warning and
        gives 0. An unreadable file raises :class:`WordFileError` before
        any of its words are inserted.
        """
        if not os.path.isfile(dict_path):
            log.warning("No word list at %s -- using seed words only.", dict_path)
            return 0

        words = self._read_file(dict_path)
        count = 0
        for word in words:
            if self.trie.insert_word(word):
                count += 1
            else:
                log.warning("Skipped word %r from %s", word, dict_path)
        log.info("Loaded %s words from %s", f"{count:,}", dict_path)
        return count

    @staticmethod
    def _read_file(path: str) -> list[str]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            log.warning("Could not read word list %s: %s", path, exc)
            raise WordFileError(path, str(exc)) from exc

        words: list[str] = []
        for line in lines:
            word = line.strip()
            if word and not word.startswith("#"):
                words.append(word)
        return words

    def matches(self, prefix: str, sort: bool = False) -> list[str]:
        return self.trie.words_with_prefix(prefix, sort=sort)

    def __contains__(self, word: str) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return len(self.trie)
