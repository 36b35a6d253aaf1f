"""Prefix trie with prefix enumeration."""

from prefixtree.api import create, destroy, insert_word, lookup
from prefixtree.constants import ROOT_ID, SEED_WORDS
from prefixtree.trie import Trie, TrieDestroyedError, TrieError, TrieNode
from prefixtree.wordlist import WordFileError, WordList, WordListError

__all__ = [
    "ROOT_ID",
    "SEED_WORDS",
    "Trie",
    "TrieDestroyedError",
    "TrieError",
    "TrieNode",
    "WordFileError",
    "WordList",
    "WordListError",
    "create",
    "destroy",
    "insert_word",
    "lookup",
]
