import pytest

from prefixtree import SEED_WORDS, Trie


@pytest.fixture
def trie():
    return Trie()


@pytest.fixture
def seeded():
    t = Trie()
    for w in SEED_WORDS:
        assert t.insert_word(w)
    return t


@pytest.fixture
def collect():
    """Run a callback lookup and return the words it reported."""
    def _collect(t, prefix, **kwargs):
        found = []
        t.lookup(prefix, lambda word, ctx: ctx.append(word), found, **kwargs)
        return found
    return _collect
