"""Command-line entry point: print stored words matching a prefix."""

from __future__ import annotations

import argparse
import logging
import sys

from prefixtree import api
from prefixtree.constants import USAGE_MESSAGE
from prefixtree.wordlist import WordFileError, WordList, WordListError

log = logging.getLogger("prefixtree")


def _print_match(word: str, ctx: object) -> None:
    print(word, file=ctx)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prefix-tree",
        description="Print every stored word that starts with PREFIX",
    )
    parser.add_argument("prefix", nargs="?", default=None,
                        help="Prefix to search for")
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to an extra word list, one word per line")
    parser.add_argument("--sorted", action="store_true",
                        help="Print matches in lexicographic order")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def run(prefix: str, dict_path: str | None = None, sort: bool = False) -> int:
    """Seed a trie, print the matches for *prefix*, return the exit status."""
    tree = api.create()
    if tree is None:
        print("Failed to create prefix tree", file=sys.stderr)
        return 1

    try:
        words = WordList(tree)
        if dict_path:
            words.load(dict_path)
    except (WordListError, WordFileError) as exc:
        print(exc, file=sys.stderr)
        api.destroy(tree)
        return 1

    log.debug("Looking up %r among %d words", prefix, len(words))
    if sort:
        for word in words.matches(prefix, sort=True):
            _print_match(word, sys.stdout)
    else:
        api.lookup(tree, prefix, _print_match, sys.stdout)

    api.destroy(tree)
    return 0


def _first_argument(argv: list[str], args: argparse.Namespace, rest: list[str]) -> str | None:
    # The prefix is the earliest non-flag argument, taken literally even
    # when it starts with "-". Anything after it is ignored.
    candidates = [a for a in (args.prefix, *rest[:1]) if a is not None]
    if not candidates:
        return None
    return min(candidates, key=argv.index)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args, rest = build_parser().parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    prefix = _first_argument(argv, args, rest)
    if prefix is None:
        print(f"\r\n{USAGE_MESSAGE}")
        return 1
    if rest:
        log.debug("Ignoring extra arguments: %s", " ".join(rest))

    return run(prefix, args.dict, args.sorted)


if __name__ == "__main__":
    sys.exit(main())
