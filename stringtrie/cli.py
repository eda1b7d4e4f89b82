"""Command-line front end for the string trie."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from stringtrie.errors import SinkWriteFailure, StreamUnavailable
from stringtrie.trie import StringTrie

log = logging.getLogger("stringtrie")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stringtrie",
        description=(
            "Trie word list -- load, edit and search newline-delimited word "
            "files. Valid characters are letters (A-Z), apostrophe, hyphen "
            "and space."
        ),
    )
    parser.add_argument("--load", "-l", action="append", default=[], metavar="PATH",
                        help="Load words from a text file (one word per line, "
                             "including a newline after the last word)")
    parser.add_argument("--add", "-a", action="append", default=[], metavar="WORD",
                        help="Add a single word")
    parser.add_argument("--remove", "-r", action="append", default=[], metavar="WORD",
                        help="Remove a single word")
    parser.add_argument("--unload", action="store_true",
                        help="Unload all words before searching or writing")
    parser.add_argument("--search", "-s", action="append", default=[], metavar="WORD",
                        help="Search for an exact word match")
    parser.add_argument("--prefix", "-p", action="append", default=[], metavar="PREFIX",
                        help="List words beginning with PREFIX (inclusive)")
    parser.add_argument("--print", dest="print_words", action="store_true",
                        help="Print all words to standard output")
    parser.add_argument("--write", "-w", metavar="PATH", default=None,
                        help="Write all words to a text file")
    parser.add_argument("--force", "-f", action="store_true",
                        help="Overwrite the --write file if it already exists")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def run(trie: StringTrie, args: argparse.Namespace) -> int:
    """Apply the requested actions to *trie*; returns the exit status."""
    status = 0

    for path in args.load:
        try:
            words = trie.load_file(path)
        except StreamUnavailable:
            status = 1
            continue
        print(f"Added {words} words to the trie from {path}.")

    for word in args.add:
        added = trie.add(word)
        print(f'Word "{word}" was{"" if added else " not"} added to the trie.')

    for word in args.remove:
        trie.remove(word)
        print(f"Trie now contains {trie.word_count} words.")

    if args.unload:
        trie.unload()
        print("All words have been removed from the trie.")

    for word in args.search:
        found = trie.search(word)
        print(f'Word "{word}" was{"" if found else " not"} found in the trie.')

    for prefix in args.prefix:
        matches = trie.search_prefix(prefix)
        print(f'Found {len(matches)} words containing the "{prefix}" prefix:')
        for match in matches:
            print(match)

    if args.print_words:
        try:
            trie.enumerate_all(sys.stdout)
        except SinkWriteFailure:
            status = 1

    if args.write:
        if os.path.exists(args.write) and not args.force:
            log.error("File already exists: %s (use --force to overwrite)", args.write)
            status = 1
        else:
            try:
                count = trie.write_file(args.write)
            except SinkWriteFailure:
                status = 1
            else:
                print(f"Finished writing {count} words to {args.write}.")

    log.info("Words currently loaded: %d", trie.word_count)
    return status


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    return run(StringTrie(), args)


if __name__ == "__main__":
    sys.exit(main())
