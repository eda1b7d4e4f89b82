"""Writing enumerated words to text sinks."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import IO

from stringtrie.errors import SinkWriteFailure

log = logging.getLogger("stringtrie.writer")


def write_words(words: Iterable[str], sink: IO[str]) -> int:
    """Write each word followed by a newline; returns the number written."""
    written = 0
    try:
        for word in words:
            sink.write(word + "\n")
            written += 1
        flush = getattr(sink, "flush", None)
        if flush is not None:
            flush()
    except (OSError, ValueError) as exc:
        log.error("Failed to write to output stream after %d words: %s", written, exc)
        raise SinkWriteFailure(
            f"Failed to write to output stream after {written} words"
        ) from exc
    return written


def write_path(words: Iterable[str], path: str) -> int:
    """Write words to *path*, one per line, replacing any existing file."""
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            count = write_words(words, f)
    except SinkWriteFailure:
        raise
    except OSError as exc:
        log.error("Failed to write to file: %s", path)
        raise SinkWriteFailure(f"Failed to write to file: {path}") from exc
    log.info("Wrote %s words to %s", f"{count:,}", path)
    return count
