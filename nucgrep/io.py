"""Sequence I/O – FASTA reading (plain, gzipped or stdin)."""

from __future__ import annotations

import gzip
import sys
from pathlib import Path
from typing import Generator, Iterable, Tuple, Union

from nucgrep.errors import MalformedRecord

STDIN = "-"


def decode_line(line: Union[str, bytes], line_number: int) -> str:
    """Decode one raw input line as UTF-8; undecodable bytes are an error."""
    if isinstance(line, str):
        return line
    try:
        return line.decode("utf-8")
    except UnicodeDecodeError as e:
        bad = line[e.start]
        raise MalformedRecord(f"invalid byte 0x{bad:02x}", line_number) from e


def parse_fasta(
    lines: Iterable[Union[str, bytes]],
) -> Generator[Tuple[str, str], None, None]:
    """Yield (name, raw_sequence) tuples from FASTA lines (text or bytes).

    The name is the header up to the first whitespace. Sequence lines are
    joined with newlines kept, so callers strip whitespace themselves.
    Raises MalformedRecord for sequence data before the first header or for
    bytes that are not UTF-8.
    """
    name: str | None = None
    parts: list[str] = []

    for line_number, raw in enumerate(lines, 1):
        line = decode_line(raw, line_number).rstrip("\n").rstrip("\r")
        if line.startswith(">"):
            if name is not None:
                yield name, "\n".join(parts)
            fields = line[1:].split(maxsplit=1)
            name = fields[0] if fields else ""
            parts = []
        elif name is None:
            if line.strip():
                raise MalformedRecord("expected '>'", line_number)
        else:
            parts.append(line)
    if name is not None:
        yield name, "\n".join(parts)


def read_fasta(filepath: Union[str, Path]) -> Generator[Tuple[str, str], None, None]:
    """Yield (name, raw_sequence) tuples from a FASTA file.

    Supports plain-text and gzip-compressed files (.gz); ``-`` reads stdin.
    Input is read as bytes and decoded line by line.
    """
    if str(filepath) == STDIN:
        yield from parse_fasta(getattr(sys.stdin, "buffer", sys.stdin))
        return

    filepath = Path(filepath)
    opener = gzip.open if filepath.suffix == ".gz" else open
    mode = "rb"

    with opener(filepath, mode) as fh:  # type: ignore[arg-type]
        yield from parse_fasta(fh)
