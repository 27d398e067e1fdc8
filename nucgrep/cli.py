"""CLI entry point for nucgrep."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from nucgrep import __version__
from nucgrep.config import COLOR_MODES, OUTPUT_FORMATS, STRATEGIES, SearchConfig
from nucgrep.errors import InvalidConfiguration, NucgrepError
from nucgrep.highlight import ANSI_STYLE, PLAIN_STYLE, Style
from nucgrep.io import read_fasta
from nucgrep.search import run

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nucgrep",
        description=(
            "Find sequences in sequences. Look for PATTERN in each FASTA record "
            "in FILE; with no FILE, or when FILE is -, read standard input."
        ),
    )
    parser.add_argument("file", nargs="?", default="-", metavar="FILE",
                        help="FASTA file, plain or gzipped (default: stdin)")
    parser.add_argument("-p", "--pattern", required=True, metavar="PATTERN",
                        help="nucleotide sequence to look for, e.g. 'AaTGATAcGGCGg'")
    parser.add_argument("-r", "--reverse-complement", action="store_true",
                        help="also show matches for the reverse complement of PATTERN")
    parser.add_argument("-R", "--reverse-complement-only", action="store_true",
                        help="show only matches for the reverse complement of PATTERN")
    parser.add_argument("-i", "--ignore-case", action="store_true",
                        help="ignore case, e.g. find 'aTgA' for PATTERN 'ATGA'")
    parser.add_argument("-N", "--allow-non-matching", "--max-mismatches",
                        dest="max_mismatches", type=int, default=0, metavar="N",
                        help="maximum number of non-matching symbols (default: 0)")
    parser.add_argument("-H", "--headers-only", action="store_true",
                        help="only show headers of records that match")
    parser.add_argument("-w", "--line-wrap", type=int, default=None, metavar="N",
                        help="wrap sequence output at N columns")
    parser.add_argument("--strategy", choices=STRATEGIES, default="window",
                        help="approximate matching strategy (default: window)")
    parser.add_argument("--molecule", choices=["dna", "rna"], default=None,
                        help="molecule type of PATTERN (default: guess from T/U)")
    parser.add_argument("--color", choices=COLOR_MODES, default="auto",
                        help="highlight with terminal colours (default: auto)")
    parser.add_argument("--output", choices=OUTPUT_FORMATS, default="fasta",
                        help="output format (default: fasta)")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="log progress to stderr (-vv for debug)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush stays quiet."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)


def _resolve_style(color: str, stream) -> Style:
    if color == "always":
        return ANSI_STYLE
    if color == "auto" and hasattr(stream, "isatty") and stream.isatty():
        return ANSI_STYLE
    return PLAIN_STYLE


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    config = SearchConfig.from_args(args)
    try:
        config.check()
    except InvalidConfiguration as e:
        for error in e.errors:
            print(f"Error: {error}", file=sys.stderr)
        return EXIT_CONFIG

    style = _resolve_style(config.color, sys.stdout)
    logger.debug("reading records from %s", "stdin" if args.file == "-" else args.file)
    try:
        run(read_fasta(args.file), config, out=sys.stdout, style=style)
    except BrokenPipeError:
        # the reader went away, e.g. `| head`
        logger.debug("output pipe closed early")
        _silence_stdout()
        return EXIT_FAILURE
    except OSError as e:
        print(f"{args.file}: {e.strerror or e}", file=sys.stderr)
        return EXIT_FAILURE
    except NucgrepError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
