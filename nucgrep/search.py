"""Per-record search pipeline: normalise, match, render, report."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field
from typing import IO, Iterable, List, Optional, Tuple, Union

from nucgrep.align import PatternAligner
from nucgrep.config import SearchConfig
from nucgrep.errors import MalformedRecord
from nucgrep.exact import MatchSpan, find_matches
from nucgrep.fuzzy import find_fuzzy_matches
from nucgrep.highlight import PLAIN_STYLE, Style, render
from nucgrep.patterns import SearchTarget, expand_patterns

logger = logging.getLogger(__name__)


def normalize(raw_sequence: Union[str, bytes]) -> str:
    """Drop all whitespace (line breaks included) from a raw record sequence.

    Bytes must be UTF-8; anything else raises MalformedRecord.
    """
    if isinstance(raw_sequence, bytes):
        try:
            raw_sequence = raw_sequence.decode("utf-8")
        except UnicodeDecodeError as e:
            bad = raw_sequence[e.start]
            raise MalformedRecord(f"invalid byte 0x{bad:02x} in sequence") from e
    return "".join(raw_sequence.split())


@dataclass
class RecordResult:
    """Matches found in one record."""

    name: str
    sequence: str
    spans: List[MatchSpan] = field(default_factory=list)

    def to_dict(self, headers_only: bool = False) -> dict:
        data = {"id": self.name}
        if not headers_only:
            data["length"] = len(self.sequence)
            data["matches"] = [
                {
                    "start": s.start,
                    "end": s.end,
                    "strand": s.strand.value,
                    "exact": s.exact,
                    "distance": s.distance,
                }
                for s in self.spans
            ]
        return data


class PatternSearcher:
    """Validated configuration plus the search targets compiled from it."""

    def __init__(self, config: SearchConfig, aligner: Optional[PatternAligner] = None):
        self.config = config.check()
        self.targets: List[SearchTarget] = expand_patterns(config)
        self.aligner = aligner or PatternAligner()
        if config.fuzzy:
            logger.info(
                "fuzzy search with %s strategy, up to %d non-matching symbols",
                config.strategy,
                config.max_mismatches,
            )

    def find_spans(self, sequence: str) -> List[MatchSpan]:
        cfg = self.config
        if cfg.fuzzy:
            return find_fuzzy_matches(
                sequence,
                self.targets,
                cfg.pattern,
                cfg.max_mismatches,
                strategy=cfg.strategy,
                aligner=self.aligner,
            )
        return find_matches(sequence, self.targets, cfg.pattern)

    def search(self, name: str, raw_sequence: Union[str, bytes]) -> Optional[RecordResult]:
        """Search one record; None when nothing matched."""
        sequence = normalize(raw_sequence)
        spans = self.find_spans(sequence)
        logger.debug("record %s: %d hits", name, len(spans))
        if not spans:
            return None
        return RecordResult(name, sequence, spans)


def format_record(
    result: RecordResult, config: SearchConfig, style: Style = PLAIN_STYLE
) -> str:
    """Output text for a reported record, without a trailing newline."""
    if config.output == "json":
        return json.dumps(result.to_dict(config.headers_only))
    header = f">{result.name}"
    if config.headers_only:
        return header
    body = render(result.sequence, result.spans, style, config.line_wrap)
    return f"{header}\n{body}"


def run(
    records: Iterable[Tuple[str, Union[str, bytes]]],
    config: SearchConfig,
    out: Optional[IO[str]] = None,
    style: Style = PLAIN_STYLE,
) -> int:
    """Search every record in order and write the ones that matched.

    The configuration is validated before the first record is pulled.
    Returns the number of records reported.
    """
    searcher = PatternSearcher(config)
    out = out or sys.stdout
    scanned = reported = 0
    for name, raw_sequence in records:
        scanned += 1
        result = searcher.search(name, raw_sequence)
        if result is None:
            continue
        reported += 1
        out.write(format_record(result, config, style) + "\n")
    logger.info("%d of %d records matched", reported, scanned)
    return reported
