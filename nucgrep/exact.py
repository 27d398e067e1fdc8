"""Exact (literal) matching of strand patterns against a sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from nucgrep.patterns import SearchTarget, Strand, fold_case


@dataclass(frozen=True)
class MatchSpan:
    """Half-open ``[start, end)`` hit on a sequence."""

    start: int
    end: int
    strand: Strand
    exact: bool
    distance: int = 0
    # absolute offsets of mismatched or gap-opposed symbols inside the span
    mismatches: Tuple[int, ...] = ()

    def __post_init__(self):
        if not 0 <= self.start < self.end:
            raise ValueError(f"invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start


def is_exact(found: str, pattern: str) -> bool:
    """True when *found* is the configured forward pattern, ignoring case."""
    return fold_case(found) == fold_case(pattern)


def find_target(sequence: str, target: SearchTarget, pattern: str) -> List[MatchSpan]:
    """Leftmost-first, non-overlapping occurrences of one target."""
    haystack = target.prepare(sequence)
    needle = target.needle
    spans = []
    pos = haystack.find(needle)
    while pos != -1:
        end = pos + len(needle)
        spans.append(MatchSpan(pos, end, target.strand, is_exact(sequence[pos:end], pattern)))
        pos = haystack.find(needle, end)
    return spans


def find_matches(
    sequence: str, targets: Iterable[SearchTarget], pattern: str
) -> List[MatchSpan]:
    """All literal occurrences of every target, sorted by position.

    Hits of different targets may overlap and are all kept; *pattern* is the
    configured forward pattern used to classify hits as exact or variant.
    """
    spans: List[MatchSpan] = []
    for target in targets:
        spans.extend(find_target(sequence, target, pattern))
    spans.sort(key=lambda s: (s.start, s.end))
    return spans
