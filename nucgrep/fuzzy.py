"""Approximate matching within an edit-distance budget.

Two strategies:

``window``
    Slide a window of ``len(pattern)`` symbols over the sequence and keep
    every window whose Levenshtein distance to the pattern is within budget.
    Hit windows may overlap, and a single true alignment can show up as
    several neighbouring windows. This superset is expected; the
    highlighter merges them.

``align``
    Literal hits plus, per strand, the best semi-global alignment of the
    pattern, accepted when enough columns match.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from Levenshtein import distance as levenshtein_distance

from nucgrep.align import PatternAligner
from nucgrep.exact import MatchSpan, find_matches, is_exact
from nucgrep.patterns import SearchTarget


def window_matches(
    sequence: str, target: SearchTarget, pattern: str, max_mismatches: int
) -> List[MatchSpan]:
    """Every window of ``len(target.pattern)`` within *max_mismatches* edits."""
    width = len(target.pattern)
    if width == 0:
        raise ValueError("Window width must be positive")
    haystack = target.prepare(sequence)
    needle = target.needle

    spans = []
    for start in range(len(haystack) - width + 1):
        # distances above the budget come back as max_mismatches + 1
        distance = levenshtein_distance(
            haystack[start:start + width], needle, score_cutoff=max_mismatches
        )
        if distance <= max_mismatches:
            end = start + width
            spans.append(
                MatchSpan(
                    start,
                    end,
                    target.strand,
                    is_exact(sequence[start:end], pattern),
                    distance=distance,
                )
            )
    return spans


def alignment_matches(
    sequence: str,
    target: SearchTarget,
    pattern: str,
    max_mismatches: int,
    aligner: Optional[PatternAligner] = None,
) -> List[MatchSpan]:
    """The best alignment of *target* in *sequence*, if it is good enough.

    Accepted when at least ``len(pattern) - max_mismatches`` columns match.
    """
    aligner = aligner or PatternAligner()
    aln = aligner.align(target.prepare(sequence), target.needle)
    if aln.matches < len(target.pattern) - max_mismatches:
        return []
    start, end = aln.sequence_start, aln.sequence_end
    return [
        MatchSpan(
            start,
            end,
            target.strand,
            is_exact(sequence[start:end], pattern),
            distance=aln.edits,
            mismatches=aln.mismatch_positions,
        )
    ]


def find_fuzzy_matches(
    sequence: str,
    targets: Iterable[SearchTarget],
    pattern: str,
    max_mismatches: int,
    strategy: str = "window",
    aligner: Optional[PatternAligner] = None,
) -> List[MatchSpan]:
    """Approximate hits of every target, searched independently per strand."""
    targets = list(targets)
    spans: List[MatchSpan] = []
    if strategy == "window":
        for target in targets:
            spans.extend(window_matches(sequence, target, pattern, max_mismatches))
    elif strategy == "align":
        aligner = aligner or PatternAligner()
        spans.extend(find_matches(sequence, targets, pattern))
        for target in targets:
            spans.extend(
                alignment_matches(sequence, target, pattern, max_mismatches, aligner)
            )
    else:
        raise ValueError(f"Unknown strategy: {strategy}")
    spans.sort(key=lambda s: (s.start, s.end))
    return spans
