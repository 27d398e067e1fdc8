"""Merging of match spans and highlighted rendering of a sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from nucgrep.exact import MatchSpan

EXACT = "exact"
VARIANT = "variant"
MISMATCH = "mismatch"

# (text, class); class is None for unmatched text
Segment = Tuple[str, Optional[str]]


@dataclass(frozen=True)
class Region:
    """A merged, non-overlapping highlighted range."""

    start: int
    end: int
    exact: bool
    mismatches: Tuple[int, ...] = ()

    @property
    def kind(self) -> str:
        return EXACT if self.exact else VARIANT


@dataclass(frozen=True)
class Style:
    """Opening and closing markup per highlight class."""

    exact: Tuple[str, str]
    variant: Tuple[str, str]
    mismatch: Tuple[str, str]

    def apply(self, text: str, kind: Optional[str]) -> str:
        if kind is None or not text:
            return text
        opening, closing = getattr(self, kind)
        return f"{opening}{text}{closing}"

    def markers(self) -> List[str]:
        return [m for pair in (self.exact, self.variant, self.mismatch) for m in pair]


_RESET = "\033[0m"
ANSI_STYLE = Style(
    exact=("\033[1;32m", _RESET),
    variant=("\033[1;35m", _RESET),
    mismatch=("\033[1;31m", _RESET),
)
PLAIN_STYLE = Style(exact=("[", "]"), variant=("{", "}"), mismatch=("<", ">"))


def merge_spans(spans: Iterable[MatchSpan]) -> List[Region]:
    """Union overlapping or adjacent spans into sorted regions.

    A region is exact if any span in it is exact. Mismatch offsets are kept
    unless an exact span covers them.
    """
    ordered = sorted(spans, key=lambda s: (s.start, s.end))
    if not ordered:
        return []

    groups: List[List[MatchSpan]] = [[ordered[0]]]
    end = ordered[0].end
    for span in ordered[1:]:
        if span.start <= end:
            groups[-1].append(span)
            end = max(end, span.end)
        else:
            groups.append([span])
            end = span.end

    regions = []
    for group in groups:
        exact_spans = [s for s in group if s.exact]
        mismatches = sorted(
            {
                pos
                for s in group
                for pos in s.mismatches
                if not any(e.start <= pos < e.end for e in exact_spans)
            }
        )
        regions.append(
            Region(
                start=group[0].start,
                end=max(s.end for s in group),
                exact=bool(exact_spans),
                mismatches=tuple(mismatches),
            )
        )
    return regions


def segments(sequence: str, spans: Iterable[MatchSpan]) -> List[Segment]:
    """Split *sequence* into unmatched and highlighted pieces, in order.

    Joining the texts always gives back *sequence*.
    """
    result: List[Segment] = []
    offset = 0
    for region in merge_spans(spans):
        if offset < region.start:
            result.append((sequence[offset:region.start], None))
        mismatched = set(region.mismatches)
        run_start = region.start
        for pos in range(region.start, region.end + 1):
            if pos == region.end or (pos in mismatched) != (run_start in mismatched):
                kind = MISMATCH if run_start in mismatched else region.kind
                result.append((sequence[run_start:pos], kind))
                run_start = pos
        offset = region.end
    if offset < len(sequence):
        result.append((sequence[offset:], None))
    return result


def render_lines(
    pieces: Iterable[Segment], style: Style, width: Optional[int] = None
) -> List[str]:
    """Apply *style* to *pieces*, wrapping every *width* visible symbols.

    Markup is closed at the end of every line and reopened on the next.
    """
    lines: List[List[Segment]] = [[]]
    used = 0
    for text, kind in pieces:
        while text:
            if width is not None and used == width:
                lines.append([])
                used = 0
            room = len(text) if width is None else width - used
            lines[-1].append((text[:room], kind))
            used += len(text[:room])
            text = text[room:]
    return ["".join(style.apply(text, kind) for text, kind in line) for line in lines]


def render(
    sequence: str,
    spans: Iterable[MatchSpan],
    style: Style = PLAIN_STYLE,
    width: Optional[int] = None,
) -> Optional[str]:
    """Highlighted *sequence*, or None when there are no spans."""
    spans = list(spans)
    if not spans:
        return None
    return "\n".join(render_lines(segments(sequence, spans), style, width))
