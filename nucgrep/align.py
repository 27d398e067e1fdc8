"""Semi-global affine-gap alignment of a pattern against a sequence.

The pattern must align end to end; the sequence may overhang on both sides
for free (global in the pattern, local in the sequence).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from nucgrep.scoring import ScoringModel

# Stands in for minus infinity in the integer DP matrices.
_NEG = -(1 << 40)

# (sequence position, pattern position, op); op is M, X, D (sequence symbol
# against a pattern gap) or I (pattern symbol against a sequence gap).
AlignedPair = Tuple[Optional[int], Optional[int], str]


@dataclass
class Alignment:
    """Stores the result of a pattern alignment."""

    sequence_start: int = 0
    sequence_end: int = 0
    aligned_pairs: List[AlignedPair] = field(default_factory=list)

    @property
    def matches(self) -> int:
        return sum(1 for _, _, op in self.aligned_pairs if op == "M")

    @property
    def edits(self) -> int:
        """Number of columns that are not matches."""
        return len(self.aligned_pairs) - self.matches

    @property
    def mismatch_positions(self) -> Tuple[int, ...]:
        """Sequence offsets aligned to a different symbol or to a gap."""
        return tuple(
            i for i, _, op in self.aligned_pairs if i is not None and op in ("X", "D")
        )


class PatternAligner:
    """Aligns one pattern at a time against a full sequence."""

    def __init__(self, scoring_model: Optional[ScoringModel] = None):
        self.scoring_model = scoring_model or ScoringModel()

    def align(self, sequence: str, pattern: str) -> Alignment:
        """Best semi-global alignment of *pattern* within *sequence*.

        Both strings are compared as given; fold case beforehand for
        case-insensitive alignment.
        """
        n = len(sequence)
        m = len(pattern)
        if n == 0 or m == 0:
            return Alignment()

        sm = self.scoring_model
        go, ge = sm.gap_open, sm.gap_extend

        # H = best score ending in any state, E = gap in pattern (sequence
        # symbol consumed), F = gap in sequence (pattern symbol consumed)
        H = np.full((n + 1, m + 1), _NEG, dtype=np.int64)
        E = np.full((n + 1, m + 1), _NEG, dtype=np.int64)
        F = np.full((n + 1, m + 1), _NEG, dtype=np.int64)

        # Leading sequence symbols are free.
        H[:, 0] = 0
        for j in range(1, m + 1):
            F[0, j] = sm.gap_score(j)
            H[0, j] = F[0, j]

        for i in range(1, n + 1):
            a = sequence[i - 1]
            for j in range(1, m + 1):
                E[i, j] = max(H[i - 1, j] + go, E[i - 1, j] + ge)
                F[i, j] = max(H[i, j - 1] + go, F[i, j - 1] + ge)
                diag = H[i - 1, j - 1] + sm.compute_base_score(a, pattern[j - 1])
                H[i, j] = max(diag, E[i, j], F[i, j])

        # Trailing sequence symbols are free: best end anywhere in the last column.
        end = int(np.argmax(H[:, m]))
        pairs = self._traceback(sequence, pattern, H, E, F, end)

        positions = [i for i, _, _ in pairs if i is not None]
        aln = Alignment(aligned_pairs=pairs)
        if positions:
            aln.sequence_start = positions[0]
            aln.sequence_end = positions[-1] + 1
        return aln

    def _traceback(
        self,
        sequence: str,
        pattern: str,
        H: np.ndarray,
        E: np.ndarray,
        F: np.ndarray,
        end: int,
    ) -> List[AlignedPair]:
        sm = self.scoring_model
        pairs: List[AlignedPair] = []
        i, j = end, len(pattern)
        state = "H"

        while j > 0:
            if state == "H":
                if i > 0:
                    sub = sm.compute_base_score(sequence[i - 1], pattern[j - 1])
                    if H[i, j] == H[i - 1, j - 1] + sub:
                        op = "M" if sequence[i - 1] == pattern[j - 1] else "X"
                        pairs.append((i - 1, j - 1, op))
                        i -= 1
                        j -= 1
                        continue
                state = "E" if H[i, j] == E[i, j] else "F"
            elif state == "E":
                pairs.append((i - 1, None, "D"))
                state = "E" if E[i, j] == E[i - 1, j] + sm.gap_extend else "H"
                i -= 1
            else:
                pairs.append((None, j - 1, "I"))
                state = "F" if F[i, j] == F[i, j - 1] + sm.gap_extend else "H"
                j -= 1

        pairs.reverse()
        return pairs
