"""Scoring scheme for gapped pattern alignment."""

from __future__ import annotations


class ScoringModel:
    """Match/mismatch scores and affine gap penalties.

    Higher score = better alignment. A gap of length k scores
    ``gap_open + (k - 1) * gap_extend``.
    """

    def __init__(
        self,
        match_score: int = 1,
        mismatch_score: int = -1,
        gap_open: int = -5,
        gap_extend: int = -1,
    ):
        if gap_open > 0 or gap_extend > 0:
            raise ValueError("Gap penalties must not be positive")
        self.match_score = match_score
        self.mismatch_score = mismatch_score
        self.gap_open = gap_open
        self.gap_extend = gap_extend

    def compute_base_score(self, base_a: str, base_b: str) -> int:
        """Return the score for aligning *base_a* against *base_b*."""
        return self.match_score if base_a == base_b else self.mismatch_score

    def gap_score(self, length: int) -> int:
        """Score of a single gap of *length* symbols."""
        if length <= 0:
            return 0
        return self.gap_open + (length - 1) * self.gap_extend
