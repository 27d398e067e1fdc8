"""Strand-specific search targets derived from the configured pattern."""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from enum import Enum
from typing import List

from nucgrep.complement import reverse_complement
from nucgrep.config import SearchConfig

logger = logging.getLogger(__name__)

# ASCII-only so that folding never changes the length of a sequence.
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def fold_case(text: str) -> str:
    """Uppercase ASCII letters only, leaving every other symbol in place."""
    return text.translate(_ASCII_UPPER)


class Strand(Enum):
    FORWARD = "+"
    REVERSE_COMPLEMENT = "-"


@dataclass(frozen=True)
class SearchTarget:
    """One pattern to look for, as it should appear in the sequence."""

    pattern: str
    strand: Strand
    ignore_case: bool = False

    @property
    def needle(self) -> str:
        """The pattern in the form matchers compare against."""
        return fold_case(self.pattern) if self.ignore_case else self.pattern

    def prepare(self, sequence: str) -> str:
        """The sequence in the form matchers compare against."""
        return fold_case(sequence) if self.ignore_case else sequence


def expand_patterns(config: SearchConfig) -> List[SearchTarget]:
    """Ordered search targets: forward first, then reverse complement.

    Raises the translation errors of reverse_complement when the pattern
    cannot be complemented.
    """
    targets: List[SearchTarget] = []
    if config.searches_forward:
        targets.append(SearchTarget(config.pattern, Strand.FORWARD, config.ignore_case))
    if config.searches_reverse_complement:
        rc = reverse_complement(config.pattern, config.molecule_type)
        targets.append(SearchTarget(rc, Strand.REVERSE_COMPLEMENT, config.ignore_case))

    for target in targets:
        logger.debug("search target %s strand %s", target.pattern, target.strand.value)
    return targets
