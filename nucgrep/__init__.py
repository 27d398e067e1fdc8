"""
nucgrep: find nucleotide patterns in FASTA records.

Looks for a pattern, its reverse complement, or both, either literally or
within an edit-distance budget, and prints the matching records with the
hits highlighted.
"""

__version__ = "0.1.0"

from nucgrep.complement import MoleculeType, reverse_complement
from nucgrep.config import SearchConfig
from nucgrep.errors import (
    AmbiguousMoleculeType,
    InvalidConfiguration,
    InvalidNucleotideSymbol,
    MalformedRecord,
    NucgrepError,
)
from nucgrep.exact import MatchSpan, find_matches
from nucgrep.fuzzy import find_fuzzy_matches
from nucgrep.highlight import merge_spans, render
from nucgrep.io import read_fasta
from nucgrep.patterns import Strand, expand_patterns
from nucgrep.search import PatternSearcher, run

__all__ = [
    "MoleculeType",
    "reverse_complement",
    "SearchConfig",
    "AmbiguousMoleculeType",
    "InvalidConfiguration",
    "InvalidNucleotideSymbol",
    "MalformedRecord",
    "NucgrepError",
    "MatchSpan",
    "find_matches",
    "find_fuzzy_matches",
    "merge_spans",
    "render",
    "read_fasta",
    "Strand",
    "expand_patterns",
    "PatternSearcher",
    "run",
]
