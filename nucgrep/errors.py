"""Exception hierarchy for nucgrep."""

from __future__ import annotations

from typing import Iterable, Optional


class NucgrepError(Exception):
    """Base class for every error nucgrep raises on purpose."""


class NucleotideComplementError(NucgrepError, ValueError):
    """A string could not be reverse-complemented."""


class InvalidNucleotideSymbol(NucleotideComplementError):
    """A symbol has no entry in the complement table."""

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"invalid nucleotide {symbol!r} at position {position}")


class AmbiguousMoleculeType(NucleotideComplementError):
    """Both T and U occur and no molecule type was given."""

    def __init__(self, sequence: str):
        self.sequence = sequence
        super().__init__(
            f"cannot tell DNA from RNA in {sequence!r}: it contains both T and U"
        )


class InvalidConfiguration(NucgrepError, ValueError):
    """The search configuration failed validation.

    Carries every problem found, not just the first one.
    """

    def __init__(self, errors: Iterable[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class MalformedRecord(NucgrepError):
    """The record source could not parse its input."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(f"FASTA parse error: {message}")
