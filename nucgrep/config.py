"""Search configuration and its up-front validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from nucgrep.complement import MoleculeType
from nucgrep.errors import InvalidConfiguration

STRATEGIES = ("window", "align")
COLOR_MODES = ("auto", "always", "never")
OUTPUT_FORMATS = ("fasta", "json")


@dataclass(frozen=True)
class SearchConfig:
    """Options for one nucgrep run. Built once, read-only afterwards."""

    pattern: str
    search_reverse_complement: bool = False
    reverse_complement_only: bool = False
    ignore_case: bool = False
    max_mismatches: int = 0
    headers_only: bool = False
    line_wrap: Optional[int] = None
    strategy: str = "window"
    molecule_type: Optional[MoleculeType] = None
    color: str = "auto"
    output: str = "fasta"

    @property
    def searches_forward(self) -> bool:
        return not self.reverse_complement_only

    @property
    def searches_reverse_complement(self) -> bool:
        return self.search_reverse_complement or self.reverse_complement_only

    @property
    def fuzzy(self) -> bool:
        return self.max_mismatches > 0

    def validate(self) -> List[str]:
        """Return every problem with this configuration (empty if valid)."""
        errors = []
        if not self.pattern:
            errors.append("pattern must not be empty")
        if self.max_mismatches < 0:
            errors.append(
                f"number of allowed mismatches must not be negative, got {self.max_mismatches}"
            )
        elif self.pattern and self.max_mismatches >= len(self.pattern):
            errors.append(
                "number of allowed mismatches is longer than or as long as pattern "
                f"({self.max_mismatches} >= {len(self.pattern)})"
            )
        if self.line_wrap is not None and self.line_wrap <= 0:
            errors.append(f"line wrap width must be positive, got {self.line_wrap}")
        if self.strategy not in STRATEGIES:
            errors.append(
                f"unknown strategy {self.strategy!r} (choose from {', '.join(STRATEGIES)})"
            )
        if self.color not in COLOR_MODES:
            errors.append(
                f"unknown color mode {self.color!r} (choose from {', '.join(COLOR_MODES)})"
            )
        if self.output not in OUTPUT_FORMATS:
            errors.append(
                f"unknown output format {self.output!r} (choose from {', '.join(OUTPUT_FORMATS)})"
            )
        return errors

    def check(self) -> "SearchConfig":
        """Raise InvalidConfiguration listing all problems, else return self."""
        errors = self.validate()
        if errors:
            raise InvalidConfiguration(errors)
        return self

    @classmethod
    def from_args(cls, args) -> "SearchConfig":
        """Build a config from an argparse namespace."""
        molecule = MoleculeType(args.molecule) if args.molecule else None
        return cls(
            pattern=args.pattern,
            search_reverse_complement=args.reverse_complement,
            reverse_complement_only=args.reverse_complement_only,
            ignore_case=args.ignore_case,
            max_mismatches=args.max_mismatches,
            headers_only=args.headers_only,
            line_wrap=args.line_wrap,
            strategy=args.strategy,
            molecule_type=molecule,
            color=args.color,
            output=args.output,
        )
