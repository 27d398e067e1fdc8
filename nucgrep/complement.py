"""Reverse complement of nucleotide strings (IUPAC, case preserving)."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from nucgrep.errors import AmbiguousMoleculeType, InvalidNucleotideSymbol


class MoleculeType(Enum):
    DNA = "dna"
    RNA = "rna"


# Symbols shared by DNA and RNA. Ambiguity codes pair with the code for the
# complementary set: M (A/C) <-> K (G/T), R (A/G) <-> Y (C/T), B <-> V, D <-> H.
_SHARED = {
    "G": "C", "C": "G",
    "M": "K", "K": "M",
    "R": "Y", "Y": "R",
    "B": "V", "V": "B",
    "D": "H", "H": "D",
    "W": "W", "S": "S",
    "N": "N",
}


def _with_lowercase(table: dict) -> dict:
    full = dict(table)
    full.update({k.lower(): v.lower() for k, v in table.items()})
    full["-"] = "-"
    return full


COMPLEMENT_DNA = _with_lowercase({**_SHARED, "A": "T", "T": "A", "U": "A"})
COMPLEMENT_RNA = _with_lowercase({**_SHARED, "A": "U", "T": "A", "U": "A"})


def detect_molecule_type(sequence: str) -> MoleculeType:
    """Guess the molecule type from the presence of T or U.

    No U means DNA, U without T means RNA. Both raise AmbiguousMoleculeType.
    """
    has_u = "U" in sequence or "u" in sequence
    if not has_u:
        return MoleculeType.DNA
    if "T" in sequence or "t" in sequence:
        raise AmbiguousMoleculeType(sequence)
    return MoleculeType.RNA


def reverse_complement(
    sequence: str, molecule_type: Optional[MoleculeType] = None
) -> str:
    """Return the reverse complement of *sequence*.

    The case of every symbol is kept. When *molecule_type* is None it is
    detected from the sequence itself.

    >>> reverse_complement("atgcn", MoleculeType.DNA)
    'ngcat'
    """
    if molecule_type is None:
        molecule_type = detect_molecule_type(sequence)
    table = COMPLEMENT_RNA if molecule_type is MoleculeType.RNA else COMPLEMENT_DNA

    complement = []
    for pos, base in enumerate(sequence):
        try:
            complement.append(table[base])
        except KeyError:
            raise InvalidNucleotideSymbol(base, pos) from None
    complement.reverse()
    return "".join(complement)
