"""Parsers for the HGVS expressions the assigners need.

Only two shapes are understood: a single amino-acid substitution such as
``p.(Lys567Thr)`` and an intronic coding substitution such as
``c.1234+8A>G``. Anything else yields ``None`` so callers can skip the rule
that needed it.
"""

import re
from dataclasses import dataclass

AA_1_TO_3 = {
    'A': 'Ala', 'C': 'Cys', 'D': 'Asp', 'E': 'Glu', 'F': 'Phe',
    'G': 'Gly', 'H': 'His', 'I': 'Ile', 'K': 'Lys', 'L': 'Leu',
    'M': 'Met', 'N': 'Asn', 'P': 'Pro', 'Q': 'Gln', 'R': 'Arg',
    'S': 'Ser', 'T': 'Thr', 'V': 'Val', 'W': 'Trp', 'Y': 'Tyr',
    '*': 'Ter', 'X': 'Xaa'
}

AA_3_TO_1 = {v: k for k, v in AA_1_TO_3.items()}

# p.(Lys567Thr), p.Lys567Thr, p.(K567T), p.K567T
_PROTEIN_THREE_LETTER = re.compile(r"p\.\(?(?P<ref>[A-Z][a-z]{2})(?P<pos>\d+)(?P<alt>[A-Z][a-z]{2})\)?")
_PROTEIN_ONE_LETTER = re.compile(r"p\.\(?(?P<ref>[A-Z*])(?P<pos>\d+)(?P<alt>[A-Z*])\)?")

# c.1234+8A>G, c.1235-21T>C
_CDNA_INTRONIC = re.compile(r"c\.\d+(?P<end>[+-])(?P<offset>\d+)[A-Z]+>[A-Z]+")


@dataclass(frozen=True)
class ProteinChange:
    """Amino-acid substitution using three-letter residue codes."""

    position: int
    ref: str
    alt: str

    def same_residue(self, other: "ProteinChange") -> bool:
        return self.position == other.position and self.ref == other.ref

    def __str__(self) -> str:
        return f"p.({self.ref}{self.position}{self.alt})"


@dataclass(frozen=True)
class IntronicOffset:
    """Distance of an intronic coding position from the nearest exon.

    ``end`` is '+' for the donor (3') side and '-' for the acceptor (5') side.
    """

    end: str
    offset: int

    def is_donor_side(self) -> bool:
        return self.end == "+"

    def is_acceptor_side(self) -> bool:
        return self.end == "-"


def parse_protein_change(hgvs_protein: str | None) -> ProteinChange | None:
    """Parse a missense protein change, one- or three-letter codes.

    Returns:
        ProteinChange with three-letter residues, or None if unparseable.
    """
    if not hgvs_protein:
        return None
    text = hgvs_protein.strip()
    # Drop any transcript/protein accession prefix, e.g. NP_000305.3:p.(Arg130Ter)
    if ":" in text:
        text = text.split(":", 1)[1]

    match = _PROTEIN_THREE_LETTER.fullmatch(text)
    if match:
        ref, alt = match.group("ref"), match.group("alt")
        if ref not in AA_3_TO_1 or alt not in AA_3_TO_1:
            return None
        return ProteinChange(int(match.group("pos")), ref, alt)

    match = _PROTEIN_ONE_LETTER.fullmatch(text)
    if match:
        ref = AA_1_TO_3.get(match.group("ref"))
        alt = AA_1_TO_3.get(match.group("alt"))
        if ref is None or alt is None:
            return None
        return ProteinChange(int(match.group("pos")), ref, alt)

    return None


def parse_intronic_offset(hgvs_cdna: str | None) -> IntronicOffset | None:
    """Parse an intronic coding substitution such as ``c.1234+8A>G``."""
    if not hgvs_cdna:
        return None
    text = hgvs_cdna.strip()
    if ":" in text:
        text = text.split(":", 1)[1]
    match = _CDNA_INTRONIC.fullmatch(text)
    if not match:
        return None
    return IntronicOffset(match.group("end"), int(match.group("offset")))
