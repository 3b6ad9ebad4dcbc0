"""ACMG/AMP criterion catalog.

Criteria and their default strengths are taken from Tables 3 and 4 of
Richards et al. 2015 (doi:10.1038/gim.2015.30). Declaration order is the
catalog order used when iterating an evidence set.
"""

from enum import Enum


class Impact(str, Enum):
    """Direction of a criterion."""

    PATHOGENIC = "Pathogenic"
    BENIGN = "Benign"


class EvidenceStrength(str, Enum):
    """Evidence strength of an assigned criterion."""

    STAND_ALONE = "StandAlone"
    VERY_STRONG = "VeryStrong"
    STRONG = "Strong"
    MODERATE = "Moderate"
    SUPPORTING = "Supporting"

    @classmethod
    def parse_value(cls, text: str) -> "EvidenceStrength":
        """Parse an enum name (VERY_STRONG) or display string (VeryStrong).

        Raises:
            ValueError: If the text matches neither form.
        """
        if text in cls.__members__:
            return cls[text]
        for strength in cls:
            if strength.value == text:
                return strength
        raise ValueError(f"Unrecognised evidence value '{text}'")

    @classmethod
    def strongest(cls, strengths) -> "EvidenceStrength | None":
        """Strongest of the given strengths, None when there are none."""
        members = list(cls)
        return min(strengths, key=members.index, default=None)

    def display_string(self) -> str:
        return self.value


_P = Impact.PATHOGENIC
_B = Impact.BENIGN


class Criterion(Enum):
    """ACMG 2015 criteria with impact, default strength and description."""

    # PATHOGENIC - Table 3
    PVS1 = (_P, EvidenceStrength.VERY_STRONG, "null variant (nonsense, frameshift, canonical ±1 or 2 splice sites, initiation codon, single or multiexon deletion) in a gene where LOF is a known mechanism of disease")
    PS1 = (_P, EvidenceStrength.STRONG, "Same amino acid change as a previously established pathogenic variant regardless of nucleotide change")
    PS2 = (_P, EvidenceStrength.STRONG, "De novo (both maternity and paternity confirmed) in a patient with the disease and no family history")
    PS3 = (_P, EvidenceStrength.STRONG, "Well-established in vitro or in vivo functional studies supportive of a damaging effect on the gene or gene product")
    PS4 = (_P, EvidenceStrength.STRONG, "The prevalence of the variant in affected individuals is significantly increased compared with the prevalence in controls")
    PM1 = (_P, EvidenceStrength.MODERATE, "Located in a mutational hot spot and/or critical and well-established functional domain (e.g., active site of an enzyme) without benign variation")
    PM2 = (_P, EvidenceStrength.MODERATE, "Absent from controls (or at extremely low frequency if recessive) in Exome Sequencing Project, 1000 Genomes Project, or Exome Aggregation Consortium")
    PM3 = (_P, EvidenceStrength.MODERATE, "For recessive disorders, detected in trans with a pathogenic variant")
    PM4 = (_P, EvidenceStrength.MODERATE, "Protein length changes as a result of in-frame deletions/insertions in a nonrepeat region or stop-loss variants")
    PM5 = (_P, EvidenceStrength.MODERATE, "Novel missense change at an amino acid residue where a different missense change determined to be pathogenic has been seen before")
    PM6 = (_P, EvidenceStrength.MODERATE, "Assumed de novo, but without confirmation of paternity and maternity")
    PP1 = (_P, EvidenceStrength.SUPPORTING, "Cosegregation with disease in multiple affected family members in a gene definitively known to cause the disease")
    PP2 = (_P, EvidenceStrength.SUPPORTING, "Missense variant in a gene that has a low rate of benign missense variation and in which missense variants are a common mechanism of disease")
    PP3 = (_P, EvidenceStrength.SUPPORTING, "Multiple lines of computational evidence support a deleterious effect on the gene or gene product (conservation, evolutionary, splicing impact, etc.)")
    PP4 = (_P, EvidenceStrength.SUPPORTING, "Patient's phenotype or family history is highly specific for a disease with a single genetic etiology")
    PP5 = (_P, EvidenceStrength.SUPPORTING, "Reputable source recently reports variant as pathogenic, but the evidence is not available to the laboratory to perform an independent evaluation")

    # BENIGN - Table 4
    BA1 = (_B, EvidenceStrength.STAND_ALONE, "Allele frequency is >5% in Exome Sequencing Project, 1000 Genomes Project, or Exome Aggregation Consortium")
    BS1 = (_B, EvidenceStrength.STRONG, "Allele frequency is greater than expected for disorder")
    BS2 = (_B, EvidenceStrength.STRONG, "Observed in a healthy adult individual for a recessive (homozygous), dominant (heterozygous), or X-linked (hemizygous) disorder, with full penetrance expected at an early age")
    BS3 = (_B, EvidenceStrength.STRONG, "Well-established in vitro or in vivo functional studies show no damaging effect on protein function or splicing")
    BS4 = (_B, EvidenceStrength.STRONG, "Lack of segregation in affected members of a family")
    BP1 = (_B, EvidenceStrength.SUPPORTING, "Missense variant in a gene for which primarily truncating variants are known to cause disease")
    BP2 = (_B, EvidenceStrength.SUPPORTING, "Observed in trans with a pathogenic variant for a fully penetrant dominant gene/disorder or observed in cis with a pathogenic variant in any inheritance pattern")
    BP3 = (_B, EvidenceStrength.SUPPORTING, "In-frame deletions/insertions in a repetitive region without a known function")
    BP4 = (_B, EvidenceStrength.SUPPORTING, "Multiple lines of computational evidence suggest no impact on gene or gene product (conservation, evolutionary, splicing impact, etc.)")
    BP5 = (_B, EvidenceStrength.SUPPORTING, "Variant found in a case with an alternate molecular basis for disease")
    BP6 = (_B, EvidenceStrength.SUPPORTING, "Reputable source recently reports variant as benign, but the evidence is not available to the laboratory to perform an independent evaluation")
    BP7 = (_B, EvidenceStrength.SUPPORTING, "A synonymous (silent) variant for which splicing prediction algorithms predict no impact to the splice consensus sequence nor the creation of a new splice site AND the nucleotide is not highly conserved")

    def __init__(self, impact: Impact, strength: EvidenceStrength, description: str):
        self.impact = impact
        self.default_strength = strength
        self.description = description

    def is_pathogenic(self) -> bool:
        return self.impact is Impact.PATHOGENIC

    def is_benign(self) -> bool:
        return self.impact is Impact.BENIGN

    @property
    def order(self) -> int:
        """Position of this criterion in the catalog."""
        return _CATALOG_ORDER[self]

    def __str__(self) -> str:
        return self.name


_CATALOG_ORDER = {criterion: index for index, criterion in enumerate(Criterion)}
