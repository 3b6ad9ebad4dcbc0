"""Data models for ACMG evidence assignment."""

from acmgassign.models.annotation import GenomeAssembly, RankType, TranscriptAnnotation, VariantEffect
from acmgassign.models.assignment import Assignment, Classification
from acmgassign.models.criterion import Criterion, EvidenceStrength, Impact
from acmgassign.models.disease import Disease, Gene, InheritanceMode, ModeOfInheritance, PhenotypeMatch
from acmgassign.models.evidence import EvidenceSet, EvidenceSetBuilder
from acmgassign.models.frequency import NON_FOUNDER_POPS, Frequency, FrequencyData, FrequencySource
from acmgassign.models.pathogenicity import (
    ClinSig,
    ClinVarRecord,
    PathogenicityData,
    PathogenicityScore,
    PathogenicitySource,
    ReviewStatus,
)
from acmgassign.models.pedigree import AffectedStatus, Individual, Pedigree, ProbandNotFoundError, Sex
from acmgassign.models.variant import SampleGenotype, Variant

__all__ = [
    "Criterion",
    "EvidenceStrength",
    "Impact",
    "EvidenceSet",
    "EvidenceSetBuilder",
    "GenomeAssembly",
    "RankType",
    "TranscriptAnnotation",
    "VariantEffect",
    "NON_FOUNDER_POPS",
    "Frequency",
    "FrequencyData",
    "FrequencySource",
    "ClinSig",
    "ClinVarRecord",
    "PathogenicityData",
    "PathogenicityScore",
    "PathogenicitySource",
    "ReviewStatus",
    "SampleGenotype",
    "Variant",
    "AffectedStatus",
    "Individual",
    "Pedigree",
    "ProbandNotFoundError",
    "Sex",
    "Disease",
    "Gene",
    "InheritanceMode",
    "ModeOfInheritance",
    "PhenotypeMatch",
    "Assignment",
    "Classification",
]
