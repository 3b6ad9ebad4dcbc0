"""Classification and assignment output models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from acmgassign.models.disease import Disease, ModeOfInheritance
from acmgassign.models.evidence import EvidenceSet
from acmgassign.models.variant import Variant


class Classification(str, Enum):
    """ACMG/AMP five-tier variant classification.

    NOT_AVAILABLE marks variants that were never classified.
    """

    PATHOGENIC = "PATHOGENIC"
    LIKELY_PATHOGENIC = "LIKELY_PATHOGENIC"
    UNCERTAIN_SIGNIFICANCE = "UNCERTAIN_SIGNIFICANCE"
    LIKELY_BENIGN = "LIKELY_BENIGN"
    BENIGN = "BENIGN"
    NOT_AVAILABLE = "NOT_AVAILABLE"


@dataclass(frozen=True)
class Assignment:
    """Evidence and classification of one variant under one mode of inheritance."""

    variant: Variant
    gene_id: str
    gene_symbol: str
    mode_of_inheritance: ModeOfInheritance
    disease: Disease | None = None
    evidence: EvidenceSet = field(default_factory=EvidenceSet.empty)
    classification: Classification = Classification.NOT_AVAILABLE

    def to_dict(self) -> dict[str, Any]:
        """Flat representation for report writers."""
        return {
            "variant": f"{self.variant.contig}-{self.variant.start}-{self.variant.ref}-{self.variant.alt}",
            "gene_symbol": self.gene_symbol,
            "gene_id": self.gene_id,
            "moi": self.mode_of_inheritance.value,
            "disease_id": self.disease.disease_id if self.disease else "",
            "disease_name": self.disease.disease_name if self.disease else "",
            "acmg_classification": self.classification.value,
            "acmg_evidence": str(self.evidence),
            "acmg_points": self.evidence.points(),
            "post_prob_path": round(self.evidence.post_prob_path(), 3),
        }
