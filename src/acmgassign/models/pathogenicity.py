"""Computational pathogenicity scores and curated clinical records."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from acmgassign.models.annotation import VariantEffect


class PathogenicitySource(str, Enum):
    POLYPHEN = "POLYPHEN"
    MUTATION_TASTER = "MUTATION_TASTER"
    SIFT = "SIFT"
    CADD = "CADD"
    REMM = "REMM"
    REVEL = "REVEL"
    MVP = "MVP"
    ALPHA_MISSENSE = "ALPHA_MISSENSE"
    PRIMATE_AI = "PRIMATE_AI"
    M_CAP = "M_CAP"
    MPC = "MPC"
    SPLICE_AI = "SPLICE_AI"
    TEST = "TEST"


class PathogenicityScore(BaseModel):
    """A single predictor output.

    ``score`` is normalised to [0, 1] with 1 most damaging. ``raw_score`` is
    the predictor's native value (SIFT raw is inverted, CADD raw is phred).
    """

    source: PathogenicitySource
    score: float = Field(..., description="Normalised score, 1.0 is most pathogenic")
    raw_score: float | None = Field(None, description="Predictor native value")

    @model_validator(mode="after")
    def _default_raw_score(self) -> "PathogenicityScore":
        if self.raw_score is None:
            self.raw_score = self.score
        return self


class ClinSig(str, Enum):
    """ClinVar clinical significance values."""

    BENIGN = "BENIGN"
    BENIGN_OR_LIKELY_BENIGN = "BENIGN_OR_LIKELY_BENIGN"
    LIKELY_BENIGN = "LIKELY_BENIGN"
    UNCERTAIN_SIGNIFICANCE = "UNCERTAIN_SIGNIFICANCE"
    LIKELY_PATHOGENIC = "LIKELY_PATHOGENIC"
    PATHOGENIC_OR_LIKELY_PATHOGENIC = "PATHOGENIC_OR_LIKELY_PATHOGENIC"
    PATHOGENIC = "PATHOGENIC"
    CONFLICTING_PATHOGENICITY_INTERPRETATIONS = "CONFLICTING_PATHOGENICITY_INTERPRETATIONS"
    AFFECTS = "AFFECTS"
    ASSOCIATION = "ASSOCIATION"
    DRUG_RESPONSE = "DRUG_RESPONSE"
    OTHER = "OTHER"
    PROTECTIVE = "PROTECTIVE"
    RISK_FACTOR = "RISK_FACTOR"
    NOT_PROVIDED = "NOT_PROVIDED"

    def is_path_or_likely_path(self) -> bool:
        return self in (ClinSig.PATHOGENIC, ClinSig.LIKELY_PATHOGENIC, ClinSig.PATHOGENIC_OR_LIKELY_PATHOGENIC)

    def is_path(self) -> bool:
        return self in (ClinSig.PATHOGENIC, ClinSig.PATHOGENIC_OR_LIKELY_PATHOGENIC)

    def is_likely_path(self) -> bool:
        return self is ClinSig.LIKELY_PATHOGENIC

    def is_benign_or_likely_benign(self) -> bool:
        return self in (ClinSig.BENIGN, ClinSig.LIKELY_BENIGN, ClinSig.BENIGN_OR_LIKELY_BENIGN)


class ReviewStatus(str, Enum):
    """ClinVar review status, which determines the star rating."""

    NO_ASSERTION_PROVIDED = "no_assertion_provided"
    NO_ASSERTION_CRITERIA_PROVIDED = "no_assertion_criteria_provided"
    NO_INTERPRETATION_FOR_THE_SINGLE_VARIANT = "no_interpretation_for_the_single_variant"
    CRITERIA_PROVIDED_SINGLE_SUBMITTER = "criteria_provided,_single_submitter"
    CRITERIA_PROVIDED_CONFLICTING_INTERPRETATIONS = "criteria_provided,_conflicting_interpretations"
    CRITERIA_PROVIDED_MULTIPLE_SUBMITTERS_NO_CONFLICTS = "criteria_provided,_multiple_submitters,_no_conflicts"
    REVIEWED_BY_EXPERT_PANEL = "reviewed_by_expert_panel"
    PRACTICE_GUIDELINE = "practice_guideline"

    def star_rating(self) -> int:
        return _STAR_RATINGS.get(self, 0)


# https://www.ncbi.nlm.nih.gov/clinvar/docs/review_status/
_STAR_RATINGS = {
    ReviewStatus.CRITERIA_PROVIDED_SINGLE_SUBMITTER: 1,
    ReviewStatus.CRITERIA_PROVIDED_CONFLICTING_INTERPRETATIONS: 1,
    ReviewStatus.CRITERIA_PROVIDED_MULTIPLE_SUBMITTERS_NO_CONFLICTS: 2,
    ReviewStatus.REVIEWED_BY_EXPERT_PANEL: 3,
    ReviewStatus.PRACTICE_GUIDELINE: 4,
}


class ClinVarRecord(BaseModel):
    """A curated ClinVar interpretation of a specific variant."""

    variation_id: str = Field("", description="ClinVar variation id")
    contig: str = Field("", description="Chromosome without 'chr' prefix")
    start: int = Field(0, ge=0, description="1-based start position")
    end: int | None = Field(None, description="1-based inclusive end position")
    ref: str = ""
    alt: str = ""
    gene_symbol: str = ""
    primary_interpretation: ClinSig = ClinSig.NOT_PROVIDED
    review_status: ReviewStatus = ReviewStatus.NO_ASSERTION_PROVIDED
    variant_effect: VariantEffect = VariantEffect.SEQUENCE_VARIANT
    hgvs_cdna: str = ""
    hgvs_protein: str = ""

    @model_validator(mode="after")
    def _normalise_coordinates(self) -> "ClinVarRecord":
        self.contig = self.contig.removeprefix("chr")
        if self.end is None:
            self.end = self.start + max(len(self.ref), 1) - 1
        return self

    def star_rating(self) -> int:
        return self.review_status.star_rating()

    def distance_to(self, start: int, end: int) -> int:
        """Number of bases separating this record from an interval, 0 if overlapping."""
        if self.end < start:
            return start - self.end
        if end < self.start:
            return self.start - end
        return 0

    def contains(self, start: int, end: int) -> bool:
        return self.start <= start and end <= self.end

    def is_same_allele(self, contig: str, start: int, ref: str, alt: str) -> bool:
        return (self.contig, self.start, self.ref, self.alt) == (contig, start, ref, alt)


class PathogenicityData(BaseModel):
    """Predictor scores plus the ClinVar record for the variant itself, if any."""

    scores: list[PathogenicityScore] = Field(default_factory=list)
    clinvar: ClinVarRecord | None = None

    @classmethod
    def of(cls, *scores: PathogenicityScore, clinvar: ClinVarRecord | None = None) -> "PathogenicityData":
        return cls(scores=list(scores), clinvar=clinvar)

    def score_for(self, source: PathogenicitySource) -> PathogenicityScore | None:
        for score in self.scores:
            if score.source is source:
                return score
        return None

    def has_clinvar(self) -> bool:
        return self.clinvar is not None
