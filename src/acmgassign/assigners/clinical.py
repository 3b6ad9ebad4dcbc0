"""Protein length, phenotype and reputable-source criteria: PM4, PP4, PP5 and BP6."""

import logging

from acmgassign.config.assigner_config import AssignerConfig
from acmgassign.models.annotation import VariantEffect
from acmgassign.models.criterion import Criterion, EvidenceStrength
from acmgassign.models.disease import PhenotypeMatch
from acmgassign.models.evidence import EvidenceSetBuilder
from acmgassign.models.variant import Variant

logger = logging.getLogger(__name__)


def assign_pm4(builder: EvidenceSetBuilder, variant: Variant) -> None:
    """PM4 "Protein length changes as a result of in-frame deletions/insertions in a nonrepeat region or stop-loss variants".

    Not assigned when PVS1 already counts the same truncation. Repeat
    regions are not annotated, so every in-frame indel is treated as non-repeat.
    """
    if builder.contains(Criterion.PVS1):
        return
    effect = variant.variant_effect
    if effect.is_inframe_indel() or effect is VariantEffect.STOP_LOST:
        builder.add(Criterion.PM4)


def assign_pp4(builder: EvidenceSetBuilder, phenotype_matches: list[PhenotypeMatch], config: AssignerConfig) -> None:
    """PP4 "Patient's phenotype or family history is highly specific for a disease with a single genetic etiology".

    Graded by the best phenotype match score.
    """
    if not phenotype_matches:
        return
    best_score = max(match.score for match in phenotype_matches)
    thresholds = config.phenotype
    if best_score >= thresholds.pp4_moderate:
        builder.add(Criterion.PP4, EvidenceStrength.MODERATE)
    elif best_score >= thresholds.pp4_supporting:
        builder.add(Criterion.PP4, EvidenceStrength.SUPPORTING)


def assign_pp5_bp6(builder: EvidenceSetBuilder, variant: Variant) -> None:
    """PP5/BP6 from the ClinVar interpretation, graded by review status.

    Skipped when PS1 is present, as the same ClinVar record may already have
    been counted there.
    """
    if builder.contains(Criterion.PS1):
        return
    clinvar = variant.pathogenicity_data.clinvar
    if clinvar is None:
        return
    clinsig = clinvar.primary_interpretation
    stars = clinvar.star_rating()
    if clinsig.is_path_or_likely_path():
        assign_pp5(builder, stars)
    elif clinsig.is_benign_or_likely_benign():
        assign_bp6(builder, stars)


def assign_pp5(builder: EvidenceSetBuilder, stars: int) -> None:
    """PP5 "Reputable source recently reports variant as pathogenic"."""
    if stars >= 3:
        builder.add(Criterion.PP5, EvidenceStrength.VERY_STRONG)
    elif stars == 2:
        builder.add(Criterion.PP5, EvidenceStrength.STRONG)
    elif stars == 1:
        builder.add(Criterion.PP5, EvidenceStrength.SUPPORTING)


def assign_bp6(builder: EvidenceSetBuilder, stars: int) -> None:
    """BP6 "Reputable source recently reports variant as benign"."""
    if stars >= 2:
        builder.add(Criterion.BP6, EvidenceStrength.STRONG)
    elif stars == 1:
        builder.add(Criterion.BP6, EvidenceStrength.SUPPORTING)
