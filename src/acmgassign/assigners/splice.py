"""Splicing criteria following the ClinGen SVI Splicing Subgroup recommendations.

"Using the ACMG/AMP framework to capture evidence related to predicted and
observed impact on splicing" (Walker et al. 2023, doi:10.1016/j.ajhg.2023.06.002)

Canonical ±1,2 donor/acceptor variants get their PVS1 call from the PVS1
assigner; here a PS1 modifier is added from nearby pathogenic splice
variants. Other splice-region SNVs are scored with SpliceAI for PP3/BP4,
which then gate PS1 and BP7 respectively.
"""

import logging

from acmgassign.config.assigner_config import AssignerConfig
from acmgassign.data.clinical_records import ClinicalRecordStore, records_surrounding
from acmgassign.models.annotation import VariantEffect
from acmgassign.models.criterion import Criterion, EvidenceStrength
from acmgassign.models.evidence import EvidenceSetBuilder
from acmgassign.models.pathogenicity import PathogenicitySource
from acmgassign.models.variant import Variant
from acmgassign.utils.hgvs import parse_intronic_offset

logger = logging.getLogger(__name__)


def assign_splice_evidence(
    builder: EvidenceSetBuilder,
    variant: Variant,
    clinical_records: ClinicalRecordStore,
    config: AssignerConfig,
) -> None:
    effect = variant.variant_effect
    if effect.is_canonical_splice():
        assign_donor_acceptor_ps1(builder, variant, clinical_records, config)
    elif effect.is_splice_region() and variant.is_snv():
        # The SpliceAI source only holds scores > 0.1, so an unscored SNV has no predicted impact
        splice_ai = variant.pathogenicity_data.score_for(PathogenicitySource.SPLICE_AI)
        score = splice_ai.score if splice_ai is not None else 0.0
        assign_splice_ai_pp3_bp4(builder, score, config)
        if builder.contains(Criterion.PP3):
            assign_splice_region_ps1(builder, variant, clinical_records, config)
        elif builder.contains(Criterion.BP4):
            assign_silent_intronic_bp7(builder, variant, config)
    assign_synonymous_bp7(builder, variant, config)


def assign_splice_ai_pp3_bp4(builder: EvidenceSetBuilder, splice_ai_score: float, config: AssignerConfig) -> None:
    """PP3 at SpliceAI >= 0.2, BP4 below 0.1, nothing in between."""
    if splice_ai_score >= config.splice_ai.pp3_min:
        builder.add(Criterion.PP3)
    elif splice_ai_score < config.splice_ai.bp4_max:
        builder.add(Criterion.BP4)


def assign_donor_acceptor_ps1(
    builder: EvidenceSetBuilder,
    variant: Variant,
    clinical_records: ClinicalRecordStore,
    config: AssignerConfig,
) -> None:
    """PS1 for a canonical splice variant, capped by the PVS1 strength already assigned.

    Table 2 of Walker et al.: with PVS1 at Very Strong only a Supporting PS1
    may be added; lower PVS1 strengths allow PS1 up to Strong.
    """
    pvs1 = builder.strength_of(Criterion.PVS1)
    if pvs1 is None:
        return
    local_records = records_surrounding(
        clinical_records, variant.assembly, variant.contig, variant.start, config.clinvar.window
    )
    ps1_strengths = []
    for record in local_records:
        record_effect = record.variant_effect
        clinsig = record.primary_interpretation
        if not (record_effect.is_splice() and clinsig.is_path_or_likely_path()):
            continue
        if pvs1 is EvidenceStrength.VERY_STRONG:
            if (record_effect.is_canonical_splice() and clinsig.is_path()) or (
                record_effect.is_splice_region() and clinsig.is_likely_path()
            ):
                ps1_strengths.append(EvidenceStrength.SUPPORTING)
        elif record_effect.is_canonical_splice() and clinsig.is_path():
            ps1_strengths.append(EvidenceStrength.STRONG)
        elif record_effect.is_splice_region() and clinsig.is_path():
            ps1_strengths.append(EvidenceStrength.MODERATE)
        elif record_effect.is_splice_region() and clinsig.is_likely_path():
            ps1_strengths.append(EvidenceStrength.SUPPORTING)
    _add_strongest_ps1(builder, ps1_strengths)


def assign_splice_region_ps1(
    builder: EvidenceSetBuilder,
    variant: Variant,
    clinical_records: ClinicalRecordStore,
    config: AssignerConfig,
) -> None:
    """PS1 for a non-canonical splice-region variant from matching P/LP splice-region records.

    Same position: P -> Strong, LP -> Moderate.
    Same region:   P -> Moderate, LP -> Supporting.
    """
    local_records = records_surrounding(
        clinical_records, variant.assembly, variant.contig, variant.start, config.clinvar.window
    )
    ps1_strengths = []
    for record in local_records:
        clinsig = record.primary_interpretation
        if not (record.variant_effect.is_splice_region() and clinsig.is_path_or_likely_path()):
            continue
        same_position = record.contains(variant.start, variant.end)
        if clinsig.is_path():
            ps1_strengths.append(EvidenceStrength.STRONG if same_position else EvidenceStrength.MODERATE)
        elif clinsig.is_likely_path():
            ps1_strengths.append(EvidenceStrength.MODERATE if same_position else EvidenceStrength.SUPPORTING)
    _add_strongest_ps1(builder, ps1_strengths)


def _add_strongest_ps1(builder: EvidenceSetBuilder, strengths: list[EvidenceStrength]) -> None:
    strongest = EvidenceStrength.strongest(strengths)
    if strongest is not None:
        builder.add(Criterion.PS1, strongest)
        logger.debug(f"Splice PS1_{strongest.display_string()}")


def assign_silent_intronic_bp7(builder: EvidenceSetBuilder, variant: Variant, config: AssignerConfig) -> None:
    """BP7 for intronic variants beyond the donor/acceptor splice region.

    Beyond +6/-20 from the exon boundary, or +7/-21 for synonymous variants.
    The position comes from the HGVS coding expression as exon coordinates
    are not available here.
    """
    annotation = variant.transcript_annotation()
    if annotation is None:
        return
    offset = parse_intronic_offset(annotation.hgvs_cdna)
    if offset is None:
        return
    synonymous = VariantEffect.SYNONYMOUS_VARIANT in (variant.variant_effect, annotation.variant_effect)
    bp7 = config.bp7
    donor_end = bp7.synonymous_donor_region_end if synonymous else bp7.donor_region_end
    acceptor_start = bp7.synonymous_acceptor_region_start if synonymous else bp7.acceptor_region_start
    if (offset.is_donor_side() and offset.offset > donor_end) or (
        offset.is_acceptor_side() and offset.offset > acceptor_start
    ):
        builder.add(Criterion.BP7)


def assign_synonymous_bp7(builder: EvidenceSetBuilder, variant: Variant, config: AssignerConfig) -> None:
    """BP7 "A synonymous (silent) variant for which splicing prediction algorithms predict no impact"."""
    if variant.variant_effect is not VariantEffect.SYNONYMOUS_VARIANT:
        return
    clinvar = variant.pathogenicity_data.clinvar
    reported_path = (
        clinvar is not None
        and clinvar.star_rating() >= 1
        and clinvar.primary_interpretation.is_path_or_likely_path()
    )
    if reported_path:
        return
    splice_ai = variant.pathogenicity_data.score_for(PathogenicitySource.SPLICE_AI)
    if splice_ai is None or splice_ai.score < config.splice_ai.bp4_max:
        builder.add(Criterion.BP7)
