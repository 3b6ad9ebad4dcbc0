"""Missense and in-frame indel criteria: PS1, PM5, PM1, PP2, BP1, PP3 and BP4."""

import logging

from acmgassign.config.assigner_config import AssignerConfig
from acmgassign.data.clinical_records import ClinicalRecordStore, GeneStatistics, records_surrounding
from acmgassign.models.criterion import Criterion, EvidenceStrength
from acmgassign.models.evidence import EvidenceSetBuilder
from acmgassign.models.pathogenicity import (
    ClinSig,
    ClinVarRecord,
    PathogenicityData,
    PathogenicityScore,
    PathogenicitySource,
)
from acmgassign.models.variant import Variant
from acmgassign.utils.hgvs import parse_protein_change

logger = logging.getLogger(__name__)

SIFT_THRESHOLD = 0.06
MUTATION_TASTER_THRESHOLD = 0.94
POLYPHEN_PROB_DAMAGING_THRESHOLD = 0.956
# CADD phred >= 13 is roughly the 95th percentile of deleteriousness
CADD_THRESHOLD = 13.0
DEFAULT_THRESHOLD = 0.5


def assign_missense_evidence(
    builder: EvidenceSetBuilder,
    variant: Variant,
    clinical_records: ClinicalRecordStore,
    config: AssignerConfig,
) -> None:
    """Run the missense/in-frame family for nuclear missense or in-frame indel variants."""
    if not variant.variant_effect.is_missense_or_inframe_indel() or variant.is_mitochondrial():
        return
    local_records = records_surrounding(
        clinical_records, variant.assembly, variant.contig, variant.start, config.clinvar.window
    )
    # PS1 "Same amino acid change as a previously established pathogenic variant regardless of nucleotide change"
    # PM5 "Novel missense change at an amino acid residue where a different missense change determined to be pathogenic has been seen before"
    assign_ps1_pm5(builder, variant, local_records, config)
    # PM1 "Located in a mutational hot spot and/or critical and well-established functional domain"
    assign_pm1(builder, variant, local_records, config)
    # TODO: BP3 needs repeat-region annotation for in-frame indels
    assign_pp2_bp1(builder, clinical_records.gene_statistics(variant.gene_symbol))
    assign_pp3_bp4(builder, variant.pathogenicity_data, config)


def assign_ps1_pm5(
    builder: EvidenceSetBuilder,
    variant: Variant,
    local_records: list[ClinVarRecord],
    config: AssignerConfig,
) -> None:
    annotation = variant.transcript_annotation()
    query_change = parse_protein_change(annotation.hgvs_protein if annotation else None)
    if query_change is None:
        return

    ps1_strengths = []
    pm5_strengths = []
    for record in local_records:
        if not (record.variant_effect.is_missense_or_inframe_indel()
                and record.primary_interpretation.is_path_or_likely_path()):
            continue
        if record.is_same_allele(variant.contig, variant.start, variant.ref, variant.alt):
            continue
        if record.distance_to(variant.start, variant.end) > config.clinvar.codon_distance:
            continue
        record_change = parse_protein_change(record.hgvs_protein)
        if record_change is None or not record_change.same_residue(query_change):
            continue
        stars = record.star_rating()
        if record_change.alt == query_change.alt:
            if stars >= 2:
                ps1_strengths.append(EvidenceStrength.STRONG)
            elif stars == 1:
                ps1_strengths.append(EvidenceStrength.MODERATE)
            else:
                ps1_strengths.append(EvidenceStrength.SUPPORTING)
            logger.debug(f"{record.hgvs_protein} ({stars} stars) -> PS1 for {query_change}")
        else:
            pm5_strengths.append(EvidenceStrength.MODERATE if stars >= 2 else EvidenceStrength.SUPPORTING)
            logger.debug(f"{record.hgvs_protein} ({stars} stars) -> PM5 for {query_change}")

    ps1 = EvidenceStrength.strongest(ps1_strengths)
    if ps1 is not None:
        builder.add(Criterion.PS1, ps1)
    pm5 = EvidenceStrength.strongest(pm5_strengths)
    if pm5 is not None:
        builder.add(Criterion.PM5, pm5)


def assign_pm1(
    builder: EvidenceSetBuilder,
    variant: Variant,
    local_records: list[ClinVarRecord],
    config: AssignerConfig,
) -> None:
    """PM1 from the density of pathogenic missense variation in the surrounding window.

    Without protein domain data a local cluster of P/LP missense records and
    no benign ones stands in for a hot spot.
    """
    path_count = vus_count = benign_count = 0
    for record in local_records:
        if not record.variant_effect.is_missense_or_inframe_indel():
            continue
        clinsig = record.primary_interpretation
        if clinsig.is_path_or_likely_path():
            path_count += 1
        elif clinsig is ClinSig.UNCERTAIN_SIGNIFICANCE:
            vus_count += 1
        elif clinsig.is_benign_or_likely_benign():
            benign_count += 1

    window = config.clinvar.window
    logger.debug(
        f"PM1 evidence for region {variant.assembly.value} {variant.contig}:{variant.start - window}-{variant.end + window} "
        f"Paths: {path_count} VUSs: {vus_count} Benigns: {benign_count}"
    )
    if path_count >= config.clinvar.pm1_min_pathogenic and benign_count == 0:
        if path_count > vus_count:
            builder.add(Criterion.PM1)
        else:
            builder.add(Criterion.PM1, EvidenceStrength.SUPPORTING)


def is_pp2_gene(statistics: GeneStatistics) -> bool:
    """A gene with a low rate of benign missense variation where missense is a common disease mechanism."""
    path_count = statistics.path_count()
    missense_path = statistics.missense_path_count()
    missense_vus = statistics.missense_vus_count()
    missense_benign = statistics.missense_benign_count()
    if path_count == 0 or missense_path == 0:
        return False
    mostly_missense = missense_path / path_count >= 0.75
    path_to_benign = missense_benign == 0 or missense_path / missense_benign >= 0.9
    benign_fraction = missense_benign / (missense_benign + missense_vus + missense_path)
    return mostly_missense and path_to_benign and benign_fraction <= 0.05


def is_bp1_gene(statistics: GeneStatistics) -> bool:
    """A gene for which primarily truncating variants are known to cause disease."""
    path_count = statistics.path_count()
    if path_count == 0:
        return False
    return statistics.lof_path_count() / path_count >= 0.75


def assign_pp2_bp1(builder: EvidenceSetBuilder, statistics: GeneStatistics) -> None:
    """PP2 for missense-mechanism genes, otherwise BP1 for truncating-mechanism genes."""
    if is_pp2_gene(statistics):
        builder.add(Criterion.PP2)
    elif is_bp1_gene(statistics):
        builder.add(Criterion.BP1)


def assign_pp3_bp4(builder: EvidenceSetBuilder, pathogenicity_data: PathogenicityData, config: AssignerConfig) -> None:
    """PP3/BP4 from REVEL alone when present, otherwise an ensemble vote.

    REVEL-only consistently out-performs other predictors, see Pejaver et
    al. 2022 (doi:10.1016/j.ajhg.2022.10.013). The ensemble approach follows
    doi:10.1136/jmedgenet-2020-107003.
    """
    revel = pathogenicity_data.score_for(PathogenicitySource.REVEL)
    if revel is not None:
        assign_revel_pp3_bp4(builder, revel, config)
    else:
        assign_ensemble_pp3_bp4(builder, pathogenicity_data)

    # Limit PM1 + PP3 to Strong: PP3_Strong supersedes the cruder PM1 hot-spot call
    pp3 = builder.strength_of(Criterion.PP3)
    pm1 = builder.strength_of(Criterion.PM1)
    if pp3 is EvidenceStrength.STRONG and pm1 is not None:
        logger.debug(f"Removing PM1_{pm1.display_string()} as PP3 is Strong")
        builder.remove(Criterion.PM1)


def assign_revel_pp3_bp4(builder: EvidenceSetBuilder, revel_score: PathogenicityScore, config: AssignerConfig) -> None:
    thresholds = config.revel
    revel = revel_score.raw_score
    if revel >= thresholds.pp3_strong:
        builder.add(Criterion.PP3, EvidenceStrength.STRONG)
    elif revel >= thresholds.pp3_moderate:
        builder.add(Criterion.PP3, EvidenceStrength.MODERATE)
    elif revel >= thresholds.pp3_supporting:
        builder.add(Criterion.PP3, EvidenceStrength.SUPPORTING)
    # benign side capped at Supporting, higher tiers push too many VUS to LB
    elif revel <= thresholds.bp4_supporting:
        builder.add(Criterion.BP4, EvidenceStrength.SUPPORTING)


def is_pathogenic_prediction(score: PathogenicityScore) -> bool:
    if score.source is PathogenicitySource.SIFT:
        return score.raw_score < SIFT_THRESHOLD
    if score.source is PathogenicitySource.MUTATION_TASTER:
        return score.score > MUTATION_TASTER_THRESHOLD
    if score.source is PathogenicitySource.POLYPHEN:
        return score.score > POLYPHEN_PROB_DAMAGING_THRESHOLD
    if score.source is PathogenicitySource.CADD:
        return score.raw_score >= CADD_THRESHOLD
    return score.score > DEFAULT_THRESHOLD


def assign_ensemble_pp3_bp4(builder: EvidenceSetBuilder, pathogenicity_data: PathogenicityData) -> None:
    """Majority vote of all predictors; a single predictor is never enough."""
    scores = pathogenicity_data.scores
    if len(scores) < 2:
        return
    num_pathogenic = sum(1 for score in scores if is_pathogenic_prediction(score))
    num_benign = len(scores) - num_pathogenic
    if num_pathogenic > num_benign:
        builder.add(Criterion.PP3)
    elif num_benign > num_pathogenic:
        builder.add(Criterion.BP4)
