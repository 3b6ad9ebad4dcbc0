"""PVS1 null-variant decision tree.

"null variant (nonsense, frameshift, canonical ±1 or 2 splice sites,
initiation codon, single or multiexon deletion) in a gene where LOF is a
known mechanism of disease"

Follows a simplified form of the ClinGen SVI PVS1 decision tree
(Abou Tayoun et al. 2018, doi:10.1002/humu.23626). Without transcript
coordinates only the last-exon rule can be applied for NMD prediction.
"""

import logging

from acmgassign.data.gene_constraints import GeneConstraints
from acmgassign.models.annotation import RankType, TranscriptAnnotation, VariantEffect
from acmgassign.models.criterion import Criterion, EvidenceStrength
from acmgassign.models.disease import Disease
from acmgassign.models.evidence import EvidenceSetBuilder
from acmgassign.models.variant import Variant

logger = logging.getLogger(__name__)


def predicted_to_lead_to_nmd(annotation: TranscriptAnnotation | None, variant_effect: VariantEffect) -> bool:
    """Nonsense-mediated decay prediction from the exon rank.

    A variant does NOT trigger NMD when it lies in the last exon (this
    includes single-exon transcripts) or outside an exon and away from the
    canonical splice sites.
    """
    if annotation is None:
        return False
    not_in_last_exon = annotation.rank < annotation.rank_total
    exonic_or_canonical_splice = (
        annotation.rank_type is RankType.EXON
        or annotation.variant_effect.is_canonical_splice()
        or variant_effect.is_canonical_splice()
    )
    return exonic_or_canonical_splice and not_in_last_exon


def pvs1_strength(variant: Variant) -> EvidenceStrength | None:
    """PVS1 strength for the variant's effect, ignoring gene-level preconditions."""
    effect = variant.variant_effect
    nmd = predicted_to_lead_to_nmd(variant.transcript_annotation(), effect)
    if effect.is_nonsense_or_frameshift() or effect.is_canonical_splice():
        return EvidenceStrength.VERY_STRONG if nmd else EvidenceStrength.STRONG
    if effect is VariantEffect.STOP_LOST:
        # read-through into the 3' UTR, scored like a truncation at the same rank
        return EvidenceStrength.VERY_STRONG if nmd else EvidenceStrength.STRONG
    if effect is VariantEffect.TRANSCRIPT_ABLATION:
        return EvidenceStrength.VERY_STRONG
    if effect is VariantEffect.EXON_LOSS_VARIANT:
        return EvidenceStrength.VERY_STRONG if nmd else EvidenceStrength.STRONG
    if effect is VariantEffect.START_LOST:
        return EvidenceStrength.MODERATE
    return None


def assign_pvs1(
    builder: EvidenceSetBuilder,
    variant: Variant,
    known_diseases: list[Disease],
    gene_constraints: GeneConstraints,
) -> None:
    """Assign PVS1 to a loss-of-function variant in a LoF-intolerant disease gene.

    Caveats from the guidelines that cannot be checked here: genes where LOF
    is not a disease mechanism (e.g. GFAP, MYH7), variants at the extreme 3'
    end, exon skipping that leaves the protein intact, and multiple transcripts.
    """
    if not known_diseases:
        return
    if not variant.variant_effect.is_loss_of_function():
        return
    if not gene_constraints.is_loss_of_function_intolerant(variant.gene_symbol):
        logger.debug(f"{variant.gene_symbol} is not LoF intolerant, PVS1 not assessed")
        return
    strength = pvs1_strength(variant)
    if strength is not None:
        builder.add(Criterion.PVS1, strength)
        logger.debug(f"{variant} -> PVS1_{strength.display_string()}")
