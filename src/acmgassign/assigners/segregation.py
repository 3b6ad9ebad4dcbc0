"""Segregation and transmission criteria: PS2, PM6, PM3, BP2 and BS4.

Genotype phase and affected status are compared between the proband and
their relatives. All functions expect the variant to be compatible with the
mode of inheritance under test, i.e. to have come out of an upstream
inheritance-mode filter.
"""

import logging

from acmgassign.models.criterion import Criterion
from acmgassign.models.disease import ModeOfInheritance
from acmgassign.models.evidence import EvidenceSetBuilder
from acmgassign.models.pathogenicity import ClinSig
from acmgassign.models.pedigree import Individual, Pedigree
from acmgassign.models.variant import SampleGenotype, Variant

logger = logging.getLogger(__name__)


def has_genotyped_relative(variant: Variant, pedigree: Pedigree, proband: Individual) -> bool:
    """True if any other pedigree member has a genotype for this variant."""
    return any(
        not variant.sample_genotype(member.id).is_empty()
        for member in pedigree.individuals
        if member.id != proband.id
    )


def _contains(variants: list[Variant], variant: Variant) -> bool:
    return any(other == variant for other in variants)


def assign_ps2(
    builder: EvidenceSetBuilder,
    variant: Variant,
    moi: ModeOfInheritance,
    contributing_variants: list[Variant],
    pedigree: Pedigree,
    proband: Individual,
) -> None:
    """PS2 "De novo (both maternity and paternity confirmed) in a patient with the disease and no family history".

    Needs at least two ancestors with a called genotype, none of whom is
    affected or carries the allele.
    """
    if not moi.is_dominant() or not _contains(contributing_variants, variant):
        return
    proband_genotype = variant.sample_genotype(proband.id)
    if not proband_genotype.carries_alt():
        return
    ancestors = pedigree.ancestors_of(proband)
    genotyped = [a for a in ancestors if variant.sample_genotype(a.id).is_called()]
    if len(genotyped) < 2:
        return
    if any(ancestor.is_affected() for ancestor in ancestors):
        return
    if any(variant.sample_genotype(ancestor.id).carries_alt() for ancestor in genotyped):
        return
    builder.add(Criterion.PS2)
    logger.debug(f"{variant} -> PS2 (absent from {len(genotyped)} unaffected ancestors)")


def assign_pm6(
    builder: EvidenceSetBuilder,
    variant: Variant,
    moi: ModeOfInheritance,
    contributing_variants: list[Variant],
    proband: Individual,
) -> None:
    """PM6 "Assumed de novo, but without confirmation of paternity and maternity".

    Not part of the default assignment sequence: a singleton heterozygous
    call is far too weak a signal to assume de novo status.
    """
    if not moi.is_dominant() or not _contains(contributing_variants, variant):
        return
    if len(variant.sample_genotypes) == 1 and variant.sample_genotype(proband.id).is_het():
        builder.add(Criterion.PM6)


def in_trans(this_genotype: SampleGenotype, other_genotype: SampleGenotype) -> bool:
    """Phased hets on opposite haplotypes, e.g. 1|0 and 0|1."""
    return _phased_hets(this_genotype, other_genotype) and this_genotype != other_genotype


def in_cis(this_genotype: SampleGenotype, other_genotype: SampleGenotype) -> bool:
    """Phased hets on the same haplotype, e.g. 1|0 and 1|0."""
    return _phased_hets(this_genotype, other_genotype) and this_genotype == other_genotype


def _phased_hets(a: SampleGenotype, b: SampleGenotype) -> bool:
    return a.is_phased() and a.is_het() and b.is_phased() and b.is_het()


def assign_pm3_bp2(
    builder: EvidenceSetBuilder,
    variant: Variant,
    moi: ModeOfInheritance,
    contributing_variants: list[Variant],
    proband: Individual,
) -> None:
    """PM3 "For recessive disorders, detected in trans with a pathogenic variant".

    BP2 "Observed in trans with a pathogenic variant for a fully penetrant
    dominant gene/disorder or observed in cis with a pathogenic variant in any
    inheritance pattern".
    """
    if len(contributing_variants) < 2 or not _contains(contributing_variants, variant):
        return
    recessive = moi.compatible_with_recessive(proband.sex)
    dominant = moi.compatible_with_dominant(proband.sex)
    this_genotype = variant.sample_genotype(proband.id)
    for other in contributing_variants:
        if other == variant:
            continue
        clinvar = other.pathogenicity_data.clinvar
        if clinvar is None or clinvar.primary_interpretation is not ClinSig.PATHOGENIC:
            continue
        other_genotype = other.sample_genotype(proband.id)
        trans = in_trans(this_genotype, other_genotype)
        cis = in_cis(this_genotype, other_genotype)
        if trans and recessive:
            #     -------P- (AR)
            #     ---X------
            builder.add(Criterion.PM3)
        elif cis and recessive:
            #     ---X---P- (AR)
            #     ---------
            builder.add(Criterion.BP2)
        elif trans and dominant:
            #     -------P- (AD)
            #     ---X------
            builder.add(Criterion.BP2)


def assign_bs4(builder: EvidenceSetBuilder, variant: Variant, pedigree: Pedigree, proband: Individual) -> None:
    """BS4 "Lack of segregation in affected members of a family"."""
    if pedigree.size() < 2:
        return
    proband_genotype = variant.sample_genotype(proband.id)
    if not proband_genotype.carries_alt():
        return
    for affected in pedigree.affected_relatives_of(proband):
        genotype = variant.sample_genotype(affected.id)
        if genotype.is_hom_ref() or genotype.is_no_call() or genotype.is_empty():
            builder.add(Criterion.BS4)
            logger.debug(f"{variant} -> BS4 (affected {affected.id} is {str(genotype) or 'untyped'})")
            return
