"""Population frequency criteria: BA1, PM2, BS1 and BS2.

Frequencies are taken from the non-founder gnomAD populations recommended
for filtering allele frequency, see
https://gnomad.broadinstitute.org/help/faf
"""

import logging

from acmgassign.config.assigner_config import AssignerConfig
from acmgassign.config.ba1_exclusions import Ba1ExclusionList
from acmgassign.models.criterion import Criterion, EvidenceStrength
from acmgassign.models.disease import ModeOfInheritance
from acmgassign.models.evidence import EvidenceSetBuilder
from acmgassign.models.frequency import NON_FOUNDER_POPS, FrequencyData, FrequencySource
from acmgassign.models.variant import Variant

logger = logging.getLogger(__name__)


def assign_ba1(
    builder: EvidenceSetBuilder,
    variant: Variant,
    config: AssignerConfig,
    exclusions: Ba1ExclusionList,
) -> bool:
    """BA1 "Allele frequency is >5% in ESP, 1000 Genomes or ExAC".

    Returns:
        True if BA1 was assigned. No further criteria should then be evaluated.
    """
    if exclusions.is_excluded(variant.assembly, variant.allele_key()):
        clinvar_id = exclusions.clinvar_id(variant.assembly, variant.allele_key())
        logger.debug(f"{variant} is on the BA1 exception list (ClinVar {clinvar_id})")
        return False
    max_freq = variant.frequency_data.max_freq_for_population(NON_FOUNDER_POPS)
    if max_freq > config.frequency.ba1_frequency:
        builder.add(Criterion.BA1)
        logger.debug(f"{variant} -> BA1 (max non-founder AF {max_freq}%)")
        return True
    return False


def assign_pm2(
    builder: EvidenceSetBuilder,
    frequency_data: FrequencyData,
    moi: ModeOfInheritance,
    config: AssignerConfig,
) -> None:
    """PM2 "Absent from controls (or at extremely low frequency if recessive)".

    Always Supporting, per the ClinGen SVI PM2 recommendation (Sept 2020).
    Local frequencies are allowed as they cannot be verified as to their
    size or content.
    """
    absent_from_databases = frequency_data.is_empty() or (
        frequency_data.size() == 1 and frequency_data.contains_source(FrequencySource.LOCAL)
    )
    rare_if_recessive = (
        moi.is_recessive()
        and frequency_data.max_freq_for_population(NON_FOUNDER_POPS) < config.frequency.pm2_recessive_max_frequency
    )
    if absent_from_databases or rare_if_recessive:
        builder.add(Criterion.PM2, EvidenceStrength.SUPPORTING)


def assign_bs1(
    builder: EvidenceSetBuilder,
    frequency_data: FrequencyData,
    moi: ModeOfInheritance,
    config: AssignerConfig,
) -> None:
    """BS1 "Allele frequency is greater than expected for disorder"."""
    max_allowed = config.bs1_max_frequency(moi)
    if max_allowed is None:
        return
    max_freq = frequency_data.max_freq_for_population(NON_FOUNDER_POPS)
    if max_freq > max_allowed:
        builder.add(Criterion.BS1)
        logger.debug(f"BS1: AF {max_freq}% > {max_allowed}% for {moi.value}")


def assign_bs2(
    builder: EvidenceSetBuilder,
    frequency_data: FrequencyData,
    moi: ModeOfInheritance,
    config: AssignerConfig,
) -> None:
    """BS2 "Observed in a healthy adult individual ... with full penetrance expected at an early age"."""
    min_homozygotes = config.bs2_min_homozygotes(moi)
    if min_homozygotes is None:
        return
    homozygotes = frequency_data.max_homozygotes_for_population(NON_FOUNDER_POPS)
    if homozygotes >= min_homozygotes:
        builder.add(Criterion.BS2)
        logger.debug(f"BS2: {homozygotes} homozygotes in controls for {moi.value}")


def assign_frequency_evidence(
    builder: EvidenceSetBuilder,
    variant: Variant,
    moi: ModeOfInheritance,
    config: AssignerConfig,
) -> None:
    """PM2, then BS1/BS2 only if neither BA1 nor PM2 used the frequency signal."""
    frequency_data = variant.frequency_data
    assign_pm2(builder, frequency_data, moi, config)
    if builder.contains(Criterion.BA1) or builder.contains(Criterion.PM2):
        return
    assign_bs1(builder, frequency_data, moi, config)
    assign_bs2(builder, frequency_data, moi, config)
