"""ACMG/AMP evidence assignment for a single variant.

Runs the rule families in a fixed order against one shared
EvidenceSetBuilder. Later steps read what earlier steps wrote (PM4 checks
PVS1, PP5 checks PS1, the splice PS1 is capped by PVS1), so the order below
is part of the contract:

    BA1 → PM2/BS1/BS2 → PVS1 → missense family → splice family
        → PS2/PM3/BP2/BS4 → PM4 → PP4 → PP5/BP6

BA1 short-circuits: a BA1 variant carries no other criterion.
"""

import logging

from acmgassign.assigners.clinical import assign_pm4, assign_pp4, assign_pp5_bp6
from acmgassign.assigners.frequency import assign_ba1, assign_frequency_evidence
from acmgassign.assigners.missense import assign_missense_evidence
from acmgassign.assigners.pvs1 import assign_pvs1
from acmgassign.assigners.segregation import assign_bs4, assign_pm3_bp2, assign_ps2, has_genotyped_relative
from acmgassign.assigners.splice import assign_splice_evidence
from acmgassign.config.assigner_config import AssignerConfig, load_assigner_config
from acmgassign.config.ba1_exclusions import Ba1ExclusionList, load_ba1_exclusions
from acmgassign.data.clinical_records import ClinicalRecordStore, InMemoryClinicalRecordStore
from acmgassign.data.gene_constraints import GeneConstraints
from acmgassign.models.disease import Disease, ModeOfInheritance, PhenotypeMatch
from acmgassign.models.evidence import EvidenceSet, EvidenceSetBuilder
from acmgassign.models.pedigree import Pedigree, ProbandNotFoundError
from acmgassign.models.variant import Variant

logger = logging.getLogger(__name__)


class EvidenceAssigner:
    """
    Assigns ACMG criteria to variants for one proband.

    The collaborators are read-only, so one assigner can be shared across
    threads assessing different genes.
    """

    def __init__(
        self,
        proband_id: str,
        pedigree: Pedigree | None = None,
        clinical_records: ClinicalRecordStore | None = None,
        gene_constraints: GeneConstraints | None = None,
        config: AssignerConfig | None = None,
        ba1_exclusions: Ba1ExclusionList | None = None,
    ):
        """
        Args:
            proband_id: Sample id of the proband, must be a pedigree member.
            pedigree: Family structure. None or empty means a singleton analysis.
            clinical_records: Curated ClinVar records and per-gene statistics.
            gene_constraints: LoF-intolerance lookup for PVS1.
            config: Thresholds, defaults to the bundled assigner_config.yaml.
            ba1_exclusions: BA1 exception list, defaults to the bundled list.

        Raises:
            ProbandNotFoundError: If the proband is not in the pedigree.
        """
        self.proband_id = proband_id
        self.pedigree = pedigree if pedigree is not None and not pedigree.is_empty() else Pedigree.just_proband(proband_id)
        proband = self.pedigree.individual_by_id(proband_id)
        if proband is None:
            raise ProbandNotFoundError(f"Proband '{proband_id}' not found in pedigree")
        self.proband = proband
        self.clinical_records = clinical_records if clinical_records is not None else InMemoryClinicalRecordStore.empty()
        self.gene_constraints = gene_constraints if gene_constraints is not None else GeneConstraints()
        self.config = config if config is not None else load_assigner_config()
        self.ba1_exclusions = ba1_exclusions if ba1_exclusions is not None else load_ba1_exclusions()

    def assign(
        self,
        variant: Variant,
        moi: ModeOfInheritance,
        contributing_variants: list[Variant],
        known_diseases: list[Disease],
        phenotype_matches: list[PhenotypeMatch],
    ) -> EvidenceSet:
        """Assign evidence to a variant assessed under a mode of inheritance.

        Args:
            variant: The variant to assess.
            moi: Mode of inheritance being tested.
            contributing_variants: Variants in the same gene contributing to
                the MOI-compatible genotype.
            known_diseases: Diseases of the gene compatible with the MOI.
            phenotype_matches: Phenotype matches of the proband to those diseases.

        Returns:
            The assigned evidence.
        """
        builder = EvidenceSetBuilder()

        # BA1 "Allele frequency is >5% in ESP, 1000 Genomes or ExAC"
        if assign_ba1(builder, variant, self.config, self.ba1_exclusions):
            return builder.build()

        # PM2, BS1, BS2
        assign_frequency_evidence(builder, variant, moi, self.config)

        # PVS1 "null variant in a gene where LOF is a known mechanism of disease"
        assign_pvs1(builder, variant, known_diseases, self.gene_constraints)

        # PS1, PM5, PM1, PP2, BP1, PP3, BP4
        assign_missense_evidence(builder, variant, self.clinical_records, self.config)

        # PS1, PP3, BP4, BP7
        assign_splice_evidence(builder, variant, self.clinical_records, self.config)

        # PM3 and BP2 only need the proband's phased genotypes
        assign_pm3_bp2(builder, variant, moi, contributing_variants, self.proband)
        if has_genotyped_relative(variant, self.pedigree, self.proband):
            assign_ps2(builder, variant, moi, contributing_variants, self.pedigree, self.proband)
            assign_bs4(builder, variant, self.pedigree, self.proband)

        # PM4 "Protein length changes as a result of in-frame deletions/insertions ... or stop-loss variants"
        assign_pm4(builder, variant)

        # PP4 "Patient's phenotype or family history is highly specific for a disease with a single genetic etiology"
        assign_pp4(builder, phenotype_matches, self.config)

        # PP5, BP6
        assign_pp5_bp6(builder, variant)

        evidence = builder.build()
        logger.debug(f"{variant} {moi.value} -> {evidence}")
        return evidence
