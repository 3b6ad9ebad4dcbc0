"""Tests for EvidenceAssigner."""

import pytest

from acmgassign.assigners.evidence_assigner import EvidenceAssigner
from acmgassign.config.assigner_config import AssignerConfig
from acmgassign.data.clinical_records import InMemoryClinicalRecordStore
from acmgassign.models.annotation import VariantEffect
from acmgassign.models.criterion import Criterion
from acmgassign.models.disease import ModeOfInheritance
from acmgassign.models.evidence import EvidenceSet
from acmgassign.models.frequency import Frequency, FrequencyData, FrequencySource
from acmgassign.models.pathogenicity import PathogenicityData, PathogenicityScore, PathogenicitySource
from acmgassign.models.pedigree import AffectedStatus, Individual, Pedigree, ProbandNotFoundError, Sex

AD = ModeOfInheritance.AUTOSOMAL_DOMINANT


@pytest.fixture
def trio():
    return Pedigree.of(
        Individual(id="proband", family_id="F1", mother_id="mother", father_id="father", sex=Sex.MALE, status=AffectedStatus.AFFECTED),
        Individual(id="mother", family_id="F1", sex=Sex.FEMALE, status=AffectedStatus.UNAFFECTED),
        Individual(id="father", family_id="F1", sex=Sex.MALE, status=AffectedStatus.UNAFFECTED),
    )


class TestConstruction:
    """Tests for EvidenceAssigner construction."""

    def test_proband_not_in_pedigree(self, trio):
        with pytest.raises(ProbandNotFoundError, match="Proband 'sibling' not found"):
            EvidenceAssigner("sibling", trio)

    def test_proband_not_found_is_value_error(self, trio):
        with pytest.raises(ValueError):
            EvidenceAssigner("sibling", trio)

    @pytest.mark.parametrize("pedigree", [None, Pedigree.empty()])
    def test_missing_pedigree_is_singleton(self, pedigree):
        assigner = EvidenceAssigner("proband", pedigree)
        assert assigner.pedigree.size() == 1
        assert assigner.proband.id == "proband"
        assert assigner.proband.is_affected()

    def test_bundled_defaults(self):
        assigner = EvidenceAssigner("proband")
        assert assigner.config == AssignerConfig()
        assert assigner.ba1_exclusions.version == "2018-09"
        assert len(assigner.ba1_exclusions) > 0
        assert len(assigner.gene_constraints) == 0


class TestAssign:
    """Tests for the full assignment sequence."""

    def test_pathogenic_start_loss(self, assigner, pten_start_lost, pten_gene, perfect_match):
        """Test ClinVar 484600, a 3 star pathogenic PTEN start-loss."""
        evidence = assigner.assign(
            pten_start_lost, AD, [pten_start_lost], pten_gene.compatible_diseases(AD), perfect_match
        )
        assert evidence == EvidenceSet.parse("PVS1_Moderate PM2_Supporting PP4_Moderate PP5_VeryStrong")
        assert str(evidence) == "[PVS1_Moderate, PM2_Supporting, PP4_Moderate, PP5_VeryStrong]"

    def test_ba1_short_circuits(self, assigner, pten_start_lost, pten_gene, perfect_match):
        """Test that a BA1 variant carries no other criterion."""
        common = pten_start_lost.model_copy(update={
            "frequency_data": FrequencyData.of(
                Frequency(source=FrequencySource.EXAC_AFRICAN_INC_AFRICAN_AMERICAN, frequency=50.0)
            ),
        })
        evidence = assigner.assign(common, AD, [common], pten_gene.compatible_diseases(AD), perfect_match)
        assert list(evidence) == [Criterion.BA1]

    def test_uncommon_missense(self, assigner, variant_factory, pten_gene):
        variant = variant_factory(
            frequency_data=FrequencyData.of(
                Frequency(source=FrequencySource.EXAC_AFRICAN_INC_AFRICAN_AMERICAN, frequency=0.5)
            ),
            pathogenicity_data=PathogenicityData.of(PathogenicityScore(source=PathogenicitySource.REVEL, score=0.5)),
        )
        evidence = assigner.assign(variant, AD, [variant], pten_gene.compatible_diseases(AD), [])
        assert evidence == EvidenceSet.of(Criterion.BS1)

    def test_no_known_disease_no_pvs1(self, assigner, pten_start_lost):
        evidence = assigner.assign(pten_start_lost, AD, [pten_start_lost], [], [])
        assert not evidence.has_criterion(Criterion.PVS1)

    def test_de_novo_in_trio(self, trio, variant_factory, gene_constraints, pten_gene, no_exclusions):
        assigner = EvidenceAssigner(
            "proband", trio, InMemoryClinicalRecordStore.empty(), gene_constraints, ba1_exclusions=no_exclusions
        )
        variant = variant_factory(variant_effect=VariantEffect.STOP_GAINED, sample_genotypes={"proband": "0/1", "mother": "0/0", "father": "0/0"})
        evidence = assigner.assign(variant, AD, [variant], pten_gene.compatible_diseases(AD), [])
        assert evidence.has_criterion(Criterion.PS2)
        assert evidence.has_criterion(Criterion.PVS1)

    def test_segregation_needs_genotyped_relative(self, trio, variant_factory, gene_constraints, pten_gene, no_exclusions):
        assigner = EvidenceAssigner(
            "proband", trio, InMemoryClinicalRecordStore.empty(), gene_constraints, ba1_exclusions=no_exclusions
        )
        variant = variant_factory(variant_effect=VariantEffect.STOP_GAINED, sample_genotypes={"proband": "0/1"})
        evidence = assigner.assign(variant, AD, [variant], pten_gene.compatible_diseases(AD), [])
        assert not evidence.has_criterion(Criterion.PS2)
        assert not evidence.has_criterion(Criterion.BS4)

    def test_pm6_not_assigned(self, assigner, variant_factory, pten_gene):
        """Test that an apparently de novo singleton call does not get PM6."""
        variant = variant_factory(sample_genotypes={"proband": "0/1"})
        evidence = assigner.assign(variant, AD, [variant], pten_gene.compatible_diseases(AD), [])
        assert not evidence.has_criterion(Criterion.PM6)

    def test_in_frame_deletion_gets_pm4(self, assigner, variant_factory, pten_gene):
        variant = variant_factory(ref="AGTC", alt="A", variant_effect=VariantEffect.INFRAME_DELETION)
        evidence = assigner.assign(variant, AD, [variant], pten_gene.compatible_diseases(AD), [])
        assert evidence == EvidenceSet.parse("PM2_Supporting PM4")
