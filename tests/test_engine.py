"""Tests for the assignment engine."""

import pytest

from acmgassign.classifiers import Acgs2020Classifier, PointsBasedClassifier
from acmgassign.engine import AssignmentCalculator, AssignmentRequest
from acmgassign.models.assignment import Assignment, Classification
from acmgassign.models.criterion import Criterion
from acmgassign.models.disease import Disease, Gene, InheritanceMode, ModeOfInheritance, PhenotypeMatch
from acmgassign.models.evidence import EvidenceSet
from acmgassign.models.frequency import Frequency, FrequencyData, FrequencySource
from acmgassign.utils.logging_config import AssignmentDecisionLogger, get_logger, reset_logger

AD = ModeOfInheritance.AUTOSOMAL_DOMINANT
AR = ModeOfInheritance.AUTOSOMAL_RECESSIVE


class TestCalculateAssignments:
    """Tests for AssignmentCalculator.calculate_assignments."""

    def test_pathogenic_assignment(self, assigner, pten_gene, pten_start_lost, perfect_match, cowden_syndrome):
        """Test a 3 star pathogenic PTEN start-loss under the ACGS classifier."""
        calculator = AssignmentCalculator(assigner, Acgs2020Classifier())
        assignments = calculator.calculate_assignments(AD, pten_gene, [pten_start_lost], perfect_match)

        expected = Assignment(
            variant=pten_start_lost,
            gene_id="HGNC:9588",
            gene_symbol="PTEN",
            mode_of_inheritance=AD,
            disease=cowden_syndrome,
            evidence=EvidenceSet.parse("PVS1_Moderate PM2_Supporting PP4_Moderate PP5_VeryStrong"),
            classification=Classification.PATHOGENIC,
        )
        assert assignments == [expected]

    def test_benign_assignment(self, assigner, pten_gene, variant_factory, cowden_syndrome):
        variant = variant_factory(
            start=89622915,
            frequency_data=FrequencyData.of(
                Frequency(source=FrequencySource.EXAC_AFRICAN_INC_AFRICAN_AMERICAN, frequency=50.0)
            ),
        )
        matches = [PhenotypeMatch(disease=cowden_syndrome, score=0.5)]
        calculator = AssignmentCalculator(assigner, PointsBasedClassifier())
        [assignment] = calculator.calculate_assignments(AD, pten_gene, [variant], matches)
        assert assignment.classification is Classification.BENIGN
        assert str(assignment.evidence) == "[BA1]"
        assert assignment.disease == cowden_syndrome

    def test_one_assignment_per_variant(self, assigner, pten_gene, variant_factory):
        variants = [variant_factory(start=89624227 + i) for i in range(3)]
        calculator = AssignmentCalculator(assigner, Acgs2020Classifier())
        assignments = calculator.calculate_assignments(AD, pten_gene, variants, [])
        assert [a.variant for a in assignments] == variants
        assert all(a.disease is None for a in assignments)
        assert all(a.classification is Classification.UNCERTAIN_SIGNIFICANCE for a in assignments)

    def test_known_diseases_follow_moi(self, assigner, pten_gene, pten_start_lost):
        """Test that PVS1 needs a disease compatible with the MOI."""
        calculator = AssignmentCalculator(assigner, Acgs2020Classifier())
        [dominant] = calculator.calculate_assignments(AD, pten_gene, [pten_start_lost], [])
        [recessive] = calculator.calculate_assignments(AR, pten_gene, [pten_start_lost], [])
        assert dominant.evidence.has_criterion(Criterion.PVS1)
        assert not recessive.evidence.has_criterion(Criterion.PVS1)

    def test_best_disease(self, cowden_syndrome):
        other = Disease(disease_id="OMIM:612359", inheritance_mode=InheritanceMode.AUTOSOMAL_DOMINANT)
        matches = [PhenotypeMatch(disease=other, score=0.6), PhenotypeMatch(disease=cowden_syndrome, score=0.9)]
        assert AssignmentCalculator.best_disease(matches) == cowden_syndrome
        assert AssignmentCalculator.best_disease([]) is None

    def test_decision_logger(self, assigner, pten_gene, pten_start_lost, tmp_path):
        decision_logger = AssignmentDecisionLogger(log_dir=tmp_path)
        calculator = AssignmentCalculator(assigner, Acgs2020Classifier(), decision_logger=decision_logger)
        calculator.calculate_assignments(AD, pten_gene, [pten_start_lost], [])
        decision_logger.file_handler.close()
        lines = decision_logger.log_file.read_text().splitlines()
        assert len(lines) == 1
        assert '"event_type": "acmg_assignment"' in lines[0]

    def test_enable_logging_uses_shared_logger(self, assigner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        reset_logger()
        try:
            calculator = AssignmentCalculator(assigner, Acgs2020Classifier(), enable_logging=True)
            assert calculator.decision_logger is get_logger()
            assert (tmp_path / "logs").is_dir()
        finally:
            reset_logger()

    def test_logging_disabled_by_default(self, assigner):
        assert AssignmentCalculator(assigner, Acgs2020Classifier()).decision_logger is None


class TestBatchCalculate:
    """Tests for AssignmentCalculator.batch_calculate."""

    @pytest.mark.asyncio
    async def test_batch(self, assigner, pten_gene, pten_start_lost, variant_factory, perfect_match):
        """Test that genes are assessed independently and results concatenated."""
        ttn = Gene(symbol="TTN", gene_id="HGNC:12403")
        ttn_variant = variant_factory(contig="2", start=178527000, gene_symbol="TTN")
        calculator = AssignmentCalculator(assigner, Acgs2020Classifier())

        assignments = await calculator.batch_calculate([
            AssignmentRequest(AD, pten_gene, [pten_start_lost], perfect_match),
            AssignmentRequest(AD, ttn, [ttn_variant]),
        ])

        assert [a.gene_symbol for a in assignments] == ["PTEN", "TTN"]
        assert assignments[0].classification is Classification.PATHOGENIC

    @pytest.mark.asyncio
    async def test_batch_captures_exceptions(self, assigner, pten_gene, pten_start_lost, variant_factory, tmp_path):
        """Test that a failing gene is logged and does not abort the batch."""

        class FailingAssigner:
            def assign(self, variant, *args):
                if variant.gene_symbol == "TTN":
                    raise RuntimeError("clinical record store unavailable")
                return assigner.assign(variant, *args)

        ttn = Gene(symbol="TTN", gene_id="HGNC:12403")
        ttn_variant = variant_factory(contig="2", start=178527000, gene_symbol="TTN")
        decision_logger = AssignmentDecisionLogger(log_dir=tmp_path)
        calculator = AssignmentCalculator(FailingAssigner(), Acgs2020Classifier(), decision_logger=decision_logger)

        assignments = await calculator.batch_calculate([
            AssignmentRequest(AD, ttn, [ttn_variant]),
            AssignmentRequest(AD, pten_gene, [pten_start_lost]),
        ])

        assert [a.gene_symbol for a in assignments] == ["PTEN"]
        decision_logger.file_handler.close()
        log_text = decision_logger.log_file.read_text()
        assert '"event_type": "acmg_error"' in log_text
        assert "clinical record store unavailable" in log_text

    @pytest.mark.asyncio
    async def test_empty_batch(self, assigner):
        calculator = AssignmentCalculator(assigner, Acgs2020Classifier())
        assert await calculator.batch_calculate([]) == []
