"""Tests for the PVS1 decision tree."""

import pytest

from acmgassign.assigners.pvs1 import assign_pvs1, predicted_to_lead_to_nmd, pvs1_strength
from acmgassign.models.annotation import RankType, TranscriptAnnotation, VariantEffect
from acmgassign.models.criterion import Criterion, EvidenceStrength


def annotated(variant_factory, effect, rank, rank_total, rank_type=RankType.EXON):
    annotation = TranscriptAnnotation(
        accession="ENST00000371953.7",
        gene_symbol="PTEN",
        variant_effect=effect,
        rank_type=rank_type,
        rank=rank,
        rank_total=rank_total,
    )
    return variant_factory(variant_effect=effect, transcript_annotations=[annotation])


class TestNmdPrediction:
    """Tests for nonsense-mediated decay prediction."""

    def test_not_last_exon(self):
        annotation = TranscriptAnnotation(variant_effect=VariantEffect.STOP_GAINED, rank_type=RankType.EXON, rank=2, rank_total=5)
        assert predicted_to_lead_to_nmd(annotation, VariantEffect.STOP_GAINED)

    def test_last_exon(self):
        annotation = TranscriptAnnotation(variant_effect=VariantEffect.STOP_GAINED, rank_type=RankType.EXON, rank=5, rank_total=5)
        assert not predicted_to_lead_to_nmd(annotation, VariantEffect.STOP_GAINED)

    def test_intronic_canonical_splice(self):
        annotation = TranscriptAnnotation(variant_effect=VariantEffect.SPLICE_DONOR_VARIANT, rank_type=RankType.INTRON, rank=3, rank_total=8)
        assert predicted_to_lead_to_nmd(annotation, VariantEffect.SPLICE_DONOR_VARIANT)

    def test_no_annotation(self):
        assert not predicted_to_lead_to_nmd(None, VariantEffect.STOP_GAINED)


class TestPvs1Strength:
    """Tests for PVS1 strength by effect."""

    @pytest.mark.parametrize("effect, rank, rank_total, expected", [
        (VariantEffect.STOP_GAINED, 2, 5, EvidenceStrength.VERY_STRONG),
        (VariantEffect.STOP_GAINED, 5, 5, EvidenceStrength.STRONG),
        (VariantEffect.FRAMESHIFT_VARIANT, 1, 9, EvidenceStrength.VERY_STRONG),
        (VariantEffect.FRAMESHIFT_TRUNCATION, 9, 9, EvidenceStrength.STRONG),
        (VariantEffect.SPLICE_ACCEPTOR_VARIANT, 3, 9, EvidenceStrength.VERY_STRONG),
        (VariantEffect.EXON_LOSS_VARIANT, 3, 9, EvidenceStrength.VERY_STRONG),
        (VariantEffect.EXON_LOSS_VARIANT, 9, 9, EvidenceStrength.STRONG),
        (VariantEffect.TRANSCRIPT_ABLATION, 9, 9, EvidenceStrength.VERY_STRONG),
        (VariantEffect.START_LOST, 1, 9, EvidenceStrength.MODERATE),
        (VariantEffect.START_LOST, 9, 9, EvidenceStrength.MODERATE),
        (VariantEffect.STOP_LOST, 9, 9, EvidenceStrength.STRONG),
        (VariantEffect.STOP_LOST, 4, 9, EvidenceStrength.VERY_STRONG),
        (VariantEffect.MISSENSE_VARIANT, 2, 5, None),
    ])
    def test_strength(self, variant_factory, effect, rank, rank_total, expected):
        assert pvs1_strength(annotated(variant_factory, effect, rank, rank_total)) is expected

    def test_stop_lost_is_loss_of_function_not_nonsense(self):
        assert VariantEffect.STOP_LOST.is_loss_of_function()
        assert not VariantEffect.STOP_LOST.is_nonsense_or_frameshift()
        assert VariantEffect.STOP_GAINED.is_nonsense_or_frameshift()


class TestAssignPvs1:
    """Tests for the PVS1 gene-level preconditions."""

    def test_assigned(self, builder, variant_factory, cowden_syndrome, gene_constraints):
        variant = annotated(variant_factory, VariantEffect.STOP_GAINED, 2, 9)
        assign_pvs1(builder, variant, [cowden_syndrome], gene_constraints)
        assert builder.strength_of(Criterion.PVS1) is EvidenceStrength.VERY_STRONG

    def test_requires_known_disease(self, builder, variant_factory, gene_constraints):
        variant = annotated(variant_factory, VariantEffect.STOP_GAINED, 2, 9)
        assign_pvs1(builder, variant, [], gene_constraints)
        assert not builder.contains(Criterion.PVS1)

    def test_requires_lof_intolerant_gene(self, builder, variant_factory, cowden_syndrome, gene_constraints):
        variant = annotated(variant_factory, VariantEffect.STOP_GAINED, 2, 9).model_copy(update={"gene_symbol": "TTN"})
        assign_pvs1(builder, variant, [cowden_syndrome], gene_constraints)
        assert not builder.contains(Criterion.PVS1)

    def test_unknown_gene_is_not_intolerant(self, builder, variant_factory, cowden_syndrome, gene_constraints):
        variant = annotated(variant_factory, VariantEffect.STOP_GAINED, 2, 9).model_copy(update={"gene_symbol": "NOVEL1"})
        assign_pvs1(builder, variant, [cowden_syndrome], gene_constraints)
        assert not builder.contains(Criterion.PVS1)

    def test_no_annotation_is_strong(self, builder, variant_factory, cowden_syndrome, gene_constraints):
        variant = variant_factory(variant_effect=VariantEffect.STOP_GAINED)
        assign_pvs1(builder, variant, [cowden_syndrome], gene_constraints)
        assert builder.strength_of(Criterion.PVS1) is EvidenceStrength.STRONG
