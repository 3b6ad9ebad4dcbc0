"""Shared fixtures for ACMG assignment tests."""

import pytest

from acmgassign.assigners.evidence_assigner import EvidenceAssigner
from acmgassign.config.assigner_config import AssignerConfig
from acmgassign.config.ba1_exclusions import Ba1ExclusionList
from acmgassign.data.clinical_records import InMemoryClinicalRecordStore
from acmgassign.data.gene_constraints import GeneConstraint, GeneConstraints
from acmgassign.models.annotation import RankType, TranscriptAnnotation, VariantEffect
from acmgassign.models.disease import Disease, Gene, InheritanceMode, PhenotypeMatch
from acmgassign.models.evidence import EvidenceSetBuilder
from acmgassign.models.pedigree import Pedigree, Sex
from acmgassign.models.variant import Variant


def make_variant(
    start: int = 89624227,
    ref: str = "A",
    alt: str = "G",
    contig: str = "10",
    gene_symbol: str = "PTEN",
    variant_effect: VariantEffect = VariantEffect.MISSENSE_VARIANT,
    **kwargs,
) -> Variant:
    """Variant in PTEN on hg38 unless told otherwise."""
    return Variant(
        contig=contig,
        start=start,
        ref=ref,
        alt=alt,
        gene_symbol=gene_symbol,
        gene_id="HGNC:9588" if gene_symbol == "PTEN" else "",
        variant_effect=variant_effect,
        **kwargs,
    )


@pytest.fixture
def builder():
    return EvidenceSetBuilder()


@pytest.fixture
def config():
    return AssignerConfig()


@pytest.fixture
def no_exclusions():
    return Ba1ExclusionList.empty()


@pytest.fixture
def cowden_syndrome():
    return Disease(
        disease_id="OMIM:158350",
        disease_name="COWDEN SYNDROME 1; CWS1",
        inheritance_mode=InheritanceMode.AUTOSOMAL_DOMINANT,
    )


@pytest.fixture
def pten_gene(cowden_syndrome):
    return Gene(symbol="PTEN", gene_id="HGNC:9588", diseases=[cowden_syndrome])


@pytest.fixture
def gene_constraints():
    """PTEN is LoF intolerant, TTN is not."""
    return GeneConstraints.of(
        GeneConstraint("PTEN", 0.21, 1.0),
        GeneConstraint("TTN", 0.95, 0.0),
    )


@pytest.fixture
def pten_start_lost():
    """ClinVar 484600: a 3 star pathogenic start-loss in PTEN."""
    annotation = TranscriptAnnotation(
        accession="ENST00000371953.7",
        gene_symbol="PTEN",
        variant_effect=VariantEffect.START_LOST,
        rank_type=RankType.EXON,
        rank=1,
        rank_total=9,
    )
    return make_variant(
        variant_effect=VariantEffect.START_LOST,
        transcript_annotations=[annotation],
        sample_genotypes={"proband": "0/1"},
        pathogenicity_data={
            "scores": [{"source": "REVEL", "score": 1.0}, {"source": "MVP", "score": 1.0}],
            "clinvar": {
                "variation_id": "484600",
                "primary_interpretation": "PATHOGENIC",
                "review_status": "reviewed_by_expert_panel",
            },
        },
    )


@pytest.fixture
def perfect_match(cowden_syndrome):
    return [PhenotypeMatch(disease=cowden_syndrome, score=1.0)]


@pytest.fixture
def assigner(gene_constraints, config, no_exclusions):
    return EvidenceAssigner(
        "proband",
        Pedigree.just_proband("proband", Sex.MALE),
        InMemoryClinicalRecordStore.empty(),
        gene_constraints,
        config=config,
        ba1_exclusions=no_exclusions,
    )


@pytest.fixture
def variant_factory():
    return make_variant
