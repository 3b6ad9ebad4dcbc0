"""Variant effect and transcript annotation models.

These are produced upstream by the annotation step and consumed read-only
by the evidence assigners.
"""

from enum import Enum

from pydantic import BaseModel, Field


class GenomeAssembly(str, Enum):
    HG19 = "hg19"
    HG38 = "hg38"

    @classmethod
    def parse_value(cls, text: str) -> "GenomeAssembly":
        """Accept hg19/GRCh37 and hg38/GRCh38 spellings."""
        value = text.strip().lower()
        if value in ("hg19", "grch37"):
            return cls.HG19
        if value in ("hg38", "grch38"):
            return cls.HG38
        raise ValueError(f"Unrecognised genome assembly '{text}'")


class VariantEffect(str, Enum):
    """Sequence Ontology variant consequence terms."""

    TRANSCRIPT_ABLATION = "transcript_ablation"
    EXON_LOSS_VARIANT = "exon_loss_variant"
    SPLICE_ACCEPTOR_VARIANT = "splice_acceptor_variant"
    SPLICE_DONOR_VARIANT = "splice_donor_variant"
    STOP_GAINED = "stop_gained"
    FRAMESHIFT_ELONGATION = "frameshift_elongation"
    FRAMESHIFT_TRUNCATION = "frameshift_truncation"
    FRAMESHIFT_VARIANT = "frameshift_variant"
    STOP_LOST = "stop_lost"
    START_LOST = "start_lost"
    INFRAME_INSERTION = "inframe_insertion"
    INFRAME_DELETION = "inframe_deletion"
    MISSENSE_VARIANT = "missense_variant"
    SPLICE_REGION_VARIANT = "splice_region_variant"
    SYNONYMOUS_VARIANT = "synonymous_variant"
    FIVE_PRIME_UTR_EXON_VARIANT = "5_prime_UTR_exon_variant"
    THREE_PRIME_UTR_EXON_VARIANT = "3_prime_UTR_exon_variant"
    NON_CODING_TRANSCRIPT_EXON_VARIANT = "non_coding_transcript_exon_variant"
    INTRON_VARIANT = "intron_variant"
    UPSTREAM_GENE_VARIANT = "upstream_gene_variant"
    DOWNSTREAM_GENE_VARIANT = "downstream_gene_variant"
    INTERGENIC_VARIANT = "intergenic_variant"
    SEQUENCE_VARIANT = "sequence_variant"

    def is_missense_or_inframe_indel(self) -> bool:
        return self in _MISSENSE_OR_INFRAME

    def is_inframe_indel(self) -> bool:
        return self in (VariantEffect.INFRAME_INSERTION, VariantEffect.INFRAME_DELETION)

    def is_nonsense_or_frameshift(self) -> bool:
        return self in _NONSENSE_OR_FRAMESHIFT

    def is_canonical_splice(self) -> bool:
        return self in (VariantEffect.SPLICE_DONOR_VARIANT, VariantEffect.SPLICE_ACCEPTOR_VARIANT)

    def is_splice_region(self) -> bool:
        return self is VariantEffect.SPLICE_REGION_VARIANT

    def is_splice(self) -> bool:
        return self.is_canonical_splice() or self.is_splice_region()

    def is_gene_or_exon_deletion(self) -> bool:
        return self in (VariantEffect.TRANSCRIPT_ABLATION, VariantEffect.EXON_LOSS_VARIANT)

    def is_loss_of_function(self) -> bool:
        return (
            self.is_nonsense_or_frameshift()
            or self.is_canonical_splice()
            or self.is_gene_or_exon_deletion()
            or self is VariantEffect.STOP_LOST
            or self is VariantEffect.START_LOST
        )


_MISSENSE_OR_INFRAME = frozenset({
    VariantEffect.MISSENSE_VARIANT,
    VariantEffect.INFRAME_INSERTION,
    VariantEffect.INFRAME_DELETION,
})

_NONSENSE_OR_FRAMESHIFT = frozenset({
    VariantEffect.STOP_GAINED,
    VariantEffect.FRAMESHIFT_ELONGATION,
    VariantEffect.FRAMESHIFT_TRUNCATION,
    VariantEffect.FRAMESHIFT_VARIANT,
})


class RankType(str, Enum):
    EXON = "exon"
    INTRON = "intron"
    UNDEFINED = "undefined"


class TranscriptAnnotation(BaseModel):
    """Annotation of a variant against a single transcript."""

    accession: str = Field("", description="Transcript accession (e.g., ENST00000371953.7)")
    gene_symbol: str = Field("", description="Gene symbol")
    variant_effect: VariantEffect = Field(VariantEffect.SEQUENCE_VARIANT)
    hgvs_cdna: str = Field("", description="Coding change, e.g. c.1234+8A>G")
    hgvs_protein: str = Field("", description="Protein change, e.g. p.(Arg130Ter)")
    rank_type: RankType = Field(RankType.UNDEFINED, description="Whether rank counts exons or introns")
    rank: int = Field(0, ge=0, description="Exon/intron number containing the variant")
    rank_total: int = Field(0, ge=0, description="Total exons/introns in the transcript")

    def in_last_exon(self) -> bool:
        return self.rank_type is RankType.EXON and self.rank_total > 0 and self.rank == self.rank_total
