"""Variant models: the read-only context handed to the evidence assigners."""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from acmgassign.models.annotation import GenomeAssembly, TranscriptAnnotation, VariantEffect
from acmgassign.models.frequency import FrequencyData
from acmgassign.models.pathogenicity import PathogenicityData

MITOCHONDRIAL_CONTIGS = frozenset({"M", "MT"})


@dataclass(frozen=True)
class SampleGenotype:
    """A VCF-style genotype call for one sample.

    Alleles are allele indexes (0 = REF, 1.. = ALT) with ``None`` for a
    no-call. Two genotypes are equal only if both alleles and phasing match,
    so ``1|0`` and ``0|1`` differ while ``1|0`` and ``1|0`` are equal.
    """

    alleles: tuple[int | None, ...] = field(default_factory=tuple)
    phased: bool = False

    @classmethod
    def parse(cls, genotype: str) -> "SampleGenotype":
        """Parse a GT string such as ``0/1``, ``1|0``, ``./.`` or ``1``.

        Raises:
            ValueError: If an allele is neither an integer nor '.'.
        """
        text = genotype.strip()
        if not text:
            return cls()
        phased = "|" in text
        alleles = []
        for allele in text.replace("|", "/").split("/"):
            if allele == ".":
                alleles.append(None)
            elif allele.isdigit():
                alleles.append(int(allele))
            else:
                raise ValueError(f"Unparseable genotype '{genotype}'")
        return cls(tuple(alleles), phased)

    @classmethod
    def het(cls) -> "SampleGenotype":
        return cls((0, 1))

    @classmethod
    def hom_alt(cls) -> "SampleGenotype":
        return cls((1, 1))

    @classmethod
    def hom_ref(cls) -> "SampleGenotype":
        return cls((0, 0))

    @classmethod
    def no_call(cls) -> "SampleGenotype":
        return cls((None, None))

    def _called(self) -> list[int]:
        return [a for a in self.alleles if a is not None]

    def is_empty(self) -> bool:
        return not self.alleles

    def is_no_call(self) -> bool:
        return bool(self.alleles) and not self._called()

    def is_het(self) -> bool:
        return len(set(self._called())) > 1

    def is_hom_alt(self) -> bool:
        called = self._called()
        return bool(called) and len(called) == len(self.alleles) and len(set(called)) == 1 and called[0] > 0

    def is_hom_ref(self) -> bool:
        called = self._called()
        return bool(called) and len(called) == len(self.alleles) and set(called) == {0}

    def is_phased(self) -> bool:
        return self.phased

    def carries_alt(self) -> bool:
        return self.is_het() or self.is_hom_alt()

    def is_called(self) -> bool:
        return not (self.is_empty() or self.is_no_call())

    def __str__(self) -> str:
        separator = "|" if self.phased else "/"
        return separator.join("." if a is None else str(a) for a in self.alleles)


class Variant(BaseModel):
    """A genomic variant with all upstream annotations attached."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "assembly": "hg38",
                "contig": "10",
                "start": 87933147,
                "ref": "C",
                "alt": "T",
                "gene_symbol": "PTEN",
                "variant_effect": "stop_gained",
            }
        }
    )

    assembly: GenomeAssembly = Field(GenomeAssembly.HG38, description="Genome build of the coordinates")
    contig: str = Field(..., description="Chromosome without 'chr' prefix (e.g., 10, X, MT)")
    start: int = Field(..., ge=1, description="1-based start position")
    end: int | None = Field(None, description="1-based inclusive end, derived from REF when omitted")
    ref: str = Field(..., description="Reference allele")
    alt: str = Field(..., description="Alternate allele")
    gene_symbol: str = Field("", description="Gene symbol (e.g., PTEN)")
    gene_id: str = Field("", description="Gene identifier (e.g., HGNC:9588)")
    variant_effect: VariantEffect = Field(VariantEffect.SEQUENCE_VARIANT)
    transcript_annotations: list[TranscriptAnnotation] = Field(default_factory=list)
    frequency_data: FrequencyData = Field(default_factory=FrequencyData)
    pathogenicity_data: PathogenicityData = Field(default_factory=PathogenicityData)
    sample_genotypes: dict[str, SampleGenotype] = Field(default_factory=dict)

    @field_validator("contig", mode="before")
    @classmethod
    def _strip_chr_prefix(cls, v):
        if isinstance(v, str):
            return v.removeprefix("chr")
        return str(v)

    @field_validator("sample_genotypes", mode="before")
    @classmethod
    def _parse_genotypes(cls, v):
        if isinstance(v, dict):
            return {
                sample: SampleGenotype.parse(gt) if isinstance(gt, str) else gt
                for sample, gt in v.items()
            }
        return v

    @model_validator(mode="after")
    def _derive_end(self) -> "Variant":
        if self.end is None:
            self.end = self.start + max(len(self.ref), 1) - 1
        return self

    def sample_genotype(self, sample_id: str) -> SampleGenotype:
        """Genotype for a sample, or an empty genotype when the sample was not typed."""
        return self.sample_genotypes.get(sample_id, SampleGenotype())

    def transcript_annotation(self) -> TranscriptAnnotation | None:
        """The primary (first) transcript annotation, if any."""
        return self.transcript_annotations[0] if self.transcript_annotations else None

    def has_transcript_annotations(self) -> bool:
        return bool(self.transcript_annotations)

    def is_snv(self) -> bool:
        return len(self.ref) == 1 and len(self.alt) == 1

    def is_mitochondrial(self) -> bool:
        return self.contig.upper() in MITOCHONDRIAL_CONTIGS

    def allele_key(self) -> tuple[str, int, str, str]:
        return (self.contig, self.start, self.ref, self.alt)

    def __str__(self) -> str:
        return f"{self.assembly.value} {self.contig}-{self.start}-{self.ref}-{self.alt} {self.gene_symbol} {self.variant_effect.value}"
