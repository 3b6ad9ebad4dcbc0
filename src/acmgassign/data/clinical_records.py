"""Curated clinical record lookups.

The assigners only need two read operations: records overlapping a
genomic interval, and historical interpretation counts per gene. Stores are
populated before assignment starts and are never written to afterwards, so
a single instance can be shared between worker threads.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from acmgassign.models.annotation import GenomeAssembly, VariantEffect
from acmgassign.models.pathogenicity import ClinSig, ClinVarRecord

logger = logging.getLogger(__name__)

LOSS_OF_FUNCTION_EFFECTS = frozenset({
    VariantEffect.STOP_LOST,
    VariantEffect.STOP_GAINED,
    VariantEffect.FRAMESHIFT_ELONGATION,
    VariantEffect.FRAMESHIFT_TRUNCATION,
    VariantEffect.FRAMESHIFT_VARIANT,
    VariantEffect.SPLICE_DONOR_VARIANT,
    VariantEffect.SPLICE_ACCEPTOR_VARIANT,
    VariantEffect.TRANSCRIPT_ABLATION,
    VariantEffect.EXON_LOSS_VARIANT,
    VariantEffect.START_LOST,
})


@dataclass
class InterpretationCounts:
    path: int = 0
    vus: int = 0
    benign: int = 0


@dataclass
class GeneStatistics:
    """Historical ClinVar interpretation counts for a gene, per variant effect."""

    gene_symbol: str
    counts: dict[VariantEffect, InterpretationCounts] = field(default_factory=dict)

    @classmethod
    def from_records(cls, gene_symbol: str, records: Iterable[ClinVarRecord]) -> "GeneStatistics":
        statistics = cls(gene_symbol)
        for record in records:
            statistics.add(record.variant_effect, record.primary_interpretation)
        return statistics

    def add(self, effect: VariantEffect, clinsig: ClinSig) -> None:
        counts = self.counts.setdefault(effect, InterpretationCounts())
        if clinsig.is_path_or_likely_path():
            counts.path += 1
        elif clinsig is ClinSig.UNCERTAIN_SIGNIFICANCE:
            counts.vus += 1
        elif clinsig.is_benign_or_likely_benign():
            counts.benign += 1

    def _missense(self) -> InterpretationCounts:
        return self.counts.get(VariantEffect.MISSENSE_VARIANT, InterpretationCounts())

    def missense_path_count(self) -> int:
        return self._missense().path

    def missense_vus_count(self) -> int:
        return self._missense().vus

    def missense_benign_count(self) -> int:
        return self._missense().benign

    def lof_path_count(self) -> int:
        return sum(c.path for effect, c in self.counts.items() if effect in LOSS_OF_FUNCTION_EFFECTS)

    def path_count(self) -> int:
        return sum(c.path for c in self.counts.values())

    def vus_count(self) -> int:
        return sum(c.vus for c in self.counts.values())

    def benign_count(self) -> int:
        return sum(c.benign for c in self.counts.values())


class ClinicalRecordStore(Protocol):
    """Read-only source of curated clinical records."""

    def find_records_overlapping(
        self, assembly: GenomeAssembly, contig: str, start: int, end: int
    ) -> list[ClinVarRecord]:
        ...

    def gene_statistics(self, gene_symbol: str) -> GeneStatistics:
        ...


class InMemoryClinicalRecordStore:
    """ClinicalRecordStore backed by in-memory lists, indexed by contig.

    Gene statistics are taken from ``gene_statistics`` when supplied,
    otherwise derived from the records for that gene.
    """

    def __init__(
        self,
        records: Iterable[ClinVarRecord] = (),
        assembly: GenomeAssembly = GenomeAssembly.HG38,
        gene_statistics: dict[str, GeneStatistics] | None = None,
    ):
        self.assembly = assembly
        self._by_contig: dict[str, list[ClinVarRecord]] = defaultdict(list)
        by_gene: dict[str, list[ClinVarRecord]] = defaultdict(list)
        for record in records:
            self._by_contig[record.contig].append(record)
            if record.gene_symbol:
                by_gene[record.gene_symbol].append(record)
        for contig_records in self._by_contig.values():
            contig_records.sort(key=lambda r: r.start)
        self._gene_statistics = dict(gene_statistics or {})
        for gene_symbol, gene_records in by_gene.items():
            self._gene_statistics.setdefault(gene_symbol, GeneStatistics.from_records(gene_symbol, gene_records))
        logger.debug(f"Loaded {sum(len(r) for r in self._by_contig.values())} clinical records for {assembly.value}")

    @classmethod
    def empty(cls) -> "InMemoryClinicalRecordStore":
        return cls()

    def find_records_overlapping(
        self, assembly: GenomeAssembly, contig: str, start: int, end: int
    ) -> list[ClinVarRecord]:
        if assembly is not self.assembly:
            return []
        return [
            record
            for record in self._by_contig.get(contig.removeprefix("chr"), [])
            if record.start <= end and record.end >= start
        ]

    def gene_statistics(self, gene_symbol: str) -> GeneStatistics:
        return self._gene_statistics.get(gene_symbol, GeneStatistics(gene_symbol))


def records_surrounding(
    store: ClinicalRecordStore, assembly: GenomeAssembly, contig: str, position: int, window: int
) -> list[ClinVarRecord]:
    """Records overlapping ``position`` ± ``window`` bases, clamped to the contig start."""
    upstream = max(1, position - window)
    downstream = position + window
    return store.find_records_overlapping(assembly, contig, upstream, downstream)
