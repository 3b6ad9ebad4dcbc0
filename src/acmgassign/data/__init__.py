"""Read-only external lookups used during evidence assignment."""

from acmgassign.data.clinical_records import (
    ClinicalRecordStore,
    GeneStatistics,
    InMemoryClinicalRecordStore,
    InterpretationCounts,
    records_surrounding,
)
from acmgassign.data.gene_constraints import GeneConstraint, GeneConstraints

__all__ = [
    "ClinicalRecordStore",
    "GeneStatistics",
    "InMemoryClinicalRecordStore",
    "InterpretationCounts",
    "records_surrounding",
    "GeneConstraint",
    "GeneConstraints",
]
