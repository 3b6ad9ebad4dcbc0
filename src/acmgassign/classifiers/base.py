"""Classifier interface."""

from typing import Protocol

from acmgassign.models.assignment import Classification
from acmgassign.models.evidence import EvidenceSet


class AcmgClassifier(Protocol):
    """Maps a finished evidence set to a five-tier classification.

    Implementations are stateless and must return UNCERTAIN_SIGNIFICANCE
    rather than raise for empty or contradictory evidence.
    """

    def classify(self, evidence: EvidenceSet) -> Classification:
        ...
