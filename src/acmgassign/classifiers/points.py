"""Points-based classifier.

"Fitting a naturally scaled point system to the ACMG/AMP variant
classification guidelines" Tavtigian et al. 2020 (doi:10.1002/humu.24088)

    Pathogenic      >= 10
    Likely Pathogenic  6 to 9
    Uncertain          0 to 5
    Likely Benign     -1 to -6
    Benign          <= -7
"""

import logging

from acmgassign.models.assignment import Classification
from acmgassign.models.evidence import EvidenceSet, posterior_probability

logger = logging.getLogger(__name__)


class PointsBasedClassifier:
    """Sums signed points per criterion and bins the total.

    Each direction is capped by EvidenceSet.points() (pathogenic 10, benign 8).
    BA1 is a hard filter and always gives BENIGN.
    """

    def classify(self, evidence: EvidenceSet) -> Classification:
        if evidence.ba >= 1:
            return Classification.BENIGN
        return self.classification(self.score(evidence))

    def score(self, evidence: EvidenceSet) -> int:
        return evidence.points()

    @staticmethod
    def classification(points: int) -> Classification:
        if points >= 10:
            return Classification.PATHOGENIC
        if points >= 6:
            return Classification.LIKELY_PATHOGENIC
        if points >= 0:
            return Classification.UNCERTAIN_SIGNIFICANCE
        if points >= -6:
            return Classification.LIKELY_BENIGN
        return Classification.BENIGN

    def posterior_probability(self, evidence: EvidenceSet) -> float:
        """Posterior probability of pathogenicity from the capped score."""
        return posterior_probability(self.score(evidence))
