"""Combinatorial classifier.

Table 3 of the ACGS Best Practice Guidelines for Variant Classification
in Rare Disease 2020 (https://www.acgs.uk.com/media/11631/uk-practice-guidelines-for-variant-classification-v4-01-2020.pdf),
which extends Richards et al. 2015 to cover PVS1 plus a single supporting
criterion.
"""

import logging

from acmgassign.models.assignment import Classification
from acmgassign.models.evidence import EvidenceSet

logger = logging.getLogger(__name__)


class Acgs2020Classifier:
    """Matches evidence counts against the fixed rule-combination table."""

    def classify(self, evidence: EvidenceSet) -> Classification:
        pathogenic = self.is_pathogenic(evidence)
        likely_pathogenic = not pathogenic and self.is_likely_pathogenic(evidence)
        benign = self.is_benign(evidence)
        likely_benign = not benign and self.is_likely_benign(evidence)

        has_pathogenic_call = pathogenic or likely_pathogenic
        has_benign_call = benign or likely_benign
        # Any benign call alongside pathogenic evidence is a conflict, including a lone PVS1
        if has_benign_call and (has_pathogenic_call or evidence.pvs >= 1):
            logger.debug(f"Conflicting evidence {evidence} -> UNCERTAIN_SIGNIFICANCE")
            return Classification.UNCERTAIN_SIGNIFICANCE

        if pathogenic:
            return Classification.PATHOGENIC
        if likely_pathogenic:
            return Classification.LIKELY_PATHOGENIC
        if benign:
            return Classification.BENIGN
        if likely_benign:
            return Classification.LIKELY_BENIGN
        return Classification.UNCERTAIN_SIGNIFICANCE

    @staticmethod
    def is_pathogenic(evidence: EvidenceSet) -> bool:
        pvs, ps, pm, pp = evidence.pvs, evidence.ps, evidence.pm, evidence.pp
        if pvs >= 1:
            # (i)(a) >=1 Strong, (b) >=1 Moderate, (c) >=2 Supporting
            # PVS1 + PP5_VeryStrong counts as PVS1 + >=1 Strong
            return pvs >= 2 or ps >= 1 or pm >= 1 or pp >= 2
        if ps >= 3:
            return True
        if ps == 2:
            return pm >= 1 or pp >= 2
        if ps == 1:
            # (iii)(a) >=3 Moderate, (b) 2 Moderate and >=2 Supporting, (c) 1 Moderate and >=4 Supporting
            return pm >= 3 or (pm == 2 and pp >= 2) or (pm == 1 and pp >= 4)
        return False

    @staticmethod
    def is_likely_pathogenic(evidence: EvidenceSet) -> bool:
        pvs, ps, pm, pp = evidence.pvs, evidence.ps, evidence.pm, evidence.pp
        if pvs == 1 and pp == 1:
            # ACGS 2020 addition
            return True
        if ps >= 2:
            return True
        if ps == 1 and (1 <= pm <= 2 or pp >= 2):
            return True
        if pm >= 3:
            return True
        if pm == 2 and pp >= 2:
            return True
        return pm == 1 and pp >= 4

    @staticmethod
    def is_benign(evidence: EvidenceSet) -> bool:
        # BS4_VeryStrong and friends are counted as Strong
        return evidence.ba >= 1 or evidence.bs + evidence.bvs >= 2

    @staticmethod
    def is_likely_benign(evidence: EvidenceSet) -> bool:
        bs = evidence.bs + evidence.bvs
        bp = evidence.bp + evidence.bm
        return (bs == 1 and bp == 1) or bp >= 2
