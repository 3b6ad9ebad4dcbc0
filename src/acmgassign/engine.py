"""ACMG assignment engine combining evidence assignment and classification.

ARCHITECTURE:
    Gene + MOI + contributing variants + phenotype matches → EvidenceAssigner → EvidenceSet → AcmgClassifier → Assignment

Assigns evidence to every variant contributing to a gene's mode of
inheritance, then classifies it.

Key Design:
- One Assignment per contributing variant, in input order
- Known diseases are the gene's diseases compatible with the MOI
- The disease reported is the best phenotype match, if any
- Synchronous per gene, parallel across genes (asyncio.to_thread + asyncio.gather)
- Batch exceptions captured and logged, not raised
- Stateless with no shared mutable state, the assigner's lookups are read-only
"""

import asyncio
import logging
from dataclasses import dataclass, field

from acmgassign.assigners.evidence_assigner import EvidenceAssigner
from acmgassign.classifiers.base import AcmgClassifier
from acmgassign.models.assignment import Assignment
from acmgassign.models.disease import Disease, Gene, ModeOfInheritance, PhenotypeMatch
from acmgassign.models.variant import Variant
from acmgassign.utils.logging_config import AssignmentDecisionLogger, get_logger

logger = logging.getLogger(__name__)


@dataclass
class AssignmentRequest:
    """Inputs for one gene in a batch."""

    moi: ModeOfInheritance
    gene: Gene
    contributing_variants: list[Variant]
    phenotype_matches: list[PhenotypeMatch] = field(default_factory=list)


class AssignmentCalculator:
    """
    Calculator for ACMG assignments.

    Evidence assignment is CPU-bound and synchronous; batch_calculate runs
    independent genes on worker threads so callers inside an event loop are
    not blocked.
    """

    def __init__(
        self,
        assigner: EvidenceAssigner,
        classifier: AcmgClassifier,
        decision_logger: AssignmentDecisionLogger | None = None,
        enable_logging: bool = False,
    ):
        self.assigner = assigner
        self.classifier = classifier
        # Falls back to the shared process-wide logger when none is given
        if decision_logger is None and enable_logging:
            decision_logger = get_logger()
        self.decision_logger = decision_logger

    def calculate_assignments(
        self,
        moi: ModeOfInheritance,
        gene: Gene,
        contributing_variants: list[Variant],
        phenotype_matches: list[PhenotypeMatch],
    ) -> list[Assignment]:
        """Assign and classify each contributing variant of a gene.

        Args:
            moi: Mode of inheritance being tested.
            gene: Gene the variants are in, with its known diseases.
            contributing_variants: Variants contributing to the MOI.
            phenotype_matches: Phenotype matches of the proband to the
                gene's MOI-compatible diseases.

        Returns:
            One Assignment per contributing variant.
        """
        known_diseases = gene.compatible_diseases(moi)
        disease = self.best_disease(phenotype_matches)

        assignments = []
        for variant in contributing_variants:
            evidence = self.assigner.assign(variant, moi, contributing_variants, known_diseases, phenotype_matches)
            classification = self.classifier.classify(evidence)
            assignment = Assignment(
                variant=variant,
                gene_id=gene.gene_id,
                gene_symbol=gene.symbol,
                mode_of_inheritance=moi,
                disease=disease,
                evidence=evidence,
                classification=classification,
            )
            logger.debug(f"{gene.symbol} {variant} {moi.value} {evidence} -> {classification.value}")
            if self.decision_logger:
                self.decision_logger.log_assignment(assignment)
            assignments.append(assignment)
        return assignments

    @staticmethod
    def best_disease(phenotype_matches: list[PhenotypeMatch]) -> Disease | None:
        """Disease of the top-scoring phenotype match, the first on ties."""
        if not phenotype_matches:
            return None
        return max(phenotype_matches, key=lambda match: match.score).disease

    async def batch_calculate(self, requests: list[AssignmentRequest]) -> list[Assignment]:
        """
        Calculate assignments for many genes concurrently.

        Each gene runs on a worker thread. A gene that fails is logged and
        left out of the results rather than failing the whole batch.
        """
        tasks = [
            asyncio.to_thread(
                self.calculate_assignments,
                request.moi,
                request.gene,
                request.contributing_variants,
                request.phenotype_matches,
            )
            for request in requests
        ]

        # Run all tasks concurrently, capturing exceptions instead of raising
        results = await asyncio.gather(*tasks, return_exceptions=True)

        assignments = []
        for request, result in zip(requests, results):
            if isinstance(result, Exception):
                logger.warning(f"ACMG assignment failed for {request.gene.symbol}: {result}")
                if self.decision_logger:
                    self.decision_logger.log_assignment_error(request.gene.symbol, result)
                continue
            assignments.extend(result)
        return assignments
