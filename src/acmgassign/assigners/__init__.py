"""ACMG/AMP evidence assigners."""

from acmgassign.assigners.evidence_assigner import EvidenceAssigner

__all__ = ["EvidenceAssigner"]
