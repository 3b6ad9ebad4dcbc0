"""Utility helpers."""

from acmgassign.utils.hgvs import IntronicOffset, ProteinChange, parse_intronic_offset, parse_protein_change

__all__ = ["IntronicOffset", "ProteinChange", "parse_intronic_offset", "parse_protein_change"]
