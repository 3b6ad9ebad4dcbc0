"""Gene constraint lookup (gnomAD loss-of-function observed/expected)."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

# gnomAD v4 guidance: LOEUF below 0.6 marks a gene as LoF intolerant
LOEUF_INTOLERANCE_THRESHOLD = 0.6


@dataclass(frozen=True)
class GeneConstraint:
    gene_symbol: str
    loeuf: float
    pli: float | None = None

    def is_loss_of_function_intolerant(self) -> bool:
        return self.loeuf < LOEUF_INTOLERANCE_THRESHOLD


class GeneConstraints:
    """Read-only gene symbol -> GeneConstraint lookup."""

    def __init__(self, constraints: dict[str, GeneConstraint] | None = None):
        self._constraints = dict(constraints or {})

    @classmethod
    def of(cls, *constraints: GeneConstraint) -> "GeneConstraints":
        return cls({c.gene_symbol: c for c in constraints})

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "GeneConstraints":
        """Build from ``{symbol: {loeuf: .., pli: ..}}``."""
        return cls({
            symbol: GeneConstraint(symbol, float(values["loeuf"]), values.get("pli"))
            for symbol, values in data.items()
        })

    @classmethod
    def from_yaml(cls, path: Path) -> "GeneConstraints":
        if not path.exists():
            return cls()
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.from_mapping(data or {})

    def gene_constraint(self, gene_symbol: str) -> GeneConstraint | None:
        return self._constraints.get(gene_symbol)

    def is_loss_of_function_intolerant(self, gene_symbol: str) -> bool:
        """False for genes with no constraint data."""
        constraint = self._constraints.get(gene_symbol)
        return constraint is not None and constraint.is_loss_of_function_intolerant()

    def __len__(self) -> int:
        return len(self._constraints)
