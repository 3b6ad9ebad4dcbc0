"""Evidence set: the criteria assigned to a variant and their strengths.

An evidence set holds at most one strength per criterion. The builder
follows a last-write-wins rule, so a sub-assigner can upgrade or downgrade
a criterion that an earlier step already added. Once built, the set is
immutable and its per-tier counts are derived from the mapping on
construction, so they can never drift from it.

Points and posterior probability follow the Bayesian adaptation of the
ACMG/AMP guidelines:
  - Tavtigian et al. 2018 (doi:10.1038/gim.2017.210)
  - Tavtigian et al. 2020 (doi:10.1002/humu.24088)
"""

import math
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from acmgassign.models.criterion import Criterion, EvidenceStrength

# Very Strong == 2 x Strong == 4 x Moderate == 8 x Supporting
PRIOR_PROB = 0.1
ODDS_PATH_VERY_STRONG = 350.0
EXPONENTIAL_PROGRESSION = 2.0
SUPPORTING_EVIDENCE_EXPONENT = EXPONENTIAL_PROGRESSION ** -3
ODDS_PATH_SUPPORTING = ODDS_PATH_VERY_STRONG ** SUPPORTING_EVIDENCE_EXPONENT

# Per-direction caps applied to the points total
MAX_PATHOGENIC_POINTS = 10
MAX_BENIGN_POINTS = 8

_PATHOGENIC_WEIGHTS = {
    EvidenceStrength.VERY_STRONG: 8,
    EvidenceStrength.STRONG: 4,
    EvidenceStrength.MODERATE: 2,
    EvidenceStrength.SUPPORTING: 1,
}

# BA1 is weighted as VERY_STRONG. Tavtigian excludes it from the Bayesian
# framework, the classifiers treat it as a hard filter instead.
_BENIGN_WEIGHTS = {
    EvidenceStrength.STAND_ALONE: 8,
    EvidenceStrength.VERY_STRONG: 8,
    EvidenceStrength.STRONG: 4,
    EvidenceStrength.MODERATE: 2,
    EvidenceStrength.SUPPORTING: 1,
}


def posterior_probability(points: int | float) -> float:
    """Posterior probability of pathogenicity for a points total.

    Equation 2 of Tavtigian et al. 2020:
        post = (odds_path * prior) / ((odds_path - 1) * prior + 1)
    """
    odds_path = math.pow(ODDS_PATH_SUPPORTING, points)
    return (odds_path * PRIOR_PROB) / ((odds_path - 1) * PRIOR_PROB + 1)


class EvidenceSet(Mapping):
    """Immutable mapping of Criterion -> EvidenceStrength in catalog order."""

    __slots__ = ("_evidence", "pvs", "ps", "pm", "pp", "ba", "bvs", "bs", "bm", "bp")

    def __init__(self, evidence: Mapping[Criterion, EvidenceStrength] | None = None):
        ordered = sorted((evidence or {}).items(), key=lambda item: item[0].order)
        self._evidence = MappingProxyType(dict(ordered))
        self.pvs = self.ps = self.pm = self.pp = 0
        self.ba = self.bvs = self.bs = self.bm = self.bp = 0
        self._count_criteria()

    def _count_criteria(self) -> None:
        for criterion, strength in self._evidence.items():
            if criterion.is_pathogenic():
                if strength is EvidenceStrength.VERY_STRONG:
                    self.pvs += 1
                elif strength is EvidenceStrength.STRONG:
                    self.ps += 1
                elif strength is EvidenceStrength.MODERATE:
                    self.pm += 1
                elif strength is EvidenceStrength.SUPPORTING:
                    self.pp += 1
            else:
                if strength is EvidenceStrength.STAND_ALONE:
                    self.ba += 1
                elif strength is EvidenceStrength.VERY_STRONG:
                    self.bvs += 1
                elif strength is EvidenceStrength.STRONG:
                    self.bs += 1
                elif strength is EvidenceStrength.MODERATE:
                    self.bm += 1
                elif strength is EvidenceStrength.SUPPORTING:
                    self.bp += 1

    @classmethod
    def empty(cls) -> "EvidenceSet":
        return _EMPTY

    @classmethod
    def of(cls, *criteria: Criterion | tuple[Criterion, EvidenceStrength]) -> "EvidenceSet":
        """Build a set from criteria (default strength) or (criterion, strength) pairs."""
        builder = EvidenceSetBuilder()
        for item in criteria:
            if isinstance(item, tuple):
                builder.add(*item)
            else:
                builder.add(item)
        return builder.build()

    @classmethod
    def parse(cls, text: str) -> "EvidenceSet":
        """Parse the short textual form, e.g. ``"PVS1 PM2_Supporting"``.

        Items may be separated by whitespace or commas and the whole string
        may be wrapped in square brackets, so ``str(evidence)`` parses back.

        Raises:
            ValueError: On an unknown criterion or strength.
        """
        builder = EvidenceSetBuilder()
        for token in text.strip().strip("[]").replace(",", " ").split():
            name, _, strength = token.partition("_")
            if name not in Criterion.__members__:
                raise ValueError(f"Unrecognised ACMG criterion '{name}'")
            criterion = Criterion[name]
            builder.add(criterion, EvidenceStrength.parse_value(strength) if strength else None)
        return builder.build()

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> "EvidenceSet":
        """Rebuild a set from the mapping produced by :meth:`to_dict`."""
        builder = EvidenceSetBuilder()
        for name, strength in data.items():
            if name not in Criterion.__members__:
                raise ValueError(f"Unrecognised ACMG criterion '{name}'")
            builder.add(Criterion[name], EvidenceStrength.parse_value(strength))
        return builder.build()

    def to_dict(self) -> dict[str, str]:
        return {criterion.name: strength.display_string() for criterion, strength in self._evidence.items()}

    def __getitem__(self, criterion: Criterion) -> EvidenceStrength:
        return self._evidence[criterion]

    def __iter__(self) -> Iterator[Criterion]:
        return iter(self._evidence)

    def __len__(self) -> int:
        return len(self._evidence)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EvidenceSet):
            return dict(self._evidence) == dict(other._evidence)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._evidence.items()))

    def has_criterion(self, criterion: Criterion) -> bool:
        return criterion in self._evidence

    def strength_of(self, criterion: Criterion) -> EvidenceStrength | None:
        return self._evidence.get(criterion)

    def is_empty(self) -> bool:
        return not self._evidence

    def counts(self) -> dict[str, int]:
        """Derived per-tier counts, keyed pvs/ps/pm/pp/ba/bvs/bs/bm/bp."""
        return {
            "pvs": self.pvs,
            "ps": self.ps,
            "pm": self.pm,
            "pp": self.pp,
            "ba": self.ba,
            "bvs": self.bvs,
            "bs": self.bs,
            "bm": self.bm,
            "bp": self.bp,
        }

    def path_points(self) -> int:
        return sum(
            _PATHOGENIC_WEIGHTS.get(strength, 0)
            for criterion, strength in self._evidence.items()
            if criterion.is_pathogenic()
        )

    def benign_points(self) -> int:
        return sum(
            _BENIGN_WEIGHTS[strength]
            for criterion, strength in self._evidence.items()
            if criterion.is_benign()
        )

    def points(self) -> int:
        """Signed points total with each direction capped."""
        path_points = min(self.path_points(), MAX_PATHOGENIC_POINTS)
        benign_points = min(self.benign_points(), MAX_BENIGN_POINTS)
        return path_points - benign_points

    def post_prob_path(self) -> float:
        return posterior_probability(self.points())

    def __str__(self) -> str:
        items = []
        for criterion, strength in self._evidence.items():
            if strength is criterion.default_strength:
                items.append(criterion.name)
            else:
                items.append(f"{criterion.name}_{strength.display_string()}")
        return "[" + ", ".join(items) + "]"

    def __repr__(self) -> str:
        return f"EvidenceSet({self})"


class EvidenceSetBuilder:
    """Mutable accumulator used while a variant is being assessed.

    Adding a criterion that is already present replaces its strength.
    """

    def __init__(self) -> None:
        self._evidence: dict[Criterion, EvidenceStrength] = {}

    def add(self, criterion: Criterion, strength: EvidenceStrength | None = None) -> "EvidenceSetBuilder":
        self._evidence[criterion] = strength or criterion.default_strength
        return self

    def remove(self, criterion: Criterion) -> "EvidenceSetBuilder":
        self._evidence.pop(criterion, None)
        return self

    def contains(self, criterion: Criterion) -> bool:
        return criterion in self._evidence

    def strength_of(self, criterion: Criterion) -> EvidenceStrength | None:
        return self._evidence.get(criterion)

    def criteria(self) -> list[Criterion]:
        return list(self._evidence)

    def build(self) -> EvidenceSet:
        if not self._evidence:
            return _EMPTY
        return EvidenceSet(self._evidence)


_EMPTY = EvidenceSet()
