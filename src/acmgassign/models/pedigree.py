"""Pedigree models."""

from enum import Enum

from pydantic import BaseModel, Field


class Sex(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    UNKNOWN = "UNKNOWN"


class AffectedStatus(str, Enum):
    AFFECTED = "AFFECTED"
    UNAFFECTED = "UNAFFECTED"
    MISSING = "MISSING"


class ProbandNotFoundError(ValueError):
    """The named proband is not a member of the supplied pedigree."""


class Individual(BaseModel):
    """A member of a pedigree, as read from a PED file."""

    id: str = Field(..., description="Sample identifier, matching the VCF sample name")
    family_id: str = Field("", description="Family identifier")
    mother_id: str = Field("", description="Mother's identifier, empty if not in the pedigree")
    father_id: str = Field("", description="Father's identifier, empty if not in the pedigree")
    sex: Sex = Sex.UNKNOWN
    status: AffectedStatus = AffectedStatus.MISSING

    def is_affected(self) -> bool:
        return self.status is AffectedStatus.AFFECTED


class Pedigree(BaseModel):
    individuals: list[Individual] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "Pedigree":
        return cls()

    @classmethod
    def just_proband(cls, proband_id: str, sex: Sex = Sex.UNKNOWN) -> "Pedigree":
        """Single-member pedigree for singleton analyses."""
        return cls(individuals=[Individual(id=proband_id, sex=sex, status=AffectedStatus.AFFECTED)])

    @classmethod
    def of(cls, *individuals: Individual) -> "Pedigree":
        return cls(individuals=list(individuals))

    def is_empty(self) -> bool:
        return not self.individuals

    def size(self) -> int:
        return len(self.individuals)

    def contains_id(self, individual_id: str) -> bool:
        return self.individual_by_id(individual_id) is not None

    def individual_by_id(self, individual_id: str) -> Individual | None:
        for individual in self.individuals:
            if individual.id == individual_id:
                return individual
        return None

    def ancestors_of(self, individual: Individual) -> list[Individual]:
        """All ancestors present in the pedigree: mother's line first, then father's."""
        ancestors: list[Individual] = []
        seen = {individual.id}
        stack = [individual]
        while stack:
            current = stack.pop(0)
            for parent_id in (current.mother_id, current.father_id):
                parent = self.individual_by_id(parent_id) if parent_id else None
                if parent is not None and parent.id not in seen:
                    seen.add(parent.id)
                    ancestors.append(parent)
                    stack.append(parent)
        return ancestors

    def affected_relatives_of(self, individual: Individual) -> list[Individual]:
        """Affected members of the same family, excluding the individual."""
        return [
            member
            for member in self.individuals
            if member.is_affected() and member.id != individual.id and member.family_id == individual.family_id
        ]
