"""Gene, disease and inheritance models."""

from enum import Enum

from pydantic import BaseModel, Field

from acmgassign.models.pedigree import Sex


class ModeOfInheritance(str, Enum):
    """Mode of inheritance being tested for a set of contributing variants."""

    AUTOSOMAL_DOMINANT = "AD"
    AUTOSOMAL_RECESSIVE = "AR"
    X_DOMINANT = "XD"
    X_RECESSIVE = "XR"
    MITOCHONDRIAL = "MT"
    ANY = "ANY"

    def is_dominant(self) -> bool:
        return self in (ModeOfInheritance.AUTOSOMAL_DOMINANT, ModeOfInheritance.X_DOMINANT)

    def is_recessive(self) -> bool:
        return self in (ModeOfInheritance.AUTOSOMAL_RECESSIVE, ModeOfInheritance.X_RECESSIVE)

    def compatible_with_dominant(self, sex: Sex) -> bool:
        """Dominant for this proband: AD, XD, or XR in a hemizygous male."""
        if self is ModeOfInheritance.AUTOSOMAL_DOMINANT or self is ModeOfInheritance.X_DOMINANT:
            return True
        return sex is Sex.MALE and self is ModeOfInheritance.X_RECESSIVE

    def compatible_with_recessive(self, sex: Sex) -> bool:
        """Recessive for this proband: AR, or XR in a female."""
        if self is ModeOfInheritance.AUTOSOMAL_RECESSIVE:
            return True
        return sex is Sex.FEMALE and self is ModeOfInheritance.X_RECESSIVE


class InheritanceMode(str, Enum):
    """Inheritance annotated on a disease (e.g. from OMIM/HPO)."""

    AUTOSOMAL_DOMINANT = "AUTOSOMAL_DOMINANT"
    AUTOSOMAL_RECESSIVE = "AUTOSOMAL_RECESSIVE"
    AUTOSOMAL_DOMINANT_AND_RECESSIVE = "AUTOSOMAL_DOMINANT_AND_RECESSIVE"
    X_LINKED = "X_LINKED"
    X_DOMINANT = "X_DOMINANT"
    X_RECESSIVE = "X_RECESSIVE"
    Y_LINKED = "Y_LINKED"
    MITOCHONDRIAL = "MITOCHONDRIAL"
    SOMATIC = "SOMATIC"
    POLYGENIC = "POLYGENIC"
    UNKNOWN = "UNKNOWN"

    def is_compatible_with(self, moi: ModeOfInheritance) -> bool:
        if moi is ModeOfInheritance.ANY:
            return True
        return moi in _COMPATIBLE_MODES.get(self, ())


_MOI = ModeOfInheritance
_COMPATIBLE_MODES = {
    InheritanceMode.AUTOSOMAL_DOMINANT: (_MOI.AUTOSOMAL_DOMINANT,),
    InheritanceMode.AUTOSOMAL_RECESSIVE: (_MOI.AUTOSOMAL_RECESSIVE,),
    InheritanceMode.AUTOSOMAL_DOMINANT_AND_RECESSIVE: (_MOI.AUTOSOMAL_DOMINANT, _MOI.AUTOSOMAL_RECESSIVE),
    InheritanceMode.X_LINKED: (_MOI.X_DOMINANT, _MOI.X_RECESSIVE),
    InheritanceMode.X_DOMINANT: (_MOI.X_DOMINANT,),
    InheritanceMode.X_RECESSIVE: (_MOI.X_RECESSIVE,),
    InheritanceMode.MITOCHONDRIAL: (_MOI.MITOCHONDRIAL,),
}


class Disease(BaseModel):
    disease_id: str = Field(..., description="Disease identifier (e.g., OMIM:158350)")
    disease_name: str = Field("", description="Disease name")
    inheritance_mode: InheritanceMode = InheritanceMode.UNKNOWN

    def is_compatible_with(self, moi: ModeOfInheritance) -> bool:
        return self.inheritance_mode.is_compatible_with(moi)


class PhenotypeMatch(BaseModel):
    """Phenotypic similarity of the proband to a disease model."""

    disease: Disease
    score: float = Field(..., ge=0.0, le=1.0, description="Similarity score in [0, 1]")


class Gene(BaseModel):
    symbol: str = Field(..., description="Gene symbol (e.g., PTEN)")
    gene_id: str = Field("", description="Gene identifier (e.g., HGNC:9588)")
    diseases: list[Disease] = Field(default_factory=list, description="Known disease associations")

    def compatible_diseases(self, moi: ModeOfInheritance) -> list[Disease]:
        return [disease for disease in self.diseases if disease.is_compatible_with(moi)]
