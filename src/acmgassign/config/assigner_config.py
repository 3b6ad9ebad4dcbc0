"""Evidence assigner threshold configuration loader.

Loads frequency, ClinVar-window, phenotype and predictor thresholds from a
YAML file. Any section or key missing from the file falls back to the
published ACMG/ClinGen value.
"""

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from acmgassign.models.disease import ModeOfInheritance


class FrequencyThresholds(BaseModel):
    ba1_frequency: float = Field(5.0, description="BA1 non-founder allele frequency (%)")
    pm2_recessive_max_frequency: float = Field(1.0, description="PM2 ceiling for recessive modes (%)")
    bs1_max_frequency: dict[ModeOfInheritance, float] = Field(
        default_factory=lambda: {
            ModeOfInheritance.AUTOSOMAL_DOMINANT: 0.1,
            ModeOfInheritance.AUTOSOMAL_RECESSIVE: 2.0,
            ModeOfInheritance.X_DOMINANT: 0.1,
            ModeOfInheritance.X_RECESSIVE: 2.0,
            ModeOfInheritance.MITOCHONDRIAL: 0.2,
        }
    )
    bs2_min_homozygotes: dict[ModeOfInheritance, int] = Field(
        default_factory=lambda: {
            ModeOfInheritance.AUTOSOMAL_DOMINANT: 1,
            ModeOfInheritance.AUTOSOMAL_RECESSIVE: 2,
            ModeOfInheritance.X_DOMINANT: 1,
            ModeOfInheritance.X_RECESSIVE: 2,
            ModeOfInheritance.MITOCHONDRIAL: 1,
        }
    )


class ClinVarThresholds(BaseModel):
    window: int = Field(25, ge=0, description="Bases either side of the variant to search")
    codon_distance: int = Field(2, ge=0, description="Maximum distance for a same-codon record")
    pm1_min_pathogenic: int = Field(4, ge=1)


class PhenotypeThresholds(BaseModel):
    pp4_moderate: float = 0.7
    pp4_supporting: float = 0.51


class RevelThresholds(BaseModel):
    # Table 2 of Pejaver et al. 2022 (doi:10.1016/j.ajhg.2022.10.013)
    pp3_strong: float = 0.932
    pp3_moderate: float = 0.773
    pp3_supporting: float = 0.644
    bp4_supporting: float = 0.290


class SpliceAiThresholds(BaseModel):
    # ClinGen SVI splicing subgroup (doi:10.1016/j.ajhg.2023.06.002)
    pp3_min: float = 0.2
    bp4_max: float = 0.1


class Bp7Thresholds(BaseModel):
    donor_region_end: int = 6
    acceptor_region_start: int = 20
    synonymous_donor_region_end: int = 7
    synonymous_acceptor_region_start: int = 21


class AssignerConfig(BaseModel):
    """All thresholds used by the evidence assigners."""

    frequency: FrequencyThresholds = Field(default_factory=FrequencyThresholds)
    clinvar: ClinVarThresholds = Field(default_factory=ClinVarThresholds)
    phenotype: PhenotypeThresholds = Field(default_factory=PhenotypeThresholds)
    revel: RevelThresholds = Field(default_factory=RevelThresholds)
    splice_ai: SpliceAiThresholds = Field(default_factory=SpliceAiThresholds)
    bp7: Bp7Thresholds = Field(default_factory=Bp7Thresholds)

    def bs1_max_frequency(self, moi: ModeOfInheritance) -> float | None:
        return self.frequency.bs1_max_frequency.get(moi)

    def bs2_min_homozygotes(self, moi: ModeOfInheritance) -> int | None:
        return self.frequency.bs2_min_homozygotes.get(moi)


@lru_cache(maxsize=4)
def load_assigner_config(config_path: Path | None = None) -> AssignerConfig:
    """Load assigner thresholds from YAML.

    Args:
        config_path: Alternative YAML file. Defaults to the bundled
            assigner_config.yaml.

    Returns:
        AssignerConfig instance. Defaults are used if the file doesn't exist.
    """
    if config_path is None:
        config_path = Path(__file__).parent / "assigner_config.yaml"

    if not config_path.exists():
        return AssignerConfig()

    with open(config_path) as f:
        config = yaml.safe_load(f)

    return AssignerConfig.model_validate(config or {})
