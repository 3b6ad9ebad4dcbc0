"""Population allele frequency summaries.

Frequencies are expressed as percentages (5.0 == 5%).
"""

from enum import Enum

from pydantic import BaseModel, Field


class FrequencySource(str, Enum):
    LOCAL = "LOCAL"
    THOUSAND_GENOMES = "THOUSAND_GENOMES"
    TOPMED = "TOPMED"
    UK10K = "UK10K"

    ESP_AA = "ESP_AA"
    ESP_EA = "ESP_EA"
    ESP_ALL = "ESP_ALL"

    EXAC_AFRICAN_INC_AFRICAN_AMERICAN = "EXAC_AFR"
    EXAC_AMERICAN = "EXAC_AMR"
    EXAC_EAST_ASIAN = "EXAC_EAS"
    EXAC_FINNISH = "EXAC_FIN"
    EXAC_NON_FINNISH_EUROPEAN = "EXAC_NFE"
    EXAC_OTHER = "EXAC_OTH"
    EXAC_SOUTH_ASIAN = "EXAC_SAS"

    GNOMAD_E_AFR = "GNOMAD_E_AFR"
    GNOMAD_E_AMR = "GNOMAD_E_AMR"
    GNOMAD_E_ASJ = "GNOMAD_E_ASJ"
    GNOMAD_E_EAS = "GNOMAD_E_EAS"
    GNOMAD_E_FIN = "GNOMAD_E_FIN"
    GNOMAD_E_NFE = "GNOMAD_E_NFE"
    GNOMAD_E_OTH = "GNOMAD_E_OTH"
    GNOMAD_E_SAS = "GNOMAD_E_SAS"
    GNOMAD_E_MID = "GNOMAD_E_MID"

    GNOMAD_G_AFR = "GNOMAD_G_AFR"
    GNOMAD_G_AMI = "GNOMAD_G_AMI"
    GNOMAD_G_AMR = "GNOMAD_G_AMR"
    GNOMAD_G_ASJ = "GNOMAD_G_ASJ"
    GNOMAD_G_EAS = "GNOMAD_G_EAS"
    GNOMAD_G_FIN = "GNOMAD_G_FIN"
    GNOMAD_G_MID = "GNOMAD_G_MID"
    GNOMAD_G_NFE = "GNOMAD_G_NFE"
    GNOMAD_G_OTH = "GNOMAD_G_OTH"
    GNOMAD_G_SAS = "GNOMAD_G_SAS"


# gnomAD filtering-allele-frequency populations: the bottle-necked Ashkenazi
# Jewish, Finnish, Other, Amish and Middle Eastern groups are excluded.
NON_FOUNDER_POPS: frozenset[FrequencySource] = frozenset({
    FrequencySource.THOUSAND_GENOMES,
    FrequencySource.TOPMED,
    FrequencySource.UK10K,
    FrequencySource.ESP_AA,
    FrequencySource.ESP_EA,
    FrequencySource.ESP_ALL,
    FrequencySource.EXAC_AFRICAN_INC_AFRICAN_AMERICAN,
    FrequencySource.EXAC_AMERICAN,
    FrequencySource.EXAC_EAST_ASIAN,
    FrequencySource.EXAC_NON_FINNISH_EUROPEAN,
    FrequencySource.EXAC_SOUTH_ASIAN,
    FrequencySource.GNOMAD_E_AFR,
    FrequencySource.GNOMAD_E_AMR,
    FrequencySource.GNOMAD_E_EAS,
    FrequencySource.GNOMAD_E_NFE,
    FrequencySource.GNOMAD_E_SAS,
    FrequencySource.GNOMAD_G_AFR,
    FrequencySource.GNOMAD_G_AMR,
    FrequencySource.GNOMAD_G_EAS,
    FrequencySource.GNOMAD_G_NFE,
    FrequencySource.GNOMAD_G_SAS,
})


class Frequency(BaseModel):
    """Allele frequency in one population source."""

    source: FrequencySource
    frequency: float = Field(..., ge=0.0, le=100.0, description="Allele frequency as a percentage")
    homozygotes: int = Field(0, ge=0, description="Number of homozygous alternate individuals")


class FrequencyData(BaseModel):
    """All known population frequencies for a variant."""

    frequencies: list[Frequency] = Field(default_factory=list)

    @classmethod
    def of(cls, *frequencies: Frequency) -> "FrequencyData":
        return cls(frequencies=list(frequencies))

    def is_empty(self) -> bool:
        return not self.frequencies

    def size(self) -> int:
        return len(self.frequencies)

    def contains_source(self, source: FrequencySource) -> bool:
        return any(f.source is source for f in self.frequencies)

    def max_freq(self) -> float:
        return max((f.frequency for f in self.frequencies), default=0.0)

    def max_freq_for_population(self, sources=NON_FOUNDER_POPS) -> float:
        """Highest frequency among the given sources, 0.0 if none are present."""
        return max((f.frequency for f in self.frequencies if f.source in sources), default=0.0)

    def max_homozygotes_for_population(self, sources=NON_FOUNDER_POPS) -> int:
        return max((f.homozygotes for f in self.frequencies if f.source in sources), default=0)
