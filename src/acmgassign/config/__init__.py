"""Configuration module for ACMG evidence assignment."""

from acmgassign.config.assigner_config import AssignerConfig, load_assigner_config
from acmgassign.config.ba1_exclusions import Ba1ExclusionList, load_ba1_exclusions

__all__ = ["AssignerConfig", "load_assigner_config", "Ba1ExclusionList", "load_ba1_exclusions"]
