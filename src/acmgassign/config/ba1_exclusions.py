"""BA1 exception list loader.

A small, versioned set of high-frequency variants that are known to be
pathogenic and so must never be assigned BA1. Coordinates are specific to
each genome assembly.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from acmgassign.models.annotation import GenomeAssembly

AlleleKey = tuple[str, int, str, str]


class Ba1ExclusionList:
    """Assembly-keyed set of (contig, position, ref, alt) BA1 exceptions."""

    def __init__(self, config: dict[str, Any]):
        self._config = config
        self.version = str(config.get("version", ""))
        self._exclusions: dict[GenomeAssembly, frozenset[AlleleKey]] = {}
        self._clinvar_ids: dict[tuple[GenomeAssembly, AlleleKey], str] = {}
        for assembly in GenomeAssembly:
            keys = set()
            for entry in config.get(assembly.value, None) or []:
                key = (str(entry["contig"]).removeprefix("chr"), int(entry["position"]), entry["ref"], entry["alt"])
                keys.add(key)
                self._clinvar_ids[(assembly, key)] = str(entry.get("clinvar_id", ""))
            self._exclusions[assembly] = frozenset(keys)

    @classmethod
    def empty(cls) -> "Ba1ExclusionList":
        return cls({})

    def is_excluded(self, assembly: GenomeAssembly, allele_key: AlleleKey) -> bool:
        return allele_key in self._exclusions.get(assembly, frozenset())

    def clinvar_id(self, assembly: GenomeAssembly, allele_key: AlleleKey) -> str | None:
        return self._clinvar_ids.get((assembly, allele_key))

    def exclusions(self, assembly: GenomeAssembly) -> frozenset[AlleleKey]:
        return self._exclusions.get(assembly, frozenset())

    def __len__(self) -> int:
        return sum(len(keys) for keys in self._exclusions.values())


@lru_cache(maxsize=4)
def load_ba1_exclusions(config_path: Path | None = None) -> Ba1ExclusionList:
    """Load the BA1 exception list from YAML.

    Args:
        config_path: Alternative YAML file. Defaults to the bundled
            ba1_exclusions.yaml.

    Returns:
        Ba1ExclusionList instance, empty if the file doesn't exist.
    """
    if config_path is None:
        config_path = Path(__file__).parent / "ba1_exclusions.yaml"

    if not config_path.exists():
        return Ba1ExclusionList.empty()

    with open(config_path) as f:
        config = yaml.safe_load(f)

    return Ba1ExclusionList(config or {})
