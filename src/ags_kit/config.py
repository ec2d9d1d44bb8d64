# src/ags_kit/config.py

from dataclasses import dataclass
from pathlib import Path

# Reserved group and heading codes the engine looks for by name.
TRANSMISSION_GROUP = "TRAN"
FORMAT_VERSION_HEADING = "TRAN_AGS"

LOCATION_GROUP = "LOCA"
LOCATION_ID_HEADING = "LOCA_ID"
LOCATION_EASTING_HEADING = "LOCA_NATE"
LOCATION_NORTHING_HEADING = "LOCA_NATN"
LOCATION_TYPE_HEADING = "LOCA_TYPE"
LOCATION_FINAL_DEPTH_HEADING = "LOCA_FDEP"

GEOLOGY_GROUP = "GEOL"
GEOLOGY_TOP_HEADING = "GEOL_TOP"
GEOLOGY_BASE_HEADING = "GEOL_BASE"

DEFAULT_DICTIONARY_VERSION = "4.1.1"


@dataclass(frozen=True)
class AgsConfig:
    """Configuration for an AGS workspace.

    Immutable. Explicit. No magic defaults from environment.
    """

    dictionary_version: str = DEFAULT_DICTIONARY_VERSION
    fallback_dictionary_version: str = DEFAULT_DICTIONARY_VERSION
    dictionary_dir: str | Path | None = None  # None disables descriptions
    user_dictionary_path: str | Path | None = None  # YAML overlay
    rescan_slack: int = 10
    location_matrix_threshold: int = 20
    hover_show_descriptions: bool = True

    def __post_init__(self) -> None:
        if self.rescan_slack < 0:
            raise ValueError("rescan_slack must be >= 0")
        if self.location_matrix_threshold < 0:
            raise ValueError("location_matrix_threshold must be >= 0")
