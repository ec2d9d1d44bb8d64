import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from ags_kit.config import DEFAULT_DICTIONARY_VERSION
from ags_kit.observability import names
from ags_kit.observability.base import MetricsHook, NoOpMetricsHook

from .models import Dictionary, HeadingDetail

logger = logging.getLogger(__name__)

DICTIONARY_GROUP = "DICT"


class _DictionaryGroup(BaseModel):
    """Shape of the DICT group in a JSON-encoded dictionary file."""

    HEADING: list[str] | None = None
    DATA: list[list[str | None]] | None = None

    class Config:
        extra = "ignore"


class DictionaryLoader:
    """Loads AGS dictionaries from `ags-dictionary-v<version>.min.json` files.

    A missing or unreadable file yields an empty Dictionary, never an error.
    Results are cached per requested version.
    """

    def __init__(
        self,
        directory: str | Path | None,
        *,
        fallback_version: str = DEFAULT_DICTIONARY_VERSION,
        user_dictionary_path: str | Path | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._directory = Path(directory) if directory is not None else None
        self._fallback_version = fallback_version
        self._user_dictionary_path = (
            Path(user_dictionary_path) if user_dictionary_path is not None else None
        )
        self._cache: dict[str, Dictionary] = {}
        self.metrics_hook = metrics_hook

    def load(self, version: str) -> Dictionary:
        if version in self._cache:
            return self._cache[version]

        dictionary = Dictionary()
        path = self._resolve_path(version)
        if path is not None:
            dictionary = self._load_file(path)

        overlay = self._load_overlay()
        if overlay is not None:
            dictionary = dictionary.merged_with(overlay)

        logger.info(
            "Loaded AGS dictionary v%s: %d groups, %d headings",
            version,
            len(dictionary.groups),
            len(dictionary.headings),
        )
        self._cache[version] = dictionary
        return dictionary

    def _resolve_path(self, version: str) -> Path | None:
        if self._directory is None:
            return None

        path = self._directory / _file_name(version)
        if path.exists():
            return path

        fallback = self._directory / _file_name(self._fallback_version)
        if fallback.exists():
            logger.info(
                "No dictionary for v%s, falling back to v%s",
                version,
                self._fallback_version,
            )
            return fallback

        logger.warning("No AGS dictionary found in %s", self._directory)
        return None

    def _load_file(self, path: Path) -> Dictionary:
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            return _dictionary_from_groups(data)
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            # ValidationError is a ValueError
            logger.warning("Failed to read AGS dictionary %s: %s", path, exc)
            self.metrics_hook.increment(names.DICTIONARY_LOAD_ERRORS_TOTAL)
            return Dictionary()

    def _load_overlay(self) -> Dictionary | None:
        if self._user_dictionary_path is None:
            return None

        try:
            with open(self._user_dictionary_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return Dictionary(**data)
        except (OSError, yaml.YAMLError, ValidationError, TypeError) as exc:
            logger.warning(
                "Ignoring user dictionary %s: %s", self._user_dictionary_path, exc
            )
            self.metrics_hook.increment(names.DICTIONARY_LOAD_ERRORS_TOTAL)
            return None


def _file_name(version: str) -> str:
    return f"ags-dictionary-v{version}.min.json"


def _dictionary_from_groups(data: Any) -> Dictionary:
    """Build a Dictionary from the DICT group of a JSON-encoded AGS file.

    Raises:
        pydantic.ValidationError: If the DICT group is not made of string rows.
    """
    if not isinstance(data, list):
        return Dictionary()

    dict_group = next(
        (g for g in data if isinstance(g, dict) and g.get("GROUP") == DICTIONARY_GROUP),
        None,
    )
    if dict_group is None:
        return Dictionary()

    shape = _DictionaryGroup(**dict_group)
    heading_row = shape.HEADING or []
    columns = {
        key: heading_row.index(code) if code in heading_row else -1
        for key, code in (
            ("type", "DICT_TYPE"),
            ("group", "DICT_GRP"),
            ("heading", "DICT_HDNG"),
            ("description", "DICT_DESC"),
            ("status", "DICT_STAT"),
            ("data_type", "DICT_DTYP"),
            ("unit", "DICT_UNIT"),
            ("example", "DICT_EXMP"),
        )
    }

    groups: dict[str, str] = {}
    headings: dict[str, HeadingDetail] = {}

    for row in shape.DATA or []:
        cells = {key: _cell(row, index) for key, index in columns.items()}

        if cells["type"] == "GROUP":
            groups[cells["group"]] = cells["description"]
        elif cells["type"] == "HEADING" and cells["heading"]:
            headings[cells["heading"]] = HeadingDetail(
                description=cells["description"],
                type=cells["data_type"],
                unit=cells["unit"],
                status=cells["status"],
                example=cells["example"],
            )

    return Dictionary(groups=groups, headings=headings)


def _cell(row: list[str | None], index: int) -> str:
    if 0 <= index < len(row) and row[index] is not None:
        return row[index]
    return ""
