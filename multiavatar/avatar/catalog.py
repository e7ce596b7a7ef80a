#!/usr/bin/env python3
"""
Part Catalog

Read-only lookup tables for avatar rendering: one SVG fragment per
(version, part) and one ordered color list per (version, theme, part).
The bundled catalog ships as package data and is loaded lazily, once per
process; callers only ever see read-only views of it.
"""

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .sdk import PART_NAMES, THEMES, VERSIONS

log = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "catalog.yaml"


class CatalogError(ValueError):
    """Raised when a catalog file is structurally malformed."""


def _check_parts(mapping: Dict[str, Any], where: str) -> None:
    unknown = sorted(set(mapping) - set(PART_NAMES))
    if unknown:
        raise ValueError(f"{where}: unknown part(s) {unknown}")


def _check_version(v: str) -> None:
    if v not in VERSIONS:
        raise ValueError(f"version key must be a 2-digit code 00..15, got {v!r}")


class CatalogData(BaseModel):
    """Schema of the catalog file."""

    fragments: Dict[str, Dict[str, str]] = Field(..., description="SVG fragment per version and part")
    themes: Dict[str, Dict[str, Dict[str, List[str]]]] = Field(
        ..., description="Color lists per version, theme letter and part"
    )

    @field_validator("fragments")
    @classmethod
    def validate_fragments(cls, v):
        for version, parts in v.items():
            _check_version(version)
            _check_parts(parts, f"fragments[{version}]")
        return v

    @field_validator("themes")
    @classmethod
    def validate_themes(cls, v):
        for version, themes in v.items():
            _check_version(version)
            unknown = sorted(set(themes) - set(THEMES))
            if unknown:
                raise ValueError(f"themes[{version}]: unknown theme(s) {unknown}")
            for theme, parts in themes.items():
                _check_parts(parts, f"themes[{version}][{theme}]")
        return v


class Catalog:
    """Immutable view over fragments and color tables."""

    def __init__(self, data: CatalogData, source: Optional[str] = None):
        self.source = source
        self._fragments: Mapping[Tuple[str, str], str] = MappingProxyType(
            {
                (version, part): fragment
                for version, parts in data.fragments.items()
                for part, fragment in parts.items()
            }
        )
        self._colors: Mapping[Tuple[str, str, str], Tuple[str, ...]] = MappingProxyType(
            {
                (version, theme, part): tuple(colors)
                for version, themes in data.themes.items()
                for theme, parts in themes.items()
                for part, colors in parts.items()
            }
        )

    @classmethod
    def from_dict(cls, raw: Any, source: Optional[str] = None) -> "Catalog":
        if not isinstance(raw, dict):
            raise CatalogError(f"Catalog {source or '<dict>'} must be a mapping/object.")
        try:
            data = CatalogData(**raw)
        except ValidationError as e:
            raise CatalogError(f"Invalid catalog {source or '<dict>'}: {e}") from e
        return cls(data, source=source)

    def fragment(self, version: str, part: str) -> Optional[str]:
        return self._fragments.get((version, part))

    def colors(self, version: str, theme: str, part: str) -> Optional[Tuple[str, ...]]:
        return self._colors.get((version, theme, part))

    def missing(self) -> List[str]:
        """List every (version, theme, part) the catalog cannot render."""
        gaps = []
        for version in VERSIONS:
            for part in PART_NAMES:
                if (version, part) not in self._fragments:
                    gaps.append(f"fragment {version}/{part}")
                for theme in THEMES:
                    if (version, theme, part) not in self._colors:
                        gaps.append(f"colors {version}{theme}/{part}")
        return gaps

    def __len__(self) -> int:
        return len(self._colors)


def load_catalog(path: Union[str, Path, None] = None) -> Catalog:
    """
    Load and validate a catalog file.

    Args:
        path: YAML (or JSON, which YAML parses) catalog file; defaults to the
            catalog bundled with the package.

    Raises:
        FileNotFoundError: If the file does not exist
        CatalogError: If the file is not a valid catalog
    """
    p = Path(path) if path else DEFAULT_CATALOG_PATH
    if not p.exists():
        raise FileNotFoundError(f"Catalog file not found: {p}")
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise CatalogError(f"Failed to parse {p}: {e}") from e

    catalog = Catalog.from_dict(raw, source=str(p))
    gaps = catalog.missing()
    if gaps:
        log.warning(f"Catalog {p} is incomplete ({len(gaps)} gaps), e.g. {gaps[:3]}")
    log.info(f"Loaded catalog {p} with {len(catalog)} color tables")
    return catalog


@lru_cache(maxsize=None)
def _cached_catalog(path: str) -> Catalog:
    return load_catalog(path)


def get_catalog(path: Union[str, Path, None] = None) -> Catalog:
    """Process-wide catalog, loaded on first use and reused afterwards."""
    return _cached_catalog(str(Path(path).resolve()) if path else str(DEFAULT_CATALOG_PATH))
