#!/usr/bin/env python3
"""
Core SDK for the avatar generator

This module provides the single source of truth for part names, orderings,
version/theme codes and the document frame. All avatar modules import from
this file to avoid drift.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


# ============================================================================
# CONSTANTS
# ============================================================================

VIEWBOX = "0 0 231 231"
SVG_OPEN = f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{VIEWBOX}">'
SVG_CLOSE = "</svg>"

SEED_LENGTH = 12
VERSION_COUNT = 16
THEME_SCALE = 47  # 16 versions x 3 themes, minus one


class Part(str, Enum):
    ENV = "env"
    CLO = "clo"
    HEAD = "head"
    MOUTH = "mouth"
    EYES = "eyes"
    TOP = "top"


# Declaration order: one 2-digit seed chunk per part, in this order.
PART_NAMES: Tuple[str, ...] = tuple(p.value for p in Part)

# Render order, background first. Independent of the declaration order.
RENDER_ORDER: Tuple[str, ...] = ("env", "head", "clo", "top", "eyes", "mouth")

THEMES: Tuple[str, ...] = ("A", "B", "C")
VERSIONS: Tuple[str, ...] = tuple(f"{i:02d}" for i in range(VERSION_COUNT))


# ============================================================================
# MODELS
# ============================================================================

@dataclass(frozen=True)
class Selection:
    """Resolved variant of one part: which fragment and which palette."""

    version: str
    theme: str

    def __str__(self) -> str:
        return f"{self.version}{self.theme}"


# ============================================================================
# HELPERS
# ============================================================================

def is_part(name: str) -> bool:
    return name in PART_NAMES


def normalize_part(name) -> str:
    """Trim a part name; returns "" for anything that is not a known part."""
    if isinstance(name, Part):
        return name.value
    pn = str(name or "").strip()
    return pn if is_part(pn) else ""


def normalize_theme(theme) -> str:
    """Upper-case and trim a theme letter; returns "" when it is not A/B/C."""
    t = str(theme or "").strip().upper()
    return t if t in THEMES else ""


def normalize_version(version) -> str:
    """Trim a version code; returns "" unless it is a 2-digit code in 00..15."""
    v = str(version or "").strip()
    return v if v in VERSIONS else ""
