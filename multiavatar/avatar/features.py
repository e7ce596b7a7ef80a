#!/usr/bin/env python3
"""
Feature Resolver

Maps each part's seed value to a (version, theme) selection and applies the
configured overrides. Resolution never fails: invalid overrides are dropped
when options are built, so everything reaching this module is well formed.
"""

import logging
from typing import Dict, Mapping

from .options import AvatarConfig
from .sdk import PART_NAMES, THEME_SCALE, Selection

log = logging.getLogger(__name__)


def scale(value: int) -> int:
    """
    Scale a seed value 0-99 onto 0-47: round(value * 47 / 100).

    Rounds half away from zero, in integer arithmetic so the result does not
    depend on float formatting. The only tie in range is 50 -> 23.5 -> 24.
    """
    return (value * THEME_SCALE + 50) // 100


def default_selection(value: int) -> Selection:
    """Seed-derived selection: 0-15 theme A, 16-31 theme B, 32-47 theme C."""
    nr = scale(value)
    if nr > 31:
        return Selection(version=f"{nr - 32:02d}", theme="C")
    if nr > 15:
        return Selection(version=f"{nr - 16:02d}", theme="B")
    return Selection(version=f"{nr:02d}", theme="A")


def resolve_theme(part: str, value: int, default: str, config: AvatarConfig) -> str:
    # per-part forced > per-part allowed list > global > seed default
    if part in config.part_themes:
        return config.part_themes[part]
    allowed = config.allowed_themes.get(part)
    if allowed:
        return allowed[value % len(allowed)]
    if config.theme:
        return config.theme
    return default


def resolve_version(part: str, value: int, default: str, config: AvatarConfig) -> str:
    # per-part forced > per-part allowed list > seed default
    if part in config.part_versions:
        return config.part_versions[part]
    allowed = config.allowed_versions.get(part)
    if allowed:
        return allowed[value % len(allowed)]
    return default


def resolve_part(part: str, value: int, config: AvatarConfig) -> Selection:
    base = default_selection(value)
    return Selection(
        version=resolve_version(part, value, base.version, config),
        theme=resolve_theme(part, value, base.theme, config),
    )


def resolve_features(values: Mapping[str, int], config: AvatarConfig) -> Dict[str, Selection]:
    """Final selection for every part, keyed in declaration order."""
    selections = {name: resolve_part(name, values[name], config) for name in PART_NAMES}
    log.debug("Resolved parts: " + ", ".join(f"{k}={v}" for k, v in selections.items()))
    return selections
