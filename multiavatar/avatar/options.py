#!/usr/bin/env python3
"""
Generation options

Options are small callables applied, in order, to a mutable ConfigBuilder;
the builder is then frozen into an AvatarConfig that generation reads.
Malformed values (unknown part names, bad version codes, non A/B/C themes,
empty color lists) are ignored here, so resolution never has to fail.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, FrozenSet, Iterable, List, Mapping, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.palette import ensure_palette
from .sdk import normalize_part, normalize_theme, normalize_version


class AvatarConfig(BaseModel):
    """Frozen per-call configuration. Maps are exposed read-only."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    without_background: bool = False
    theme: Optional[str] = None
    part_versions: Mapping[str, str] = Field(default_factory=dict)
    allowed_versions: Mapping[str, Tuple[str, ...]] = Field(default_factory=dict)
    part_themes: Mapping[str, str] = Field(default_factory=dict)
    allowed_themes: Mapping[str, Tuple[str, ...]] = Field(default_factory=dict)
    disabled_parts: FrozenSet[str] = frozenset()
    colors: Mapping[str, Tuple[str, ...]] = Field(default_factory=dict)

    @field_validator("part_versions", "allowed_versions", "part_themes", "allowed_themes", "colors")
    @classmethod
    def read_only(cls, v):
        return MappingProxyType(dict(v))

    def is_rendered(self, part: str) -> bool:
        if part == "env" and self.without_background:
            return False
        return part not in self.disabled_parts


@dataclass
class ConfigBuilder:
    without_background: bool = False
    theme: Optional[str] = None
    part_versions: Dict[str, str] = field(default_factory=dict)
    allowed_versions: Dict[str, List[str]] = field(default_factory=dict)
    part_themes: Dict[str, str] = field(default_factory=dict)
    allowed_themes: Dict[str, List[str]] = field(default_factory=dict)
    disabled_parts: Set[str] = field(default_factory=set)
    colors: Dict[str, List[str]] = field(default_factory=dict)

    def freeze(self) -> AvatarConfig:
        return AvatarConfig(
            without_background=self.without_background,
            theme=self.theme,
            part_versions=dict(self.part_versions),
            allowed_versions={k: tuple(v) for k, v in self.allowed_versions.items()},
            part_themes=dict(self.part_themes),
            allowed_themes={k: tuple(v) for k, v in self.allowed_themes.items()},
            disabled_parts=frozenset(self.disabled_parts),
            colors={k: tuple(v) for k, v in self.colors.items()},
        )


Option = Callable[[ConfigBuilder], None]


def build_config(*options: Option) -> AvatarConfig:
    builder = ConfigBuilder()
    for opt in options:
        opt(builder)
    return builder.freeze()


# ---------------- Background & global theme ----------------


def without_background() -> Option:
    """Render without the background (env) disc."""
    def apply(c: ConfigBuilder) -> None:
        c.without_background = True
    return apply


def with_theme(theme: str) -> Option:
    """Force the theme letter ("A", "B", "C") for every part."""
    t = normalize_theme(theme)

    def apply(c: ConfigBuilder) -> None:
        if t:
            c.theme = t
    return apply


# ---------------- Versions ----------------


def with_part_version(part_name: str, part_version: str) -> Option:
    """Force a part to a version "00".."15"."""
    pn = normalize_part(part_name)
    pv = normalize_version(part_version)

    def apply(c: ConfigBuilder) -> None:
        if pn and pv:
            c.part_versions[pn] = pv
    return apply


def with_allowed_versions(part_name: str, versions: Iterable[str]) -> Option:
    """
    Restrict a part to a list of versions, e.g. ["01", "03", "07"].
    The pick within the list is deterministic in the input hash.
    """
    pn = normalize_part(part_name)
    vlist = [v for v in (normalize_version(x) for x in (versions or [])) if v]

    def apply(c: ConfigBuilder) -> None:
        if pn and vlist:
            c.allowed_versions[pn] = list(vlist)
    return apply


def with_allowed_head_versions(*versions: str) -> Option:
    return with_allowed_versions("head", versions)


def with_allowed_eyes_versions(*versions: str) -> Option:
    return with_allowed_versions("eyes", versions)


def with_allowed_top_versions(*versions: str) -> Option:
    return with_allowed_versions("top", versions)


# ---------------- Themes ----------------


def with_part_theme(part_name: str, theme: str) -> Option:
    """Force the theme letter for one part. Beats every other theme setting."""
    pn = normalize_part(part_name)
    t = normalize_theme(theme)

    def apply(c: ConfigBuilder) -> None:
        if pn and t:
            c.part_themes[pn] = t
    return apply


def with_allowed_themes(part_name: str, themes: Iterable[str]) -> Option:
    """Restrict a part to theme letters, e.g. ["A", "C"]."""
    pn = normalize_part(part_name)
    tlist = [t for t in (normalize_theme(x) for x in (themes or [])) if t]

    def apply(c: ConfigBuilder) -> None:
        if pn and tlist:
            c.allowed_themes[pn] = list(tlist)
    return apply


# ---------------- Parts & colors ----------------


def without_part(part_name: str) -> Option:
    """Skip rendering a part, e.g. "top" to remove the hair."""
    pn = normalize_part(part_name)

    def apply(c: ConfigBuilder) -> None:
        if pn:
            c.disabled_parts.add(pn)
    return apply


def with_part_colors(part_name: str, colors) -> Option:
    """
    Replace the color list of a part wholesale.

    ``colors`` may be any iterable of colors, a single color string or a
    palette shape accepted by ``ensure_palette``. Entries are trimmed and
    keep their slot positions, blanks included; a list that is empty or
    entirely blank leaves the configuration untouched.
    """
    pn = normalize_part(part_name)
    cp = tuple(c.strip() for c in ensure_palette(colors).as_tuple())

    def apply(c: ConfigBuilder) -> None:
        if pn and any(cp):
            c.colors[pn] = list(cp)
    return apply


def with_skin_color(color: str) -> Option:
    return with_part_colors("head", [color])


def with_env_color(color: str) -> Option:
    return with_part_colors("env", [color])


def with_eyes_colors(*colors: str) -> Option:
    return with_part_colors("eyes", list(colors))


def with_top_colors(*colors: str) -> Option:
    return with_part_colors("top", list(colors))


def with_clothes_colors(*colors: str) -> Option:
    return with_part_colors("clo", list(colors))


def with_mouth_colors(*colors: str) -> Option:
    return with_part_colors("mouth", list(colors))


# ---------------- Presets ----------------

FEMALE_ALIASES = {"female", "woman", "girl", "f", "♀"}
MALE_ALIASES = {"male", "man", "boy", "m", "♂"}

GENDER_PRESETS = {
    "female": {
        "allowed_versions": {"top": ["01", "03", "07", "10"], "eyes": ["03", "11"]},
        "allowed_themes": {"top": ["A", "C"]},
        "part_themes": {"top": "C", "eyes": "C"},
    },
    "male": {
        "allowed_versions": {"top": ["04", "05", "14"], "eyes": ["09", "10"]},
        "allowed_themes": {"top": ["A", "B"]},
        "part_themes": {"top": "B", "eyes": "B"},
    },
    "unisex": {
        "allowed_versions": {
            "top": ["01", "03", "04", "05", "07", "10", "14"],
            "eyes": ["03", "09", "10", "11"],
        },
        "allowed_themes": {"top": ["A", "B", "C"]},
        "part_themes": {},
    },
}


def gender_preset_name(gender: str) -> str:
    g = str(gender or "").strip().lower()
    if g in FEMALE_ALIASES:
        return "female"
    if g in MALE_ALIASES:
        return "male"
    return "unisex"


def with_gender(gender: str) -> Option:
    """
    Apply a styling preset: restrict hair/eye versions and themes while keeping
    selection deterministic within those sets. Unknown values mean unisex.
    """
    preset = GENDER_PRESETS[gender_preset_name(gender)]

    def apply(c: ConfigBuilder) -> None:
        for part, versions in preset["allowed_versions"].items():
            c.allowed_versions[part] = list(versions)
        for part, themes in preset["allowed_themes"].items():
            c.allowed_themes[part] = list(themes)
        c.part_themes.update(preset["part_themes"])
    return apply


def options_from_defaults(defaults) -> List[Option]:
    """Turn a settings ``defaults`` block (DefaultsCfg) into options."""
    opts: List[Option] = []
    if defaults is None:
        return opts
    if defaults.transparent:
        opts.append(without_background())
    if defaults.theme:
        opts.append(with_theme(defaults.theme))
    if defaults.gender:
        opts.append(with_gender(defaults.gender))
    for part, colors in (defaults.colors or {}).items():
        opts.append(with_part_colors(part, colors))
    return opts
