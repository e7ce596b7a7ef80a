"""
Avatar Generator - Core Package

Deterministic SVG avatars from arbitrary strings: seed extraction, per-part
version/theme selection, color substitution and document assembly.
"""

from .assemble import assemble, generate, generate_with_config, render_part
from .catalog import Catalog, CatalogError, get_catalog, load_catalog
from .colors import resolve_colors
from .features import default_selection, resolve_features, resolve_part, scale
from .options import (  # Config; Options; Presets
    AvatarConfig,
    ConfigBuilder,
    Option,
    build_config,
    options_from_defaults,
    with_allowed_eyes_versions,
    with_allowed_head_versions,
    with_allowed_themes,
    with_allowed_top_versions,
    with_allowed_versions,
    with_clothes_colors,
    with_env_color,
    with_eyes_colors,
    with_gender,
    with_mouth_colors,
    with_part_colors,
    with_part_theme,
    with_part_version,
    with_skin_color,
    with_theme,
    with_top_colors,
    without_background,
    without_part,
)
from .render import find_placeholders, render_fragment
from .sdk import (  # Constants; Models
    PART_NAMES,
    RENDER_ORDER,
    SVG_CLOSE,
    SVG_OPEN,
    THEMES,
    VERSIONS,
    VIEWBOX,
    Part,
    Selection,
)
from .seed import extract_seed, seed_values

__all__ = [
    "VIEWBOX",
    "SVG_OPEN",
    "SVG_CLOSE",
    "PART_NAMES",
    "RENDER_ORDER",
    "THEMES",
    "VERSIONS",
    "Part",
    "Selection",
    "Catalog",
    "CatalogError",
    "load_catalog",
    "get_catalog",
    "extract_seed",
    "seed_values",
    "scale",
    "default_selection",
    "resolve_part",
    "resolve_features",
    "resolve_colors",
    "find_placeholders",
    "render_fragment",
    "render_part",
    "assemble",
    "generate",
    "generate_with_config",
    "AvatarConfig",
    "ConfigBuilder",
    "Option",
    "build_config",
    "options_from_defaults",
    "without_background",
    "with_theme",
    "with_part_version",
    "with_allowed_versions",
    "with_allowed_head_versions",
    "with_allowed_eyes_versions",
    "with_allowed_top_versions",
    "with_part_theme",
    "with_allowed_themes",
    "without_part",
    "with_part_colors",
    "with_skin_color",
    "with_env_color",
    "with_eyes_colors",
    "with_top_colors",
    "with_clothes_colors",
    "with_mouth_colors",
    "with_gender",
]
