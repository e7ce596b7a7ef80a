#!/usr/bin/env python3
"""
Request parameter translation.

Turns textual key/value parameters (as found in a query string) into avatar
options. Per-part maps use "part:value" pairs separated by commas and
multi-value lists use "|", e.g. ``allowedVersions=eyes:03|11,top:01|03``.
Pairs are applied in the order they appear, so the translation is stable.
"""

import logging
from typing import Dict, List, Mapping, Optional

from ..avatar import options as o
from ..avatar.assemble import generate
from ..avatar.catalog import Catalog

log = logging.getLogger(__name__)

SVG_CONTENT_TYPE = "image/svg+xml; charset=utf-8"

TRUE_VALUES = {"1", "true", "yes", "y", "on"}

# list-valued color parameters, in the order they are applied
COLOR_PARAMS = ("env", "clo", "mouth", "head", "eyes", "top")


class MissingParameterError(ValueError):
    """A required request parameter is absent or blank."""


def parse_bool(s: Optional[str]) -> bool:
    return str(s or "").strip().lower() in TRUE_VALUES


def split_list(s: Optional[str]) -> List[str]:
    """Split "a|b|c" into trimmed, non-empty items."""
    s = str(s or "").strip()
    if not s:
        return []
    return [item.strip() for item in s.split("|") if item.strip()]


def _pairs(s: Optional[str]):
    s = str(s or "").strip()
    if not s:
        return
    for chunk in s.split(","):
        chunk = chunk.strip()
        if not chunk or ":" not in chunk:
            continue
        key, val = chunk.split(":", 1)
        yield key.strip(), val.strip()


def parse_kv_comma(s: Optional[str]) -> Dict[str, str]:
    """Parse "key:val,key2:val2"; later duplicates win."""
    return {k: v for k, v in _pairs(s) if k and v}


def parse_kv_list(s: Optional[str]) -> Dict[str, List[str]]:
    """Parse "key:a|b|c,key2:x|y"."""
    res: Dict[str, List[str]] = {}
    for k, v in _pairs(s):
        items = split_list(v)
        if k and items:
            res[k] = items
    return res


def _color_option(part: str, raw: Optional[str]) -> Optional[o.Option]:
    colors = split_list(raw)
    if not colors:
        return None
    if part == "env":
        return o.with_env_color(colors[0])
    if part == "head":
        # the whole value is one skin color
        return o.with_skin_color(str(raw).strip())
    return o.with_part_colors(part, colors)


def options_from_query(params: Mapping[str, str]) -> List[o.Option]:
    """
    Build the option list for a parameter mapping.

    Recognised keys: transparent, theme, gender, partTheme, allowedThemes,
    partVersion, allowedVersions, env, clo, mouth, head, eyes, top,
    withoutPart. Unknown keys and malformed values are ignored.
    """
    opts: List[o.Option] = []

    if parse_bool(params.get("transparent")):
        opts.append(o.without_background())

    theme = str(params.get("theme") or "").strip()
    if theme:
        opts.append(o.with_theme(theme))

    gender = str(params.get("gender") or "").strip()
    if gender:
        opts.append(o.with_gender(gender))

    for part, val in parse_kv_comma(params.get("partTheme")).items():
        opts.append(o.with_part_theme(part, val))
    for part, items in parse_kv_list(params.get("allowedThemes")).items():
        opts.append(o.with_allowed_themes(part, items))
    for part, val in parse_kv_comma(params.get("partVersion")).items():
        opts.append(o.with_part_version(part, val))
    for part, items in parse_kv_list(params.get("allowedVersions")).items():
        opts.append(o.with_allowed_versions(part, items))

    for part in COLOR_PARAMS:
        opt = _color_option(part, params.get(part))
        if opt is not None:
            opts.append(opt)

    for part in split_list(params.get("withoutPart")):
        opts.append(o.without_part(part))

    return opts


def avatar_from_query(params: Mapping[str, str], catalog: Optional[Catalog] = None) -> str:
    """
    Render the avatar described by request parameters.

    Raises:
        MissingParameterError: If the ``name`` parameter is missing or blank
    """
    name = str(params.get("name") or "").strip()
    if not name:
        raise MissingParameterError("missing required 'name' parameter")
    opts = options_from_query(params)
    log.debug(f"Rendering avatar for {name!r} with {len(opts)} option(s)")
    return generate(name, *opts, catalog=catalog)
