#!/usr/bin/env python3
"""
Document Assembler

Entry point of the avatar pipeline:

    text -> seed -> (version, theme) per part -> colors -> fragments -> SVG

generate() is a pure function of its arguments and the read-only catalog, so
it is safe to call from any number of threads at once.
"""

import logging
from typing import Mapping, Optional

from .catalog import Catalog, get_catalog
from .colors import resolve_colors
from .features import resolve_features
from .options import AvatarConfig, Option, build_config
from .render import render_fragment
from .sdk import PART_NAMES, RENDER_ORDER, SVG_CLOSE, SVG_OPEN, Selection
from .seed import extract_seed, seed_values

log = logging.getLogger(__name__)


def render_part(catalog: Catalog, part: str, selection: Selection, config: AvatarConfig) -> str:
    colors = resolve_colors(catalog, part, selection, config.colors.get(part))
    if colors is None:
        return ""
    template = catalog.fragment(selection.version, part)
    if template is None:
        log.warning(f"No fragment for {part} {selection.version} in catalog {catalog.source}")
        return ""
    return render_fragment(template, colors)


def assemble(fragments: Mapping[str, str], config: AvatarConfig) -> str:
    """Join rendered fragments in render order, skipping suppressed parts."""
    body = "".join(fragments.get(part, "") for part in RENDER_ORDER if config.is_rendered(part))
    return SVG_OPEN + body + SVG_CLOSE


def generate_with_config(text: str, config: AvatarConfig, catalog: Optional[Catalog] = None) -> str:
    if not text:
        return ""
    if catalog is None:
        catalog = get_catalog()

    seed = extract_seed(text)
    selections = resolve_features(seed_values(seed), config)
    log.debug(f"Seed {seed}: " + " ".join(f"{p}={selections[p]}" for p in PART_NAMES))

    fragments = {
        part: render_part(catalog, part, selection, config)
        for part, selection in selections.items()
        if config.is_rendered(part)
    }
    return assemble(fragments, config)


def generate(text: str, *options: Option, catalog: Optional[Catalog] = None) -> str:
    """
    Create an SVG avatar for ``text``.

    Args:
        text: Any string; the same text and options always give the same SVG
        *options: Options from multiavatar.avatar.options, applied in order
        catalog: Catalog to draw from; defaults to the bundled one

    Returns:
        A complete SVG document, or "" when ``text`` is empty
    """
    if not text:
        return ""
    return generate_with_config(text, build_config(*options), catalog=catalog)
