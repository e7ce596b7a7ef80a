import logging
from typing import Optional, Sequence, Tuple

from .catalog import Catalog
from .sdk import Selection

log = logging.getLogger(__name__)


def resolve_colors(
    catalog: Catalog,
    part: str,
    selection: Selection,
    override: Optional[Sequence[str]] = None,
) -> Optional[Tuple[str, ...]]:
    """
    Color list for a part's selection.

    A non-empty ``override`` replaces the catalog list wholesale. Returns None
    when the catalog has no entry for the selection; the part then renders
    as an empty fragment, override or not.
    """
    colors = catalog.colors(selection.version, selection.theme, part)
    if colors is None:
        log.warning(f"No colors for {part} {selection} in catalog {catalog.source}")
        return None
    if override:
        return tuple(override)
    return colors
