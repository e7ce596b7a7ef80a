# multiavatar/utils/palette.py
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

HexColor = str


@dataclass
class Palette:
    colors: List[HexColor] = field(default_factory=list)
    name: Optional[str] = None

    def as_tuple(self) -> Tuple[HexColor, ...]:
        return tuple(self.colors)


def _color(c: Any) -> HexColor:
    # None keeps its slot as an empty entry
    return "" if c is None else str(c)


def _flatten_color_sources(obj: Any) -> List[HexColor]:
    """
    Accept common palette shapes and produce a flat list of color strings.
    Supported:
      - {'colors': ['#fff', '#000', ...]}
      - {'palette': ['#fff', ...]}
      - {'primary': ['#...'], 'accent': ['#...']}  # category dict → flattened in stable key order
      - ['#fff', '#000']  # list, tuple, generator or any other iterable
      - '#fff'  # single color
    """
    if obj is None:
        return []
    if isinstance(obj, Palette):
        return list(obj.colors)
    if isinstance(obj, str):
        return [obj]
    if isinstance(obj, dict):
        if "colors" in obj:
            colors_val = obj["colors"]
            if isinstance(colors_val, (list, tuple)):
                return [_color(c) for c in colors_val]
            elif isinstance(colors_val, dict):
                # name -> color pairs, in insertion order
                return [_color(c) for c in colors_val.values()]
        if "palette" in obj and isinstance(obj["palette"], (list, tuple)):
            return [_color(c) for c in obj["palette"]]
        # Category dict → flatten by sorted keys for determinism
        flat: List[str] = []
        for k in sorted(obj.keys()):
            v = obj[k]
            if isinstance(v, (list, tuple)):
                flat.extend(_color(c) for c in v)
            elif isinstance(v, str):
                flat.append(v)
        return flat
    if isinstance(obj, Iterable):
        return [_color(c) for c in obj]
    return []


def ensure_palette(obj: Any, *, name: Optional[str] = None) -> Palette:
    """
    Convert list/dict/string/iterable forms into a Palette.

    Entries are trimmed; order and slot positions are preserved, so a blank
    entry stays in place as "".
    """
    if isinstance(obj, Palette):
        return obj
    return Palette(colors=[c.strip() for c in _flatten_color_sources(obj)], name=name)
