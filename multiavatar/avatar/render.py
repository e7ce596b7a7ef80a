#!/usr/bin/env python3
"""
Fragment Renderer

Fills the color slots of an SVG fragment. A slot is a "#" followed by the
shortest run of characters up to the next ";" on the same line, e.g. "#01;".
Slots are filled strictly by position: the i-th slot found scanning left to
right receives the i-th color, so two slots with the same text still get
different colors. Slots beyond the color list are left as they are.
"""

from typing import List, Sequence, Tuple

Span = Tuple[int, int]


def find_placeholders(template: str) -> List[Span]:
    """Return (start, end) spans of every color slot, left to right."""
    spans: List[Span] = []
    pos = 0
    while True:
        start = template.find("#", pos)
        if start < 0:
            break
        end = template.find(";", start + 1)
        if end < 0:
            break
        if "\n" in template[start:end]:
            # slots never span lines; retry from the next character
            pos = start + 1
            continue
        spans.append((start, end + 1))
        pos = end + 1
    return spans


def render_fragment(template: str, colors: Sequence[str]) -> str:
    spans = find_placeholders(template)
    if not spans:
        return template

    out = []
    last = 0
    for i, (start, end) in enumerate(spans):
        out.append(template[last:start])
        if i < len(colors):
            out.append(colors[i] + ";")
        else:
            out.append(template[start:end])
        last = end
    out.append(template[last:])
    return "".join(out)
