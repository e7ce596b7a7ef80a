import hashlib
from typing import Dict

from .sdk import PART_NAMES, SEED_LENGTH


def extract_seed(text: str) -> str:
    """
    SHA-256 the UTF-8 bytes of ``text`` and keep the first 12 decimal digits
    of the lowercase hex digest.
    """
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
    digits = "".join(ch for ch in digest if ch.isdigit())
    return digits[:SEED_LENGTH]


def seed_values(seed: str) -> Dict[str, int]:
    """
    Split a seed into one 2-digit value (0-99) per part, in declaration order.

    A chunk past the end of a short seed counts as 0.
    """
    values = {}
    for i, name in enumerate(PART_NAMES):
        chunk = seed[i * 2:i * 2 + 2]
        values[name] = int(chunk) if chunk else 0
    return values
