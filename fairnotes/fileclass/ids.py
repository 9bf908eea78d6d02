"""
Field identifiers for appended fileClass descriptors.

Two strategies are available.  ``legacy`` reproduces the ids earlier
vaults were generated with: the base ``abcdef`` with only its first
character advanced per field (``abcdef``, ``bbcdef``, ``cbcdef`` ...).
``unique`` draws random six-character ids and rejects any already
present in the document.
"""

from __future__ import annotations

import secrets
import string
from typing import Iterable, List

LEGACY_BASE_ID = "abcdef"
ID_ALPHABET = string.ascii_lowercase + string.digits
ID_STRATEGIES = ("legacy", "unique")


def legacy_ids(count: int, base: str = LEGACY_BASE_ID) -> List[str]:
    ids: List[str] = []
    current = base
    for _ in range(count):
        ids.append(current)
        current = chr(ord(current[0]) + 1) + current[1:]
    return ids


def unique_ids(count: int, taken: Iterable[str] = (), length: int = 6) -> List[str]:
    """Random ids distinct from each other and from `taken`."""
    seen = {str(t) for t in taken}
    ids: List[str] = []
    while len(ids) < count:
        candidate = "".join(secrets.choice(ID_ALPHABET) for _ in range(length))
        if candidate in seen:
            continue
        seen.add(candidate)
        ids.append(candidate)
    return ids
