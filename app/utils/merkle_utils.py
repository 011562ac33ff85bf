import hashlib
from typing import List, Sequence

EMPTY_DIGEST = ""


def combine(left: str, right: str) -> str:
    """Parent digest: SHA-256 over the two hex strings concatenated, left first."""
    return hashlib.sha256((left + right).encode("utf-8")).hexdigest()


def _next_level(level: Sequence[str]) -> List[str]:
    parents: List[str] = []
    for i in range(0, len(level), 2):
        if i + 1 < len(level):
            parents.append(combine(level[i], level[i + 1]))
        else:
            # odd leftover moves up as-is (not duplicated, not re-hashed)
            parents.append(level[i])
    return parents


def build_digest(hashes: Sequence[str]) -> str:
    """
    Fold an ordered list of paragraph hashes into a single root digest.

      - []          → EMPTY_DIGEST
      - [h]         → h
      - otherwise   → pairwise reduction, left to right, until one remains

    The result depends on order: the same hashes permuted give another root.
    """
    if not hashes:
        return EMPTY_DIGEST

    level = list(hashes)
    while len(level) > 1:
        level = _next_level(level)
    return level[0]


def verify_digest(hashes: Sequence[str], expected_root: str) -> bool:
    return build_digest(hashes) == expected_root
