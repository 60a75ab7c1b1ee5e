from __future__ import annotations

import re

from vigcrack.classical.common import is_az, letter_rank
from vigcrack.errors import InvalidArgument

_AZ_ONLY_RE = re.compile(r"[^A-Z]+")


def normalize_az(s: str) -> str:
    """Keep only A-Z, uppercase."""
    if s is None:
        return ""
    return _AZ_ONLY_RE.sub("", s.upper())


def is_sanitized(s: str) -> bool:
    return _AZ_ONLY_RE.search(s) is None


def letter_counts(s: str) -> list[int]:
    """26-slot count table indexed by letter rank. Raises InvalidArgument on anything but A-Z."""
    counts = [0] * 26
    for ch in s:
        if not is_az(ch):
            raise InvalidArgument(f"Expected sanitized A-Z text, found {ch!r}.")
        counts[letter_rank(ch)] += 1
    return counts
